"""Projects Demo CLI application using Typer.

This module provides command-line utilities: serving the API and
running the word-frequency ranking locally.
"""

from typing import Annotated, Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from projects_demo.domain.wordcount import (
    STORY,
    InvalidLimitError,
    RankingStrategy,
    rank,
)
from projects_demo_config.settings import get_settings

app = typer.Typer(
    name="projects-demo",
    help="Projects Demo - project catalogue API and word count CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: Annotated[
        Optional[str], typer.Option(help="Bind address (default: API_HOST)")
    ] = None,
    port: Annotated[
        Optional[int], typer.Option(help="Listen port (default: API_PORT)")
    ] = None,
    reload: Annotated[bool, typer.Option(help="Reload on code changes")] = False,
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "projects_demo.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("word-count")
def word_count(
    text: Annotated[
        Optional[str],
        typer.Argument(help="Text to analyse (default: the built-in story)"),
    ] = None,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Entries to show")] = 2,
    strategy: Annotated[
        RankingStrategy,
        typer.Option("--strategy", "-s", help="Ranking implementation"),
    ] = RankingStrategy.PIPELINE,
) -> None:
    """Print the most frequent words of a text."""
    try:
        result = rank(text if text is not None else STORY, limit, strategy=strategy)
    except InvalidLimitError as exc:
        console.print(f"[red]Error:[/red] {exc.message}")
        raise typer.Exit(code=1) from exc

    if not result:
        console.print("[dim]No words to rank.[/dim]")
        return

    table = Table(title=f"Top {limit} words ({strategy.value})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Word", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for position, entry in enumerate(result, start=1):
        table.add_row(str(position), entry.word, str(entry.count))

    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()

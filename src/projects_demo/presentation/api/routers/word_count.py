"""Word count router: top-N word frequencies of a fixed story."""

from typing import Annotated

from fastapi import APIRouter, Query

from projects_demo.application.queries import RankWordsQuery
from projects_demo.domain.wordcount import RankingStrategy
from projects_demo.presentation.api.dependencies import ApiSettings
from projects_demo.presentation.api.schemas import ErrorResponse, WordCountResponse

router = APIRouter()

# No lower bound here: negative values are rejected by the domain (400)
LimitParam = Annotated[
    int | None,
    Query(description="Number of entries to return (defaults to 2)"),
]

_RESPONSES = {
    200: {"description": "Words ordered by count descending, then alphabetically"},
    400: {
        "model": ErrorResponse,
        "description": "Negative limit (a malformed value yields a list of messages)",
    },
}


def _rank(
    strategy: RankingStrategy,
    limit: int | None,
    settings: ApiSettings,
) -> list[WordCountResponse]:
    if limit is None:
        limit = settings.word_count_default_limit
    result = RankWordsQuery(strategy).execute(limit)
    return [WordCountResponse(word=wc.word, count=wc.count) for wc in result]


@router.get("/v1", summary="Word count (grouping)", responses=_RESPONSES)
async def word_count_v1(
    settings: ApiSettings,
    limit: LimitParam = None,
) -> list[WordCountResponse]:
    """Rank words by grouping them per count."""
    return _rank(RankingStrategy.GROUPING, limit, settings)


@router.get("/v2", summary="Word count (bounded heap)", responses=_RESPONSES)
async def word_count_v2(
    settings: ApiSettings,
    limit: LimitParam = None,
) -> list[WordCountResponse]:
    """Rank words with a bounded heap selection."""
    return _rank(RankingStrategy.HEAP, limit, settings)


@router.get("/v3", summary="Word count (pipeline)", responses=_RESPONSES)
async def word_count_v3(
    settings: ApiSettings,
    limit: LimitParam = None,
) -> list[WordCountResponse]:
    """Rank words with a counter / sort / slice pipeline."""
    return _rank(RankingStrategy.PIPELINE, limit, settings)

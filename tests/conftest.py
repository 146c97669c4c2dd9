"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no database, no HTTP)
    │   ├── domain/
    │   ├── application/
    │   └── presentation/
    └── integration/       # Tests against a temporary SQLite database
        ├── api/           # Full HTTP round trips through the ASGI app
        └── persistence/   # Repository behaviour

Environment:
    Values from config/.env.test (if present) are loaded before settings
    are created, so tests never pick up a developer's local database.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from projects_demo_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that exercise the database or the HTTP stack",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that deliberately wait (e.g. streaming delays)",
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Clear cached settings around every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()

"""API configuration adapter.

Bridges the centralized projects_demo_config settings with the API layer.
"""

from projects_demo_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration.

    Overridden per application by ``create_app(settings=...)``.
    """
    return get_settings()

"""
Configuration for selection providers and logging.

``get_settings()`` is what ``PlaywrightPage`` falls back to when it is given no
``ProviderSettings``. Values come from ``web-selection.yaml``, then
``WEB_SELECTION__*`` environment variables, then explicit overrides:

    WEB_SELECTION__PROVIDER__LINK_TEXT_MATCH=partial
    WEB_SELECTION__LOGGING__LEVEL=DEBUG
"""

from web_selection.config.settings import (
    Settings,
    ProviderSettings,
    LoggingSettings,
)
from web_selection.config.loader import ConfigLoader, load_config

_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "ProviderSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
    "get_settings",
    "reset_settings",
]

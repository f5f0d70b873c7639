"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from web_selection.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.provider.link_text_match)
    'exact'
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseModel):
    """
    Element provider settings.

    Attributes:
        link_text_match: How link-text criteria match anchor text.
            'exact' matches the whole normalized text, 'partial' any substring.
    """
    link_text_match: Literal["exact", "partial"] = "exact"


class LoggingSettings(BaseModel):
    """
    Logging configuration.

    Attributes:
        level: Log level
        format: Log format string
        file: Log file path (None for console only)
        json_format: Use JSON format for logs
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    json_format: bool = False


class Settings(BaseSettings):
    """
    Root settings container - single source of truth for all configuration.

    Constructed directly, explicit values beat WEB_SELECTION__* environment
    variables, which beat defaults. ConfigLoader layers a YAML file underneath
    the environment.

    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(provider=ProviderSettings(link_text_match="partial"))
    """

    model_config = SettingsConfigDict(
        env_prefix="WEB_SELECTION__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.

        Args:
            overrides: Dictionary of values to override

        Returns:
            New Settings instance with overrides applied
        """
        return Settings(**deep_merge(self.model_dump(), overrides))


def deep_merge(base: dict, updates: dict) -> dict:
    """
    Recursively merge ``updates`` into ``base``; ``updates`` wins on conflicts.

    Nested mappings are merged key by key, anything else is replaced.
    ``base`` is modified and returned.
    """
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base

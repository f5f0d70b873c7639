"""
Config Loader - build Settings from a YAML file, the environment and overrides.

Sources are layered before validation, later ones winning key by key:

    defaults < YAML file < WEB_SELECTION__* env vars < explicit overrides

A nested value set in the environment therefore replaces the same key from
the file without discarding the file's sibling keys.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from pydantic_settings import EnvSettingsSource

from web_selection.config.settings import Settings, deep_merge
from web_selection.exceptions.base import ConfigurationError


class ConfigLoader:
    """
    Locate, read and layer the configuration sources.

    Without an explicit path the loader looks for ``web-selection.yaml`` in the
    working directory, then ``~/.config/web-selection/config.yaml``.
    """

    DEFAULT_CONFIG_PATHS = [
        Path("web-selection.yaml"),
        Path.home() / ".config" / "web-selection" / "config.yaml",
    ]

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None

    def find_config_file(self) -> Optional[Path]:
        """Return the first existing config file, or None."""
        candidates = [self.config_path] if self.config_path else []
        for path in candidates + self.DEFAULT_CONFIG_PATHS:
            if path.exists():
                return path
        return None

    def load_yaml_config(self, path: Path) -> Dict[str, Any]:
        """
        Read a YAML mapping from ``path``.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return config

    def load(
        self,
        env_file: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Settings:
        """
        Layer file, environment and overrides, then validate.

        Args:
            env_file: Optional .env file exported into the environment first
            overrides: Values that beat every other source

        Raises:
            ConfigurationError: If the layered values fail validation
        """
        if env_file:
            load_dotenv(env_file)

        values: Dict[str, Any] = {}
        config_file = self.find_config_file()
        if config_file:
            values = self.load_yaml_config(config_file)

        deep_merge(values, EnvSettingsSource(Settings)())
        if overrides:
            deep_merge(values, overrides)

        try:
            return Settings(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> Settings:
    """
    Convenience function to load configuration.

    Example:
        >>> settings = load_config()
        >>> settings = load_config(config_path="my-config.yaml")
        >>> settings = load_config(provider={"link_text_match": "partial"})
    """
    loader = ConfigLoader(config_path)
    return loader.load(env_file=env_file, overrides=overrides or None)

"""
Config Loader - Read label-locator settings from YAML and .env files.

A YAML file holds the same sections as Settings (browser, resolver,
logging). It is looked up in this order:

1. The path passed to ConfigLoader / load_config
2. The path in the LABEL_LOCATOR_CONFIG environment variable
3. label-locator.yaml or label-locator.yml in the working directory
4. ~/.config/label-locator/config.yaml

Example label-locator.yaml:

    browser:
      engine: selenium
      headless: false
    resolver:
      verify_category: false
      options_timeout_s: 8
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic_settings import EnvSettingsSource

from label_locator.config.settings import Settings
from label_locator.exceptions import ConfigurationError

CONFIG_ENV_VAR = "LABEL_LOCATOR_CONFIG"

SEARCH_PATHS: List[Path] = [
    Path("label-locator.yaml"),
    Path("label-locator.yml"),
    Path.home() / ".config" / "label-locator" / "config.yaml",
]

ENV_FILES: List[Path] = [Path(".env"), Path(".env.local")]


class ConfigLoader:
    """
    Build Settings from a YAML file, .env files and explicit overrides.

    Environment variables beat the YAML file, and overrides beat both.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None

    def find_config_file(self) -> Optional[Path]:
        """
        Locate the YAML file to read.

        An explicitly named file (argument or LABEL_LOCATOR_CONFIG) must
        exist; the search paths are optional.

        Raises:
            ConfigurationError: If an explicitly named file is missing
        """
        explicit = self.config_path
        if explicit is None and os.environ.get(CONFIG_ENV_VAR):
            explicit = Path(os.environ[CONFIG_ENV_VAR])

        if explicit is not None:
            if not explicit.is_file():
                raise ConfigurationError(
                    f"Config file not found: {explicit}",
                    {"path": str(explicit)},
                )
            return explicit

        return next((path for path in SEARCH_PATHS if path.is_file()), None)

    def read_yaml(self, path: Path) -> Dict[str, Any]:
        """
        Parse a YAML config file into a mapping of settings sections.

        Raises:
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        with open(path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}", {"path": str(path)})

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{path} must map section names (browser, resolver, logging) to values",
                {"path": str(path), "type": type(data).__name__},
            )
        return data

    def load(
        self,
        env_file: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Settings:
        """
        Load settings.

        Args:
            env_file: .env file to read; defaults to the first of .env, .env.local
            overrides: Nested values applied last, e.g. {"browser": {"headless": False}}
        """
        if env_file:
            load_dotenv(env_file)
        else:
            found = next((path for path in ENV_FILES if path.is_file()), None)
            if found:
                load_dotenv(found)

        config_file = self.find_config_file()
        file_config = self.read_yaml(config_file) if config_file else {}

        # Init kwargs outrank the environment in pydantic-settings, so the
        # LABEL_LOCATOR__ variables are applied on top of the file
        settings = Settings(**file_config)
        env_values = EnvSettingsSource(Settings)()
        if env_values:
            settings = settings.merge_with(env_values)

        if overrides:
            settings = settings.merge_with(overrides)
        return settings


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    env_file: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> Settings:
    """
    Load settings from the config file, the environment and keyword overrides.

    Example:
        >>> settings = load_config(resolver={"verify_category": False})
    """
    return ConfigLoader(config_path).load(env_file=env_file, overrides=overrides or None)

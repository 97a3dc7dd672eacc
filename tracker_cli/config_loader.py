#!/usr/bin/env python3
"""Tracker Configuration Loader Module

This module handles loading and parsing the configuration file of the
tracker command line tools.

Configuration files can be in YAML or JSON format and are searched
in the following order:
1. the current directory
2. ~/.config/tracker/

Example configuration structure:
{
  "database": {
    "path": "data/tracker.db",
    "table_prefix": "jos_"
  },
  "logging": {
    "level": "INFO",
    "file": "logs/tracker.log"
  },
  "github": {
    "api_url": "https://api.github.com",
    "token": "..."
  },
  "console": {
    "progress_bar": true
  }
}
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigError
from .services.project_repository import PREFIX_PATTERN

CONFIG_NAMES = ["tracker.yaml", "tracker.yml", "tracker.json"]
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TOKEN_ENV_VAR = "TRACKER_GITHUB_TOKEN"


@dataclass
class AppConfig:
    """Represents the tracker CLI configuration."""

    database_path: Path = Path("tracker.db")
    table_prefix: str = "jos_"
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    github_api_url: str = "https://api.github.com"
    github_token: Optional[str] = None
    use_progress_bar: bool = True
    config_path: Optional[Path] = None


# section -> {key in file: AppConfig attribute}
SECTION_KEYS: Dict[str, Dict[str, str]] = {
    "database": {"path": "database_path", "table_prefix": "table_prefix"},
    "logging": {"level": "log_level", "file": "log_file"},
    "github": {"api_url": "github_api_url", "token": "github_token"},
    "console": {"progress_bar": "use_progress_bar"},
}


class ConfigLoader:
    """Loads and parses tracker configuration files."""

    def __init__(self, search_paths: Optional[List[Path]] = None):
        """Initialize the config loader with search paths.

        Args:
            search_paths: List of directories to search for config files.
                         Defaults to ['.', '~/.config/tracker']
        """
        self.logger = logging.getLogger(__name__)

        if search_paths is None:
            self.search_paths = [Path("."), Path.home() / ".config" / "tracker"]
        else:
            self.search_paths = search_paths

    def find_config_file(self) -> Optional[Path]:
        """Find the first configuration file in the search paths.

        Returns:
            Path to the config file if found, None otherwise
        """
        for search_path in self.search_paths:
            for name in CONFIG_NAMES:
                config_path = search_path / name
                if config_path.exists():
                    self.logger.debug(f"Found config file: {config_path}")
                    return config_path

        return None

    def parse_config_data(self, config_data: str, file_path: Path) -> Dict[str, Any]:
        """Parse configuration data based on file extension.

        Args:
            config_data: Configuration string
            file_path: Path to the config file (for extension detection)

        Returns:
            Parsed configuration data

        Raises:
            ConfigError: If configuration format is invalid
        """
        ext = file_path.suffix.lower()

        if ext == ".json":
            try:
                data = json.loads(config_data)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON format: {e}")
        elif ext in [".yaml", ".yml"]:
            try:
                data = yaml.safe_load(config_data)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML format: {e}")
        else:
            raise ConfigError(f"Unsupported file format: {ext}")

        # An empty YAML document loads as None
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {file_path}")
        return data

    def load_config(self, config_path: Optional[Path] = None) -> AppConfig:
        """Load the configuration.

        Args:
            config_path: Explicit config file. When omitted the search
                         paths are used, falling back to defaults.

        Returns:
            AppConfig with loaded configuration

        Raises:
            ConfigError: If the explicit file is missing or any file is invalid
        """
        if config_path is not None and not config_path.exists():
            raise ConfigError(f"Configuration file '{config_path}' not found")

        if config_path is None:
            config_path = self.find_config_file()

        config = AppConfig()

        if config_path is not None:
            try:
                config_content = config_path.read_text()
            except OSError as e:
                raise ConfigError(f"Error reading config file {config_path}: {e}")

            config_data = self.parse_config_data(config_content, config_path)
            self._apply_sections(config, config_data)
            config.config_path = config_path
            self.logger.info(f"Loaded configuration from {config_path}")
        else:
            self.logger.debug("No configuration file found, using defaults")

        token = os.environ.get(TOKEN_ENV_VAR)
        if token:
            config.github_token = token

        errors = self.validate_config(config)
        if errors:
            raise ConfigError("; ".join(errors))

        return config

    def _apply_sections(self, config: AppConfig, config_data: Dict[str, Any]) -> None:
        """Copy known section values onto the config object"""
        for section, values in config_data.items():
            keys = SECTION_KEYS.get(section)
            if keys is None:
                self.logger.warning(f"Ignoring unknown config section: {section}")
                continue
            if not isinstance(values, dict):
                raise ConfigError(f"Section '{section}' must be a mapping")

            for key, value in values.items():
                attr = keys.get(key)
                if attr is None:
                    self.logger.warning(f"Ignoring unknown config key: {section}.{key}")
                    continue
                if attr in ("database_path", "log_file") and value is not None:
                    if not isinstance(value, str):
                        raise ConfigError(f"{section}.{key} must be a path string")
                    value = Path(value).expanduser()
                setattr(config, attr, value)

    def validate_config(self, config: AppConfig) -> List[str]:
        """Validate a configuration.

        Args:
            config: AppConfig to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(config.log_level, str) or config.log_level.upper() not in LOG_LEVELS:
            errors.append(
                f"Invalid log level: '{config.log_level}'. "
                f"Must be one of {', '.join(LOG_LEVELS)}"
            )
        else:
            config.log_level = config.log_level.upper()

        if not isinstance(config.table_prefix, str):
            errors.append("Table prefix must be a string")
        elif not PREFIX_PATTERN.fullmatch(config.table_prefix):
            errors.append(
                f"Invalid table prefix: '{config.table_prefix}'. "
                "Only letters, digits and underscores are allowed"
            )

        if not isinstance(config.use_progress_bar, bool):
            errors.append("console.progress_bar must be true or false")

        if not config.github_api_url:
            errors.append("GitHub API URL is required")

        return errors

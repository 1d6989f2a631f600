#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
config.py - Configuration management for Zeka

Settings are loaded from several sources, each overriding the previous one:
1. Default values
2. Configuration file (YAML)
3. Environment variables (a `.env` file is honored too)
4. Command line arguments
"""

import argparse
import logging
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration manager for Zeka.

    Only the command line front end creates one; the rest of the package
    receives the repository path as an explicit argument.
    """

    # Default configuration values
    DEFAULTS: Dict[str, Any] = {
        "repository": "",  # Must be provided via ENV var, config file, or CLI
        "verbose": False,
        "editor": "",  # Command used to open files; empty prints the path
    }

    # Map config keys to environment variable names
    ENV_MAPPING = {
        "repository": "ZEKA_REPOSITORY",
        "verbose": "ZEKA_VERBOSE",
        "editor": "ZEKA_EDITOR",
    }

    def __init__(self, config_file: Optional[str] = None,
                 args: Optional[argparse.Namespace] = None,
                 use_env: bool = True):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to a configuration file to load from
            args: Parsed command line arguments to apply last
            use_env: Whether to read environment variables (and `.env`)
        """
        self._config = self.DEFAULTS.copy()

        if config_file:
            self.load_from_file(config_file)
        else:
            for path in self.default_locations():
                if os.path.exists(path):
                    self.load_from_file(path)
                    break

        if use_env:
            dotenv_path = find_dotenv(usecwd=True)
            if dotenv_path:
                load_dotenv(dotenv_path)
            self.load_from_env()

        if args is not None:
            self.load_from_args(args)

    @staticmethod
    def default_locations():
        """Configuration files tried, in order, when none is given."""
        return [
            os.path.join(os.getcwd(), "zeka.yaml"),
            os.path.expanduser("~/.config/zeka/config.yaml"),
        ]

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file.

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Error loading configuration from '{config_file}': {e}") from e

        if isinstance(config_data, dict):
            for key, value in config_data.items():
                if key in self._config:
                    self._config[key] = value
                else:
                    logger.warning("Unknown configuration key '%s' in %s", key, config_file)
            logger.debug("Loaded configuration from %s", config_file)

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        for config_key, env_var in self.ENV_MAPPING.items():
            if env_var in os.environ:
                value: Any = os.environ[env_var]

                if isinstance(self.DEFAULTS[config_key], bool):
                    value = value.lower() in ("true", "yes", "1")

                self._config[config_key] = value

    def load_from_args(self, args: argparse.Namespace) -> None:
        """
        Apply command line arguments.

        Only arguments that were actually given (not None, not False) override
        the values loaded so far.

        Args:
            args: Parsed command line arguments
        """
        for key, value in vars(args).items():
            config_key = key.replace("-", "_")
            if config_key in self._config and value not in (None, False):
                self._config[config_key] = value

    def repository(self) -> Optional[str]:
        """
        Get the configured repository root.

        Returns:
            The repository path with `~` expanded, or None if unset
        """
        repo = self._config.get("repository")
        if not repo:
            return None
        return os.path.expanduser(str(repo))

    def __getitem__(self, key: str) -> Any:
        return self._config.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value with a default fallback."""
        return self._config.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Get a dictionary representation of the configuration."""
        return self._config.copy()


def require_repository(repo: Optional[str]) -> str:
    """
    Check that the Zeka repository is configured and exists.

    Nothing should be done when the repository is not in place; we could
    cause a mess if we tried.

    Args:
        repo: Configured repository path, or None

    Returns:
        The repository path

    Raises:
        ConfigurationError: If no repository is configured or it does not exist
    """
    if not repo:
        raise ConfigurationError("No Zeka repository configured! Please define it in the settings.")

    if not os.path.isdir(repo):
        raise ConfigurationError(f"No Zeka repository found at '{repo}'.")

    return repo

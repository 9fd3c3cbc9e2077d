"""
Configuration management for unpkgify.

Handles loading, merging, and discovery of configuration files.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

from unpkgify.utils.exceptions import ConfigNotFoundError, InvalidConfigError

LOCAL_CONFIG_FILE = "unpkgify.config.yaml"

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages unpkgify configuration loading and merging operations."""

    def __init__(self):
        self.source: Optional[str] = None

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigError("Config file is not valid YAML", source=path, original_exception=e)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigError("Config file must contain a mapping", source=path)
        return data

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import unpkgify.config
        default_config_path = importlib_resources.files(unpkgify.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        self.source = user_config_path
        logger.debug(f"Merging {user_config_path} over package default config")
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise ConfigNotFoundError(config_arg)

        # Priority 2: unpkgify.config.yaml in current directory
        if os.path.exists(LOCAL_CONFIG_FILE):
            return self.load_and_merge_config(LOCAL_CONFIG_FILE)

        # Priority 3: Package default config
        self.source = "package default"
        return self.load_package_default_config()

    def merge_config_and_args(
        self, config: dict, output_format: Optional[str], show_labels: Optional[bool]
    ) -> dict:
        """Merge configuration with CLI arguments."""
        output = config.get("output") or {}
        config["output"] = output
        if output_format is not None:
            output["format"] = output_format

        if show_labels is not None:
            output["show_labels"] = show_labels

        return config

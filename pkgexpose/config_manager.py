"""
Configuration management for the pkgexpose CLI.

Handles loading, merging, and discovery of configuration files. The library
API never reads configuration; only the command line does.
"""
import importlib.resources as importlib_resources
import os
from typing import List, Optional

import yaml

DEFAULT_CONFIG_FILENAME = "pkgexpose.config.yaml"


class ConfigManager:
    """Manages pkgexpose configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        if not isinstance(user, dict):
            return user
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        try:
            config_files = importlib_resources.files("pkgexpose.config")
            with (config_files / "default.yaml").open("r") as f:
                return yaml.safe_load(f)
        except (ModuleNotFoundError, FileNotFoundError):
            # Last resort - try relative path
            package_path = os.path.dirname(os.path.abspath(__file__))
            return self.load_config(os.path.join(package_path, "config", "default.yaml"))

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: pkgexpose.config.yaml in current directory
        if os.path.exists(DEFAULT_CONFIG_FILENAME):
            return self.load_and_merge_config(DEFAULT_CONFIG_FILENAME)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def merge_config_and_args(self, config: dict, include: Optional[List[str]], output_format: Optional[str]) -> dict:
        """Merge configuration with CLI arguments."""
        if not isinstance(config, dict):
            return config

        if include:
            config["include"] = list(include)

        if output_format is not None:
            config.setdefault("output", {})["format"] = output_format

        return config

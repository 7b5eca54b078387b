"""Configuration loader for urlloader.

This module loads the YAML configuration files shipped in this package (or from
the directory named by URLLOADER_CONFIG_DIR) and provides a singleton config
object for easy access throughout the package.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

CONFIG_DIR_ENV = "URLLOADER_CONFIG_DIR"


class Config:
    """Configuration manager that loads and provides access to all config files."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use a copy of the provided config
            self._configs = dict(config_dict)
            self._config_dir = None
        else:
            self._configs = {}
            self._config_dir = self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path:
        """Find the config directory (env override first, then the packaged defaults)."""
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            config_dir = Path(override)
            if not config_dir.is_dir():
                raise FileNotFoundError(
                    f"Config directory from {CONFIG_DIR_ENV} not found at {config_dir}."
                )
            return config_dir

        # fetch_config.yaml ships next to this module
        return Path(__file__).resolve().parent

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        config_files = {
            "fetch": "fetch_config.yaml",
        }

        for key, filename in config_files.items():
            config_path = self._config_dir / filename
            if config_path.exists():
                with open(config_path, encoding="utf-8") as f:
                    loaded_config = yaml.safe_load(f)

                if not isinstance(loaded_config, dict):
                    print(
                        f"Warning: Config file {filename} must contain a dictionary, "
                        f"got {type(loaded_config).__name__}. Using empty config."
                    )
                    self._configs[key] = {}
                else:
                    self._configs[key] = loaded_config
            else:
                print(f"Warning: Config file {filename} not found at {config_path}")
                self._configs[key] = {}

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "fetch.max_workers")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("fetch.max_workers")
            4
            >>> config.get("fetch.base_url")
            None
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def fetch(self) -> dict[str, Any]:
        """Get fetch engine configuration."""
        # Safe cast: _load_all_configs validates all config values are dicts
        return cast(dict[str, Any], self._configs.get("fetch", {}))

    def reload(self):
        """Reload all configuration files (no-op for an injected dictionary)."""
        if self._config_dir is None:
            return
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()

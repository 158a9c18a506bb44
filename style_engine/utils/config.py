"""
Configuration utility for the style engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "units": {
        "em_size": 16.0
    },
    "gradients": {
        "trailing_stop_at_end": False
    },
    "logging": {
        "level": "WARNING"
    }
}


class Config:
    """Configuration for the value parsers."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_path: Optional path to a JSON file whose values override the defaults
        """
        self.config_path = config_path
        self.config = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load the defaults, then the configuration file if there is one."""
        self._set_defaults()

        if not self.config_path:
            return

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                overrides = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(overrides, dict):
            logger.error(f"Configuration in {self.config_path} is not an object, using defaults")
            return

        with self._lock:
            _merge(self.config, overrides)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'units.em_size')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            config = self.config
            parts = key.split('.')

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'units.em_size')
            value: Configuration value
        """
        with self._lock:
            config = self.config
            parts = key.split('.')

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Recursively merge overrides into target."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value

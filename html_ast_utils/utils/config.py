"""
Configuration utility for the parser and serializer.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "parser": {
        "fragment_container": "div",
        "strict": False,
        "namespace_html_elements": True,
    },
    "serializer": {
        "quote_attr_values": "always",
        "quote_char": '"',
        "omit_optional_tags": False,
        "minimize_boolean_attributes": False,
        "use_trailing_solidus": False,
        "escape_rcdata": False,
        "escape_lt_in_attrs": False,
        "alphabetical_attributes": False,
        "strip_whitespace": False,
    },
    "logging": {
        "console_level": "WARNING",
        "file_level": "DEBUG",
        "log_file": None,
    },
}


class Config:
    """Configuration manager for parsing and serialization options."""

    def __init__(self, config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to a JSON config file merged over the defaults
            overrides: Optional dotted-key overrides, e.g. {'parser.strict': True}
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self._set_defaults()
        if config_path:
            self.load()

        for key, value in (overrides or {}).items():
            self.set(key, value)

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """
        Load configuration from file, merging it over the defaults.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON or not a JSON object
        """
        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a JSON object")

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self, config_path: Optional[str] = None) -> None:
        """
        Save configuration to file.

        Args:
            config_path: Target path, defaults to the path the config was loaded from
        """
        path = config_path or self.config_path
        if not path:
            raise ValueError("No configuration path to save to")

        with self._lock:
            config_copy = copy.deepcopy(self.config)

        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.strict')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'serializer.escape_rcdata')
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Deep copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def parser_options(self) -> Dict[str, Any]:
        """Options for the html5lib parser section."""
        return dict(self.get("parser", {}))

    def serializer_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``html5lib.serializer.HTMLSerializer``."""
        return dict(self.get("serializer", {}))

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value


_default_config: Optional[Config] = None
_default_lock = threading.Lock()


def get_default_config() -> Config:
    """Return the process-wide default configuration, creating it on first use."""
    global _default_config
    with _default_lock:
        if _default_config is None:
            _default_config = Config()
        return _default_config

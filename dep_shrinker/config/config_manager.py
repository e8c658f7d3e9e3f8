"""Configuration management for the dependency shrinker."""

import copy
import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator


class ConfigManager:
    """Manages configuration loading and validation for dependency shrinking."""

    DEFAULT_CONFIG_LOCATIONS = [
        "dep-shrinker.yaml",
        "dep-shrinker.yml",
        ".dep-shrinker.yaml",
        os.path.expanduser("~/.dep-shrinker/config.yaml"),
    ]

    DEFAULTS = {
        'target': {
            'project_dir': '.',
            'modules_dir': 'node_modules'
        },
        'installer': {
            'command': ['npm', 'install', '--omit=dev'],
            'timeout_seconds': 900
        },
        'minifier': {
            'command': ['terser'],
            'ecma': 2020,
            'timeout_seconds': 60
        },
        'logging': {
            'level': 'INFO',
            'file': None
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations and fall back
                        to built-in defaults.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.loaded_from: Optional[str] = None
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, if one is present.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If an explicit config file cannot be found.
            ValueError: If config file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {config_file}: {e}")
            self.loaded_from = config_file

        # Validate configuration
        self.validator.validate(self.config_data)

        # Set defaults
        self._set_defaults()

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None if there is none.

        Raises:
            FileNotFoundError: If the explicit config file does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        for section, section_defaults in self.DEFAULTS.items():
            if section not in self.config_data:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = copy.deepcopy(value)

    def get_target_config(self) -> Dict[str, Any]:
        """Get target directory configuration."""
        return self.config_data.get('target', {})

    def get_installer_config(self) -> Dict[str, Any]:
        """Get package installer configuration."""
        return self.config_data.get('installer', {})

    def get_minifier_config(self) -> Dict[str, Any]:
        """Get JavaScript minifier configuration."""
        return self.config_data.get('minifier', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return self.config_data.get('logging', {})

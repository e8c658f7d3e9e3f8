"""Configuration validation for the dependency shrinker."""

from typing import Dict, Any


class ConfigValidator:
    """Validates dependency shrinker configuration."""

    SECTIONS = ['target', 'installer', 'minifier', 'logging']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    ECMA_VERSIONS = [5] + list(range(2015, 2025))

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_structure(config)
        self._validate_target(config.get('target', {}))

        for section in ['installer', 'minifier']:
            section_config = config.get(section, {})
            if 'command' in section_config:
                self._validate_command(section, section_config['command'])
            if 'timeout_seconds' in section_config:
                self._validate_timeout(section, section_config['timeout_seconds'])

        minifier_config = config.get('minifier', {})
        if 'ecma' in minifier_config and minifier_config['ecma'] not in self.ECMA_VERSIONS:
            raise ValueError(f"Minifier ecma must be 5 or 2015-2024, got: {minifier_config['ecma']}")

        level = config.get('logging', {}).get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level}")

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Raises:
            ValueError: If the configuration or one of its sections is not a mapping.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        for section in self.SECTIONS:
            if section in config and not isinstance(config[section], dict):
                raise ValueError(f"Configuration section '{section}' must be a mapping")

    def _validate_target(self, target: Dict[str, Any]) -> None:
        if 'modules_dir' in target and not target['modules_dir']:
            raise ValueError("Target modules_dir cannot be empty")
        if 'project_dir' in target and not target['project_dir']:
            raise ValueError("Target project_dir cannot be empty")

    def _validate_command(self, section: str, command: Any) -> None:
        if not isinstance(command, list) or not command:
            raise ValueError(f"{section} command must be a non-empty list")
        if not all(isinstance(part, str) and part for part in command):
            raise ValueError(f"{section} command must contain only non-empty strings")

    def _validate_timeout(self, section: str, timeout: Any) -> None:
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ValueError(f"{section} timeout_seconds must be a positive integer, got: {timeout}")

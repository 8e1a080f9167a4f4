"""Configuration loader for selection operators."""

import os
import yaml
from typing import Dict, Any, Optional

from genetic.errors import ConfigurationError


class Config:
    """Selection configuration container."""

    def __init__(self, config_dict: Dict[str, Any]):
        """Initialize from dictionary.

        Args:
            config_dict: Configuration dictionary from YAML
        """
        self.raw = config_dict
        self._parse_sections()

    def _parse_sections(self):
        """Parse configuration sections into attributes."""
        self.selection = self.raw.get('selection', {})
        self.random = self.raw.get('random', {})
        self.logging = self.raw.get('logging', {})

    @property
    def seed(self) -> Optional[int]:
        return self.random.get('seed')

    def get(self, key: str, default: Any = None) -> Any:
        """Get value by dot-notation key (e.g., 'selection.preset').

        Args:
            key: Dot-notation key path
            default: Default value if key not found

        Returns:
            Value at key path or default
        """
        keys = key.split('.')
        value = self.raw
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def override(self, overrides: Dict[str, Any]):
        """Override config values with CLI arguments.

        Args:
            overrides: Dictionary of overrides (supports dot-notation keys)
        """
        _apply_overrides(self.raw, overrides)
        self._parse_sections()


def load_config(config_path: str, cli_overrides: Optional[Dict[str, Any]] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file
        cli_overrides: Dictionary of CLI argument overrides

    Returns:
        Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        ConfigurationError: If the configuration is invalid
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f) or {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping at top level")

    config_dict = apply_defaults(config_dict)

    # Overrides are validated together with the file contents
    if cli_overrides:
        _apply_overrides(config_dict, cli_overrides)

    from config.config_schema import validate_config
    validate_config(config_dict)

    return Config(config_dict)


def apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to missing config keys.

    Args:
        config: Configuration dictionary

    Returns:
        Configuration with defaults applied
    """
    defaults = {
        'selection': {
            'preset': 'rank',
        },
        'random': {
            'seed': None,
        },
        'logging': {
            'level': 'INFO',
        },
    }

    return deep_merge(defaults, config)


def deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_overrides(config: Dict[str, Any], overrides: Dict[str, Any]):
    for key, value in overrides.items():
        if value is None:
            continue
        keys = key.split('.')
        current = config
        for k in keys[:-1]:
            current = current.setdefault(k, {})
        current[keys[-1]] = value

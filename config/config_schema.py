"""Configuration validation schemas."""

from typing import Dict, Any

from genetic.errors import ConfigurationError
from genetic.selection.factory import SELECTION_REGISTRY
from config.presets.selection_presets import SELECTION_PRESETS
from utils.logger import initialize_logger

logger = initialize_logger(__name__)

VALID_LOGGING_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

def validate_config(config: Dict[str, Any]):
    """Validate configuration structure and values.

    Args:
        config: Configuration dictionary

    Raises:
        ConfigurationError: If configuration is invalid
    """
    # Validate selection section
    selection = config.get('selection', {})
    if not isinstance(selection, dict):
        raise ConfigurationError(f"Invalid selection section: {selection}. Must be a mapping")

    preset = selection.get('preset')
    if preset == 'custom':
        custom = selection.get('custom')
        if not isinstance(custom, dict) or not custom:
            raise ConfigurationError("Custom selection preset requires a 'custom' mapping with 'type' and 'params'")
        if 'type' not in custom:
            raise ConfigurationError("Custom selection missing 'type' field")
        if str(custom['type']).lower() not in SELECTION_REGISTRY:
            raise ConfigurationError(
                f"Invalid selection type: {custom['type']}. Must be one of {list(SELECTION_REGISTRY.keys())}")
        if not isinstance(custom.get('params', {}), dict):
            raise ConfigurationError(f"Custom selection (type={custom['type']}) 'params' must be a mapping")
    elif preset not in SELECTION_PRESETS:
        raise ConfigurationError(
            f"Invalid selection preset: {preset}. Must be one of {list(SELECTION_PRESETS.keys()) + ['custom']}")

    # Validate random section
    seed = config.get('random', {}).get('seed')
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
        raise ConfigurationError(f"Invalid seed: {seed}. Must be a non-negative integer or null")

    # Validate logging section
    level = config.get('logging', {}).get('level')
    if not isinstance(level, str) or level.upper() not in VALID_LOGGING_LEVELS:
        raise ConfigurationError(f"Invalid logging level: {level}. Must be one of {VALID_LOGGING_LEVELS}")

    logger.info("Validation passed")

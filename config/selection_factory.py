"""Factory for creating selection operators from configuration."""

from typing import Any, Dict

from genetic.errors import ConfigurationError
from genetic.selection.base_selection import BaseSelection
from genetic.selection.factory import create_selection
from genetic.utils.alias_method import RandomSource
from config.presets.selection_presets import SELECTION_PRESETS


def create_selection_from_config(selection_config: Dict[str, Any], rng: RandomSource = None) -> BaseSelection:
    """Create a selection operator from configuration.

    Args:
        selection_config: Selection section from config file
        rng: Seed or numpy Generator handed to random strategies

    Returns:
        Selection operator instance

    Raises:
        ConfigurationError: If preset or operator type is unknown
    """
    preset = selection_config.get('preset', 'rank')

    if preset == 'custom':
        spec = selection_config.get('custom')
        if not spec:
            raise ConfigurationError("Custom selection preset requires a 'custom' specification")
    else:
        if preset not in SELECTION_PRESETS:
            raise ConfigurationError(f"Unknown selection preset: '{preset}'. Available: {list(SELECTION_PRESETS.keys())}")
        spec = SELECTION_PRESETS[preset]

    return _create_from_spec(spec, rng)


def _create_from_spec(spec: Dict[str, Any], rng: RandomSource) -> BaseSelection:
    selection_type = spec.get('type')
    params = spec.get('params') or {}

    if not selection_type:
        raise ConfigurationError(f"Selection specification missing 'type': {spec}")
    if not isinstance(params, dict):
        raise ConfigurationError(f"Selection 'params' must be a mapping, got {params!r}")

    return create_selection(selection_type, rng=rng, **params)

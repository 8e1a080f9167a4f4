"""Helper functions for creating selection operators."""

from typing import Any

from genetic.errors import ConfigurationError
from genetic.selection.base_selection import BaseSelection
from genetic.selection.elite import EliteSelection
from genetic.selection.truncation import TruncationSelection
from genetic.selection.weighted_roulette import WeightedRouletteSelection
from genetic.selection.rank import RankSelection
from genetic.utils.alias_method import RandomSource


def elite_selection(num_elite: int = 1) -> EliteSelection:
    """Creates an EliteSelection operator, selecting the single best chromosome by default."""
    return EliteSelection(num_elite)


def truncation_selection(subset_size: int, rng: RandomSource = None) -> TruncationSelection:
    """Creates a TruncationSelection operator breeding from the `subset_size` best chromosomes."""
    return TruncationSelection(subset_size, rng=rng)


def weighted_roulette_selection(rng: RandomSource = None) -> WeightedRouletteSelection:
    """Creates a fitness proportional WeightedRouletteSelection operator."""
    return WeightedRouletteSelection(rng=rng)


def rank_selection(rng: RandomSource = None) -> RankSelection:
    """Creates a rank proportional RankSelection operator."""
    return RankSelection(rng=rng)


# Selection registry mapping type names to factories
SELECTION_REGISTRY = {
    'elite': elite_selection,
    'truncation': truncation_selection,
    'weighted_roulette': weighted_roulette_selection,
    'rank': rank_selection,
}

# Strategies that draw random numbers and accept an rng argument
RANDOM_SELECTIONS = {'truncation', 'weighted_roulette', 'rank'}


def create_selection(name: str, rng: RandomSource = None, **params: Any) -> BaseSelection:
    """Create a selection operator by name.

    Args:
        name: Registered strategy name, e.g. 'rank'
        rng: Seed or numpy Generator, ignored by deterministic strategies
        **params: Constructor arguments of the strategy

    Returns:
        The selection operator

    Raises:
        ConfigurationError: If the name is unknown or the parameters are invalid
    """
    if not isinstance(name, str):
        raise ConfigurationError(f"Selection operator name must be a string, got {name!r}")
    key = name.lower()
    if key not in SELECTION_REGISTRY:
        raise ConfigurationError(f"Unknown selection operator: '{name}'. Available: {list(SELECTION_REGISTRY.keys())}")

    factory = SELECTION_REGISTRY[key]
    if key in RANDOM_SELECTIONS:
        params = {**params, 'rng': rng}
    try:
        return factory(**params)
    except TypeError as e:
        raise ConfigurationError(f"Invalid parameters for selection operator '{name}': {e}") from e

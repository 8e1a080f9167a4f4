from genetic.selection.base_selection import BaseSelection, prepare_population
from genetic.selection.elite import EliteSelection
from genetic.selection.truncation import TruncationSelection
from genetic.selection.weighted_roulette import WeightedRouletteSelection
from genetic.selection.rank import RankSelection
from genetic.selection.factory import (
    SELECTION_REGISTRY,
    create_selection,
    elite_selection,
    truncation_selection,
    weighted_roulette_selection,
    rank_selection,
)

__all__ = [
    'BaseSelection',
    'prepare_population',
    'EliteSelection',
    'TruncationSelection',
    'WeightedRouletteSelection',
    'RankSelection',
    'SELECTION_REGISTRY',
    'create_selection',
    'elite_selection',
    'truncation_selection',
    'weighted_roulette_selection',
    'rank_selection',
]

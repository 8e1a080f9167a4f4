from typing import Optional

from utils.population import Population
from utils.status_info import StatusInfo
from utils.logger import initialize_logger

from genetic.errors import PreconditionViolation
from genetic.selection.base_selection import BaseSelection
from genetic.utils.alias_method import AliasMethodSampler, RandomSource, as_generator

logger = initialize_logger(__name__)


class RankSelection(BaseSelection):
    """Rank selection operator for selecting parents in a genetic algorithm.
    Selects chromosomes with a probability proportional to their rank: the best of n chromosomes
    has weight n, the worst weight 1. Every chromosome keeps a chance to be picked, which also
    slows down convergence compared to fitness proportional selection.
    """
    def __init__(self, rng: RandomSource = None):
        """
        Args:
            rng (RandomSource, optional): Seed or numpy Generator. Defaults to None.
        """
        self.rng = as_generator(rng)
        self.sampler: Optional[AliasMethodSampler] = None
        self.weights: list[int] = []

    @property
    def needs_sorted_population(self) -> bool:
        return True

    @staticmethod
    def rank_weights(n: int) -> list[int]:
        """Rank weights for a sorted population of size n: [n, n-1, ..., 1]."""
        return list(range(n, 0, -1))

    def _init(self, status: StatusInfo, population: Population):
        n = len(population)
        self.weights = self.rank_weights(n)
        self.sampler = AliasMethodSampler(self.weights, n * (n + 1) // 2, rng=self.rng)
        logger.debug("Rebuilt rank sampler for generation %d (%d chromosomes)", status.generation, n)

    def _select(self, population: Population) -> list:
        if self.sampler is None:
            raise PreconditionViolation("RankSelection.select() called before init()")
        if len(population) != len(self.weights):
            raise PreconditionViolation(
                f"Population size changed from {len(self.weights)} to {len(population)} since init()")
        return [population[self.sampler.draw()], population[self.sampler.draw()]]

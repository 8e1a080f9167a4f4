from typing import Optional

from utils.population import Population
from utils.status_info import StatusInfo
from utils.logger import initialize_logger

from genetic.errors import PreconditionViolation
from genetic.selection.base_selection import BaseSelection
from genetic.utils.alias_method import AliasMethodSampler, RandomSource, as_generator

logger = initialize_logger(__name__)


class WeightedRouletteSelection(BaseSelection):
    """Roulette wheel selection operator for selecting parents in a genetic algorithm.
    Selects chromosomes with a probability proportional to their fitness, using the alias method.

    Note:
        If one chromosome dominates the total fitness it will be picked almost every time.
    """
    def __init__(self, rng: RandomSource = None):
        """
        Args:
            rng (RandomSource, optional): Seed or numpy Generator. Defaults to None.
        """
        self.rng = as_generator(rng)
        self.sampler: Optional[AliasMethodSampler] = None
        self._population_size = 0

    def _init(self, status: StatusInfo, population: Population):
        self.sampler = AliasMethodSampler(population.fitnesses(), population.total_fitness, rng=self.rng)
        self._population_size = len(population)
        logger.debug("Rebuilt fitness sampler for generation %d (%d chromosomes)", status.generation, len(population))

    def _select(self, population: Population) -> list:
        if self.sampler is None:
            raise PreconditionViolation("WeightedRouletteSelection.select() called before init()")
        if len(population) != self._population_size:
            raise PreconditionViolation(
                f"Population size changed from {self._population_size} to {len(population)} since init()")
        return [population[self.sampler.draw()], population[self.sampler.draw()]]

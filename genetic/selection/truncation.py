from utils.population import Population
from utils.status_info import StatusInfo

from genetic.errors import ConfigurationError, PreconditionViolation
from genetic.selection.base_selection import BaseSelection
from genetic.utils.alias_method import RandomSource, as_generator


class TruncationSelection(BaseSelection):
    """Truncation selection operator for selecting parents in a genetic algorithm.
    Picks both parents uniformly from the `subset_size` best chromosomes. The same chromosome
    may be picked twice.
    """
    def __init__(self, subset_size: int, rng: RandomSource = None):
        """
        Args:
            subset_size (int): Number of top chromosomes forming the breeding pool, must be > 1.
            rng (RandomSource, optional): Seed or numpy Generator. Defaults to None.
        """
        if isinstance(subset_size, bool) or not isinstance(subset_size, int) or subset_size <= 1:
            raise ConfigurationError(f"subset_size must be an integer greater than 1, got {subset_size!r}")
        self.subset_size = subset_size
        self.rng = as_generator(rng)

    @property
    def needs_sorted_population(self) -> bool:
        return True

    def _init(self, status: StatusInfo, population: Population):
        self._check_size(population)

    def _select(self, population: Population) -> list:
        self._check_size(population)
        first, second = self.rng.integers(0, self.subset_size, size=2)
        return [population[int(first)], population[int(second)]]

    def _check_size(self, population: Population):
        if len(population) < self.subset_size:
            raise PreconditionViolation(
                f"Population of size {len(population)} is smaller than the subset size {self.subset_size}")

    def __repr__(self) -> str:
        return f"TruncationSelection(subset_size={self.subset_size})"

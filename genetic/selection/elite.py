from utils.population import Population
from utils.status_info import StatusInfo

from genetic.errors import ConfigurationError, PreconditionViolation
from genetic.selection.base_selection import BaseSelection


class EliteSelection(BaseSelection):
    """Elite selection operator for carrying the best chromosomes unchanged into the next generation.
    Always returns the `num_elite` fittest chromosomes, best first. Involves no randomness.
    """
    def __init__(self, num_elite: int = 1):
        """
        Args:
            num_elite (int, optional): Number of elite chromosomes to select. Defaults to 1.
        """
        if isinstance(num_elite, bool) or not isinstance(num_elite, int) or num_elite < 1:
            raise ConfigurationError(f"num_elite must be a positive integer, got {num_elite!r}")
        self.num_elite = num_elite

    @property
    def needs_sorted_population(self) -> bool:
        return True

    def _init(self, status: StatusInfo, population: Population):
        self._check_size(population)

    def _select(self, population: Population) -> list:
        self._check_size(population)
        return population[:self.num_elite]

    def _check_size(self, population: Population):
        if len(population) < self.num_elite:
            raise PreconditionViolation(
                f"Cannot select {self.num_elite} elite chromosomes from a population of size {len(population)}")

    def __repr__(self) -> str:
        return f"EliteSelection(num_elite={self.num_elite})"

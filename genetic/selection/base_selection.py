from utils.chromosome import HasFitness
from utils.population import Population
from utils.status_info import StatusInfo
from utils.logger import initialize_logger

from genetic.errors import PreconditionViolation

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T', bound=HasFitness)

logger = initialize_logger(__name__)


def prepare_population(operator: 'BaseSelection', population: Population) -> None:
    """Sorts the population if the operator needs it. Must run before any operator-specific setup."""
    if operator.needs_sorted_population and not population.sorted:
        population.sort_chromosomes()
        logger.debug("%s sorted population of size %d", operator.__class__.__name__, len(population))


class BaseSelection(ABC, Generic[T]):
    """Abstract base class for selection operators.

    The engine calls `init` once per generation and `select` as often as it needs parents.
    `init` sorts the population first when `needs_sorted_population` is set, so strategies can
    build their tables from a sorted population. `select` checks the preconditions and then
    delegates to `_select`.
    """
    @property
    def needs_sorted_population(self) -> bool:
        """Whether the population must be sorted by descending fitness before `select`."""
        return False

    def init(self, status: StatusInfo, population: Population[T]) -> None:
        """Prepares the operator for one generation.

        Sorting is skipped when `population.sorted` is already set. If fitness values were changed
        in place since the last sort, call `population.invalidate()` first, otherwise the operator
        works on a stale order.

        Args:
            status (StatusInfo): Run-level information about the current generation.
            population (Population[T]): The population parents are selected from.
        """
        if len(population) == 0:
            raise PreconditionViolation("Cannot initialise a selection operator on an empty population")
        prepare_population(self, population)
        self._init(status, population)

    def _init(self, status: StatusInfo, population: Population[T]) -> None:
        pass

    def select(self, population: Population[T]) -> list[T]:
        """Selects chromosomes from the population.

        Args:
            population (Population[T]): The population passed to the last `init`.

        Returns:
            list[T]: The selected chromosomes, in selection order.

        Raises:
            PreconditionViolation: If the population is empty, or unsorted although the operator needs it sorted.
        """
        if population is None or len(population) == 0:
            raise PreconditionViolation("Cannot select from an empty population")
        if self.needs_sorted_population and not population.sorted:
            raise PreconditionViolation(
                f"{self.__class__.__name__} needs a sorted population, call init() before select()")
        return self._select(population)

    @abstractmethod
    def _select(self, population: Population[T]) -> list[T]:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

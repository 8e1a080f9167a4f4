import math
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from utils.chromosome import HasFitness

T = TypeVar('T', bound=HasFitness)


class Population(Generic[T]):
    """Ordered collection of chromosomes of one generation.

    The population remembers whether it is sorted by descending fitness. Any structural change
    (assignment, append, extend) clears that flag, `sort_chromosomes` sets it again.
    """
    def __init__(self, chromosomes: Optional[Iterable[T]] = None):
        self.chromosomes: list[T] = list(chromosomes) if chromosomes is not None else []
        self._sorted = False

    def __len__(self) -> int:
        return len(self.chromosomes)

    def __iter__(self) -> Iterator[T]:
        return iter(self.chromosomes)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self.chromosomes[key]
        if key < 0 or key >= len(self.chromosomes):
            raise IndexError(f"Chromosome index ({key}) out of range")
        return self.chromosomes[key]

    def __setitem__(self, key: int, chromosome: T):
        self.chromosomes[key] = chromosome
        self._sorted = False

    def __repr__(self) -> str:
        return f"Population(size={len(self)}, sorted={self._sorted})"

    def append(self, chromosome: T):
        self.chromosomes.append(chromosome)
        self._sorted = False

    def extend(self, chromosomes: Iterable[T]):
        self.chromosomes.extend(chromosomes)
        self._sorted = False

    @property
    def sorted(self) -> bool:
        """True once the chromosomes are ordered by descending fitness."""
        return self._sorted

    def sort_chromosomes(self):
        """Orders the chromosomes by descending fitness. Ties keep their current relative order."""
        if self._sorted:
            return
        self.chromosomes.sort(key=lambda chromosome: chromosome.fitness, reverse=True)
        self._sorted = True

    def invalidate(self):
        """Marks the population unsorted, e.g. after fitness values were changed in place."""
        self._sorted = False

    @property
    def total_fitness(self) -> float:
        """Sum of the fitness of all chromosomes."""
        return math.fsum(chromosome.fitness for chromosome in self.chromosomes)

    def fitnesses(self) -> list[float]:
        """Fitness of every chromosome, in population order."""
        return [chromosome.fitness for chromosome in self.chromosomes]

    def best(self) -> T:
        return max(self.chromosomes, key=lambda chromosome: chromosome.fitness)

    def worst(self) -> T:
        return min(self.chromosomes, key=lambda chromosome: chromosome.fitness)

    def mean_fitness(self) -> float:
        return self.total_fitness / len(self.chromosomes)

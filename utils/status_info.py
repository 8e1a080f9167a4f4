from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class StatusInfo:
    """Run-level information handed to selection operators once per generation."""
    generation: int = 0
    """Zero-based index of the generation about to be bred."""
    evaluations: int = 0
    """Number of fitness evaluations performed so far."""
    best_fitness: Optional[float] = None
    """Best fitness seen so far, None before the first evaluation."""

    def next_generation(self, evaluations: int = 0, best_fitness: Optional[float] = None) -> 'StatusInfo':
        """Returns the status for the following generation.

        Args:
            evaluations (int, optional): Evaluations performed during the finished generation. Defaults to 0.
            best_fitness (Optional[float], optional): Best fitness of the finished generation. Defaults to None.
        """
        if best_fitness is not None and self.best_fitness is not None:
            best_fitness = max(best_fitness, self.best_fitness)
        elif best_fitness is None:
            best_fitness = self.best_fitness
        return replace(
            self,
            generation=self.generation + 1,
            evaluations=self.evaluations + evaluations,
            best_fitness=best_fitness,
        )

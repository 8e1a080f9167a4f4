from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HasFitness(Protocol):
    """Anything a selection operator can rank: it only needs a numeric fitness, higher is better."""
    fitness: float


@dataclass
class Chromosome:
    """A scored candidate solution."""
    genes: Any = None
    """Encoded solution; selection operators never look at it."""
    fitness: float = 0.0
    """Quality of the solution, higher is better."""
    metadata: dict = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Chromosome(fitness={self.fitness})"

import numpy as np
from typing import Optional, Sequence, Union

from genetic.errors import ConfigurationError, SamplerBuildError

RandomSource = Union[None, int, np.random.Generator]


def as_generator(rng: RandomSource = None) -> np.random.Generator:
    """Returns `rng` if it already is a numpy Generator, otherwise seeds a new one with it."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class AliasMethodSampler:
    """Walker's alias method for sampling indices from a discrete weighted distribution.

    Building the tables is O(n), every draw afterwards is O(1): pick a column uniformly,
    then keep it or jump to its alias with a single biased coin flip.
    """
    def __init__(self, weights: Sequence[float], total: Optional[float] = None, rng: RandomSource = None):
        """
        Args:
            weights (Sequence[float]): Non-negative weight per index.
            total (Optional[float], optional): Sum of the weights. Computed from `weights` if omitted.
            rng (RandomSource, optional): Seed or numpy Generator used for draws. Defaults to None.

        Raises:
            ConfigurationError: If `weights` is empty or not one-dimensional.
            SamplerBuildError: If the weights or the total cannot be normalised.
        """
        weights = np.asarray(weights, dtype=np.float64)
        if weights.ndim != 1:
            raise ConfigurationError(f"Weights must be a flat sequence, got shape {weights.shape}")
        if len(weights) == 0:
            raise ConfigurationError("Cannot build a sampler from an empty weight sequence")
        if not np.all(np.isfinite(weights)):
            raise SamplerBuildError("Weights must be finite")
        if np.any(weights < 0):
            raise SamplerBuildError(f"Weights must be non-negative, got minimum {weights.min()}")

        weight_sum = float(weights.sum())
        if total is None:
            total = weight_sum
        total = float(total)
        if not np.isfinite(total) or total <= 0:
            raise SamplerBuildError(f"Total weight must be positive, got {total}")
        if not np.isclose(weight_sum, total, rtol=1e-6, atol=0.0):
            raise SamplerBuildError(f"Total weight {total} does not match the sum of the weights {weight_sum}")

        self._rng = as_generator(rng)
        self._probabilities, self._aliases = self._build_tables(weights, total)
        # plain lists are faster than numpy scalars for single draws
        self._probability_list = self._probabilities.tolist()
        self._alias_list = self._aliases.tolist()

    @staticmethod
    def _build_tables(weights: np.ndarray, total: float) -> tuple[np.ndarray, np.ndarray]:
        n = len(weights)
        # dividing first keeps tiny totals from overflowing n / total
        scaled = weights / total * n
        if not np.all(np.isfinite(scaled)):
            raise SamplerBuildError(f"Weights cannot be normalised by total {total}")
        probabilities = scaled.tolist()
        aliases = list(range(n))

        small = [i for i, p in enumerate(probabilities) if p < 1.0]
        large = [i for i, p in enumerate(probabilities) if p >= 1.0]

        while small and large:
            s = small.pop()
            l = large.pop()
            aliases[s] = l
            probabilities[l] = (probabilities[l] + probabilities[s]) - 1.0
            if probabilities[l] < 1.0:
                small.append(l)
            else:
                large.append(l)

        # leftovers only differ from 1 by rounding error
        for i in small + large:
            probabilities[i] = 1.0

        return np.array(probabilities, dtype=np.float64), np.array(aliases, dtype=np.int64)

    def __len__(self) -> int:
        return len(self._probability_list)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(n={len(self)})"

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @property
    def probabilities(self) -> np.ndarray:
        """Copy of the probability table: chance of keeping column i once it is picked."""
        return self._probabilities.copy()

    @property
    def aliases(self) -> np.ndarray:
        """Copy of the alias table: where column i redirects to when not kept."""
        return self._aliases.copy()

    def draw(self) -> int:
        """Draws a single index in [0, n)."""
        i = int(self._rng.integers(len(self._probability_list)))
        u = self._rng.random()
        if u < self._probability_list[i]:
            return i
        return self._alias_list[i]

    def draw_many(self, size: int) -> np.ndarray:
        """Draws `size` indices at once, distributed exactly like repeated calls to `draw`."""
        columns = self._rng.integers(0, len(self._probabilities), size=size)
        coins = self._rng.random(size)
        return np.where(coins < self._probabilities[columns], columns, self._aliases[columns])

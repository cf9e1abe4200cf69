"""
Injectable random-bit sources.

Every stochastic operator in neuroevo takes a RandomSource argument instead of
touching a global generator. Each derived draw (coin toss, uniform real,
weighted choice) consumes exactly one call to `random()`, so the sequence of
draws an operator makes is fully determined by the order it asks for them.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar
import numpy as np

from .errors import (
    DegenerateWeightsError,
    EmptyPopulationError,
    InvalidParameterError,
    LengthMismatchError,
)

T = TypeVar('T')


class RandomSource(ABC):
    """Source of uniform reals in [0, 1) plus the draws built on top of it."""

    @abstractmethod
    def random(self) -> float:
        """Return a uniform real in [0, 1)."""

    def gen_bool(self, p: float = 0.5) -> bool:
        """
        Bernoulli trial that succeeds with probability p.

        p = 0 never succeeds and p = 1 always does.
        """
        if not 0.0 <= p <= 1.0:
            raise InvalidParameterError(f"Probability {p} out of range [0, 1]")
        return self.random() < p

    def uniform(self, low: float, high: float) -> float:
        """Uniform real in [low, high)."""
        return low + (high - low) * self.random()

    def choose_weighted(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """
        Pick one item with probability proportional to its weight.

        Args:
            items: Candidates to choose from
            weights: One non-negative weight per item

        Returns:
            The chosen item (never one whose weight is zero)
        """
        if len(items) == 0:
            raise EmptyPopulationError("Cannot choose from an empty sequence")
        if len(items) != len(weights):
            raise LengthMismatchError(
                f"Got {len(items)} items but {len(weights)} weights"
            )

        w = np.asarray(weights, dtype=np.float64)
        if not np.all(np.isfinite(w)) or np.any(w < 0):
            raise DegenerateWeightsError(
                f"Weights must be finite and non-negative, got {w.tolist()}"
            )
        peak = w.max()
        if peak <= 0:
            raise DegenerateWeightsError("All weights are zero")
        # Scale to [0, 1] so huge finite weights cannot overflow the running sum
        cumulative = np.cumsum(w / peak)
        total = cumulative[-1]

        target = self.random() * total
        index = int(np.searchsorted(cumulative, target, side='right'))
        # target can round up to exactly `total`; fall back to the last non-zero item
        last_positive = int(np.flatnonzero(w)[-1])
        return items[min(index, last_positive)]


class NumpyRandom(RandomSource):
    """RandomSource backed by a numpy Generator."""

    def __init__(self, generator: np.random.Generator):
        self.generator = generator

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> 'NumpyRandom':
        """Create a source whose draw sequence is fixed by `seed`."""
        return cls(np.random.default_rng(seed))

    def random(self) -> float:
        return float(self.generator.random())

    def __repr__(self) -> str:
        return f"NumpyRandom({self.generator.bit_generator.__class__.__name__})"

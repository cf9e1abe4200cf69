"""
The Individual capability.

Anything a population is made of must subclass Individual. The genetic
algorithm only ever calls these three methods; it knows nothing else about
the domain object behind them.
"""

from abc import ABC, abstractmethod

from .genome import Genome


class Individual(ABC):
    """Domain object that owns one Genome and reports a fitness."""

    @abstractmethod
    def fitness(self) -> float:
        """Scalar quality; must be non-negative for roulette-wheel selection."""

    @abstractmethod
    def chromosome(self) -> Genome:
        """The genome this individual was built from."""

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Genome) -> 'Individual':
        """Build a new individual that owns `chromosome`."""

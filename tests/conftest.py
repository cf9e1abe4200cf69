"""Shared fixtures: random sources with known draw sequences."""

from typing import List, Optional, Sequence

import pytest

from neuroevo.evolution.genome import Genome
from neuroevo.evolution.individual import Individual
from neuroevo.rng import NumpyRandom, RandomSource


class ScriptedRandom(RandomSource):
    """Replays a fixed list of draws; fails loudly when it runs out."""

    def __init__(self, values: Sequence[float]):
        self.values = list(values)
        self.position = 0

    def random(self) -> float:
        if self.position >= len(self.values):
            raise AssertionError(f"Script exhausted after {self.position} draws")
        value = self.values[self.position]
        self.position += 1
        return value

    @property
    def exhausted(self) -> bool:
        return self.position == len(self.values)


class CountingRandom(NumpyRandom):
    """Seeded source that counts how many draws were made."""

    def __init__(self, seed: int):
        super().__init__(NumpyRandom.from_seed(seed).generator)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return super().random()


class SampleIndividual(Individual):
    """
    Individual with either a fixed fitness or a genome.

    Built from a genome, its fitness is the sum of its genes.
    """

    def __init__(self, genome: Optional[Genome] = None, fitness: Optional[float] = None):
        self.genome = genome
        self.fixed_fitness = fitness

    def fitness(self) -> float:
        if self.fixed_fitness is not None:
            return self.fixed_fitness
        return sum(self.genome)

    def chromosome(self) -> Genome:
        if self.genome is None:
            raise AttributeError("Individual was built with a fitness only")
        return self.genome

    @classmethod
    def create(cls, chromosome: Genome) -> 'SampleIndividual':
        return cls(genome=chromosome)

    def __repr__(self) -> str:
        return f"SampleIndividual({self.genome!r}, fitness={self.fitness()})"


def individual(genes: List[float]) -> SampleIndividual:
    return SampleIndividual.create(Genome(genes))


@pytest.fixture
def rng():
    """Deterministically seeded random source."""
    return NumpyRandom.from_seed(42)

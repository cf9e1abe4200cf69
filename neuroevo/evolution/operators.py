"""
Evolutionary operators: selection, crossover, and mutation.

These operators drive the evolutionary search by:
- Selecting fit individuals for reproduction
- Combining parent genomes through crossover
- Introducing variation through mutation

Each operator family is an abstract strategy so the GeneticAlgorithm can be
configured with any implementation. Every operator takes the RandomSource as
its first argument and consumes draws in a fixed, documented order; that order
is what makes a seeded run reproducible.
"""

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

from ..errors import EmptyPopulationError, InvalidParameterError, LengthMismatchError
from ..rng import RandomSource
from .genome import Genome
from .individual import Individual

IndividualT = TypeVar('IndividualT', bound=Individual)


# =============================================================================
# Selection Operators
# =============================================================================

class SelectionMethod(ABC):
    """Picks one individual out of a population."""

    @abstractmethod
    def select(self, rng: RandomSource, population: Sequence[IndividualT]) -> IndividualT:
        ...


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate selection with replacement.

    Each individual is picked with probability fitness / total fitness. One
    draw per call. Repeated calls are independent, so the same individual may
    be picked as both parents of a child.
    """

    def select(self, rng: RandomSource, population: Sequence[IndividualT]) -> IndividualT:
        if not population:
            raise EmptyPopulationError("Cannot select from an empty population")
        return rng.choose_weighted(
            population,
            [individual.fitness() for individual in population],
        )

    def __repr__(self) -> str:
        return 'RouletteWheelSelection()'


# =============================================================================
# Crossover Operators
# =============================================================================

class CrossoverMethod(ABC):
    """Combines two equal-length parent genomes into one child genome."""

    @abstractmethod
    def crossover(
        self,
        rng: RandomSource,
        parent_a: Genome,
        parent_b: Genome,
    ) -> Genome:
        ...


def _check_same_length(parent_a: Genome, parent_b: Genome) -> None:
    if len(parent_a) != len(parent_b):
        raise LengthMismatchError(
            f"Parent genomes differ in length ({len(parent_a)} vs {len(parent_b)})"
        )


class UniformCrossover(CrossoverMethod):
    """
    Gene-by-gene crossover.

    For every index, in order, one fair coin decides the source: heads takes
    parent_a's gene, tails takes parent_b's.

    Example:
        parent_a: [1, 2, 3, 4]
        parent_b: [-1, -2, -3, -4]
        coins:    [H, T, T, H]
        child:    [1, -2, -3, 4]
    """

    def crossover(
        self,
        rng: RandomSource,
        parent_a: Genome,
        parent_b: Genome,
    ) -> Genome:
        _check_same_length(parent_a, parent_b)
        return Genome(
            a if rng.gen_bool(0.5) else b
            for a, b in zip(parent_a, parent_b)
        )

    def __repr__(self) -> str:
        return 'UniformCrossover()'


class SinglePointCrossover(CrossoverMethod):
    """
    Single-point crossover.

    One draw picks a cut point k in [0, len]; the child is parent_a's genes
    before k followed by parent_b's genes from k on.

    Example:
        parent_a: [1, 2, 3, 4]
        parent_b: [-1, -2, -3, -4]
        Cut at 1: [1, -2, -3, -4]
    """

    def crossover(
        self,
        rng: RandomSource,
        parent_a: Genome,
        parent_b: Genome,
    ) -> Genome:
        _check_same_length(parent_a, parent_b)
        n = len(parent_a)
        point = min(int(rng.random() * (n + 1)), n)

        genes = parent_a.to_numpy()
        genes[point:] = parent_b.to_numpy()[point:]
        return Genome.from_numpy(genes)

    def __repr__(self) -> str:
        return 'SinglePointCrossover()'


# =============================================================================
# Mutation Operators
# =============================================================================

class MutationMethod(ABC):
    """Perturbs a genome in place."""

    @abstractmethod
    def mutate(self, rng: RandomSource, genome: Genome) -> None:
        ...


class GaussianMutation(MutationMethod):
    """
    Additive random perturbation of individual genes.

    For every gene, in index order:
    1. A fair coin picks the sign (heads = -1, tails = +1)
    2. A Bernoulli(chance) trial decides whether the gene mutates
    3. Only if it does, u ~ U[0, 1) is drawn and sign * coeff * u is added

    Args:
        chance: Probability a given gene is perturbed, in [0, 1]
        coeff: Magnitude scale of a perturbation
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise InvalidParameterError(f"Mutation chance {chance} out of range [0, 1]")
        self.chance = chance
        self.coeff = coeff

    def mutate(self, rng: RandomSource, genome: Genome) -> None:
        for i in range(len(genome)):
            sign = -1.0 if rng.gen_bool(0.5) else 1.0

            if rng.gen_bool(self.chance):
                genome[i] = genome[i] + sign * self.coeff * rng.random()

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"

"""
Main evolutionary optimization engine.

Turns one generation into the next. For every slot of the new population:
1. Select parent A
2. Select parent B (independently; may be the same individual)
3. Cross their genomes over into a child genome
4. Mutate the child genome in place
5. Build the new individual from it

Slots are filled in index order and every operator draws from the same
RandomSource, so a fixed seed and population give a fixed next generation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence
import logging
import time

from ..errors import EmptyPopulationError, InvalidParameterError
from ..rng import NumpyRandom, RandomSource
from .genome import Genome
from .history import EvolutionHistory, GenerationStats
from .individual import Individual
from .operators import (
    CrossoverMethod,
    GaussianMutation,
    MutationMethod,
    RouletteWheelSelection,
    SelectionMethod,
    SinglePointCrossover,
    UniformCrossover,
)

logger = logging.getLogger(__name__)


class CrossoverKind(str, Enum):
    UNIFORM = 'uniform'
    SINGLE_POINT = 'single_point'


class SelectionKind(str, Enum):
    ROULETTE_WHEEL = 'roulette_wheel'


_CROSSOVER_METHODS = {
    CrossoverKind.UNIFORM: UniformCrossover,
    CrossoverKind.SINGLE_POINT: SinglePointCrossover,
}

_SELECTION_METHODS = {
    SelectionKind.ROULETTE_WHEEL: RouletteWheelSelection,
}


@dataclass
class EvolutionConfig:
    """Configuration for a genetic algorithm and its runs."""
    # Mutation parameters
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3

    # Strategy choice
    crossover: CrossoverKind = CrossoverKind.UNIFORM
    selection: SelectionKind = SelectionKind.ROULETTE_WHEEL

    # Run parameters
    generations: int = 1
    seed: Optional[int] = None

    # Early stopping (disabled when patience is None)
    early_stop_patience: Optional[int] = None
    early_stop_min_improvement: float = 0.001

    def __post_init__(self):
        """Validate configuration and normalize strategy names."""
        try:
            self.crossover = CrossoverKind(self.crossover)
            self.selection = SelectionKind(self.selection)
        except ValueError as e:
            raise InvalidParameterError(str(e)) from e
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise InvalidParameterError(
                f"Mutation chance {self.mutation_chance} out of range [0, 1]"
            )
        if self.generations < 0:
            raise InvalidParameterError(f"Generations must be >= 0, got {self.generations}")
        if self.early_stop_patience is not None and self.early_stop_patience < 1:
            raise InvalidParameterError(
                f"Early stop patience must be at least 1, got {self.early_stop_patience}"
            )

    def build(self) -> 'GeneticAlgorithm':
        """Create the GeneticAlgorithm this configuration describes."""
        return GeneticAlgorithm(
            _SELECTION_METHODS[self.selection](),
            _CROSSOVER_METHODS[self.crossover](),
            GaussianMutation(self.mutation_chance, self.mutation_coeff),
        )

    def make_rng(self) -> NumpyRandom:
        """Random source seeded from `seed` (unseeded when it is None)."""
        return NumpyRandom.from_seed(self.seed)

    def run(
        self,
        population: Sequence[Individual],
        callback: Optional[Callable[[GenerationStats], None]] = None,
    ) -> 'EvolutionResult':
        """Evolve `population` for `generations` generations with a fresh seeded source."""
        return self.build().run(
            self.make_rng(),
            population,
            self.generations,
            callback,
            patience=self.early_stop_patience,
            min_improvement=self.early_stop_min_improvement,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mutation_chance': self.mutation_chance,
            'mutation_coeff': self.mutation_coeff,
            'crossover': self.crossover.value,
            'selection': self.selection.value,
            'generations': self.generations,
            'seed': self.seed,
            'early_stop_patience': self.early_stop_patience,
            'early_stop_min_improvement': self.early_stop_min_improvement,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvolutionConfig':
        return cls(**data)


@dataclass
class EvolutionResult:
    """Results from a multi-generation run."""
    final_population: List[Individual]
    history: EvolutionHistory
    generations_completed: int
    runtime_seconds: float = 0.0
    early_stopped: bool = False

    def best_individual(self) -> Optional[Individual]:
        """Fittest individual of the final population."""
        if not self.final_population:
            return None
        return max(self.final_population, key=lambda ind: ind.fitness())

    def summary(self) -> str:
        """Generate summary string."""
        lines = [
            f"Generations: {self.generations_completed}",
            f"Population size: {len(self.final_population)}",
            f"Runtime: {self.runtime_seconds:.1f}s",
            f"Early stopped: {self.early_stopped}",
        ]
        if self.history.fitness_trajectory:
            lines.append(f"Best fitness seen: {max(self.history.fitness_trajectory):.4f}")
        return '\n'.join(lines)


class GeneticAlgorithm:
    """
    Evolves a population of Individuals one generation at a time.

    The selection, crossover and mutation strategies are fixed at
    construction; the algorithm itself keeps no other state.
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(
        self,
        rng: RandomSource,
        population: Sequence[Individual],
        create: Optional[Callable[[Genome], Individual]] = None,
    ) -> List[Individual]:
        """
        Produce the next generation.

        Args:
            rng: Random source shared by every operator
            population: Current, non-empty population
            create: Builds an individual from a genome; defaults to the
                `create` classmethod of the first individual's type

        Returns:
            New population of the same size
        """
        if not population:
            raise EmptyPopulationError("Cannot evolve an empty population")

        if create is None:
            create = type(population[0]).create

        next_population = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population).chromosome()
            parent_b = self.selection_method.select(rng, population).chromosome()

            child = self.crossover_method.crossover(rng, parent_a, parent_b)
            self.mutation_method.mutate(rng, child)

            next_population.append(create(child))

        logger.debug("Evolved a generation of %d individuals", len(next_population))
        return next_population

    def run(
        self,
        rng: RandomSource,
        population: Sequence[Individual],
        generations: int,
        callback: Optional[Callable[[GenerationStats], None]] = None,
        patience: Optional[int] = None,
        min_improvement: float = 0.001,
    ) -> EvolutionResult:
        """
        Evolve for several generations.

        Each generation's statistics describe the population it was evolved
        from, so the history's first entry is the starting population.

        Args:
            rng: Random source shared by every operator
            population: Starting, non-empty population
            generations: Number of generations to evolve
            callback: Optional callback(stats) after each generation
            patience: If set, stop once the best fitness has not improved by
                `min_improvement` for this many generations
            min_improvement: Minimum improvement to count as progress

        Returns:
            EvolutionResult with the final population and history
        """
        if generations < 0:
            raise InvalidParameterError(f"Generations must be >= 0, got {generations}")
        if not population:
            raise EmptyPopulationError("Cannot evolve an empty population")

        start_time = time.time()
        history = EvolutionHistory()
        current = list(population)
        early_stopped = False
        completed = 0

        for generation in range(generations):
            stats = history.record_generation(generation, current)
            logger.info("Evolving %s", stats)

            current = self.evolve(rng, current)
            completed += 1

            if callback:
                callback(stats)

            if patience is not None and history.should_early_stop(patience, min_improvement):
                logger.info(
                    "Stopping after %d generations: no improvement > %s in %d generations",
                    completed, min_improvement, patience,
                )
                early_stopped = True
                break

        runtime = time.time() - start_time
        logger.info("Finished %d generations in %.2fs", completed, runtime)

        return EvolutionResult(
            final_population=current,
            history=history,
            generations_completed=completed,
            runtime_seconds=runtime,
            early_stopped=early_stopped,
        )

    def __repr__(self) -> str:
        return (
            f"GeneticAlgorithm(selection={self.selection_method!r}, "
            f"crossover={self.crossover_method!r}, mutation={self.mutation_method!r})"
        )

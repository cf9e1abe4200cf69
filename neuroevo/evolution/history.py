"""
Per-generation statistics for evolutionary runs.

Enables:
- Summarizing the fitness spread of a population
- Recording generation-by-generation history
- Detecting stagnation for early stopping
"""

from dataclasses import dataclass, asdict
from typing import List, Dict, Any, Sequence
import numpy as np

from ..errors import InvalidParameterError
from .individual import Individual


@dataclass
class GenerationStats:
    """Statistics for a single generation."""
    generation: int
    population_size: int
    min_fitness: float
    max_fitness: float
    mean_fitness: float
    std_fitness: float

    @classmethod
    def from_population(
        cls,
        generation: int,
        population: Sequence[Individual],
    ) -> 'GenerationStats':
        """
        Summarize the fitness of a population.

        An empty population yields zeros for every fitness field.
        """
        fitnesses = np.array([ind.fitness() for ind in population], dtype=np.float64)
        if fitnesses.size == 0:
            fitnesses = np.zeros(1)

        return cls(
            generation=generation,
            population_size=len(population),
            min_fitness=float(fitnesses.min()),
            max_fitness=float(fitnesses.max()),
            mean_fitness=float(fitnesses.mean()),
            std_fitness=float(fitnesses.std()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"gen {self.generation}: size={self.population_size} "
            f"min={self.min_fitness:.4f} max={self.max_fitness:.4f} "
            f"mean={self.mean_fitness:.4f} std={self.std_fitness:.4f}"
        )


class EvolutionHistory:
    """
    Tracks evolution progress over generations.

    Records per-generation statistics for analysis and early stopping.
    """

    def __init__(self):
        self.generations: List[GenerationStats] = []
        self.fitness_trajectory: List[float] = []

    def __len__(self) -> int:
        return len(self.generations)

    def record_generation(
        self,
        generation: int,
        population: Sequence[Individual],
    ) -> GenerationStats:
        """
        Record statistics for a generation.

        Args:
            generation: Generation number
            population: Population whose fitness is summarized

        Returns:
            GenerationStats for this generation
        """
        stats = GenerationStats.from_population(generation, population)
        self.generations.append(stats)
        self.fitness_trajectory.append(stats.max_fitness)
        return stats

    def to_dict(self) -> Dict[str, Any]:
        """Convert history to dictionary for serialization."""
        return {
            'generations': [g.to_dict() for g in self.generations],
            'fitness_trajectory': self.fitness_trajectory,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvolutionHistory':
        """Restore history from dictionary."""
        history = cls()
        for entry in data.get('generations', []):
            stats = GenerationStats(**entry)
            history.generations.append(stats)
            history.fitness_trajectory.append(stats.max_fitness)
        return history

    def generations_since_improvement(self, min_improvement: float = 0.001) -> int:
        """
        Count recorded generations since the best fitness last rose.

        The first generation sets the bar; a later one raises it only when its
        best fitness beats the bar by at least `min_improvement`.
        """
        bar = None
        stalled = 0
        for best in self.fitness_trajectory:
            if bar is None or best - bar >= min_improvement:
                bar = best
                stalled = 0
            else:
                stalled += 1
        return stalled

    def should_early_stop(
        self,
        patience: int = 10,
        min_improvement: float = 0.001,
    ) -> bool:
        """
        True once `patience` generations in a row failed to raise the bar.

        See generations_since_improvement for what counts as a rise.
        """
        if patience < 1:
            raise InvalidParameterError(f"Patience must be at least 1, got {patience}")
        return self.generations_since_improvement(min_improvement) >= patience

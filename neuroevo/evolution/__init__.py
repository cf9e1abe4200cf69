"""
Genetic algorithm over flat real-valued chromosomes.

Key components:
- Genome: Fixed-length vector of float32 genes
- Individual: Capability every population member implements
- Operators: Selection, crossover, and mutation strategies
- GeneticAlgorithm: Evolves a population one generation at a time
- EvolutionHistory: Per-generation fitness statistics
"""

from .genome import Genome
from .individual import Individual
from .operators import (
    SelectionMethod,
    RouletteWheelSelection,
    CrossoverMethod,
    UniformCrossover,
    SinglePointCrossover,
    MutationMethod,
    GaussianMutation,
)
from .history import GenerationStats, EvolutionHistory
from .engine import (
    GeneticAlgorithm,
    EvolutionConfig,
    EvolutionResult,
    CrossoverKind,
    SelectionKind,
)
from .population import (
    create_initial_population,
    genome_distance,
    population_diversity,
)

__all__ = [
    # Core classes
    'Genome',
    'Individual',
    'GeneticAlgorithm',
    'EvolutionConfig',
    'EvolutionResult',
    'CrossoverKind',
    'SelectionKind',
    # Operators
    'SelectionMethod',
    'RouletteWheelSelection',
    'CrossoverMethod',
    'UniformCrossover',
    'SinglePointCrossover',
    'MutationMethod',
    'GaussianMutation',
    # History
    'GenerationStats',
    'EvolutionHistory',
    # Population
    'create_initial_population',
    'genome_distance',
    'population_diversity',
]

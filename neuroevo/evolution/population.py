"""
Population management for weight-space evolution.

Handles:
- Initial population creation from randomly initialized networks
- Diversity measures over genomes
"""

from itertools import combinations
from typing import List, Sequence, Type
import numpy as np

from ..core.network import Network, validate_topology
from ..errors import InvalidParameterError, LengthMismatchError
from ..rng import RandomSource
from .genome import Genome
from .individual import Individual


def create_initial_population(
    rng: RandomSource,
    individual_type: Type[Individual],
    topology: Sequence[int],
    population_size: int,
) -> List[Individual]:
    """
    Create a population of individuals with random network parameters.

    Each individual is built from the flattened parameters of a freshly
    randomized Network, so every genome has parameter_count(topology) genes.

    Args:
        rng: Random source; networks are drawn one after another
        individual_type: Individual subclass whose `create` builds each member
        topology: Layer widths of the encoded network, input width first
        population_size: Number of individuals to create

    Returns:
        List of individuals forming the initial population
    """
    if population_size < 1:
        raise InvalidParameterError(f"Population size must be >= 1, got {population_size}")
    topology = validate_topology(topology)

    return [
        individual_type.create(Network.random(rng, topology).to_genome())
        for _ in range(population_size)
    ]


def genome_distance(g1: Genome, g2: Genome) -> float:
    """
    Mean absolute difference between two genomes, gene by gene.

    Returns 0.0 for two empty genomes.
    """
    if len(g1) != len(g2):
        raise LengthMismatchError(
            f"Cannot compare genomes of length {len(g1)} and {len(g2)}"
        )
    if len(g1) == 0:
        return 0.0
    diff = g1.to_numpy().astype(np.float64) - g2.to_numpy().astype(np.float64)
    return float(np.mean(np.abs(diff)))


def population_diversity(population: Sequence[Individual]) -> float:
    """
    Mean pairwise genome distance across the population.

    Populations with fewer than two members have no diversity (0.0).
    """
    if len(population) < 2:
        return 0.0

    genomes = [individual.chromosome() for individual in population]
    distances = [genome_distance(a, b) for a, b in combinations(genomes, 2)]
    return float(np.mean(distances))

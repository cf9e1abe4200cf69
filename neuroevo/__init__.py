"""
neuroevo - evolving the weights of small feed-forward neural networks.

This package provides a genetic algorithm that improves a population of
flat real-valued chromosomes through selection, crossover and mutation, plus
the network evaluator those chromosomes encode.

Key components:
- Genome: Flat chromosome of float32 genes
- Individual: Capability a domain object implements to be evolved
- GeneticAlgorithm: Turns one generation into the next
- Network: Feed-forward ReLU network whose parameters a Genome encodes
- RandomSource: Injectable, seedable source of every random draw

Example usage:
    from neuroevo import EvolutionConfig, Network, NumpyRandom

    config = EvolutionConfig(mutation_chance=0.01, mutation_coeff=0.3, seed=42)
    ga = config.build()
    rng = config.make_rng()

    population = ga.evolve(rng, population)
"""

import logging

from .errors import (
    NeuroevoError,
    LengthMismatchError,
    EmptyPopulationError,
    InvalidParameterError,
    InvalidTopologyError,
    DegenerateWeightsError,
)
from .rng import RandomSource, NumpyRandom
from .evolution import (
    Genome,
    Individual,
    GeneticAlgorithm,
    EvolutionConfig,
    EvolutionResult,
    RouletteWheelSelection,
    UniformCrossover,
    SinglePointCrossover,
    GaussianMutation,
)
from .core import Network, Layer, Neuron, parameter_count

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    'NeuroevoError',
    'LengthMismatchError',
    'EmptyPopulationError',
    'InvalidParameterError',
    'InvalidTopologyError',
    'DegenerateWeightsError',
    # Randomness
    'RandomSource',
    'NumpyRandom',
    # Evolution
    'Genome',
    'Individual',
    'GeneticAlgorithm',
    'EvolutionConfig',
    'EvolutionResult',
    'RouletteWheelSelection',
    'UniformCrossover',
    'SinglePointCrossover',
    'GaussianMutation',
    # Networks
    'Network',
    'Layer',
    'Neuron',
    'parameter_count',
]

"""Feed-forward network evaluator."""

from .network import Network, Layer, Neuron, relu, parameter_count, validate_topology

__all__ = [
    'Network',
    'Layer',
    'Neuron',
    'relu',
    'parameter_count',
    'validate_topology',
]

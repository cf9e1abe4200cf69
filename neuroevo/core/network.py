"""
Feed-forward network evaluator.

A Network is a linear stack of fully-connected Layers, each a list of
Neurons with a bias and one weight per input. Every neuron applies the
rectified-linear activation to its weighted sum.

Networks are immutable once built. Their parameters can be flattened into a
Genome (bias first, then weights, neuron by neuron, layer by layer) and a
Genome of matching length can be decoded back into a Network of the same
topology, so evolution can work on weights without knowing about layers.
"""

from typing import Iterable, List, Sequence, Tuple, TYPE_CHECKING
import numpy as np

from ..errors import InvalidTopologyError, LengthMismatchError
from ..rng import RandomSource

if TYPE_CHECKING:
    from ..evolution.genome import Genome


def relu(x: float) -> float:
    """Rectified Linear Unit - the only activation this network uses."""
    return max(x, 0.0)


def validate_topology(topology: Sequence[int]) -> Tuple[int, ...]:
    """
    Check a topology and return it as a tuple.

    A topology lists the width of every layer, the raw input width first, so
    it needs at least two entries and every width must be positive.
    """
    topology = tuple(topology)
    if len(topology) < 2:
        raise InvalidTopologyError(
            f"Topology needs at least 2 entries (input and output width), got {list(topology)}"
        )
    message = f"Layer widths must be positive integers, got {list(topology)}"
    for width in topology:
        try:
            valid = int(width) == width and width >= 1
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidTopologyError(message) from e
        if not valid:
            raise InvalidTopologyError(message)
    return tuple(int(width) for width in topology)


def parameter_count(topology: Sequence[int]) -> int:
    """
    Number of genes needed to encode a network of this topology.

    Each neuron contributes one bias plus one weight per input.

    Example:
        [3, 2, 1]: 2 * (1 + 3) + 1 * (1 + 2) = 11
    """
    topology = validate_topology(topology)
    return sum(
        n_out * (1 + n_in)
        for n_in, n_out in zip(topology[:-1], topology[1:])
    )


class Neuron:
    """One bias and one weight per input."""

    __slots__ = ('bias', 'weights')

    def __init__(self, bias: float, weights: Iterable[float]):
        self.bias = float(np.float32(bias))
        self.weights = np.array(list(weights), dtype=np.float32)
        self.weights.flags.writeable = False

    @property
    def input_size(self) -> int:
        return len(self.weights)

    def propagate(self, inputs: Sequence[float]) -> float:
        """Weighted sum of inputs plus bias, clipped at zero."""
        inputs = np.asarray(inputs, dtype=np.float32)
        if len(inputs) != len(self.weights):
            raise LengthMismatchError(
                f"Neuron expects {len(self.weights)} inputs, got {len(inputs)}"
            )
        return relu(self.bias + float(np.dot(inputs, self.weights)))

    @classmethod
    def random(cls, rng: RandomSource, input_size: int) -> 'Neuron':
        """Bias, then each weight in order, drawn uniformly from [-1, 1)."""
        bias = rng.uniform(-1.0, 1.0)
        weights = [rng.uniform(-1.0, 1.0) for _ in range(input_size)]
        return cls(bias, weights)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Neuron):
            return NotImplemented
        return self.bias == other.bias and np.array_equal(self.weights, other.weights)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Neuron(bias={self.bias:.4f}, weights={self.weights.tolist()})"


class Layer:
    """Fully-connected layer; every neuron sees the same inputs."""

    __slots__ = ('neurons',)

    def __init__(self, neurons: Iterable[Neuron]):
        self.neurons: Tuple[Neuron, ...] = tuple(neurons)
        if not self.neurons:
            raise InvalidTopologyError("A layer needs at least one neuron")
        input_sizes = {neuron.input_size for neuron in self.neurons}
        if len(input_sizes) != 1:
            raise InvalidTopologyError(
                f"All neurons in a layer must share an input width, got {sorted(input_sizes)}"
            )

    @property
    def input_size(self) -> int:
        return self.neurons[0].input_size

    @property
    def output_size(self) -> int:
        return len(self.neurons)

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """One output per neuron, in neuron order."""
        return np.array(
            [neuron.propagate(inputs) for neuron in self.neurons],
            dtype=np.float32,
        )

    @classmethod
    def random(cls, rng: RandomSource, input_size: int, output_size: int) -> 'Layer':
        """`output_size` random neurons, each taking `input_size` inputs."""
        return cls(Neuron.random(rng, input_size) for _ in range(output_size))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return self.neurons == other.neurons

    __hash__ = None

    def __repr__(self) -> str:
        return f"Layer({self.input_size} -> {self.output_size})"


class Network:
    """
    Linear stack of fully-connected layers.

    Each layer's output width must equal the next layer's input width.
    """

    __slots__ = ('layers',)

    def __init__(self, layers: Iterable[Layer]):
        self.layers: Tuple[Layer, ...] = tuple(layers)
        if not self.layers:
            raise InvalidTopologyError("A network needs at least one layer")
        for i, (prev, layer) in enumerate(zip(self.layers[:-1], self.layers[1:]), start=1):
            if layer.input_size != prev.output_size:
                raise InvalidTopologyError(
                    f"Layer {i} takes {layer.input_size} inputs but layer {i - 1} "
                    f"produces {prev.output_size} outputs"
                )

    @property
    def topology(self) -> List[int]:
        """Layer widths, raw input width first."""
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        """Feed `inputs` through every layer in turn."""
        outputs = np.asarray(inputs, dtype=np.float32)
        for layer in self.layers:
            outputs = layer.propagate(outputs)
        return outputs

    @classmethod
    def random(cls, rng: RandomSource, topology: Sequence[int]) -> 'Network':
        """
        Build a network with uniformly random parameters.

        Args:
            rng: Random source; consumed layer by layer, neuron by neuron
            topology: Layer widths, raw input width first (at least 2 entries)
        """
        topology = validate_topology(topology)
        return cls(
            Layer.random(rng, n_in, n_out)
            for n_in, n_out in zip(topology[:-1], topology[1:])
        )

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def weights(self) -> np.ndarray:
        """Flatten every parameter into one float32 vector."""
        params = []
        for layer in self.layers:
            for neuron in layer.neurons:
                params.append(neuron.bias)
                params.extend(neuron.weights.tolist())
        return np.array(params, dtype=np.float32)

    @classmethod
    def from_weights(cls, topology: Sequence[int], weights: Sequence[float]) -> 'Network':
        """
        Rebuild a network from a flat parameter vector.

        Inverse of `weights()` for the same topology.
        """
        topology = validate_topology(topology)
        weights = np.asarray(weights, dtype=np.float32).reshape(-1)
        expected = parameter_count(topology)
        if len(weights) != expected:
            raise LengthMismatchError(
                f"Topology {list(topology)} needs {expected} parameters, got {len(weights)}"
            )

        layers = []
        offset = 0
        for n_in, n_out in zip(topology[:-1], topology[1:]):
            neurons = []
            for _ in range(n_out):
                neurons.append(Neuron(weights[offset], weights[offset + 1:offset + 1 + n_in]))
                offset += 1 + n_in
            layers.append(Layer(neurons))
        return cls(layers)

    def to_genome(self) -> 'Genome':
        # Import here to avoid circular dependency
        from ..evolution.genome import Genome

        return Genome.from_numpy(self.weights())

    @classmethod
    def from_genome(cls, topology: Sequence[int], genome: 'Genome') -> 'Network':
        return cls.from_weights(topology, genome.to_numpy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return self.layers == other.layers

    __hash__ = None

    def __repr__(self) -> str:
        return f"Network(topology={self.topology})"

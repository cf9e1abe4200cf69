"""
Exceptions raised by neuroevo.

All of these are precondition violations: the caller passed something the
operation cannot work with. None of them are retried or recovered internally.
Each one is also a ValueError so callers can catch them the usual way.
"""


class NeuroevoError(Exception):
    """Base class for all neuroevo errors."""


class LengthMismatchError(NeuroevoError, ValueError):
    """Two sequences that must have equal length do not."""


class EmptyPopulationError(NeuroevoError, ValueError):
    """Selection or evolution was asked to work on an empty population."""


class InvalidParameterError(NeuroevoError, ValueError):
    """An operator or configuration value is out of its allowed range."""


class InvalidTopologyError(NeuroevoError, ValueError):
    """A network topology is too short or has non-positive layer widths."""


class DegenerateWeightsError(NeuroevoError, ValueError):
    """Weighted choice is undefined (negative, non-finite or all-zero weights)."""

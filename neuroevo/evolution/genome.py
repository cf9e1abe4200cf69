"""
Genome representation for weight-space evolution.

A Genome is the flat chromosome one individual carries: an ordered,
fixed-length vector of float32 genes. Crossover builds new genomes from two
parents and mutation perturbs a genome in place, so the genes live in a
private numpy array that is never shared between genomes.
"""

from typing import Iterable, Iterator, List
import numpy as np

# Genomes compare approximately; mutation and float32 rounding make exact
# equality meaningless.
GENE_RTOL = 1e-6
GENE_ATOL = 1e-6


class Genome:
    """
    Ordered sequence of real-valued genes.

    Supports len(), indexing (read and in-place write), iteration and
    approximate equality. Construction always copies its input.
    """

    __slots__ = ('_genes',)

    def __init__(self, genes: Iterable[float] = ()):
        self._genes = np.array(list(genes), dtype=np.float32)

    @classmethod
    def from_numpy(cls, genes: np.ndarray) -> 'Genome':
        """Build a genome from a 1-D array (copied)."""
        genome = cls()
        genome._genes = np.array(genes, dtype=np.float32).reshape(-1)
        return genome

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int) -> float:
        return float(self._genes[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._genes[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(g) for g in self._genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._genes, other._genes, rtol=GENE_RTOL, atol=GENE_ATOL))

    __hash__ = None  # mutable

    def to_list(self) -> List[float]:
        """Decompose into a plain list of floats."""
        return [float(g) for g in self._genes]

    def to_numpy(self) -> np.ndarray:
        """Return a float32 copy of the genes."""
        return self._genes.copy()

    def copy(self) -> 'Genome':
        return Genome.from_numpy(self._genes)

    def __repr__(self) -> str:
        if len(self) <= 8:
            genes = ', '.join(f"{g:.4f}" for g in self)
        else:
            head = ', '.join(f"{g:.4f}" for g in self._genes[:4])
            genes = f"{head}, ... ({len(self)} genes)"
        return f"Genome([{genes}])"

"""
Finite Functions Module

Implements total functions between finite sets {0, ..., src-1} and
{0, ..., tgt-1}, together with diagrammatic-order composition.

Composition reads left to right: compose(f, g) means "first f, then g",
the opposite of the usual g ∘ f notation. Commutative squares and
hexagons are all written in this order.
"""

from typing import Iterable, Sequence, Tuple
from dataclasses import dataclass

import numpy as np

from .constants import CHAIN_SEPARATOR
from .exceptions import InvalidFunction, TypeMismatch


def _as_value_array(vals) -> np.ndarray:
    arr = np.asarray(vals)
    if arr.size == 0:
        arr = np.zeros(0, dtype=np.intp)
    if arr.ndim != 1:
        raise InvalidFunction(f"Expected 1D value array, got {arr.ndim}D")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidFunction(f"Expected integer values, got dtype {arr.dtype}")
    arr = arr.astype(np.intp, copy=True)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False, repr=False)
class FiniteFunction:
    """
    A total function from {0, ..., src-1} to {0, ..., tgt-1}.

    Attributes:
        tgt: Size of the codomain
        vals: Read-only array of images; vals[i] is the image of i

    The domain size is not stored: src is always len(vals).
    """
    tgt: int
    vals: np.ndarray

    def __post_init__(self):
        if isinstance(self.tgt, bool) or not isinstance(self.tgt, (int, np.integer)):
            raise InvalidFunction(f"Codomain size must be an integer, got {self.tgt!r}")
        tgt = int(self.tgt)
        vals = _as_value_array(self.vals)
        if tgt < 0:
            raise InvalidFunction(f"Codomain size must be non-negative, got {tgt}")
        if vals.size and (vals.min() < 0 or vals.max() >= tgt):
            raise InvalidFunction(
                f"Values {vals.tolist()} out of range for codomain of size {tgt}"
            )
        object.__setattr__(self, "tgt", tgt)
        object.__setattr__(self, "vals", vals)

    @classmethod
    def identity(cls, n: int) -> "FiniteFunction":
        """Identity function on n elements."""
        return cls(n, np.arange(n))

    @classmethod
    def zeros(cls, src: int, tgt: int) -> "FiniteFunction":
        """Constant-zero function, the first one enumerated for (src, tgt)."""
        return cls(tgt, np.zeros(src, dtype=np.intp))

    @classmethod
    def from_values(cls, tgt: int, vals: Iterable[int]) -> "FiniteFunction":
        """
        Build a function from an explicit value array.

        Raises:
            InvalidFunction: if any value is not in [0, tgt)
        """
        return cls(tgt, list(vals))

    @property
    def src(self) -> int:
        return len(self.vals)

    def then(self, other: "FiniteFunction") -> "FiniteFunction":
        """Compose with another function, applying self first."""
        return compose(self, other)

    def is_identity(self) -> bool:
        return self.src == self.tgt and bool(np.array_equal(self.vals, np.arange(self.src)))

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(self.vals.tolist())

    def __eq__(self, other):
        if not isinstance(other, FiniteFunction):
            return NotImplemented
        return self.tgt == other.tgt and bool(np.array_equal(self.vals, other.vals))

    def __hash__(self):
        return hash((self.tgt, self.as_tuple()))

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.vals.tolist()) + "]"

    def __repr__(self) -> str:
        return f"FiniteFunction(tgt={self.tgt}, vals={self})"


def compose(f: FiniteFunction, g: FiniteFunction) -> FiniteFunction:
    """
    Compose two functions in diagrammatic order (first f, then g).

    Args:
        f: Function src_f → tgt_f
        g: Function tgt_f → tgt_g

    Returns:
        New function h with h.vals[i] = g.vals[f.vals[i]]

    Raises:
        TypeMismatch: if f.tgt != g.src
    """
    if f.tgt != g.src:
        raise TypeMismatch(f, g)
    return FiniteFunction(g.tgt, g.vals[f.vals])


def chain(fs: Sequence[FiniteFunction]) -> FiniteFunction:
    """
    Left-fold compose over a non-empty sequence of functions.

    A single-element chain returns that function unchanged.
    """
    if not fs:
        raise ValueError("Cannot chain an empty sequence of functions")
    result = fs[0]
    for f in fs[1:]:
        result = compose(result, f)
    return result


def render_chain(fs: Sequence[FiniteFunction]) -> str:
    """Render functions as a diagrammatic-order chain, e.g. "[0, 1] ; [1, 1]"."""
    return CHAIN_SEPARATOR.join(str(f) for f in fs)
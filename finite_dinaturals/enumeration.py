"""
Function Enumeration Module

Enumerates every total function {0, ..., src-1} → {0, ..., tgt-1} by
odometer counting over the value array: src digits in base tgt, least
significant digit first, starting from all zeros.
"""

from typing import Iterator, Optional

import numpy as np

from .functions import FiniteFunction


def _advance(buf: np.ndarray, tgt: int) -> bool:
    """Step an odometer buffer in place. Returns False once it wraps around."""
    for i in range(len(buf)):
        if buf[i] >= tgt - 1:
            buf[i] = 0
        else:
            buf[i] += 1
            return True
    return False


def step(f: FiniteFunction) -> Optional[FiniteFunction]:
    """
    Return the successor of f in enumeration order, or None if f is the last.

    The first position holding less than tgt-1 is incremented and every
    position before it is reset to 0. f itself is left untouched.
    """
    buf = np.array(f.vals, dtype=np.intp)
    if not _advance(buf, f.tgt):
        return None
    return FiniteFunction(f.tgt, buf)


class FunctionEnumerator:
    """
    Deterministic, re-iterable enumeration of all functions src → tgt.

    Every call to iter() starts again from the all-zeros function and
    yields exactly tgt ** src distinct functions in the same order.
    """

    def __init__(self, src: int, tgt: int):
        if src < 0 or tgt < 0:
            raise ValueError(f"Set sizes must be non-negative, got src={src}, tgt={tgt}")
        self.src = src
        self.tgt = tgt

    def __len__(self) -> int:
        return self.tgt ** self.src

    def __iter__(self) -> Iterator[FiniteFunction]:
        if self.src > 0 and self.tgt == 0:
            return
        buf = np.zeros(self.src, dtype=np.intp)
        while True:
            yield FiniteFunction(self.tgt, buf)
            if not _advance(buf, self.tgt):
                return

    def __repr__(self) -> str:
        return f"FunctionEnumerator(src={self.src}, tgt={self.tgt})"


def functions(src: int, tgt: int) -> Iterator[FiniteFunction]:
    """Iterate over all functions src → tgt in odometer order."""
    return iter(FunctionEnumerator(src, tgt))


def endofunctions(n: int) -> FunctionEnumerator:
    """All functions from an n-element set to itself."""
    return FunctionEnumerator(n, n)

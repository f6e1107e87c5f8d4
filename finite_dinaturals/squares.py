"""
Commutative Squares Module

A commutative square is four endofunctions on the same finite set whose
two composition paths agree:

        up_left ; up_right  ==  down_left ; down_right

The finder tries every 4-tuple of endofunctions on n elements and keeps
the ones that commute.
"""

import logging
from typing import Optional, Tuple
from dataclasses import dataclass

from .enumeration import endofunctions
from .functions import FiniteFunction, chain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommutativeSquare:
    """
    Four endofunctions forming a commuting square.

    Build through CommutativeSquare.new, which checks commutativity once;
    instances are immutable afterwards and the property is not re-checked.
    """
    up_left: FiniteFunction
    up_right: FiniteFunction
    down_left: FiniteFunction
    down_right: FiniteFunction

    @classmethod
    def new(cls, up_left: FiniteFunction, up_right: FiniteFunction,
            down_left: FiniteFunction, down_right: FiniteFunction) -> Optional["CommutativeSquare"]:
        """
        Build a square if it commutes.

        Returns:
            CommutativeSquare, or None when the two paths disagree
        """
        if chain([up_left, up_right]) != chain([down_left, down_right]):
            return None
        return cls(up_left, up_right, down_left, down_right)

    @property
    def composite(self) -> FiniteFunction:
        """The common diagonal of the square."""
        return chain([self.up_left, self.up_right])

    def __str__(self) -> str:
        return f"({self.up_left} ; {self.up_right} = {self.down_left} ; {self.down_right})"


def commutative_squares(n: int) -> Tuple[int, Tuple[CommutativeSquare, ...]]:
    """
    Enumerate all n^(4n) 4-tuples of endofunctions and keep those that commute.

    Tuples are tried with up_left outermost and down_right innermost.

    Returns:
        (number of 4-tuples examined, commuting squares in enumeration order)
    """
    fs = endofunctions(n)
    squares = []
    examined = 0
    for a in fs:
        for b in fs:
            for c in fs:
                for d in fs:
                    square = CommutativeSquare.new(a, b, c, d)
                    if square is not None:
                        squares.append(square)
                    examined += 1
    logger.debug("Examined %d 4-tuples on n=%d, %d commute", examined, n, len(squares))
    return examined, tuple(squares)

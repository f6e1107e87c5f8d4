"""
Dinatural Families Module

A dinatural here is a family of two endofunctions (family[0], family[1])
defined relative to two commutative squares s1 and s2, satisfying

    s1.up_left ; family[0] ; s2.up_right  ==  s1.down_left ; family[1] ; s2.down_right

Two dinaturals sharing a square, d1 over (s1, s2) and d2 over (s2, s3),
compose when the hexagon closes:

    s1.up_left ; d1[0] ; d2[0] ; s3.up_right  ==  s1.down_left ; d1[1] ; d2[1] ; s3.down_right
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass

from .enumeration import endofunctions
from .functions import FiniteFunction, chain
from .squares import CommutativeSquare

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dinatural:
    """
    A family of endofunctions that is dinatural with respect to two squares.

    Attributes:
        family: Component on the up path and component on the down path
        s1: Square supplying the left legs
        s2: Square supplying the right legs

    s1 and s2 are the caller's square objects, held by reference.
    """
    family: Tuple[FiniteFunction, FiniteFunction]
    s1: CommutativeSquare
    s2: CommutativeSquare

    @classmethod
    def new(cls, family: Sequence[FiniteFunction], s1: CommutativeSquare,
            s2: CommutativeSquare) -> Optional["Dinatural"]:
        """
        Build a dinatural if the dinaturality equation holds.

        Returns:
            Dinatural, or None when the up and down chains disagree
        """
        up, down = family
        if chain([s1.up_left, up, s2.up_right]) != chain([s1.down_left, down, s2.down_right]):
            return None
        return cls((up, down), s1, s2)

    def hexagon_up(self, other: "Dinatural") -> List[FiniteFunction]:
        """Up side of the hexagon formed with a dinatural starting at self.s2."""
        return [self.s1.up_left, self.family[0], other.family[0], other.s2.up_right]

    def hexagon_down(self, other: "Dinatural") -> List[FiniteFunction]:
        """Down side of the hexagon formed with a dinatural starting at self.s2."""
        return [self.s1.down_left, self.family[1], other.family[1], other.s2.down_right]

    def composes_with(self, other: "Dinatural") -> bool:
        """
        Check that the hexagon built from self and other closes.

        other must be defined over (self.s2, s3) for some square s3; the
        shared square is not re-checked.
        """
        return chain(self.hexagon_up(other)) == chain(self.hexagon_down(other))

    def __str__(self) -> str:
        return (
            f"Functor 1: {self.s1}\n"
            f"Functor 2: {self.s2}\n"
            f"Family on 0: {self.family[0]}\n"
            f"Family on 1: {self.family[1]}\n"
        )


def dinaturals_for_squares(n: int, p: CommutativeSquare, q: CommutativeSquare) -> List[Dinatural]:
    """
    Find all dinaturals over (p, q) among the n^n candidate families.

    Both components of the family are forced to the same endofunction e.
    This is a restriction of the general definition, where the two
    components would be enumerated independently (n^n * n^n candidates).
    """
    found = []
    for e in endofunctions(n):
        d = Dinatural.new((e, e), p, q)
        if d is not None:
            found.append(d)
    return found


def dinaturals_by_pair(n: int, squares: Sequence[CommutativeSquare]) -> Dict[Tuple[int, int], List[Dinatural]]:
    """
    Dinaturals over every ordered pair of squares, keyed by square indices.

    Keys are inserted with the first index outermost, so iterating the
    table visits pairs in the same order as the nested loops.
    """
    table = {}
    for i, s1 in enumerate(squares):
        for j, s2 in enumerate(squares):
            table[(i, j)] = dinaturals_for_squares(n, s1, s2)
    logger.debug(
        "Found %d dinaturals over %d squares on n=%d",
        sum(len(ds) for ds in table.values()), len(squares), n,
    )
    return table


def dinaturals(n: int, squares: Sequence[CommutativeSquare]) -> List[Dinatural]:
    """Collect the dinaturals over every ordered pair of squares."""
    found = []
    for ds in dinaturals_by_pair(n, squares).values():
        found.extend(ds)
    return found


def candidate_count(n: int, squares: Sequence[CommutativeSquare]) -> int:
    """Number of families tried by dinaturals(n, squares)."""
    return len(squares) ** 2 * n ** n

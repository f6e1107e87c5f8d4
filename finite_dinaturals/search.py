"""
Hexagon Search Module

Exhaustively looks for two dinaturals sharing a square whose hexagon
does not close. A hit is a counterexample, returned as a HexagonFailure
carrying everything needed to print a diagnostic.
"""

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
from dataclasses import dataclass

from .constants import SECTION_RULE
from .dinaturals import Dinatural, dinaturals_for_squares
from .functions import FiniteFunction, chain, render_chain
from .squares import CommutativeSquare

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HexagonFailure:
    """
    Two dinaturals whose hexagon does not close.

    Attributes:
        first: Dinatural over (s1, s2)
        second: Dinatural over (s2, s3)
        up: Functions along the up side of the hexagon
        down: Functions along the down side of the hexagon
    """
    first: Dinatural
    second: Dinatural
    up: Tuple[FiniteFunction, ...]
    down: Tuple[FiniteFunction, ...]

    @classmethod
    def of(cls, first: Dinatural, second: Dinatural) -> "HexagonFailure":
        return cls(
            first=first,
            second=second,
            up=tuple(first.hexagon_up(second)),
            down=tuple(first.hexagon_down(second)),
        )

    @property
    def up_result(self) -> FiniteFunction:
        return chain(self.up)

    @property
    def down_result(self) -> FiniteFunction:
        return chain(self.down)

    def format(self) -> str:
        """Render the diagnostic dump, one titled section per item."""
        sections = [
            ("First dinatural", str(self.first)),
            ("Second dinatural", str(self.second)),
            ("Morphisms hexagon up", render_chain(self.up)),
            ("Morphisms hexagon down", render_chain(self.down)),
            ("Hexagon up", str(self.up_result)),
            ("Hexagon down", str(self.down_result)),
        ]
        lines = []
        for title, body in sections:
            lines.append(title)
            lines.append(SECTION_RULE)
            lines.append(body)
        return "\n".join(lines)


class _PairCache:
    """Dinaturals per ordered pair of square indices, computed on first use."""

    def __init__(self, n: int, squares: Sequence[CommutativeSquare],
                 by_pair: Optional[Dict[Tuple[int, int], List[Dinatural]]] = None):
        self.n = n
        self.squares = squares
        self._cache: Dict[Tuple[int, int], List[Dinatural]] = dict(by_pair) if by_pair is not None else {}

    def __call__(self, i: int, j: int) -> List[Dinatural]:
        key = (i, j)
        if key not in self._cache:
            self._cache[key] = dinaturals_for_squares(self.n, self.squares[i], self.squares[j])
        return self._cache[key]


def iter_hexagon_failures(n: int, squares: Sequence[CommutativeSquare],
                          by_pair: Optional[Dict[Tuple[int, int], List[Dinatural]]] = None,
                          ) -> Iterator[HexagonFailure]:
    """
    Yield every hexagon failure over ordered triples of squares.

    Triples (s1, s2, s3) are visited with s1 outermost; within a triple,
    dinaturals over (s1, s2) are the outer loop and those over (s2, s3)
    the inner one.

    Args:
        n: Size of the finite set
        squares: Commutative squares to combine
        by_pair: Dinaturals already found per pair of square indices, as
            returned by dinaturals_by_pair. Missing pairs are computed
            on first use.
    """
    pairs = _PairCache(n, squares, by_pair)
    count = len(squares)
    checked = 0
    for i in range(count):
        for j in range(count):
            for k in range(count):
                for d1 in pairs(i, j):
                    for d2 in pairs(j, k):
                        checked += 1
                        if not d1.composes_with(d2):
                            logger.debug(
                                "Hexagon fails on squares (%d, %d, %d) after %d checks",
                                i, j, k, checked,
                            )
                            yield HexagonFailure.of(d1, d2)
        logger.debug("Finished s1=%d/%d, %d hexagons checked", i + 1, count, checked)


def find_hexagon_failure(n: int, squares: Sequence[CommutativeSquare],
                         by_pair: Optional[Dict[Tuple[int, int], List[Dinatural]]] = None,
                         ) -> Optional[HexagonFailure]:
    """Return the first hexagon failure, or None if every hexagon closes."""
    return next(iter_hexagon_failures(n, squares, by_pair), None)

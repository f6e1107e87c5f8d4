"""
Finite Dinaturals - Exhaustive Search over Finite Set-Functions

Enumerates every function on a small finite set, keeps the commutative
squares among all 4-tuples of endofunctions, finds the dinatural
families between pairs of squares and searches for two dinaturals
whose hexagon fails to close.
"""

__version__ = "0.1.0"

from .exceptions import FiniteFunctionError, InvalidFunction, TypeMismatch
from .functions import FiniteFunction, compose, chain, render_chain
from .enumeration import FunctionEnumerator, functions, endofunctions, step
from .squares import CommutativeSquare, commutative_squares
from .dinaturals import Dinatural, dinaturals, dinaturals_by_pair, dinaturals_for_squares, candidate_count
from .search import HexagonFailure, find_hexagon_failure, iter_hexagon_failures

__all__ = [
    "FiniteFunctionError",
    "InvalidFunction",
    "TypeMismatch",
    "FiniteFunction",
    "compose",
    "chain",
    "render_chain",
    "FunctionEnumerator",
    "functions",
    "endofunctions",
    "step",
    "CommutativeSquare",
    "commutative_squares",
    "Dinatural",
    "dinaturals",
    "dinaturals_by_pair",
    "dinaturals_for_squares",
    "candidate_count",
    "HexagonFailure",
    "find_hexagon_failure",
    "iter_hexagon_failures",
]

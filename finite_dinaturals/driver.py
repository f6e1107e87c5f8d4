"""
Search driver: counts squares and dinaturals on an n-element set, then
looks for two dinaturals whose hexagon does not close.

Usage:
  python -m finite_dinaturals
  python -m finite_dinaturals --n 1 --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .constants import DEFAULT_N, FAILURE_EXIT_CODE
from .dinaturals import candidate_count, dinaturals_by_pair
from .functions import FiniteFunction, chain
from .search import find_hexagon_failure
from .squares import commutative_squares

logger = logging.getLogger(__name__)


def sanity_composition() -> FiniteFunction:
    """[0, 1, 1] ; [1, 0, 2], which is [1, 0, 0] when composition runs left to right."""
    return chain([
        FiniteFunction.from_values(3, [0, 1, 1]),
        FiniteFunction.from_values(3, [1, 0, 2]),
    ])


def run(n: int = DEFAULT_N, out: Optional[TextIO] = None) -> int:
    """
    Run the full search on an n-element set and report to out.

    Returns:
        0 if every hexagon closes, FAILURE_EXIT_CODE on the first that does not
    """
    out = out if out is not None else sys.stdout

    def emit(line=""):
        print(line, file=out)

    examined, squares = commutative_squares(n)
    emit(f"Squares, total: {examined}")
    emit(f"Squares, comm.: {len(squares)}")

    by_pair = dinaturals_by_pair(n, squares)
    emit(f"dinaturals, total: {candidate_count(n, squares)}")
    emit(f"dinaturals; comm.: {sum(len(ds) for ds in by_pair.values())}")

    emit(f"Comp: {sanity_composition()}")

    logger.debug("Searching %d ordered triples of squares", len(squares) ** 3)
    failure = find_hexagon_failure(n, squares, by_pair)
    if failure is not None:
        emit(failure.format())
        return FAILURE_EXIT_CODE

    emit(f"No hexagon counterexample for n={n}")
    return 0


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"n must be at least 1, got {n}")
    return n


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Exhaustive search for commutative squares, dinaturals and hexagon counterexamples"
    )
    parser.add_argument(
        "--n", type=_positive_int, default=DEFAULT_N,
        help=f"Size of the finite set (default: {DEFAULT_N})"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log search progress to stderr"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    sys.exit(run(args.n))


if __name__ == "__main__":
    main()

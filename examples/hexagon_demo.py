"""
Demonstration of the Finite Dinaturals Search

Walks through the search on a two-element set:
1. Which 4-tuples of endofunctions form commutative squares?
2. Which families are dinatural between two given squares?
3. Do two dinaturals sharing a square always compose?
"""

from collections import Counter

from finite_dinaturals import (
    CommutativeSquare,
    FiniteFunction,
    commutative_squares,
    dinaturals_for_squares,
    find_hexagon_failure,
)


def print_section(title):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demonstrate_squares(n):
    print_section("QUESTION 1: Commutative Squares")

    examined, squares = commutative_squares(n)
    print(f"\nTried {examined} 4-tuples, {len(squares)} commute")

    # Group squares by their common diagonal
    diagonals = Counter(str(s.composite) for s in squares)
    print("-" * 70)
    for diagonal, count in sorted(diagonals.items()):
        print(f"  diagonal {diagonal}: {count} squares")

    identity_diagonals = sum(1 for s in squares if s.composite.is_identity())
    print(f"\n  {identity_diagonals} squares have the identity as diagonal")

    return squares


def demonstrate_dinaturals(n):
    print_section("QUESTION 2: Dinatural Families")

    zero = FiniteFunction.zeros(n, n)
    identity = FiniteFunction.identity(n)
    constant = CommutativeSquare.new(zero, zero, zero, zero)
    split = CommutativeSquare.new(zero, identity, zero, zero)

    print(f"\nFirst square:  {constant}")
    print(f"Second square: {split}")
    print("-" * 70)
    for d in dinaturals_for_squares(n, constant, split):
        print(f"  family {d.family[0]}")


def demonstrate_hexagon(n, squares):
    print_section("QUESTION 3: Hexagon Closure")

    failure = find_hexagon_failure(n, squares)
    if failure is None:
        print(f"\n✓ Every hexagon closes for n={n}")
        return

    print("\nCounterexample found:\n")
    print(failure.format())


def main():
    n = 2
    squares = demonstrate_squares(n)
    demonstrate_dinaturals(n)
    demonstrate_hexagon(n, squares)


if __name__ == "__main__":
    main()

"""Fair division of items between two people, with a checker."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Sequence

_FORMAT_ERROR = "Odpowiedź niezgodna z formatem wyjścia."
_FIRST_ENVIES = "Bitek zazdrości Bajtynie."
_SECOND_ENVIES = "Bajtyna zazdrości Bitkowi."


class UnfairDivision(ValueError):
    """Raised when an assignment is malformed or not envy-free up to one item."""


def verify(a: Sequence[int], b: Sequence[int], assignment: Sequence[int]) -> None:
    """Check an assignment of items to group 0 or group 1.

    Group 0 values items by ``a`` and group 1 by ``b``. Each side must not
    envy the other once the other's least valuable item is removed.
    """
    if not len(a) == len(b) == len(assignment):
        raise ValueError("a, b and assignment must have the same length")
    if any(side not in (0, 1) for side in assignment):
        raise UnfairDivision(_FORMAT_ERROR)

    first = [(x, y) for x, y, side in zip(a, b, assignment) if side == 0]
    second = [(x, y) for x, y, side in zip(a, b, assignment) if side == 1]

    if second:
        a_second = [x for x, _ in second]
        if sum(x for x, _ in first) < sum(a_second) - min(a_second):
            raise UnfairDivision(_FIRST_ENVIES)
    if first:
        b_first = [y for _, y in first]
        if sum(y for _, y in second) < sum(b_first) - min(b_first):
            raise UnfairDivision(_SECOND_ENVIES)


def is_fair(a: Sequence[int], b: Sequence[int], assignment: Sequence[int]) -> bool:
    """Return whether ``assignment`` passes :func:`verify`."""
    try:
        verify(a, b, assignment)
    except UnfairDivision:
        return False
    return True


def greedy_division(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Split items greedily by ``a`` value, flipping the sides if unfair."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    assignment = [0] * len(a)
    total_one = total_zero = 0
    for index in sorted(range(len(a)), key=lambda i: -a[i]):
        if total_one < total_zero:
            total_one += a[index]
            assignment[index] = 1
        else:
            total_zero += a[index]
    if not is_fair(a, b, assignment):
        assignment = [1 - side for side in assignment]
    return assignment


def brute_force_division(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the lexicographically first fair assignment."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    for candidate in itertools.product((0, 1), repeat=len(a)):
        if is_fair(a, b, candidate):
            return list(candidate)
    raise UnfairDivision("no fair division exists")


def _read_values(tokens: list[int]) -> tuple[int, list[int], list[int]]:
    n = tokens[0]
    return n, tokens[1 : n + 1], tokens[n + 1 : 2 * n + 1]


def main(argv: list[str] | None = None) -> int:
    """Read the items from standard input and print a fair assignment."""
    parser = argparse.ArgumentParser(description="Read items from stdin and print a fair division.")
    parser.parse_args(argv)
    tokens = [int(token) for token in sys.stdin.read().split()]
    _, a, b = _read_values(tokens)
    print(" ".join(str(side) for side in greedy_division(a, b)))
    return 0


def checker_main(argv: list[str] | None = None) -> int:
    """Read items and an assignment from standard input and print C or I."""
    parser = argparse.ArgumentParser(description="Check a division read from stdin.")
    parser.parse_args(argv)
    tokens = [int(token) for token in sys.stdin.read().split()]
    n, a, b = _read_values(tokens)
    assignment = tokens[2 * n + 1 : 3 * n + 1]
    try:
        verify(a, b, assignment)
    except UnfairDivision as error:
        print(f"I {error}")
    else:
        print("C")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
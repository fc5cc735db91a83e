"""Fewest operations to turn a number on a cyclic lock into all nines.

Two operations are allowed: add one to the number, or move the first digit to
the end (dropping leading zeros). Three methods are offered: a direct formula
and two step-by-step simulations.
"""

from __future__ import annotations

import argparse
import itertools
import sys
from collections import deque

_DIGITS = frozenset("0123456789")
_WINDOW = 8


def _parse(number: str) -> list[int]:
    if not number or not set(number) <= _DIGITS:
        raise ValueError(f"not a decimal number: {number!r}")
    if number[0] == "0":
        raise ValueError("number must not start with zero")
    return [int(char) for char in number]


def _power_of_ten_answer(digits: list[int]) -> int | None:
    if digits[0] != 1:
        return None
    if len(digits) == 1:
        return 0
    if any(digits[1:]):
        return None
    return 1


def _trailing_nines(digits: list[int]) -> int:
    return sum(1 for _ in itertools.takewhile(lambda d: d == 9, reversed(digits)))


def _nine_suffix(digits: list[int], window: int) -> tuple[list[int], int] | None:
    """Split off the digits after a run of nines starting ``window`` from the end.

    Returns those digits and the count of nines directly before them, or None
    when the window does not start with a nine or holds only nines.
    """
    tail = digits[-window:]
    if tail[0] != 9:
        return None
    rest = list(itertools.dropwhile(lambda d: d == 9, tail))
    if not rest:
        return None
    return rest, _trailing_nines(digits[: len(digits) - len(rest)])


def _fill_cost(rest: list[int]) -> int:
    return 10 ** len(rest) - 1 - int("".join(map(str, rest)))


def min_operations(number: str) -> int:
    """Return the fewest operations for ``number``, computed directly."""
    digits = _parse(number)
    special = _power_of_ten_answer(digits)
    if special is not None:
        return special

    result = 0
    found = _nine_suffix(digits, _WINDOW)
    if found is not None:
        rest, nines = found
        move_cost = _fill_cost(rest)
        add_cost = sum(10 - d for d in rest if d) - 1
        if move_cost - add_cost < nines:
            result += move_cost
            digits[-len(rest):] = [9] * len(rest)

    count = _trailing_nines(digits[:-1])
    result += count if digits[-1] == 0 else 9 - digits[-1]
    result += sum(10 - d for d in digits[: len(digits) - count - 1] if d)
    return result + 2


def _rotate_to_nines(queue: deque[int], cost: int) -> int:
    nines = _trailing_nines(list(queue)[:-1]) if queue[-1] != 0 else 0
    while nines != len(queue):
        if queue[-1] not in (0, 9):
            cost += 9 - queue[-1]
            queue[-1] = 9
        if queue[-1] == 9:
            nines += 1
        if nines != len(queue):
            queue.rotate(-1)
            while queue[0] == 0:
                queue.popleft()
            cost += 1
    return cost


def _simulation_start(digits: list[int], window: int) -> tuple[list[int], int] | None:
    found = _nine_suffix(digits, window)
    if found is None:
        return None
    rest, nines = found
    move_cost = _fill_cost(rest)
    add_cost = sum(9 - d for d in rest if d)
    if move_cost - add_cost <= nines:
        return digits[: -len(rest)] + [9] * len(rest), move_cost
    return list(digits), 0


def simulate_operations(number: str) -> int:
    """Return the operation count found by performing the moves one by one."""
    digits = _parse(number)
    special = _power_of_ten_answer(digits)
    if special is not None:
        return special
    start, cost = _simulation_start(digits, _WINDOW) or (digits, 0)
    return _rotate_to_nines(deque(start), cost) + 2


def best_simulated_operations(number: str) -> int:
    """Return the smallest simulated count over every nine-run window up to eight digits."""
    digits = _parse(number)
    special = _power_of_ten_answer(digits)
    if special is not None:
        return special
    candidates = [_rotate_to_nines(deque(digits), 0)]
    for window in range(1, _WINDOW + 1):
        start = _simulation_start(digits, window)
        if start is not None:
            candidates.append(_rotate_to_nines(deque(start[0]), start[1]))
    return min(candidates) + 2


_METHODS = {
    "formula": min_operations,
    "simulate": simulate_operations,
    "best": best_simulated_operations,
}


def main(argv: list[str] | None = None) -> int:
    """Read a number from standard input and print the operation count."""
    parser = argparse.ArgumentParser(description="Read a number from stdin and print the answer.")
    parser.add_argument("--method", choices=sorted(_METHODS), default="formula")
    args = parser.parse_args(argv)
    number = sys.stdin.read().split()[0]
    print(_METHODS[args.method](number))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Waiting time for items to flow along a row of stairs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def min_wait(current: Sequence[int], required: Sequence[int]) -> int:
    """Return the answer for the given current and required amounts.

    Positions are linked to their right neighbour unless the surplus to the
    left is non-positive on both sides; each chain of links is walked from
    its start, accumulating the waiting time.
    """
    if len(current) != len(required):
        raise ValueError("current and required must have the same length")
    n = len(current)
    now = [0, *current, 0]
    need = [0, *required, 0]

    has_next = [False] * (n + 2)
    prefix = 0
    for i in range(1, n + 1):
        right = -prefix
        prefix += now[i] - need[i]
        if prefix <= 0 and right <= 0:
            continue
        has_next[i] = True

    result = 0
    for start in range(1, n + 1):
        if has_next[start - 1]:
            continue
        wait = 0
        node = start
        while has_next[node]:
            nxt = node + 1
            surplus = now[node] - need[node]
            if now[node] == 0:
                wait = max(wait + 1, wait - (now[nxt] - need[nxt]))
            elif surplus < 0:
                wait -= surplus
            result = max(result, wait - (now[nxt] - need[nxt]))
            node = nxt
    return result


def main(argv: list[str] | None = None) -> int:
    """Read the stairs from standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Read the stairs from stdin and print the answer.")
    parser.parse_args(argv)
    tokens = [int(token) for token in sys.stdin.read().split()]
    n = tokens[0]
    current = tokens[1 : n + 1]
    required = tokens[n + 1 : 2 * n + 1]
    print(min_wait(current, required))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
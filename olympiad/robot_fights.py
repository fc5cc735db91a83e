"""Decide whether the robot tournament can be won."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

_INF = 10**9


def can_win(bots: Iterable[tuple[int, int]]) -> bool:
    """Return True for a "TAK" answer, False for "NIE".

    Each bot is a pair of two attributes; bots are ordered by the pair,
    descending.
    """
    ordered = sorted((tuple(bot) for bot in bots), reverse=True)

    higher: list[bool] = []
    best = 0
    for _, height in ordered:
        is_higher = height > best
        higher.append(is_higher)
        if is_higher:
            best = height

    if sum(higher) % 2 == 0:
        return True

    lowest: list[int] = []
    current = _INF
    for index, ((_, height), is_higher) in enumerate(zip(ordered, higher)):
        if index > 0 and not is_higher:
            current = min(current, height)
        lowest.append(current)

    highest: list[int] = []
    last = len(ordered) - 1
    current = 0
    for index in range(last, -1, -1):
        height = ordered[index][1]
        if index == last:
            current = 0 if higher[index] else height
        elif not higher[index]:
            current = max(current, height)
        highest.append(current)
    highest.reverse()

    return any(
        is_higher and (low < height or high > height)
        for (_, height), is_higher, low, high in zip(ordered, higher, lowest, highest)
    )


def main(argv: list[str] | None = None) -> int:
    """Read the bots from standard input and print TAK or NIE."""
    parser = argparse.ArgumentParser(description="Read robots from stdin and print TAK or NIE.")
    parser.parse_args(argv)
    tokens = iter(int(token) for token in sys.stdin.read().split())
    count = next(tokens)
    bots = [(next(tokens), next(tokens)) for _ in range(count)]
    print("TAK" if can_win(bots) else "NIE")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
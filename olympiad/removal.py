"""Count of numbers removed from the range between two endpoints."""

from __future__ import annotations

import argparse
import sys


def removal_count(a: int, b: int) -> int:
    """Return the answer for the range from ``a`` to ``b``.

    The remainder of ``b - a`` modulo 4 is taken with truncation toward zero,
    so negative differences keep their sign.
    """
    diff = b - a
    remainder = abs(diff) % 4
    if diff < 0:
        remainder = -remainder
    if remainder in (0, 2):
        return diff
    if remainder == 1:
        return diff - 1
    return diff + 1


def main(argv: list[str] | None = None) -> int:
    """Read two integers from standard input and print the answer."""
    parser = argparse.ArgumentParser(description="Read a and b from stdin and print the result.")
    parser.parse_args(argv)
    a, b = (int(token) for token in sys.stdin.read().split()[:2])
    print(removal_count(a, b))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
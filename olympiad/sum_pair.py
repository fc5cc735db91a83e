"""Sum of two integers."""

from __future__ import annotations

import argparse
import sys


def add(x: int, y: int) -> int:
    """Return ``x + y``."""
    return x + y


def main(argv: list[str] | None = None) -> int:
    """Read two integers from standard input and print their sum."""
    parser = argparse.ArgumentParser(description="Read x and y from stdin and print x + y.")
    parser.parse_args(argv)
    x, y = (int(token) for token in sys.stdin.read().split()[:2])
    print(add(x, y))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Random test inputs for the cyclic lock problem."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

_DIGITS = "0123456789"
DEFAULT_FOLDER = "testy4"
DEFAULT_COUNT = 10_000
DEFAULT_LENGTH = 999_999


def random_number(length: int, rng: random.Random | None = None) -> str:
    """Return a random decimal number of exactly ``length`` digits."""
    if length < 1:
        raise ValueError("length must be positive")
    rng = rng or random.Random()
    first = str(rng.randint(1, 9))
    return first + "".join(rng.choices(_DIGITS, k=length - 1))


def generate_tests(
    folder: str | Path = DEFAULT_FOLDER,
    count: int = DEFAULT_COUNT,
    length: int = DEFAULT_LENGTH,
    rng: random.Random | None = None,
) -> list[Path]:
    """Write ``count`` files ``test<i>.in`` into ``folder``, one random number each."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    directory = Path(folder)
    directory.mkdir(exist_ok=True)
    paths = []
    for index in range(1, count + 1):
        path = directory / f"test{index}.in"
        path.write_text(random_number(length, rng), encoding="ascii")
        paths.append(path)
    return paths


def main(argv: list[str] | None = None) -> int:
    """Generate the test files and report where they went."""
    parser = argparse.ArgumentParser(description="Generate random cyclic lock inputs.")
    parser.add_argument("--folder", default=DEFAULT_FOLDER)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        generate_tests(args.folder, args.count, args.length, random.Random(args.seed))
    except OSError as error:
        print(f"Nie udało się zapisać testów: {error}", file=sys.stderr)
        return 1
    print(f"Wygenerowano {args.count} liczb losowych i zapisano do folderu {args.folder}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
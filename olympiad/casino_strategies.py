"""Strategies that recover the casino's hidden number by gcd queries."""

from __future__ import annotations

import argparse
import functools
import math
from collections.abc import Callable, Sequence

from olympiad.casino import DEFAULT_BUDGET, DEFAULT_N, BudgetExhausted, Casino

Strategy = Callable[[Casino], "int | None"]

DEFAULT_SIEVE_LIMIT = 8_000_000
DEFAULT_PRIME_COUNT = 4000

# (minimum prime index, lower bound on the found part) below which a round is abandoned
_GIVE_UP = (
    (10, 200),
    (30, 16_000),
    (100, 900_000),
    (250, 600_000_000),
    (1200, 3_000_000_000_000),
    (70000, 10_000_000_000_000),
)


def sieve_primes(limit: int) -> list[int]:
    """Return every prime below ``limit``."""
    if limit <= 2:
        return []
    composite = bytearray(limit)
    for i in range(2, math.isqrt(limit - 1) + 1):
        if not composite[i]:
            composite[i * i :: i] = b"\x01" * len(range(i * i, limit, i))
    return [i for i in range(2, limit) if not composite[i]]


def first_primes(count: int) -> list[int]:
    """Return the first ``count`` primes, found by trial division."""
    if count < 1:
        raise ValueError("count must be positive")
    primes = [2]
    candidate = 3
    while len(primes) < count:
        root = math.isqrt(candidate)
        is_prime = True
        for prime in primes:
            if prime > root:
                break
            if candidate % prime == 0:
                is_prime = False
                break
        if is_prime:
            primes.append(candidate)
        candidate += 2
    return primes


def prime_powers(primes: Sequence[int], n: int) -> list[int]:
    """Return, for each prime, its largest power not above ``n``."""
    powers = []
    for prime in primes:
        power = prime
        while power <= n // prime:
            power *= prime
        powers.append(power)
    return powers


def guess_by_sieve(casino: Casino, primes: Sequence[int], powers: Sequence[int]) -> int | None:
    """Factor the hidden number block by block; return it once known, else None."""
    n = casino.n
    found = 1
    i = 0
    while i < len(primes):
        block = 1
        j = i
        while j < len(primes) and block < n // primes[j]:
            block *= primes[j]
            j += 1
        if j == i:
            return None
        common = casino.ask(block)
        for index in range(i, j):
            if common % primes[index] == 0:
                found *= casino.ask(powers[index])
        last = j - 1
        if found >= n // primes[last]:
            return found
        if any(last > index and found < bound for index, bound in _GIVE_UP):
            return None
        i = j
    return None


def guess_by_blocks(casino: Casino, primes: Sequence[int], per_prime_bound: bool) -> int | None:
    """Query products of consecutive primes and climb the powers of every hit.

    A block closes when its product would pass ``n // p`` for the next prime
    ``p`` (with ``per_prime_bound``) or ``n // primes[-1]`` otherwise. The last
    block is never queried. Returns a guess, or None to ask for a new number.
    """
    n = casino.n
    found = 1
    combined = 1
    start = 0
    for i, prime in enumerate(primes):
        bound = n // prime if per_prime_bound else n // primes[-1]
        if combined * prime > bound:
            common = casino.ask(combined)
            for candidate in primes[start : i + 1]:
                if common % candidate:
                    continue
                power = candidate
                while power * candidate <= n and casino.ask(power * candidate) == power * candidate:
                    power *= candidate
                found *= power
            start = i
            combined = 1
        combined *= prime
    if found == 1 or n // found > primes[-1]:
        return None
    return found


def play(casino: Casino, strategy: Strategy) -> int:
    """Play until the coins run out and return the number of wins."""
    try:
        while True:
            guess = strategy(casino)
            if guess is None:
                casino.poke()
            else:
                casino.answer(guess)
    except BudgetExhausted as finished:
        return finished.wins


def _build_strategy(args: argparse.Namespace, n: int) -> Strategy:
    if args.strategy == "sieve":
        primes = sieve_primes(args.sieve_limit)
        powers = prime_powers(primes, n)
        return functools.partial(guess_by_sieve, primes=primes, powers=powers)
    primes = first_primes(args.primes)
    return functools.partial(
        guess_by_blocks, primes=primes, per_prime_bound=args.per_prime_bound
    )


def main(argv: list[str] | None = None) -> int:
    """Play a whole game against a seeded casino and print the wins."""
    parser = argparse.ArgumentParser(description="Play the casino game and print the wins.")
    parser.add_argument("--strategy", choices=("sieve", "blocks"), default="sieve")
    parser.add_argument("--n", type=int, default=DEFAULT_N)
    parser.add_argument("--budget", type=int, default=DEFAULT_BUDGET)
    parser.add_argument("--seed", type=int, default=1)
    parser.add_argument("--sieve-limit", type=int, default=DEFAULT_SIEVE_LIMIT)
    parser.add_argument("--primes", type=int, default=DEFAULT_PRIME_COUNT)
    parser.add_argument("--per-prime-bound", action="store_true")
    args = parser.parse_args(argv)
    casino = Casino(n=args.n, budget=args.budget, seed=args.seed)
    print(play(casino, _build_strategy(args, args.n)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
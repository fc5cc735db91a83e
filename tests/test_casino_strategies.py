import functools

import pytest

from olympiad.casino import Casino
from olympiad.casino_strategies import (
    first_primes,
    guess_by_blocks,
    guess_by_sieve,
    main,
    play,
    prime_powers,
    sieve_primes,
)

N = 10**6


def test_sieve_small_limit():
    assert sieve_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_sieve_empty_below_two():
    assert sieve_primes(2) == []


def test_sieve_matches_trial_division():
    sieved = sieve_primes(5000)
    assert first_primes(len(sieved)) == sieved


def test_first_primes_rejects_nonpositive_count():
    with pytest.raises(ValueError):
        first_primes(0)


def test_prime_powers_are_maximal():
    primes = sieve_primes(200)
    for prime, power in zip(primes, prime_powers(primes, N)):
        assert power <= N < power * prime
        reduced = power
        while reduced % prime == 0:
            reduced //= prime
        assert reduced == 1


def test_sieve_guess_divides_secret():
    primes = sieve_primes(1000)
    powers = prime_powers(primes, N)
    casino = Casino(n=N, budget=100_000, seed=9)
    for _ in range(50):
        secret = casino.secret
        guess = guess_by_sieve(casino, primes, powers)
        assert guess is None or guess == secret
        casino.poke()


@pytest.mark.parametrize("per_prime_bound", [False, True])
def test_block_guess_divides_secret(per_prime_bound):
    primes = first_primes(200)
    casino = Casino(n=N, budget=100_000, seed=12)
    for _ in range(50):
        secret = casino.secret
        guess = guess_by_blocks(casino, primes, per_prime_bound)
        assert guess is None or (secret % guess == 0 and N // guess <= primes[-1])
        casino.poke()


def test_play_with_sieve_wins_and_reports_casino_wins():
    primes = sieve_primes(1000)
    strategy = functools.partial(guess_by_sieve, primes=primes, powers=prime_powers(primes, N))
    casino = Casino(n=N, budget=5000, seed=1)
    wins = play(casino, strategy)
    assert wins > 0
    assert wins == casino.wins
    assert casino.remaining == 0


def test_play_with_no_guesses_wins_nothing():
    casino = Casino(n=N, budget=25, seed=1)
    assert play(casino, lambda _: None) == 0


def test_main_matches_play(capsys):
    main(["--n", str(N), "--budget", "3000", "--seed", "4", "--sieve-limit", "1000"])
    printed = int(capsys.readouterr().out.strip())
    primes = sieve_primes(1000)
    strategy = functools.partial(guess_by_sieve, primes=primes, powers=prime_powers(primes, N))
    assert printed == play(Casino(n=N, budget=3000, seed=4), strategy)
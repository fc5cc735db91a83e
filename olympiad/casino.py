"""An interactive guessing game played against a hidden random number.

The casino hides a number ``X`` drawn uniformly from ``1..n``. A player may
ask for ``gcd(X, y)``, poke the casino to draw a fresh ``X``, or answer with a
guess. Each of these moves costs one coin. The game ends when the coins run
out, and the number of correct answers is what counts.
"""

from __future__ import annotations

import math
import random

DEFAULT_N = 10**18
DEFAULT_BUDGET = 10_000_000
DEFAULT_SEED = 1


class BudgetExhausted(Exception):
    """Raised when the coins run out; carries the number of wins."""

    def __init__(self, wins: int) -> None:
        super().__init__(f"Liczba wygranych: {wins}")
        self.wins = wins


class WrongAnswer(Exception):
    """Raised when an answer does not match the hidden number."""

    def __init__(self, guess: int, secret: int) -> None:
        super().__init__(f"answered {guess}, hidden number was {secret}")
        self.guess = guess
        self.secret = secret


class Casino:
    """The judge of the game, with a seeded source of hidden numbers."""

    def __init__(
        self,
        n: int = DEFAULT_N,
        budget: int = DEFAULT_BUDGET,
        seed: int | None = DEFAULT_SEED,
    ) -> None:
        if n < 1:
            raise ValueError("n must be at least 1")
        if budget < 0:
            raise ValueError("budget must not be negative")
        self.n = n
        self._remaining = budget
        self._rng = random.Random(seed)
        self._wins = 0
        self._secret = self._draw()

    @property
    def remaining(self) -> int:
        """Coins left to spend."""
        return self._remaining

    @property
    def wins(self) -> int:
        """Correct answers given so far."""
        return self._wins

    @property
    def secret(self) -> int:
        """The number currently hidden."""
        return self._secret

    def _draw(self) -> int:
        return self._rng.randint(1, self.n)

    def _finish_if_broke(self) -> None:
        if self._remaining == 0:
            raise BudgetExhausted(self._wins)

    def _spend(self) -> None:
        self._finish_if_broke()
        self._remaining -= 1

    def _check_range(self, y: int) -> None:
        if not 1 <= y <= self.n:
            raise ValueError(f"{y} is outside 1..{self.n}")

    def ask(self, y: int) -> int:
        """Return ``gcd(X, y)`` for the hidden ``X``."""
        self._check_range(y)
        self._spend()
        self._finish_if_broke()
        return math.gcd(self._secret, y)

    def poke(self) -> None:
        """Replace the hidden number with a fresh one."""
        self._spend()
        self._secret = self._draw()
        self._finish_if_broke()

    def answer(self, y: int) -> None:
        """Claim that the hidden number is ``y``; a correct claim starts a new round."""
        self._check_range(y)
        self._spend()
        if y != self._secret:
            raise WrongAnswer(y, self._secret)
        self._wins += 1
        self._finish_if_broke()
        self._secret = self._draw()
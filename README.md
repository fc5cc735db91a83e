# olympiad

Solutions to a handful of programming olympiad tasks, together with a
checker and a simulated interactive judge. Each task is a module with a
plain function you can call from Python and a command that reads the task's
input from standard input and prints the answer. The package needs nothing
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command | Module | Input on stdin | Output |
| --- | --- | --- | --- |
| `olympiad-removal` | `olympiad.removal` | `a b` | `removal_count(a, b)` |
| `olympiad-sum-pair` | `olympiad.sum_pair` | `x y` | `x + y` (`add`) |
| `olympiad-robot-fights` | `olympiad.robot_fights` | `n`, then `n` pairs | `TAK` or `NIE` (`can_win`) |
| `olympiad-stairs` | `olympiad.stairs` | `n`, `n` current values, `n` required values | `min_wait(current, required)` |
| `olympiad-fair-division` | `olympiad.fair_division` | `n`, `n` values `a`, `n` values `b` | a `0`/`1` side for each item (`greedy_division`) |
| `olympiad-fair-division-check` | `olympiad.fair_division` | as above, then `n` sides | `C`, or `I` followed by the reason |
| `olympiad-bitada` | `olympiad.bitada` | `n m k`, `n-1` pattern edges, `m-1` host edges | `count_embeddings(...)` |
| `olympiad-cyclic-lock` | `olympiad.cyclic_lock` | a decimal number | fewest operations |
| `olympiad-lock-generator` | `olympiad.lock_generator` | nothing | writes test files |
| `olympiad-casino` | `olympiad.casino_strategies` | nothing | wins in a simulated game |

Options:

- `olympiad-cyclic-lock --method {formula,simulate,best}` picks
  `min_operations` (default), `simulate_operations` or
  `best_simulated_operations`.
- `olympiad-lock-generator --folder DIR --count N --length L --seed S`
  writes files `test1.in` … `testN.in` into `DIR` (default `testy4`, 10000
  files of 999999 digits each), each holding one random number without a
  leading zero.
- `olympiad-casino --strategy {sieve,blocks} --n N --budget B --seed S
  --sieve-limit L --primes P --per-prime-bound` plays until the budget is
  spent and prints the number of wins. The defaults (`n = 10**18`, a budget
  of 10,000,000 moves, a sieve up to 8,000,000) make a full game take a long
  time; a smaller `--budget` gives a quick run.

## Using it from Python

```python
from olympiad.sum_pair import add
from olympiad.fair_division import greedy_division, is_fair
from olympiad.cyclic_lock import min_operations

add(2, 3)                     # 5

a = [5, 3, 2]
b = [1, 4, 4]
split = greedy_division(a, b)
is_fair(a, b, split)          # True

min_operations("10")          # 1
```

### Fair division

`verify(a, b, assignment)` raises `UnfairDivision` (a `ValueError`) with the
reason when an assignment holds something other than 0 and 1, or when one
side envies the other even after removing the other side's least valuable
item; `is_fair` returns a boolean instead. `greedy_division` splits items by
their `a` value and swaps the sides if the result is unfair;
`brute_force_division` returns the lexicographically first fair assignment,
trying all `2**n` of them.

### Tree embeddings

`olympiad.bitada.count_embeddings(n, pattern_edges, m, host_edges, k)`
counts the injective, edge-preserving placements of a pattern tree with
nodes `1..n` into a host tree with nodes `1..m`, modulo `k`. Both trees
must have maximum degree three; malformed trees raise `ValueError`.
`root_tree(n, edges)` roots the pattern at its first node of degree below
three and returns the root with each node's children.

### Cyclic lock

`min_operations(number)` computes the answer directly;
`simulate_operations` and `best_simulated_operations` perform the moves one
by one and are handy for cross-checking on small inputs. A string that is
not a decimal number, or starts with zero, raises `ValueError`.
`olympiad.lock_generator` offers `random_number(length, rng)` and
`generate_tests(folder, count, length, rng)`.

## The casino game

`olympiad.casino.Casino(n, budget, seed)` is the judge: it hides a random
number `X` between 1 and `n` and allows `budget` moves, each costing one.

- `ask(y)` returns `gcd(X, y)`;
- `poke()` draws a new hidden number;
- `answer(y)` checks a guess and, if right, starts a new round.

`remaining`, `wins` and `secret` report the state. A `y` outside `1..n`
raises `ValueError`; running out of budget raises `BudgetExhausted`, whose
`wins` attribute holds the score; a wrong guess raises `WrongAnswer`.

Strategies live in `olympiad.casino_strategies`: `guess_by_sieve(casino,
primes, powers)` and `guess_by_blocks(casino, primes, per_prime_bound)`
return a guess or `None`. `sieve_primes`, `first_primes` and
`prime_powers` build their inputs, and `play(casino, strategy)` keeps
playing rounds until the budget is spent and returns the number of wins.

```python
from olympiad.casino import Casino
from olympiad.casino_strategies import (
    guess_by_sieve, play, prime_powers, sieve_primes,
)

casino = Casino(10**18, 100_000, 1)
primes = sieve_primes(100_000)
powers = prime_powers(primes, 10**18)
wins = play(casino, lambda c: guess_by_sieve(c, primes, powers))
```

## What it does not do

The casino judge and the strategies run in the same Python process. There
is no mode in which a separate player program talks to the judge over
standard input and output.
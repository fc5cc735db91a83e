import math

import pytest

from olympiad.casino import BudgetExhausted, Casino, WrongAnswer


def test_ask_returns_gcd_with_secret():
    casino = Casino(n=10**6, budget=100, seed=7)
    for y in (1, 2, 12, 999_983, 10**6):
        assert casino.ask(y) == math.gcd(casino.secret, y)


def test_secret_is_within_range():
    casino = Casino(n=50, budget=1000, seed=3)
    for _ in range(200):
        assert 1 <= casino.secret <= 50
        casino.poke()


def test_same_seed_gives_same_secret():
    first = Casino(n=1000, budget=100, seed=11)
    second = Casino(n=1000, budget=100, seed=11)
    first_secrets = []
    second_secrets = []
    for _ in range(5):
        first_secrets.append(first.secret)
        second_secrets.append(second.secret)
        first.poke()
        second.poke()
    assert first_secrets == second_secrets
    assert all(1 <= secret <= 1000 for secret in first_secrets)


def test_each_move_costs_one_coin():
    casino = Casino(budget=10, seed=2)
    casino.ask(5)
    casino.poke()
    assert casino.remaining == 8


def test_last_coin_ends_the_game_before_answering_a_query():
    casino = Casino(budget=3, seed=4)
    casino.ask(1)
    casino.ask(1)
    with pytest.raises(BudgetExhausted) as info:
        casino.ask(1)
    assert info.value.wins == 0


def test_zero_budget_ends_at_once():
    casino = Casino(budget=0)
    with pytest.raises(BudgetExhausted):
        casino.poke()


def test_correct_answer_counts_a_win_and_draws_again():
    casino = Casino(n=10**18, budget=10, seed=5)
    first = casino.secret
    casino.answer(first)
    assert casino.wins == 1
    assert casino.secret != first


def test_correct_answer_with_last_coin_is_counted():
    casino = Casino(budget=1, seed=6)
    with pytest.raises(BudgetExhausted) as info:
        casino.answer(casino.secret)
    assert info.value.wins == 1


def test_wrong_answer_raises():
    casino = Casino(n=100, budget=10, seed=8)
    wrong = casino.secret % 100 + 1
    with pytest.raises(WrongAnswer) as info:
        casino.answer(wrong)
    assert info.value.secret == casino.secret


@pytest.mark.parametrize("y", [0, -3, 101])
def test_out_of_range_query_is_rejected(y):
    casino = Casino(n=100, budget=10)
    with pytest.raises(ValueError):
        casino.ask(y)
    assert casino.remaining == 10


def test_invalid_construction():
    with pytest.raises(ValueError):
        Casino(n=0)
    with pytest.raises(ValueError):
        Casino(budget=-1)
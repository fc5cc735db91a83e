import io

import pytest

from olympiad.sum_pair import add, main


@pytest.mark.parametrize("x,y", [(1, 2), (-5, 9), (10**18, 10**18), (0, -3)])
def test_commutative(x, y):
    assert add(x, y) == add(y, x)


@pytest.mark.parametrize("x", [0, 1, -1, 123456789, -(10**17)])
def test_zero_is_identity(x):
    assert add(x, 0) == x


@pytest.mark.parametrize("x", [0, 7, -42, 10**18])
def test_inverse_gives_zero(x):
    assert add(x, -x) == 0


def test_associative():
    assert add(add(3, 4), 5) == add(3, add(4, 5))


def test_main_prints_sum(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(add(2, 3))
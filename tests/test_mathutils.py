import io
import math

import pytest

from brakecalc.mathutils import factorial, main, sum_to


@pytest.mark.parametrize("n", [0, 1, -4])
def test_factorial_small_is_one(n):
    assert factorial(n) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_agrees_with_stdlib():
    assert [factorial(n) for n in range(15)] == [math.factorial(n) for n in range(15)]


def test_factorial_known_value():
    assert factorial(5) == 120


@pytest.mark.parametrize("n", [0, -1, -100])
def test_sum_to_non_positive_is_zero(n):
    assert sum_to(n) == 0


@pytest.mark.parametrize("n", range(1, 50))
def test_sum_to_steps(n):
    assert sum_to(n) - sum_to(n - 1) == n


def test_main_prints_both_results(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert out == f"n? factorial(6) = {factorial(6)}\nsum_to(6) = {sum_to(6)}\n"


def test_main_rejects_non_integer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("six\n"))
    assert main() == 1
    assert "factorial" not in capsys.readouterr().out
import math

import pytest

from osdrills.poisson import factorial, format_table, main, poisson


def test_factorial_small():
    assert factorial(5) == 120


def test_factorial_zero_and_recurrence():
    assert factorial(0) == 1
    for n in range(1, 20):
        assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("lam", [0.5, 2.0, 3.0, 10.0])
def test_probabilities_sum_to_one(lam):
    total = sum(poisson(k, lam) for k in range(200))
    assert total == pytest.approx(1.0, rel=1e-9)


@pytest.mark.parametrize("lam", [1.0, 2.0, 7.5])
def test_recurrence_between_terms(lam):
    for k in range(15):
        assert poisson(k + 1, lam) == pytest.approx(poisson(k, lam) * lam / (k + 1))


def test_zero_term_is_exp():
    assert poisson(0, 4.0) == pytest.approx(math.exp(-4.0))


def test_large_k_does_not_overflow():
    value = poisson(300, 250.0)
    assert 0.0 < value < 1.0


def test_table_layout():
    table = format_table()
    lines = table.splitlines()
    assert lines[1] == "~~~~~~~~~~~~ Poisson distribution ~~~~~~~~~~~~"
    assert lines[4] == "---------------|---------------|---------------"
    assert len(lines) == 10
    assert lines[5].endswith("0.270670566473")


def test_table_values_match_function():
    rows = format_table().splitlines()[5:]
    assert rows[3].endswith(f"{poisson(3, 3):.12f}")


def test_main_prints_value(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == f"P_X(1) = {poisson(1, 2):.10f}\n"


def test_main_accepts_integral_float_k(capsys):
    assert main(["2", "3.0"]) == 0
    assert capsys.readouterr().out.startswith("P_X(3) = ")


def test_main_wrong_arg_count(capsys):
    assert main(["2"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_bad_lambda(capsys):
    assert main(["abc", "1"]) == 1
    assert "need to be a number" in capsys.readouterr().out


@pytest.mark.parametrize("k", ["1.5", "x"])
def test_main_bad_k(capsys, k):
    assert main(["2", k]) == 1
    assert capsys.readouterr().out == "k need to be an integer\n"
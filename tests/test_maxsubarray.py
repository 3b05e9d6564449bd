import pytest

from osdrills.maxsubarray import (
    MAX_ELEMENT,
    MIN_ELEMENT,
    generate_random_array,
    main,
    max_sub_array_cubic,
    max_sub_array_linear,
    max_sub_array_quadratic,
)


def test_classic_example():
    values = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    assert max_sub_array_linear(values) == 6
    assert max_sub_array_quadratic(values) == 6
    assert max_sub_array_cubic(values) == 6


def test_empty_is_zero():
    assert max_sub_array_linear([]) == 0
    assert max_sub_array_quadratic([]) == 0
    assert max_sub_array_cubic([]) == 0


def test_all_negative_is_zero():
    values = [-3, -1, -7]
    assert max_sub_array_linear(values) == 0
    assert max_sub_array_quadratic(values) == 0
    assert max_sub_array_cubic(values) == 0


def test_all_positive_is_total():
    values = [3, 1, 7, 2]
    assert max_sub_array_linear(values) == 13
    assert max_sub_array_quadratic(values) == 13
    assert max_sub_array_cubic(values) == 13


@pytest.mark.parametrize("seed", range(10))
def test_implementations_agree(seed):
    values = generate_random_array(seed, 40)
    linear = max_sub_array_linear(values)
    assert linear == max_sub_array_quadratic(values)
    assert linear == max_sub_array_cubic(values)


def test_random_array_range_and_length():
    values = generate_random_array(7, 500)
    assert len(values) == 500
    assert all(MIN_ELEMENT <= v <= MAX_ELEMENT for v in values)


def test_random_array_is_deterministic():
    first = generate_random_array(3, 20)
    second = generate_random_array(3, 20)
    assert len(first) == 20
    assert first == second


def test_random_array_negative_length():
    with pytest.raises(ValueError):
        generate_random_array(1, -1)


def test_main_output(capsys):
    assert main(["5", "30"]) == 0
    expected = max_sub_array_linear(generate_random_array(5, 30))
    assert capsys.readouterr().out == f"The maximum subarray sum is {expected}\n"


def test_main_usage(capsys):
    assert main(["5"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_bad_seed(capsys):
    assert main(["x", "3"]) == 1
    assert capsys.readouterr().out == "Error: seed should be an integer\n"


def test_main_bad_n(capsys):
    assert main(["1", "y"]) == 1
    assert capsys.readouterr().out == "Error: n should be an integer\n"
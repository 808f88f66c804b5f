import pytest

from calcgarden.dohoudaniel_ops import (
    add,
    divide,
    is_valid_operator,
    mult,
    perform_calculation,
    subtract,
)


def test_add_small_numbers():
    assert add(2, 3) == 5.0


def test_divide_gives_fraction():
    assert divide(7, 2) == 3.5


@pytest.mark.parametrize("a, b", [(4, 9), (-6, 2), (0, 11), (100, -37)])
def test_subtract_undoes_add(a, b):
    assert subtract(add(a, b), b) == a


@pytest.mark.parametrize("a, b", [(4, 9), (-6, 2), (0, 11), (13, -3)])
def test_mult_is_commutative(a, b):
    assert mult(a, b) == mult(b, a)


@pytest.mark.parametrize("a, b", [(4, 9), (-6, 2), (13, -3)])
def test_divide_undoes_mult(a, b):
    assert divide(mult(a, b), b) == a


def test_operands_are_truncated():
    assert add(2.9, 1.2) == add(2, 1)
    assert mult(-2.7, 3.9) == mult(-2, 3)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError, match="Division by zero is not allowed"):
        divide(1, 0)


def test_divisor_truncating_to_zero_raises():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0.5)


@pytest.mark.parametrize("operator", ["+", "-", "*", "/"])
def test_valid_operators(operator):
    assert is_valid_operator(operator) is True


@pytest.mark.parametrize("operator", ["%", "^", "x", " ", ""])
def test_invalid_operators(operator):
    assert is_valid_operator(operator) is False


@pytest.mark.parametrize(
    "operator, function", [("+", add), ("-", subtract), ("*", mult), ("/", divide)]
)
def test_perform_calculation_dispatches(operator, function):
    assert perform_calculation(12, 4, operator) == function(12, 4)


def test_perform_calculation_rejects_unknown_operator():
    with pytest.raises(ValueError, match="invalid operator"):
        perform_calculation(1, 2, "%")
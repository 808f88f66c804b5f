import io
import sys

import pytest

from calcgarden import codescience


def test_divide_by_zero_returns_zero():
    assert codescience.divide(5.0, 0.0) == 0.0


def test_divide_inverts_multiply():
    assert codescience.divide(codescience.multiply(2.5, 4.0), 4.0) == 2.5


def test_subtract_inverts_add():
    assert codescience.subtract(codescience.add(1.75, 3.0), 3.0) == 1.75


@pytest.mark.parametrize("x", [0.0, 1.5, 3.0, 12.0])
def test_square_root_inverts_square(x):
    assert codescience.square_root(x * x) == pytest.approx(x)


def test_square_root_of_negative_is_nan():
    result = codescience.square_root(-1.0)
    assert str(result) == "nan"


@pytest.mark.parametrize("base", [2.0, 3.5, -4.0])
def test_power_identities(base):
    assert codescience.power(base, 0) == 1.0
    assert codescience.power(base, 1) == base


def test_power_of_negative_base_with_fraction_is_nan():
    result = codescience.power(-8.0, 0.5)
    assert str(result) == "nan"


@pytest.mark.parametrize("angle", [0.0, 0.3, 1.0, 2.5, -4.0])
def test_sine_and_cosine_identity(angle):
    total = codescience.sine(angle) ** 2 + codescience.cosine(angle) ** 2
    assert total == pytest.approx(1.0)


@pytest.mark.parametrize(
    "operator, expected",
    [
        ("+", codescience.add(6.0, 2.0)),
        ("-", codescience.subtract(6.0, 2.0)),
        ("*", codescience.multiply(6.0, 2.0)),
        ("/", codescience.divide(6.0, 2.0)),
        ("^", codescience.power(6.0, 2.0)),
        ("r", codescience.square_root(6.0)),
        ("s", codescience.sine(6.0)),
        ("c", codescience.cosine(6.0)),
    ],
)
def test_calculate_dispatches(operator, expected):
    assert codescience.calculate(operator, 6.0, 2.0) == expected


def test_calculate_rejects_unknown_operator():
    with pytest.raises(ValueError, match="Invalid operator"):
        codescience.calculate("%", 1.0, 2.0)


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n2\n/\n"))
    assert codescience.main([]) == 0
    assert "Result: 2.00" in capsys.readouterr().out


def test_main_rejects_unknown_operator(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n2\nx\n"))
    assert codescience.main([]) == 1
    assert "Invalid operator" in capsys.readouterr().out
import io
import math

import pytest

from calcgarden import hullaah
from calcgarden.hullaah import (
    add,
    divide,
    lookup_operation,
    mul,
    parse_number,
    power,
    sub,
)


def test_add_sub_mul_invariants():
    assert sub(add(1.25, 3.5), 3.5) == 1.25
    assert mul(1.25, 3.5) == mul(3.5, 1.25)
    assert divide(mul(1.25, 4.0), 4.0) == 1.25


def test_divide_by_zero_follows_floating_point():
    assert divide(1.0, 0.0) == math.inf
    assert math.isnan(divide(0.0, 0.0))


def test_power_recurrence():
    assert power(3.0, 0) == 1
    for n in range(1, 10):
        assert power(3.0, n) == 3.0 * power(3.0, n - 1)


@pytest.mark.parametrize("exponent", [-1, 0.5, math.inf, math.nan])
def test_power_rejects_other_exponents(exponent):
    with pytest.raises(ValueError):
        power(2.0, exponent)


def test_parse_number():
    assert parse_number("3.25") == 3.25
    assert parse_number(" -4") == -4.0


@pytest.mark.parametrize("text", ["", "4x", "x", "4 "])
def test_parse_number_rejects(text):
    with pytest.raises(ValueError, match="INVALID NUMBER"):
        parse_number(text)


def test_lookup_operation():
    assert lookup_operation("+") is add
    assert lookup_operation("^") is power
    with pytest.raises(ValueError, match="INVALID OPERATION"):
        lookup_operation("%")


def test_main_divides(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n3\n/\n"))
    assert hullaah.main() == 0
    assert capsys.readouterr().out.endswith("2\n")


def test_main_retries_invalid_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n6\n3\n%\n+\n"))
    assert hullaah.main() == 0
    captured = capsys.readouterr()
    assert "INVALID NUMBER" in captured.err
    assert "INVALID OPERATION" in captured.err
    assert captured.out.endswith(f"{add(6.0, 3.0):g}\n")


@pytest.mark.parametrize("text", ["6\n", "6\n3\n+"])
def test_main_fails_when_input_ends(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert hullaah.main() == 1
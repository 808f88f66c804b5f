import io
import math
import sys
from unittest.mock import patch

import pytest

from calcgarden import techdanny


def test_add_is_commutative():
    assert techdanny.calculate(2.5, "+", 4.0) == techdanny.calculate(4.0, "+", 2.5)


def test_subtract_self_is_zero():
    assert techdanny.calculate(6.75, "-", 6.75) == 0


def test_multiply_by_one_is_identity():
    assert techdanny.calculate(3.25, "*", 1) == 3.25


def test_divide_self_is_one():
    assert techdanny.calculate(7.0, "/", 7.0) == 1.0


def test_divide_by_zero_gives_infinity():
    assert techdanny.calculate(1.0, "/", 0.0) == math.inf
    assert techdanny.calculate(-1.0, "/", 0.0) == -math.inf


def test_zero_over_zero_is_nan():
    result = techdanny.calculate(0.0, "/", 0.0)
    assert str(result) == "nan"


def test_invalid_operator_raises():
    with pytest.raises(ValueError, match="invalid operator"):
        techdanny.calculate(1.0, "%", 2.0)


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    with patch("calcgarden.techdanny.subprocess.run") as run:
        code = techdanny.main()
    return code, capsys.readouterr().out, run


def test_main_prints_calculation(monkeypatch, capsys):
    code, out, run = _run(monkeypatch, capsys, "2\n+\n0\n")
    assert code == 0
    assert "2.00 + 0.00 = 2.00" in out
    run.assert_called_once_with(["clear"], check=False)


def test_main_reports_invalid_operator_and_continues(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "1\n%\n2\n5\n*\n1\n")
    assert code == 0
    assert "invalid operator" in out
    assert "5.00 * 1.00 = 5.00" in out


def test_main_rejects_bad_number(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "abc\n")
    assert code == 1
    assert "Invalid number" in out
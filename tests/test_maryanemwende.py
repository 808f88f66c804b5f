import io
import math

import pytest

from calcgarden import maryanemwende
from calcgarden.maryanemwende import calculate


def test_calculate_invariants():
    assert calculate("-", calculate("+", 1.5, 2.25), 2.25) == 1.5
    assert calculate("*", 1.5, 2.25) == calculate("*", 2.25, 1.5)
    assert calculate("/", calculate("*", 1.5, 2.25), 2.25) == 1.5


def test_division_by_zero_gives_infinity():
    assert calculate("/", 1.0, 0.0) == math.inf


def test_invalid_operator():
    with pytest.raises(ValueError, match="% is an invalid arithmetic operator"):
        calculate("%", 1.0, 2.0)


def test_main_adds(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+\n2\n3\n"))
    assert maryanemwende.main() == 0
    assert "Resulting addition is: 5.00" in capsys.readouterr().out


def test_main_reports_invalid_operator(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n1\n2\n"))
    assert maryanemwende.main() == 0
    assert "x is an invalid arithmetic operator" in capsys.readouterr().out


def test_main_rejects_missing_numbers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+\nabc\n"))
    assert maryanemwende.main() == 1
    assert "Invalid number" in capsys.readouterr().out
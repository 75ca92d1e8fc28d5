import runpy

import pytest

from contfrac.cli import main


def test_rational(capsys):
    assert main(["415/93", "--convergents"]) == 0
    out = capsys.readouterr().out
    assert "[4; 2, 6, 7]" in out
    assert "c3 = 415/93" in out
    assert "terminates at step 4 (bound 44)" in out


def test_symbolic(capsys):
    assert main(["sqrt(2)", "--symbolic", "--steps", "3"]) == 0
    assert capsys.readouterr().out.strip() == "[1; 2, 2, 2, ...]"


def test_nested(capsys):
    assert main(["7/5", "--nested"]) == 0
    assert "1 + 1/(2 + 1/2)" in capsys.readouterr().out


def test_bad_value():
    with pytest.raises(SystemExit) as info:
        main(["not-a-number"])
    assert info.value.code == 2


@pytest.mark.parametrize(
    "argv",
    [
        ["x", "--symbolic"],
        ["foo(", "--symbolic"],
        ["I", "--symbolic"],
        ["0.1", "--symbolic"],
        ["7/3", "--steps", "-1"],
        ["7/3", "--steps", "many"],
        ["7/3", "--log-level", "loud"],
    ],
)
def test_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2
    assert "contfrac: error:" in capsys.readouterr().err


def test_module_entry_point(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["contfrac", "7/3"])
    with pytest.raises(SystemExit) as info:
        runpy.run_module("contfrac", run_name="__main__")
    assert info.value.code == 0
    assert "[2; 3]" in capsys.readouterr().out

import pytest

from pushswap.cli import main
from pushswap.stack import Machine


def _replay(values, lines):
    machine = Machine(values)
    for line in lines:
        machine.apply(line)
    return machine


def test_no_arguments_returns_one_silently(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""


def test_two_numbers(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "ra\n"


def test_numbers_in_one_argument_are_sorted(capsys):
    values = [5, -3, 12, 0, 7, 1, -8]
    assert main([" ".join(str(v) for v in values)]) == 0
    lines = capsys.readouterr().out.splitlines()
    machine = _replay(values, lines)
    assert machine.a.values() == sorted(values)
    assert len(machine.b) == 0


@pytest.mark.parametrize(
    "args",
    [["1", "x"], ["1 1"], ["1", ""], ["2147483648"], ["-0", "3"], ["1-2"]],
)
def test_invalid_input_prints_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_only_spaces_returns_one(capsys):
    assert main(["   "]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
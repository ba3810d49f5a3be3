import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def replay(values, lines):
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(line)
    return stacks


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_two_elements(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_output_sorts_quoted_arguments(capsys):
    assert main(["9 -4 7", "0", "3 12"]) == 0
    lines = capsys.readouterr().out.splitlines()
    result = replay([9, -4, 7, 0, 3, 12], lines)
    assert list(result.a) == [-4, 0, 3, 7, 9, 12]
    assert not result.b


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["2147483648"], ["-2147483649"], ["   "], ["1", ""], ["1-"]],
)
def test_invalid_input_reports_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""
import pytest

from pushswap.cli import main
from pushswap.parsing import build_elements
from pushswap.stacks import Stacks


def _apply(values, lines):
    stacks = Stacks(build_elements(values))
    for line in lines:
        stacks.apply(line)
    return stacks


def test_no_arguments_returns_one_silently(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_two_reversed_prints_swap(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_single_string_argument_is_split(capsys):
    assert main(["3 1 5 2 4 9 7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    stacks = _apply([3, 1, 5, 2, 4, 9, 7], lines)
    assert [e.value for e in stacks.a] == [1, 2, 3, 4, 5, 7, 9]
    assert len(stacks.b) == 0


def test_separate_arguments_are_sorted(capsys):
    values = [42, -7, 0, 19, -100, 3, 8, 77, 12, -1, 5]
    assert main([str(v) for v in values]) == 0
    stacks = _apply(values, capsys.readouterr().out.splitlines())
    assert [e.value for e in stacks.a] == sorted(values)


@pytest.mark.parametrize(
    "args",
    [
        ["1", "a"],
        ["1", "1"],
        [""],
        [" 1 2"],
        ["2147483648"],
        ["-2147483649", "3"],
        ["-0"],
        ["1", "+"],
    ],
)
def test_invalid_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""
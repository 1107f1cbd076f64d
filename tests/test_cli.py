import itertools

import pytest

from pushswap.checker import check
from pushswap.cli import main


def _run(capsys, args):
    code = main(args)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_no_arguments_prints_nothing(capsys):
    code, out, err = _run(capsys, [])
    assert (code, out, err) == (0, "", "")


def test_single_number_needs_no_moves(capsys):
    code, out, _ = _run(capsys, ["42"])
    assert code == 0
    assert out == ""


def test_already_sorted_needs_no_moves(capsys):
    code, out, _ = _run(capsys, ["1", "2", "3"])
    assert code == 0
    assert out == ""


def test_three_descending_worked_example(capsys):
    code, out, _ = _run(capsys, ["3", "2", "1"])
    assert code == 0
    assert out == "ra\nsa\n"


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3])))
def test_output_is_accepted_by_checker(capsys, perm):
    args = [str(n) for n in perm]
    code, out, _ = _run(capsys, args)
    assert code == 0
    lines = out.splitlines(keepends=True)
    assert check(list(perm), lines) is True


def test_single_argument_is_split_on_spaces(capsys):
    code, out, _ = _run(capsys, ["3 2 1"])
    assert code == 0
    assert check([3, 2, 1], out.splitlines(keepends=True)) is True


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["1", "2x"], ["2147483648"], [""], ["1", "+"]],
)
def test_invalid_input_reports_error(capsys, args):
    code, out, err = _run(capsys, args)
    assert code == 1
    assert out == ""
    assert err == "Error\n"
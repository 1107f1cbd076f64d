"""Verify that a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Optional

from .parsing import InputError, parse_arguments
from .stack import A, B, Stack


class Move(Enum):
    """The eleven instructions of the puzzle."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"


def parse_move(line: str) -> Move:
    """Read one newline-terminated instruction; raise InputError otherwise."""
    if not line.endswith("\n"):
        raise InputError(f"instruction not terminated by a newline: {line!r}")
    try:
        return Move(line[:-1])
    except ValueError:
        raise InputError(f"unknown instruction: {line!r}") from None


def apply_move(a: Stack, b: Stack, move: Move) -> None:
    """Carry out ``move`` on the stacks ``a`` and ``b``."""
    if move in (Move.SA, Move.SS):
        a.swap()
    if move in (Move.SB, Move.SS):
        b.swap()
    if move is Move.PA:
        a.push_from(b)
    if move is Move.PB:
        b.push_from(a)
    if move in (Move.RA, Move.RR):
        a.rotate()
    if move in (Move.RB, Move.RR):
        b.rotate()
    if move in (Move.RRA, Move.RRR):
        a.reverse_rotate()
    if move in (Move.RRB, Move.RRR):
        b.reverse_rotate()


def check(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each instruction line and report whether A ends up in order.

    Raises InputError at the first line that is not a valid instruction.
    """
    a = Stack(A, list(numbers))
    b = Stack(B)
    a.other = b
    b.other = a
    for line in lines:
        apply_move(a, b, parse_move(line))
    return a.is_correct(len(a))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
        correct = check(numbers, sys.stdin)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if correct else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
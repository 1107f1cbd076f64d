"""Turning command-line words into the initial list of numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI = re.compile(r"[\t\n \f\r\v]*([+-]?)([0-9]*)")
_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """The arguments do not describe a valid set of distinct integers."""


def atoi(text: str) -> int:
    """Read a leading integer after optional whitespace and sign; 0 if none."""
    match = _ATOI.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def is_number(text: str | None) -> bool:
    """True when ``text`` is an optionally signed decimal that fits in 32 bits."""
    if text is None or not _NUMBER.fullmatch(text):
        return False
    return INT_MIN <= int(text) <= INT_MAX


def has_repeats(values: Iterable[int]) -> bool:
    """True when any value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse the program arguments into numbers, top of the stack first.

    A single argument is split on spaces; several arguments are taken one
    number each.  Raises InputError on anything invalid or repeated.
    """
    if not args:
        return []
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
        if not words:
            raise InputError("no numbers given")
    else:
        words = list(args)
    for word in words:
        if not is_number(word):
            raise InputError(f"not a valid integer: {word!r}")
    numbers = [atoi(word) for word in words]
    if has_repeats(numbers):
        raise InputError("duplicate numbers")
    return numbers
"""Command that prints the instructions sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .parsing import InputError, parse_arguments
from .sorter import solve


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one instruction per line for the numbers given as arguments.

    Invalid or repeated numbers print ``Error`` on standard error and
    return 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in solve(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Command-line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, is_blank, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers in ``argv``, print one move per line, return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 1 and args[0] and is_blank(args[0]):
        sys.stdout.write("Error\n")
        return 1
    try:
        numbers = parse_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    moves = solve(numbers)
    if moves:
        sys.stdout.write("\n".join(moves) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
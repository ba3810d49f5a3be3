"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_arguments
from .stacks import Operation, StackError, Stacks, is_sorted


def _operation(line: str) -> Operation:
    if not line.endswith("\n"):
        raise StackError(f"unterminated instruction: {line!r}")
    try:
        return Operation(line[:-1])
    except ValueError:
        raise StackError(f"unknown instruction: {line!r}") from None


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> Stacks:
    """Apply newline-terminated instructions to stacks built from ``values``.

    Raises :class:`StackError` on an unknown instruction or an impossible move.
    """
    stacks = Stacks(values)
    for line in lines:
        stacks.apply(_operation(line))
    return stacks


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Return True if the instructions leave every value sorted in stack ``a``."""
    stacks = run_instructions(values, lines)
    return not stacks.b and is_sorted(list(stacks.a))


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        values = parse_arguments(args)
        result = check(values, sys.stdin)
    except (InputError, StackError):
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_arguments
from .solver import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report invalid input as ``Error``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for operation in solve(values):
        sys.stdout.write(f"{operation}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
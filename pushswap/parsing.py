"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_BLANK = " \t\n\v\f\r"
_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def is_valid_number(token: str) -> bool:
    """Return True if ``token`` is an optional sign followed by decimal digits.

    Leading spaces are ignored; anything else around the number makes it invalid.
    """
    return _NUMBER.fullmatch(token.lstrip(" ")) is not None


def _tokens(args: Iterable[str]) -> list[str]:
    joined = []
    for arg in args:
        if not arg.strip(_BLANK):
            raise InputError("empty argument")
        joined.append(arg)
    return [token for token in " ".join(joined).split(" ") if token]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse arguments into integers, top of the stack first.

    Arguments may hold several numbers separated by spaces. Raises
    :class:`InputError` for blank arguments, malformed numbers, values
    outside the 32-bit signed range and duplicates.
    """
    values: list[int] = []
    seen: set[int] = set()
    for token in _tokens(args):
        if not is_valid_number(token):
            raise InputError(f"not a number: {token!r}")
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {token!r}")
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values
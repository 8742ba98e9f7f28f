"""Reading the numbers of a push-swap puzzle from command-line arguments."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_number(token: str) -> int:
    """Turn one token into an integer that fits in 32 signed bits.

    A token is an optional sign followed by decimal digits and nothing else.
    A signed zero such as ``-0`` or ``+00`` is refused, as is any value
    outside the 32-bit range.
    """
    if not _NUMBER_PATTERN.fullmatch(token):
        raise InputError()
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    if value == 0 and not token.startswith("0"):
        raise InputError()
    return value


def has_duplicates(values: Iterable[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Read the stack, top first, from the given arguments.

    Arguments are joined with spaces and split on spaces, so one argument may
    hold several numbers. An empty argument, a malformed number or a repeated
    value raises :class:`InputError`. Arguments made only of spaces give no
    numbers.
    """
    if any(arg == "" for arg in args):
        raise InputError()
    words = [word for word in " ".join(args).split(" ") if word]
    values = [parse_number(word) for word in words]
    if has_duplicates(values):
        raise InputError()
    return values
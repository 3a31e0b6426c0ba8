"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_SPACES = frozenset("\t\n\v\f\r ")


class InputError(ValueError):
    """The arguments do not form a valid list of distinct integers."""


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def is_syntax_error(text: str) -> bool:
    """Tell whether ``text`` has anything besides one optional sign and digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return any(ch not in _DIGITS for ch in body)


def parse_int(text: str) -> int:
    """Read a leading integer the way the C ``atoi`` does, without overflow.

    Leading whitespace is skipped, one sign is accepted, and reading stops at
    the first non-digit; no digits at all gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the numbers for stack a, top first.

    A single argument is split on spaces. Raises InputError for anything that
    is not an integer, lies outside the 32-bit signed range, or repeats.
    """
    words = split_words(args[0], " ") if len(args) == 1 else list(args)
    numbers: list[int] = []
    seen: set[int] = set()
    for word in words:
        if is_syntax_error(word):
            raise InputError(f"not an integer: {word!r}")
        number = parse_int(word)
        if not INT_MIN <= number <= INT_MAX:
            raise InputError(f"out of range: {word!r}")
        if number in seen:
            raise InputError(f"duplicate number: {number}")
        seen.add(number)
        numbers.append(number)
    return numbers
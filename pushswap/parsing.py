"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WHITESPACE = " \t\n\v\f\r"
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


class ParseError(ValueError):
    """Raised when the input is not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def is_blank(text: str) -> bool:
    """True if ``text`` holds only spaces and control whitespace (or nothing)."""
    return all(ch in _WHITESPACE for ch in text)


def parse_int(text: str) -> int:
    """Read a signed 32-bit integer from the start of ``text``.

    Leading whitespace and one sign are allowed; reading stops at the first
    non-digit after at least one digit. Out-of-range values raise.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if not rest[:1].isascii() or not rest[:1].isdigit():
        raise ParseError()
    limit = _INT_MIN_MAGNITUDE if negative else _INT_MAX
    value = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if value > limit:
            raise ParseError()
    return -value if negative else value


def check_duplicates(values: Iterable[int]) -> None:
    """Raise ParseError if any value appears twice."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ParseError()
        seen.add(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers to sort.

    A single argument is split on spaces; several arguments are taken one
    number each.
    """
    if not args:
        return []
    if len(args) == 1:
        text = args[0]
        if text and is_blank(text):
            raise ParseError()
        words = split_words(text, " ")
    else:
        words = list(args)
    numbers = []
    for word in words:
        if is_blank(word):
            raise ParseError()
        numbers.append(parse_int(word))
    check_duplicates(numbers)
    return numbers
"""Conversions between integers and their decimal text form."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer out of *text*.

    Leading whitespace is skipped, one optional ``+`` or ``-`` is accepted,
    and ASCII digits are read until the first other character. Text with
    no digits in that position yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal text of *n*, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits
"""Writing characters, strings and numbers to text streams.

Every writer takes an optional *stream*; when it is left out, the text
goes to ``sys.stdout``. :func:`format_printf` builds the text that
:func:`printf` writes, so it can also be used on its own.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from ftkit.conversion import itoa

__all__ = [
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
    "format_printf",
    "printf",
]

_BYTE_MASK = 0xFF
_UINT_MASK = 0xFFFF_FFFF
_INT_SIGN = 0x8000_0000
_ULONG_MASK = 0xFFFF_FFFF_FFFF_FFFF

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character *c*."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write *s* as it is."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write *s* followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of *n*."""
    _target(stream).write(itoa(n))


def _as_int(value: Any, spec: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{spec} needs an integer, got {type(value).__name__}"
        ) from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & _BYTE_MASK)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    return value if isinstance(value, str) else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    if isinstance(value, int):
        address = value & _ULONG_MASK
    else:
        address = id(value)
    if address == 0:
        return _NULL_POINTER
    return f"0x{address:x}"


def _signed(value: Any) -> str:
    number = _as_int(value, "d") & _UINT_MASK
    if number & _INT_SIGN:
        number -= _UINT_MASK + 1
    return str(number)


def _unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return f"{_as_int(value, 'x') & _UINT_MASK:x}"


def _hex_upper(value: Any) -> str:
    return f"{_as_int(value, 'X') & _UINT_MASK:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_argument(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions of *fmt* with *args*.

    Supported conversions are ``%c %s %p %d %i %u %x %X`` and ``%%``.
    Integers are taken as 32-bit values, the way the matching C types
    would hold them. An unknown conversion produces nothing and uses no
    argument; a ``%`` at the very end is dropped. Too few arguments
    raise ``TypeError``; extra arguments are ignored.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_argument(values, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of *fmt* and return the number of characters written."""
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)
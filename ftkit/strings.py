"""Bounded string operations with C-library semantics.

The bounded copies return the new text together with the length that
was attempted, so callers can detect truncation. Searches return an
index into the string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str, name: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of *src*.

    Returns the copied text and ``len(src)``; the copy was truncated when
    the second value is not smaller than *size*. A *size* of 0 copies
    nothing.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* so the result holds at most ``size - 1`` characters.

    Returns the new text and the length it tried to create. When *dst* is
    already *size* characters or longer, it is returned unchanged and the
    reported length is ``size + len(src)``.
    """
    _non_negative(size, "size")
    dst_len = min(len(dst), size)
    if dst_len >= size:
        return dst, dst_len + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strchr(s: str, c: str) -> int | None:
    """Index of the first *c* in *s*.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    _single_char(c, "c")
    if c == _NUL:
        pos = s.find(c)
        return len(s) if pos < 0 else pos
    pos = s.find(c)
    return None if pos < 0 else pos


def strrchr(s: str, c: str) -> int | None:
    """Index of the last *c* in *s*; NUL finds the terminator at ``len(s)``."""
    _single_char(c, "c")
    if c == _NUL:
        return len(s)
    pos = s.rfind(c)
    return None if pos < 0 else pos


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns 0 when they agree, otherwise the difference of the code points
    at the first mismatch, with the end of a string counting as 0.
    """
    _non_negative(n, "n")
    for a, b in zip(s1[:n].ljust(n, _NUL), s2[:n].ljust(n, _NUL)):
        if a == _NUL and b == _NUL:
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of *little* in the first *length* characters of *big*.

    An empty *little* is found at index 0.
    """
    _non_negative(length, "length")
    if not little:
        return 0
    pos = big[:length].find(little)
    return None if pos < 0 else pos


def substr(s: str, start: int, length: int) -> str:
    """Up to *length* characters of *s* from *start*; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character found in *chars*."""
    if not isinstance(chars, str):
        raise TypeError(f"chars must be a str, got {type(chars).__name__}")
    return s.strip(chars)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty words."""
    _single_char(sep, "sep")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each item of *chars*, in place.

    A returned character replaces the item; ``None`` leaves it unchanged.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
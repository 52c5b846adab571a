"""String helpers: integer conversion, splitting, searching and bounded copies."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

from pushswap.libft.chars import is_digit

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(" \f\n\r\t\v")


def atoi(text: str) -> int:
    """Parse a leading, optionally signed decimal integer from ``text``.

    Leading whitespace is skipped and parsing stops at the first non-digit.
    A value above ``INT_MAX`` yields -1 and one below ``INT_MIN`` yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = 10 * result + ord(ch) - ord("0")
        if result * sign > INT_MAX:
            return -1
        if result * sign < INT_MIN:
            return 0
    return result * sign


def itoa(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus when negative."""
    return str(n)


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def find_char(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``; NUL finds the end of the text."""
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def find_last_char(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``; NUL finds the end of the text."""
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference at the first mismatch."""
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def find_substring(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy of ``src`` fitting a buffer of ``size`` (one slot kept for the terminator).

    Returns the copied text and the full length of ``src``.
    """
    return src[: max(size - 1, 0)], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size``.

    Returns the new text and the length the full result would have had.
    When ``dst`` already fills the buffer it is left as is and the length
    reported is ``size + len(src)``.
    """
    if size <= len(dst):
        return dst, size + len(src)
    return dst + src[: size - len(dst) - 1], len(dst) + len(src)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iterate_indexed(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call ``func(index, char)`` for every character.

    A string returned by ``func`` replaces that character; ``None`` keeps it.
    Returns the resulting text.
    """
    chars = list(text)
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return "".join(chars)
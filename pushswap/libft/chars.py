"""Character classification and case conversion on ASCII codes."""

from __future__ import annotations


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def is_integer_literal(text: str) -> bool:
    """Whether ``text`` is an optional sign followed by one or more digits 0-9."""
    if text[:1] in ("-", "+"):
        text = text[1:]
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def is_alnum(c: str | int) -> bool:
    """Whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: str | int) -> bool:
    """Whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_ascii(c: str | int) -> bool:
    """Whether ``c`` lies in 0..127."""
    return 0 <= _code(c) <= 127


def is_digit(c: str | int) -> bool:
    """Whether ``c`` is an ASCII digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c: str | int) -> bool:
    """Whether ``c`` is a printable ASCII character (32..126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII capital; other input is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case a code whose low byte is an ASCII small letter."""
    code = _code(c)
    if ord("a") <= (code & 0xFF) <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code
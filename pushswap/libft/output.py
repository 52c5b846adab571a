"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` as is."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    _target(stream).write(f"{text}\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal form of ``n``."""
    _target(stream).write(str(n))
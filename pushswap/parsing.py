"""Turning command-line arguments into ranked stack elements."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.libft.chars import is_integer_literal
from pushswap.libft.strings import atoi, split
from pushswap.stacks import Element


class InputError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def _parse_token(token: str) -> int:
    if not token or not is_integer_literal(token):
        raise InputError(f"not an integer: {token!r}")
    value = atoi(token)
    # The conversion reports overflow as 0 for negatives and -1 for positives,
    # so "-0" and a literal that overflows are both rejected here.
    if token.startswith("-") and value == 0:
        raise InputError(f"invalid integer: {token!r}")
    if not token.startswith("-") and value == -1:
        raise InputError(f"invalid integer: {token!r}")
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse the program arguments into integers.

    A single argument is split on spaces; it must not be empty or start
    with a space. Several arguments are taken one number each.
    """
    if len(args) == 1:
        text = args[0]
        if not text or text.startswith(" "):
            raise InputError("empty or badly spaced argument")
        tokens = split(text, " ")
    else:
        tokens = list(args)
    return [_parse_token(token) for token in tokens]


def build_elements(values: Iterable[int]) -> list[Element]:
    """Elements carrying each value and its 1-based rank; duplicates are an error."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError("duplicate value")
    ranks = {value: rank for rank, value in enumerate(sorted(values), start=1)}
    return [Element(value, ranks[value]) for value in values]
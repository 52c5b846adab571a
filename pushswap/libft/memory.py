"""Byte-buffer helpers: zeroing, filling, searching, comparing and copying."""

from __future__ import annotations

import sys


def _check_length(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError("length exceeds buffer size")


def zero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_length(n, buffer)
    buffer[:n] = bytes(n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` items of ``size`` bytes each.

    Raises ``OverflowError`` when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size and count > sys.maxsize // size:
        raise OverflowError("requested size is too large")
    return bytearray(count * size)


def find_byte(buffer: bytes | bytearray, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (taken modulo 256) among the first ``n``."""
    _check_length(n, buffer)
    index = bytes(buffer[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Difference of the first mismatching bytes within ``n``; 0 when equal."""
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def copy_bytes(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def move_bytes(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("region exceeds buffer size")
    buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def fill_bytes(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer
"""Three-way comparison functions returning -1, 0 or 1."""

from __future__ import annotations

from typing import Any

_UINT16_MASK = 0xFFFF


def _sign(lhs: Any, rhs: Any) -> int:
    if lhs < rhs:
        return -1
    if lhs > rhs:
        return 1
    return 0


def str_compare(lhs: str, rhs: str) -> int:
    """Compare two strings by code point, like a byte-wise string compare."""
    return _sign(lhs, rhs)


def uint16_compare(lhs: int, rhs: int) -> int:
    """Compare two integers as unsigned 16-bit values (wrapped to 16 bits)."""
    return _sign(lhs & _UINT16_MASK, rhs & _UINT16_MASK)


def identity_compare(lhs: Any, rhs: Any) -> int:
    """Compare two objects by identity; equal only when they are the same object."""
    if lhs is rhs:
        return 0
    return _sign(id(lhs), id(rhs))
"""Conversion of arguments to the integer types named by length modifiers."""

from __future__ import annotations

from enum import Enum


class Length(Enum):
    """Length modifier of a conversion."""

    NONE = ""
    HH = "hh"
    H = "h"
    L = "l"
    LL = "ll"
    J = "j"
    Z = "z"
    T = "t"

    @property
    def bits(self) -> int:
        """Width in bits of the integer type the modifier selects."""
        return _BITS[self]


_BITS = {
    Length.NONE: 32,
    Length.HH: 8,
    Length.H: 16,
    Length.L: 64,
    Length.LL: 64,
    Length.J: 64,
    Length.Z: 64,
    Length.T: 64,
}


def _check(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def signed_value(value: int, length: Length = Length.NONE) -> int:
    """Reduce an argument to the signed type selected by ``length``."""
    return _signed(_check(value), length.bits)


def unsigned_value(value: int, length: Length = Length.NONE) -> int:
    """Reduce an argument to the unsigned type selected by ``length``."""
    return _unsigned(_check(value), length.bits)
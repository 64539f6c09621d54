"""Conversion specifications: flags, field width, precision and length."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .encoding import PrintfError
from .values import Length

FLAG_CHARS = "-0# +"

_TWO_CHAR_LENGTHS = {"hh": Length.HH, "ll": Length.LL}
_ONE_CHAR_LENGTHS = {
    "h": Length.H,
    "l": Length.L,
    "j": Length.J,
    "z": Length.Z,
    "t": Length.T,
}


@dataclass
class FormatSpec:
    """Everything between ``%`` and the conversion character.

    ``precision`` is None when no precision was given.
    """

    minus: bool = False
    zero: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int | None = None
    length: Length = Length.NONE

    @property
    def zero_pad(self) -> bool:
        """Whether the field is padded with zeros rather than spaces."""
        return self.zero and not self.minus and self.precision is None


def _next_int(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise PrintfError("missing argument for '*'") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'*' expects an integer argument, got {type(value).__name__}")
    return value


def _read_digits(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and fmt[pos] in "0123456789":
        pos += 1
    return int(fmt[start:pos]), pos


def _parse_flags(fmt: str, pos: int, spec: FormatSpec) -> int:
    while pos < len(fmt) and fmt[pos] in FLAG_CHARS:
        flag = fmt[pos]
        if flag == "-":
            spec.minus = True
            spec.zero = False
        elif flag == "0":
            if not spec.minus:
                spec.zero = True
        elif flag == "#":
            spec.hash = True
        elif flag == " ":
            if not spec.plus:
                spec.space = True
        else:
            spec.plus = True
            spec.space = False
        pos += 1
    return pos


def _parse_width(fmt: str, pos: int, spec: FormatSpec, args: Iterator[object]) -> int:
    if pos >= len(fmt):
        return pos
    if fmt[pos] == "*":
        width = _next_int(args)
        if width < 0:
            spec.minus = True
            width = -width
        spec.width = width
        return pos + 1
    if fmt[pos].isdigit() and fmt[pos] in "0123456789":
        spec.width, pos = _read_digits(fmt, pos)
    return pos


def _parse_precision(
    fmt: str, pos: int, spec: FormatSpec, args: Iterator[object]
) -> int:
    if pos >= len(fmt) or fmt[pos] != ".":
        spec.precision = None
        return pos
    pos += 1
    if pos < len(fmt) and fmt[pos] == "*":
        precision = _next_int(args)
        spec.precision = precision if precision >= 0 else None
        return pos + 1
    if pos < len(fmt) and fmt[pos] in "0123456789":
        spec.precision, pos = _read_digits(fmt, pos)
        return pos
    spec.precision = 0
    return pos


def _parse_length(fmt: str, pos: int, spec: FormatSpec) -> int:
    # A two-character modifier may be followed by a one-character one,
    # which then takes its place.
    two = _TWO_CHAR_LENGTHS.get(fmt[pos:pos + 2])
    if two is not None:
        spec.length = two
        pos += 2
    one = _ONE_CHAR_LENGTHS.get(fmt[pos:pos + 1])
    if one is not None:
        spec.length = one
        pos += 1
    return pos


def parse_spec(
    fmt: str, pos: int, args: Iterator[object]
) -> tuple[FormatSpec, int]:
    """Parse a conversion specification starting just after its ``%``.

    ``args`` is an iterator over the remaining arguments; a ``*`` width or
    precision consumes one of them. Returns the specification and the
    position of the conversion character.
    """
    spec = FormatSpec()
    pos = _parse_flags(fmt, pos, spec)
    pos = _parse_width(fmt, pos, spec, args)
    pos = _parse_precision(fmt, pos, spec, args)
    pos = _parse_length(fmt, pos, spec)
    return spec, pos
"""Conversion handlers: each turns one argument into the bytes it prints."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from .encoding import (
    NULL_TEXT,
    PrintfError,
    encode_wchar,
    encode_wide_string,
    hex_string,
    to_decimal,
)
from .padding import (
    apply_hash,
    apply_precision,
    apply_precision_int,
    apply_sign,
    apply_width,
)
from .spec import FormatSpec
from .values import Length, signed_value, unsigned_value

CONVERSIONS = "cspdiuxX%"
NIL_TEXT = "(nil)"

_POINTER_MASK = (1 << 64) - 1

# Text is handled internally as latin-1 strings so that every character
# stands for exactly one output byte, as field widths count bytes.
_BYTE_CODEC = "latin-1"


def _to_text(raw: bytes) -> str:
    return raw.decode(_BYTE_CODEC)


def _to_bytes(text: str) -> bytes:
    return text.encode(_BYTE_CODEC)


def _next_arg(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise PrintfError("missing argument for conversion") from None


def _char_byte(value: object) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise TypeError("%c expects a single byte")
        return value[0]
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return ord(value) & 0xFF
    if isinstance(value, int) and not isinstance(value, bool):
        return value & 0xFF
    raise TypeError(f"%c expects a character, got {type(value).__name__}")


def _null_char(spec: FormatSpec) -> bytes:
    padding = b" " * max(spec.width - 1, 0)
    if spec.minus:
        return b"\0" + padding
    return padding + b"\0"


def format_char(spec: FormatSpec, args: Iterator[object]) -> bytes:
    """Format a ``%c`` conversion; with ``l`` the argument is a wide character."""
    value = _next_arg(args)
    if spec.length is Length.L:
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise TypeError(f"%lc expects a character, got {type(value).__name__}")
        text = _to_text(encode_wchar(value))
    else:
        code = _char_byte(value)
        if code == 0:
            return _null_char(spec)
        text = chr(code)
    return _to_bytes(apply_width(text, spec, 1))


def _narrow_string(value: object, spec: FormatSpec) -> bytes:
    if value is None:
        if spec.precision is not None and spec.precision < len(NULL_TEXT):
            return b""
        return NULL_TEXT
    if isinstance(value, str):
        raw = value.encode("utf-8")
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return raw.split(b"\0", 1)[0]


def format_string(spec: FormatSpec, args: Iterator[object]) -> bytes:
    """Format a ``%s`` conversion; with ``l`` the argument is a wide string."""
    value = _next_arg(args)
    if spec.length is Length.L:
        if value is not None and not isinstance(value, (str, list, tuple)):
            raise TypeError(f"%ls expects a wide string, got {type(value).__name__}")
        raw = encode_wide_string(value)
    else:
        raw = _narrow_string(value, spec)
    text = apply_precision(_to_text(raw), spec)
    return _to_bytes(apply_width(text, spec, len(text)))


def _address(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value & _POINTER_MASK
    return id(value) & _POINTER_MASK


def format_pointer(spec: FormatSpec, args: Iterator[object]) -> bytes:
    """Format a ``%p`` conversion.

    Integers are taken as addresses, None as the null pointer and any other
    object by its identity.
    """
    address = _address(_next_arg(args))
    if address == 0:
        text = NIL_TEXT
    else:
        text = "0x" + apply_precision(hex_string(address), spec)
    return _to_bytes(apply_width(text, spec, len(text)))


def format_int(spec: FormatSpec, args: Iterator[object]) -> bytes:
    """Format a ``%d`` or ``%i`` conversion."""
    number = signed_value(_next_arg(args), spec.length)
    text = "" if number == 0 and spec.precision == 0 else to_decimal(abs(number))
    text = apply_precision_int(text, spec)
    text = apply_sign(text, spec, number < 0)
    return _to_bytes(apply_width(text, spec, len(text)))


def format_uint(spec: FormatSpec, args: Iterator[object]) -> bytes:
    """Format a ``%u`` conversion."""
    number = unsigned_value(_next_arg(args), spec.length)
    text = "" if number == 0 and spec.precision == 0 else to_decimal(number)
    text = apply_precision_int(text, spec)
    return _to_bytes(apply_width(text, spec, len(text)))


def format_hex(
    spec: FormatSpec, args: Iterator[object], uppercase: bool = False
) -> bytes:
    """Format a ``%x`` or, with ``uppercase``, a ``%X`` conversion."""
    number = unsigned_value(_next_arg(args), spec.length)
    if number == 0 and spec.precision == 0:
        text = ""
    else:
        text = hex_string(number, uppercase)
    text = apply_precision_int(text, spec)
    if number != 0:
        text = apply_hash(text, spec, uppercase)
    return _to_bytes(apply_width(text, spec, len(text)))


_HANDLERS: dict[str, Callable[[FormatSpec, Iterator[object]], bytes]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_uint,
    "x": lambda spec, args: format_hex(spec, args, False),
    "X": lambda spec, args: format_hex(spec, args, True),
}


def dispatch(specifier: str, spec: FormatSpec, args: Iterator[object]) -> bytes:
    """Format one conversion named by its conversion character.

    An unknown conversion character prints as ``%`` followed by itself;
    an empty one prints nothing.
    """
    if not specifier:
        return b""
    if specifier == "%":
        return b"%"
    handler = _HANDLERS.get(specifier)
    if handler is None:
        return ("%" + specifier).encode("utf-8")
    return handler(spec, args)
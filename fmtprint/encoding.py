"""Number-to-text conversion and UTF-8 encoding of wide characters."""

from __future__ import annotations

from collections.abc import Iterable

DIGITS = "0123456789"
HEXLOW = "0123456789abcdef"
HEXUPP = "0123456789ABCDEF"
OCTAL = "01234567"

UNICODE_MAX = 0x10FFFF
ASCII_MAX = 0x7F
UTF8_2_BYTES_MAX = 0x7FF
UTF8_3_BYTES_MAX = 0xFFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

_MASK_2BYTE = 0xC0
_MASK_3BYTE = 0xE0
_MASK_4BYTE = 0xF0
_MASK_CONT = 0x80
_SIX_BITS = 0x3F

NULL_TEXT = b"(null)"


class PrintfError(Exception):
    """Raised when a value cannot be formatted."""


def _utf8_bytes(code: int) -> bytes:
    if code > UNICODE_MAX or SURROGATE_MIN <= code <= SURROGATE_MAX:
        raise PrintfError(f"invalid wide character: {code:#x}")
    if code <= ASCII_MAX:
        # Negative wide characters keep only their low byte.
        return bytes([code & 0xFF])
    if code <= UTF8_2_BYTES_MAX:
        return bytes([
            _MASK_2BYTE | (code >> 6),
            _MASK_CONT | (code & _SIX_BITS),
        ])
    if code <= UTF8_3_BYTES_MAX:
        return bytes([
            _MASK_3BYTE | (code >> 12),
            _MASK_CONT | ((code >> 6) & _SIX_BITS),
            _MASK_CONT | (code & _SIX_BITS),
        ])
    return bytes([
        _MASK_4BYTE | ((code >> 18) & 0x07),
        _MASK_CONT | ((code >> 12) & _SIX_BITS),
        _MASK_CONT | ((code >> 6) & _SIX_BITS),
        _MASK_CONT | (code & _SIX_BITS),
    ])


def encode_wchar(code: int | str) -> bytes:
    """Encode one wide character as UTF-8.

    A character whose encoding is a NUL byte yields an empty result, as the
    encoded text ends at its first NUL. Surrogates and code points above
    U+10FFFF raise PrintfError.
    """
    if isinstance(code, str):
        if len(code) != 1:
            raise TypeError("expected a single character")
        code = ord(code)
    encoded = _utf8_bytes(code)
    return encoded.split(b"\0", 1)[0]


def encode_wide_string(codes: Iterable[int | str] | str | None) -> bytes:
    """Encode a wide string as UTF-8, stopping at the first NUL character.

    None encodes as ``(null)``.
    """
    if codes is None:
        return NULL_TEXT
    parts = []
    for code in codes:
        value = ord(code) if isinstance(code, str) else code
        if value == 0:
            break
        parts.append(encode_wchar(value))
    return b"".join(parts)


def to_base(number: int, digits: str) -> str:
    """Write a non-negative integer using the given digit alphabet."""
    if number < 0:
        raise ValueError("number must not be negative")
    base = len(digits)
    if base < 2:
        raise ValueError("digit alphabet needs at least two symbols")
    if number == 0:
        return digits[0]
    out = []
    while number:
        number, rem = divmod(number, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def to_decimal(number: int) -> str:
    """Write a non-negative integer in decimal."""
    return to_base(number, DIGITS)


def fill(size: int, char: str) -> str:
    """Return ``size`` copies of ``char``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if len(char) != 1:
        raise ValueError("fill character must be a single character")
    return char * size


def hex_string(number: int, uppercase: bool = False) -> str:
    """Write a non-negative integer in hexadecimal."""
    return to_base(number, HEXUPP if uppercase else HEXLOW)
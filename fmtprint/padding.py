"""Transformations applied to converted text: precision, sign, prefix, width."""

from __future__ import annotations

from .spec import FormatSpec

_SIGN_CHARS = "-+ "


def apply_hash(text: str, spec: FormatSpec, uppercase: bool = False) -> str:
    """Prefix hexadecimal text with ``0x`` or ``0X`` when ``#`` was given."""
    if not spec.hash or text.startswith("0"):
        return text
    return ("0X" if uppercase else "0x") + text


def apply_precision(text: str, spec: FormatSpec) -> str:
    """Truncate text to at most ``precision`` characters."""
    if spec.precision is None:
        return text
    return text[:spec.precision]


def apply_precision_int(text: str, spec: FormatSpec) -> str:
    """Left-pad the digits of a number with zeros up to ``precision``."""
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if spec.precision is None or spec.precision <= len(digits):
        return text
    padded = digits.rjust(spec.precision, "0")
    return "-" + padded if negative else padded


def apply_sign(text: str, spec: FormatSpec, negative: bool) -> str:
    """Prepend ``-``, ``+`` or a space as the number and flags require."""
    if negative:
        return "-" + text
    if spec.plus:
        return "+" + text
    if spec.space:
        return " " + text
    return text


def apply_width(text: str, spec: FormatSpec, content_len: int) -> str:
    """Pad text to the field width.

    ``content_len`` is the length the field counts the text as. With zero
    padding a leading sign stays in front of the zeros.
    """
    if spec.width <= content_len:
        return text
    pad_char = "0" if spec.zero_pad else " "
    padding = spec.width - content_len
    sign = ""
    if spec.zero_pad and text[:1] in _SIGN_CHARS and text:
        sign, text = text[0], text[1:]
        padding = spec.width - len(text) - 1
    padding = max(padding, 0)
    if spec.minus:
        return sign + text + " " * padding
    return sign + pad_char * padding + text
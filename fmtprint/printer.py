"""Rendering of whole format strings and writing them to streams."""

from __future__ import annotations

import io
import sys
from typing import IO, Any

from .handlers import dispatch
from .spec import parse_spec


def render(fmt: str, *args: object) -> bytes:
    """Format ``args`` according to ``fmt`` and return the output bytes.

    The format ends at its first NUL character. Raises PrintfError when an
    argument is missing or cannot be encoded.
    """
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    out = bytearray()
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            out += fmt[pos:].encode("utf-8")
            break
        out += fmt[pos:percent].encode("utf-8")
        spec, pos = parse_spec(fmt, percent + 1, remaining)
        if pos >= len(fmt):
            break
        out += dispatch(fmt[pos], spec, remaining)
        pos += 1
    return bytes(out)


def _write(stream: IO[Any], data: bytes) -> None:
    if isinstance(stream, io.TextIOBase):
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            stream.flush()
            buffer.write(data)
            buffer.flush()
            return
        stream.write(data.decode("utf-8", errors="replace"))
        return
    stream.write(data)


def fprintf(stream: IO[Any], fmt: str, *args: object) -> int:
    """Write the formatted output to ``stream`` and return its byte count."""
    data = render(fmt, *args)
    _write(stream, data)
    return len(data)


def printf(fmt: str, *args: object) -> int:
    """Write the formatted output to standard output and return its byte count."""
    return fprintf(sys.stdout, fmt, *args)
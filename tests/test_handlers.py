import pytest

from fmtprint.encoding import PrintfError
from fmtprint.handlers import (
    dispatch,
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_uint,
)
from fmtprint.spec import FormatSpec
from fmtprint.values import Length, signed_value, unsigned_value


def args(*values):
    return iter(values)


@pytest.mark.parametrize(
    "spec, pyfmt, value",
    [
        (FormatSpec(), "%d", 42),
        (FormatSpec(width=5), "%5d", 42),
        (FormatSpec(minus=True, width=5), "%-5d", 42),
        (FormatSpec(zero=True, width=6), "%06d", -42),
        (FormatSpec(precision=5), "%.5d", -42),
        (FormatSpec(plus=True), "%+d", 7),
        (FormatSpec(plus=True), "%+d", 0),
        (FormatSpec(space=True), "% d", 7),
        (FormatSpec(width=8, precision=4), "%8.4d", 31),
    ],
)
def test_format_int_matches_standard_printf(spec, pyfmt, value):
    assert format_int(spec, args(value)) == (pyfmt % value).encode()


def test_format_int_zero_with_zero_precision_is_empty():
    assert format_int(FormatSpec(precision=0), args(0)) == b""


def test_format_int_applies_length():
    spec = FormatSpec(length=Length.HH)
    assert format_int(spec, args(300)) == str(signed_value(300, Length.HH)).encode()


def test_format_int_rejects_non_integer():
    with pytest.raises(TypeError):
        format_int(FormatSpec(), args("x"))


def test_format_uint_wraps_negative():
    assert format_uint(FormatSpec(), args(-1)) == str(unsigned_value(-1)).encode()


def test_format_uint_precision_and_width():
    spec = FormatSpec(width=7, precision=4)
    assert format_uint(spec, args(12)) == ("%7.4u" % 12).encode()


@pytest.mark.parametrize(
    "spec, pyfmt, upper",
    [
        (FormatSpec(), "%x", False),
        (FormatSpec(), "%X", True),
        (FormatSpec(hash=True), "%#x", False),
        (FormatSpec(hash=True), "%#X", True),
        (FormatSpec(hash=True, width=10), "%#10x", False),
    ],
)
def test_format_hex_matches_standard_printf(spec, pyfmt, upper):
    assert format_hex(spec, args(255), upper) == (pyfmt % 255).encode()


def test_format_hex_hash_skipped_for_zero():
    assert format_hex(FormatSpec(hash=True), args(0)) == b"0"


def test_format_hex_hash_skipped_after_zero_precision_padding():
    spec = FormatSpec(hash=True, precision=5)
    assert format_hex(spec, args(255)) == ("%.5x" % 255).encode()


def test_format_string_width_and_precision():
    assert format_string(FormatSpec(width=5), args("ab")) == ("%5s" % "ab").encode()
    spec = FormatSpec(precision=2)
    assert format_string(spec, args("hello")) == ("%.2s" % "hello").encode()


def test_format_string_null():
    assert format_string(FormatSpec(), args(None)) == b"(null)"
    assert format_string(FormatSpec(precision=3), args(None)) == b""
    assert format_string(FormatSpec(precision=6), args(None)) == b"(null)"


def test_format_wide_string_null_is_truncated():
    spec = FormatSpec(precision=3, length=Length.L)
    assert format_string(spec, args(None)) == b"(null)"[:3]


def test_format_wide_string_encodes_utf8():
    spec = FormatSpec(length=Length.L)
    assert format_string(spec, args("héllo")) == "héllo".encode("utf-8")


def test_format_string_width_counts_bytes():
    result = format_string(FormatSpec(width=6), args("é"))
    assert len(result) == 6
    assert result.endswith("é".encode("utf-8"))


def test_format_char_width():
    assert format_char(FormatSpec(width=3), args("a")) == ("%3c" % "a").encode()
    assert format_char(FormatSpec(), args(ord("z"))) == b"z"


def test_format_null_char_padding_left_and_right():
    right = format_char(FormatSpec(width=3), args(0))
    assert len(right) == 3 and right.endswith(b"\0") and set(right[:-1]) == {32}
    left = format_char(FormatSpec(width=3, minus=True), args(0))
    assert len(left) == 3 and left.startswith(b"\0") and set(left[1:]) == {32}


def test_format_wide_char():
    spec = FormatSpec(length=Length.L)
    assert format_char(spec, args("é")) == "é".encode("utf-8")
    with pytest.raises(PrintfError):
        format_char(spec, args(0xD800))


def test_format_pointer():
    assert format_pointer(FormatSpec(), args(None)) == b"(nil)"
    assert format_pointer(FormatSpec(), args(0)) == b"(nil)"
    value = 0xDEADBEEF
    assert format_pointer(FormatSpec(), args(value)) == ("%#x" % value).encode()


def test_format_pointer_width():
    result = format_pointer(FormatSpec(width=20), args(0x1234))
    assert len(result) == 20
    assert result.strip() == ("%#x" % 0x1234).encode()


def test_dispatch():
    assert dispatch("%", FormatSpec(), args()) == b"%"
    assert dispatch("k", FormatSpec(), args()) == b"%k"
    assert dispatch("", FormatSpec(), args()) == b""
    assert dispatch("d", FormatSpec(width=4), args(9)) == ("%4d" % 9).encode()
    assert dispatch("X", FormatSpec(), args(171)) == ("%X" % 171).encode()


def test_missing_argument_raises():
    with pytest.raises(PrintfError):
        format_int(FormatSpec(), args())
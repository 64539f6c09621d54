# fmtprint

A printf-style formatter that produces bytes. It handles these conversions:

| Conversion | Meaning |
|------------|---------|
| `%c` | one byte, given as an int, a one-character `str` or a one-byte `bytes`. With `l`, a wide character given as a code point or a one-character `str`, written as UTF-8 |
| `%s` | a `str` (written as UTF-8) or `bytes`. `None` prints `(null)`. With `l`, a wide string given as a `str`, list or tuple of code points |
| `%p` | a pointer, written as `0x` and lowercase hex digits. An int is taken as the address, `None` as the null pointer, and any other object by its `id()`. A zero address prints `(nil)` |
| `%d`, `%i` | a signed integer |
| `%u` | an unsigned integer |
| `%x`, `%X` | an unsigned integer in hexadecimal |
| `%%` | a literal percent sign |

It also handles:

- the flags `-`, `0`, `#`, space and `+`;
- a field width and a precision. Each is given either as digits or as `*`, which takes the value from the next argument. A negative `*` width turns on `-`. A negative `*` precision counts as no precision.
- the length modifiers `hh`, `h`, `l`, `ll`, `j`, `z` and `t`. For integer conversions these reduce the argument to 8, 16, 64 or (with no modifier) 32 bits, signed or unsigned, as the conversion requires.

Other behaviour to know about:

- An unknown conversion character is written out as it stands: `%` followed by the character.
- A `%` at the very end of the format prints nothing.
- The format string ends at its first NUL character. A narrow string argument ends at its first NUL byte, and a wide string at its first NUL character.
- Field widths and precisions count bytes of output, not characters.

## Usage

```python
from fmtprint.printer import render, printf, fprintf

data = render("%-5d|%05x|%.3s", 42, 255, "abcdef")
# b"42   |000ff|abc"

count = printf("%+d %#X\n", 7, 255)   # writes "+7 0XFF\n" to stdout, returns 8

import io
buf = io.StringIO()
fprintf(buf, "[%*s]", 6, "hi")       # buf now holds "[    hi]", returns 8
```

- `render(fmt, *args)` returns the formatted output as `bytes`.
- `fprintf(stream, fmt, *args)` writes that output to `stream` and returns the number of bytes written. A binary stream receives the bytes as they are. A text stream with an underlying `buffer`, such as `sys.stdout`, has the bytes written to that buffer. Any other text stream receives the output decoded as UTF-8, with undecodable bytes replaced.
- `printf(fmt, *args)` does the same as `fprintf` on `sys.stdout`.

All three raise `fmtprint.encoding.PrintfError` in these cases:

- an argument is missing;
- a wide character is a surrogate or lies above U+10FFFF.

They raise `TypeError` when an argument has the wrong type for its conversion.

The building blocks can also be used on their own:

- `fmtprint.spec` holds `parse_spec` and `FormatSpec`.
- `fmtprint.padding` holds `apply_width`, `apply_precision`, `apply_precision_int`, `apply_sign` and `apply_hash`.
- `fmtprint.handlers` holds the per-conversion `format_*` functions and `dispatch`.
- `fmtprint.values` holds `Length`, `signed_value` and `unsigned_value`.
- `fmtprint.encoding` holds `encode_wchar`, `encode_wide_string`, `to_base`, `to_decimal`, `hex_string` and `fill`.

## What it does not do

- It has no floating-point conversions (`%f`, `%e`, `%g`, `%a`), no octal `%o` and no `%n`.
- It provides no command-line program. It is a library only.

## Installing for development

```
pip install -e .[test]
pytest
```
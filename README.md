# fmtprint

`fmtprint` formats text in the style of C's `printf`. It supports flags, field width, precision and length modifiers. Floating-point values are expanded to exact decimals, so very large or very small values come out with every digit before rounding is applied.

## Installing

```
pip install .
```

## Formatting

```python
from fmtprint.formatter import sprintf, printf

sprintf("%5d|%-5d|%05d", 42, 42, 42)   # '   42|42   |00042'
sprintf("%#x %#o %X", 255, 8, 255)     # '0xff 010 FF'
sprintf("%.3f", 3.14159)               # '3.142'
sprintf("%10.2s|", "hello")            # '        he|'
sprintf("%p", 4096)                    # '0x1000'

count = printf("%s has %d items\n", "cart", 3)   # writes to stdout, returns the length
```

`sprintf(fmt, *args)` returns the formatted string. `printf(fmt, *args)` writes the same text to standard output and returns its length. The format ends at its first NUL character. An unknown conversion, a `%` at the very end of the format, or a missing argument raises `ValueError`. Arguments that are left over are ignored.

### Conversions

| Conversion | Meaning |
|------------|---------|
| `d`, `i`   | signed decimal integer |
| `o`        | unsigned octal |
| `u`        | unsigned decimal |
| `x`, `X`   | unsigned hexadecimal, lower or upper case |
| `f`        | fixed-point float; `Lf` treats the value as an 80-bit extended float |
| `c`        | single character; integer codes wrap to a byte |
| `s`        | string; `None` prints as `(null)` |
| `p`        | 64-bit address as `0x...` |
| `%`        | a literal percent sign |

The flags are `-`, `+`, space, `#` and `0`. A width or precision of `*` takes its value from the argument list, and a negative `*` width turns on left alignment. The length modifiers `hh`, `h`, `l`, `ll` and `L` reduce integer arguments to 8, 16 or 64 bits, two's complement. With no modifier, integers are reduced to 32 bits.

### Behaviour worth knowing

- For `f`, the default precision is 6. When a digit is dropped at exactly a half, the kept digit rounds to even, except that a 9 is kept as it is.
- For `f`, infinities and NaN are padded with spaces to the width. Under `Lf` they are written bare, as `inf`, `-inf` or `nan`.
- `%c` always pads with spaces; the `0` flag has no effect on it.
- `%%` pads after the sign: with zeros when `0` is given, otherwise with spaces. With the `-` flag, each fill character comes before the sign and is preceded by the marker `lol`.
- Repeating a flag adds its bit value again, so the repeat carries into the next flag.

## Building blocks

The pieces the formatter is built from can be used on their own:

- `fmtprint.spec`: `parse_spec(text, pos, args)` parses one conversion into a frozen `FormatSpec` (`flags`, `width`, `precision`, `length`, `conversion`) using the `Flag` and `Length` enums. `parse_integer` reads a leading decimal integer.
- `fmtprint.integers`: `format_signed`, `format_unsigned` (base 8 or 10), `format_hex`, `format_pointer`, plus `to_signed` and `to_unsigned`.
- `fmtprint.floats`: `format_float`, `format_double`, `format_long_double` and `pad_special`.
- `fmtprint.text`: `format_char`, `format_string` and `format_percent`.
- `fmtprint.digits`: exact decimal digits of binary mantissas (`fraction_digits`, `integer_digits`) and rounding of digit lists (`round_half_even`, `rounding_digit`, `propagate_carry`, `round_to_precision`).

There are also small C-style helpers:

- `fmtprint.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`, `atoi` and `itoa`. The last two wrap values to 32 bits.
- `fmtprint.strings`: `strlen`, `strchr`, `strrchr`, `strstr`, `strnstr`, `strcmp`, `strncmp`, `strequ` and `strnequ`. The search functions return an index or `None`.
- `fmtprint.strtools`: `striter`, `striteri`, `strmap`, `strmapi`, `strsub`, `strjoin`, `strtrim` and `strsplit`.
- `fmtprint.linkedlist`: `ListNode` with byte payloads, and `lstnew`, `lstadd`, `lstdelone`, `lstdel`, `lstiter`, `lstmap`, `lstlen`, `lstrev`, `swaplst` and `swpcntlst`.

## What it does not do

`printf` writes only to standard output. There is no function that formats to another file descriptor or stream; to send the text elsewhere, call `sprintf` and write the result yourself. The package has no helpers for raw byte buffers, and none for in-place copying into or concatenation onto string buffers.

## Running the tests

```
pip install .[test]
pytest
```
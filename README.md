# miniprintf

A deliberately small `printf`. It understands a fixed set of conversions.
It has no flags, widths or precisions. Integers are wrapped to C's fixed-width
integer types before they are formatted.

## Conversions

| Spec | Argument | Output |
|------|----------|--------|
| `%c` | int or one-character str | one character; an int gives the character of its low byte |
| `%s` | any object, or `None` | `str()` of the value up to its first NUL, or `(null)` for `None` |
| `%p` | int address, or `None` | `0x` followed by lowercase hex of the 64-bit address, or `(nil)` for 0 or `None` |
| `%d`, `%i` | int | signed 32-bit decimal |
| `%u` | int | unsigned 32-bit decimal |
| `%x`, `%X` | int | unsigned 32-bit hexadecimal, in lower or upper case |
| `%%` | none | a literal `%` |

Other rules:

- Any other character after `%` is consumed. It produces nothing and uses no argument.
- A lone `%` at the end of the format is dropped.
- The format string ends at its first NUL character.
- Extra arguments are ignored.
- Too few arguments raise `TypeError`.
- Passing a `str` of any length other than one to `%c` raises `ValueError`.

## Usage

```python
from miniprintf.printf import printf, sprintf

text = sprintf("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

count = printf("%u\n", -1)   # writes "4294967295\n" to stdout
# count == 11
```

`sprintf` returns the formatted string. `printf` writes the string to standard
output, flushes it, and returns the number of characters written.

## Single conversions

`miniprintf.conversions` also offers each conversion on its own:

- `char(value)`
- `string(value)`
- `pointer(address)`
- `signed_decimal(value)`
- `unsigned_decimal(value)`
- `hexadecimal(value, uppercase=False)`

```python
from miniprintf import conversions

conversions.signed_decimal(2**31)     # '-2147483648'
conversions.hexadecimal(255, True)    # 'FF'
conversions.pointer(0)                # '(nil)'
```

## Running the tests

```
pip install -e .[test]
pytest
```
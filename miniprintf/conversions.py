"""Rendering of single values for each supported conversion specifier."""

from __future__ import annotations

LOWER_DIGITS = "0123456789abcdef"
UPPER_DIGITS = "0123456789ABCDEF"

_UINT32_MASK = (1 << 32) - 1
_UINT64_MASK = (1 << 64) - 1
_INT32_SIGN = 1 << 31


def _in_base(value: int, digits: str) -> str:
    """Spell a non-negative integer with the given digit alphabet."""
    base = len(digits)
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, remainder = divmod(value, base)
        out.append(digits[remainder])
    return "".join(reversed(out))


def _truncate_at_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def char(value: int | str) -> str:
    """Render ``%c``: one character, taken from the low byte of an integer."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a %c argument must be a single character")
        return value
    return chr(value & 0xFF)


def string(value: object) -> str:
    """Render ``%s``: the text up to its first NUL, or ``(null)`` for None."""
    if value is None:
        return "(null)"
    return _truncate_at_nul(str(value))


def pointer(address: int | None) -> str:
    """Render ``%p``: ``0x`` and lowercase hex digits, or ``(nil)`` for zero."""
    if address is None:
        return "(nil)"
    masked = address & _UINT64_MASK
    if masked == 0:
        return "(nil)"
    return "0x" + _in_base(masked, LOWER_DIGITS)


def signed_decimal(value: int) -> str:
    """Render ``%d``/``%i``: the value as a 32-bit signed decimal integer."""
    wrapped = value & _UINT32_MASK
    if wrapped & _INT32_SIGN:
        wrapped -= 1 << 32
    return str(wrapped)


def unsigned_decimal(value: int) -> str:
    """Render ``%u``: the value as a 32-bit unsigned decimal integer."""
    return str(value & _UINT32_MASK)


def hexadecimal(value: int, uppercase: bool = False) -> str:
    """Render ``%x``/``%X``: the value as 32-bit unsigned hexadecimal."""
    digits = UPPER_DIGITS if uppercase else LOWER_DIGITS
    return _in_base(value & _UINT32_MASK, digits)
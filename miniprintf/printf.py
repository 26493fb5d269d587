"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Callable

from miniprintf import conversions

_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": conversions.char,
    "s": conversions.string,
    "p": conversions.pointer,
    "d": conversions.signed_decimal,
    "i": conversions.signed_decimal,
    "u": conversions.unsigned_decimal,
    "x": lambda value: conversions.hexadecimal(value, False),
    "X": lambda value: conversions.hexadecimal(value, True),
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text.

    Unknown specifiers produce nothing and consume no argument; a lone
    trailing ``%`` is dropped; the format ends at its first NUL character.
    Extra arguments are ignored.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt.split("\0", 1)[0])
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        render = _CONVERSIONS.get(spec)
        if render is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(render(arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
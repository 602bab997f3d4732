"""A small printf-style formatter with a fixed set of conversions.

Supported conversions: ``%c %s %d %i %u %x %X %p %%``. Any other character
after ``%`` produces no output and consumes no argument. A lone ``%`` at the
end of the template is dropped.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


def _to_unsigned(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _to_signed(value: Any) -> int:
    unsigned = _to_unsigned(value)
    return unsigned - (1 << _INT_BITS) if unsigned >> (_INT_BITS - 1) else unsigned


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _signed(value: Any) -> str:
    return str(_to_signed(value))


def _unsigned(value: Any) -> str:
    return str(_to_unsigned(value))


def _hex_lower(value: Any) -> str:
    return format(_to_unsigned(value), "x")


def _hex_upper(value: Any) -> str:
    return format(_to_unsigned(value), "X")


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + format(operator.index(value) & _POINTER_MASK, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def render(template: str, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args`` and return the text."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
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
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(template: str, *args: Any) -> int:
    """Write the rendered template to standard output; return characters written."""
    text = render(template, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
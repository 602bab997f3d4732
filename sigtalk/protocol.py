"""Bit-level wire protocol: each byte travels as eight signals, least significant bit first.

A set bit is carried by SIGUSR1, a clear bit by SIGUSR2, and a message ends
with a zero byte.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does, wrapping to 32 bits.

    Leading whitespace is skipped, one sign is accepted, and parsing stops at
    the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    magnitude = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * magnitude)


def char_bits(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, least significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE))


def message_bits(message: Union[bytes, str]) -> Iterator[int]:
    """Yield every bit of ``message`` followed by the eight bits of the terminating zero."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if b"\0" in data:
        raise ValueError("message must not contain a zero byte")
    return _bits_of(data + b"\0")


def _bits_of(data: bytes) -> Iterator[int]:
    for byte in data:
        yield from char_bits(byte)


class Decoder:
    """Assembles incoming bits, least significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending(self) -> int:
        """Number of bits received for the byte in progress."""
        return self._count

    def feed(self, bit: object) -> Optional[int]:
        """Add one bit; return the finished byte after every eighth bit, else None."""
        if bit:
            self._value |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self.reset()
        return byte

    def reset(self) -> None:
        """Discard any partly received byte."""
        self._value = 0
        self._count = 0
"""RGB colours given as six-digit hexadecimal strings."""

from __future__ import annotations

from dataclasses import dataclass
from string import hexdigits


@dataclass(frozen=True)
class Color:
    """An RGB colour with one byte per channel."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 0xFF:
                raise ValueError("color channel must be in the range 0-255")

    def __bytes__(self) -> bytes:
        return bytes((self.red, self.green, self.blue))

    def __str__(self) -> str:
        return f"{self.red:02X}{self.green:02X}{self.blue:02X}"


def parse_hex(text: str) -> Color:
    """Parse a colour such as ``FF8000``; raise ValueError if it is malformed."""
    if len(text.encode("utf-8")) != 6:
        raise ValueError("color hex must be of length 6")

    digits = text[1:] if text.startswith("+") else text
    if not digits or any(char not in hexdigits for char in digits):
        raise ValueError("could not parse color hex")

    value = int(digits, 16)
    return Color(red=(value >> 16) & 0xFF, green=(value >> 8) & 0xFF, blue=value & 0xFF)
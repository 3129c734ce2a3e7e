"""Byte and normalised RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass

_HEX_DIGITS = "0123456789abcdef"
_RGBA_STRING_LENGTH = 9
_RGB_STRING_LENGTH = 7
_BYTE_MAX = 255


@dataclass(frozen=True)
class FColor:
    """A colour with components from 0.0 to 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


def _hex_byte(high: str, low: str) -> int:
    digits = []
    for char in (high, low):
        value = _HEX_DIGITS.find(char.lower())
        if value < 0 or len(char) != 1:
            raise ValueError(f"{char!r} is not a valid hex char")
        digits.append(value)
    return digits[0] * 16 + digits[1]


@dataclass(frozen=True)
class Color:
    """A colour with byte components from 0 to 255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _BYTE_MAX:
                raise ValueError(f"color component {name} must be an int from 0 to 255, got {value!r}")

    @classmethod
    def from_hex(cls, rgba_hex: int) -> Color:
        """Build from a 32-bit value laid out as 0xRRGGBBAA."""
        if not 0 <= rgba_hex <= 0xFFFFFFFF:
            raise ValueError(f"{rgba_hex!r} is not a 32-bit unsigned value")
        return cls(
            (rgba_hex >> 24) & 0xFF,
            (rgba_hex >> 16) & 0xFF,
            (rgba_hex >> 8) & 0xFF,
            rgba_hex & 0xFF,
        )

    @classmethod
    def from_rgb_string(cls, text: str) -> Color:
        """Parse ``#rrggbb``; alpha is fully opaque."""
        if len(text) != _RGB_STRING_LENGTH:
            raise ValueError(
                f'color string "{text}" is invalid in length. Must be '
                f"{_RGB_STRING_LENGTH} chars long with format #rrggbb"
            )
        return cls(
            _hex_byte(text[1], text[2]),
            _hex_byte(text[3], text[4]),
            _hex_byte(text[5], text[6]),
            _BYTE_MAX,
        )

    @classmethod
    def from_rgba_string(cls, text: str) -> Color:
        """Parse ``#rrggbbaa``."""
        if len(text) != _RGBA_STRING_LENGTH:
            raise ValueError(
                f'color string "{text}" is invalid in length. Must be '
                f"{_RGBA_STRING_LENGTH} chars long with format #rrggbbaa"
            )
        return cls(
            _hex_byte(text[1], text[2]),
            _hex_byte(text[3], text[4]),
            _hex_byte(text[5], text[6]),
            _hex_byte(text[7], text[8]),
        )

    def to_fcolor(self) -> FColor:
        """The same colour with components scaled to 0.0 .. 1.0."""
        return FColor(self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def __str__(self) -> str:
        return f"{{ {self.r}, {self.g}, {self.b}, {self.a} }}"
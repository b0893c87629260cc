"""Colour value type and the default identicon palette.

Colours are immutable: hue rotation hands back a new `Color`, so one palette
can be shared by any number of composers.
"""
import colorsys
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

RGB = Tuple[int, int, int]
ColorLike = Union["Color", int, str]


def _channel8(value: float) -> int:
    return int(max(0.0, min(1.0, value)) * 255 + 0.5)


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float

    @classmethod
    def from_int(cls, value: int) -> "Color":
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"colour out of 24-bit range: {value:#x}")
        return cls(((value >> 16) & 0xFF) / 255, ((value >> 8) & 0xFF) / 255, (value & 0xFF) / 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse '#rrggbb' or 'rrggbb'."""
        digits = value.strip().lstrip("#")
        if len(digits) != 6 or any(ch not in "0123456789abcdefABCDEF" for ch in digits):
            raise ValueError(f"invalid hex colour: {value!r}")
        return cls.from_int(int(digits, 16))

    @classmethod
    def coerce(cls, value: ColorLike) -> "Color":
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        raise TypeError(f"cannot use {type(value).__name__} as a colour")

    @property
    def rgb8(self) -> RGB:
        return _channel8(self.red), _channel8(self.green), _channel8(self.blue)

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.rgb8)

    def shift_hue(self, amount: float) -> "Color":
        """Rotate the hue by `amount` turns (1.0 == 360 degrees).

        Lightness and saturation are kept, so the channel max and min are too.
        """
        h, l, s = colorsys.rgb_to_hls(self.red, self.green, self.blue)
        r, g, b = colorsys.hls_to_rgb((h + amount) % 1.0, l, s)
        return Color(r, g, b)


DEFAULT_PALETTE: Tuple[Color, ...] = tuple(Color.from_int(c) for c in (
    0x01888c,  # teal
    0xfc7500,  # bright orange
    0x034f5d,  # dark teal
    0xE784BA,  # light pink
    0x81C8B6,  # bright green
    0xc7144c,  # raspberry
    0xf3c100,  # goldenrod
    0x1598f2,  # lightning blue
    0x2465e1,  # sail blue
    0xf19e02,  # gold
))


def to_palette(colors: Iterable[ColorLike]) -> Tuple[Color, ...]:
    return tuple(Color.coerce(c) for c in colors)


def parse_palette(text: str) -> Tuple[Color, ...]:
    """Parse a comma separated list of hex colours, e.g. '#01888c,#fc7500'."""
    return tuple(Color.from_hex(part) for part in text.split(",") if part.strip())

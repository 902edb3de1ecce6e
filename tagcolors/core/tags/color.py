"""Tag color values and their JSON decoding.

Accepted JSON shapes for a single tag color:
- null -> no color (used to cancel a color set by another source)
- a predefined color name, e.g. "red" (case-insensitive)
- a hex string "#rrggbb" (case-insensitive)
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

# RGB color is (0..255, 0..255, 0..255)
ColorRGB = Tuple[int, int, int]


class TagColorDecodeError(ValueError):
    pass


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    PREDEFINED: ClassVar[dict[str, ColorRGB]] = {
        "red": (255, 0, 0),
        "orange": (255, 128, 0),
        "yellow": (255, 255, 0),
        "green": (0, 255, 0),
        "blue": (0, 0, 255),
        "purple": (128, 0, 255),
    }

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not isinstance(channel, int) or isinstance(channel, bool) or not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel!r}")

    @property
    def rgb(self) -> ColorRGB:
        return (self.red, self.green, self.blue)

    @property
    def name(self) -> Optional[str]:
        """Return the predefined name for this color, if it has one."""
        for name, rgb in self.PREDEFINED.items():
            if rgb == self.rgb:
                return name
        return None

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @classmethod
    def named(cls, name: str) -> "Color":
        try:
            return cls(*cls.PREDEFINED[name.lower()])
        except KeyError:
            raise TagColorDecodeError(f"Unknown color name: {name!r}") from None

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Parse a "#rrggbb" string. Shorthand "#rgb" is not accepted."""
        s = hex_color
        if len(s) != 7 or s[0] != "#" or not all(c in string.hexdigits for c in s[1:]):
            raise TagColorDecodeError(f"Invalid hex color: {hex_color!r}")
        return cls(int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))

    @classmethod
    def decode(cls, value: object) -> Optional["Color"]:
        """Decode one JSON value into a color.

        Returns None for JSON null. Raises TagColorDecodeError for any value
        that matches none of the accepted shapes.
        """

        if value is None:
            return None
        if not isinstance(value, str):
            raise TagColorDecodeError(f"Expected a color string or null, got {type(value).__name__}")
        if value.startswith("#"):
            return cls.from_hex(value)
        return cls.named(value)


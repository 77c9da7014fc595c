from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Sequence

from coloraide import Color as CAColor

Hex = str

FALLBACK_HEX: Hex = "FFFFFF"

FIT_SRGB = {"method": "raytrace"}  # consistent gamut-fit for parsed CSS colours


def _unit(x: float) -> float:
    return 0.0 if x <= 0.0 else 1.0 if x >= 1.0 else x


def _u8(x: float) -> int:
    # truncates, so 0.5 -> 7F
    return int(_unit(float(x)) * 255.0)


@dataclass(frozen=True)
class Color:
    """Immutable RGBA colour, every channel in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0
    monochrome: bool = field(default=False, compare=False, repr=False)

    @classmethod
    def white_level(cls, white: float, alpha: float = 1.0) -> "Color":
        return cls(white, white, white, alpha, monochrome=True)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """
        Parse the leading hex digits of `text` into an opaque colour.

        Behaves like a hex scanner: whitespace is skipped, '#' or '0x' is
        accepted as a prefix, and reading stops at the first non-hex
        character. Only the low 24 bits are used. No digits at all -> black.
        """
        raw = (text or "").lstrip()
        if raw.startswith("#"):
            raw = raw[1:]
        elif raw[:2] in ("0x", "0X"):
            raw = raw[2:]
        digits = ""
        for ch in raw:
            if ch not in string.hexdigits:
                break
            digits += ch
        value = int(digits, 16) if digits else 0
        return cls(
            ((value & 0xFF0000) >> 16) / 255.0,
            ((value & 0x00FF00) >> 8) / 255.0,
            (value & 0x0000FF) / 255.0,
        )

    @property
    def components(self) -> tuple[float, ...]:
        if self.monochrome:
            return (self.red, self.alpha)
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def hex_string(self) -> Hex:
        return hex_from_components(self.components)

    def brightened(self, amount: float) -> "Color":
        """Add `amount` to red, green and blue, clamped to [0, 1]."""
        return Color(
            _unit(self.red + amount),
            _unit(self.green + amount),
            _unit(self.blue + amount),
            self.alpha,
        )


def hex_from_components(components: Sequence[float]) -> Hex:
    """
    RRGGBB (uppercase, no '#') from a colour's component list.

    4 components are read as RGBA, 2 as white + alpha; anything else
    yields FALLBACK_HEX.
    """
    if len(components) == 4:
        r, g, b = components[0], components[1], components[2]
    elif len(components) == 2:
        r = g = b = components[0]
    else:
        return FALLBACK_HEX
    return f"{_u8(r):02X}{_u8(g):02X}{_u8(b):02X}"


def parse_color(text: str) -> Color:
    """Any CSS colour string -> Color, gamut-fitted to sRGB."""
    try:
        ca = CAColor((text or "").strip())
    except ValueError as exc:
        raise ValueError(f"invalid color: {text!r}") from exc
    srgb = ca.convert("srgb").fit("srgb", **FIT_SRGB).normalize()
    r, g, b = (_unit(float(v)) for v in srgb.coords())
    return Color(r, g, b, _unit(float(srgb.get("alpha"))))


# UIKit system colour values
WHITE = Color.white_level(1.0)
RED = Color(1.0, 0.0, 0.0)
ORANGE = Color(1.0, 0.5, 0.0)
YELLOW = Color(1.0, 1.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
CYAN = Color(0.0, 1.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0)
PURPLE = Color(0.5, 0.0, 0.5)
BROWN = Color(0.6, 0.4, 0.2)
GRAY = Color.white_level(0.5)
BLACK = Color.white_level(0.0)


__all__ = [
    "Color",
    "FALLBACK_HEX",
    "hex_from_components",
    "parse_color",
    "WHITE",
    "RED",
    "ORANGE",
    "YELLOW",
    "GREEN",
    "CYAN",
    "BLUE",
    "PURPLE",
    "BROWN",
    "GRAY",
    "BLACK",
]

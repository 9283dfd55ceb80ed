# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Color -- the canonical color value.

A Color holds exactly four numbers: the red, green and blue channel
fractions and the alpha, each in [0, 1]. Everything else (HSL, HSV, HWB,
CMYK, 8-bit channels, text) is derived from them on demand.

Write rules:
- Channel fractions (r, g, b) are wrapped into [0, 1] by modulo. Values
  already inside [0, 1] are kept as-is.
- 8-bit channels (red, green, blue) are clamped to [0, 255], then scaled.
- Alpha is clamped to [0, 1].

No setter raises. The only error is InvalidColorSyntax, raised when text
cannot be parsed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from polychrome.convert.colorspace import HUE_MAX, RGB_MAX, unit_to_byte, wrap_unit
from polychrome.schema.models import (
    CMYKView,
    HSLView,
    HSVView,
    HWBView,
    PERCENT,
    RGBView,
)

if TYPE_CHECKING:
    from polychrome.syntax.formatter import ColorFormat


class InvalidColorSyntax(ValueError):
    """Raised when text matches none of the recognized color syntaxes."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid color syntax: {text!r}")
        self.text = text


class Color:
    """
    A mutable sRGB color with alpha.

    Construct from text, or start from opaque black::

        c = Color("hsl(120, 100%, 50%)")
        c.hsl.hue = 240
        c.to_string("hex")      # '#0000ff'

    Attributes:
        r, g, b: Channel fractions in [0, 1]
        alpha: Opacity in [0, 1]
        rgb, hsl, hsv, hwb, cmyk: Coordinate views bound to this color
    """

    __slots__ = ("_r", "_g", "_b", "_a")

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: Optional[str] = None, *, alpha: Optional[float] = None) -> None:
        self._r = 0.0
        self._g = 0.0
        self._b = 0.0
        self._a = 1.0
        if text is not None:
            parsed = type(self).parse(text)
            self._r, self._g, self._b, self._a = parsed.rgba
        if alpha is not None:
            self.alpha = alpha

    # -------------------------------------------------------------------------
    # Channel fractions
    # -------------------------------------------------------------------------

    @property
    def r(self) -> float:
        return self._r

    @r.setter
    def r(self, value: float) -> None:
        self._r = float(wrap_unit(value))

    @property
    def g(self) -> float:
        return self._g

    @g.setter
    def g(self, value: float) -> None:
        self._g = float(wrap_unit(value))

    @property
    def b(self) -> float:
        return self._b

    @b.setter
    def b(self, value: float) -> None:
        self._b = float(wrap_unit(value))

    # -------------------------------------------------------------------------
    # 8-bit channels
    # -------------------------------------------------------------------------

    @property
    def red(self) -> int:
        return int(unit_to_byte(self._r))

    @red.setter
    def red(self, value: float) -> None:
        self._r = float(np.clip(value, 0.0, RGB_MAX)) / RGB_MAX

    @property
    def green(self) -> int:
        return int(unit_to_byte(self._g))

    @green.setter
    def green(self, value: float) -> None:
        self._g = float(np.clip(value, 0.0, RGB_MAX)) / RGB_MAX

    @property
    def blue(self) -> int:
        return int(unit_to_byte(self._b))

    @blue.setter
    def blue(self, value: float) -> None:
        self._b = float(np.clip(value, 0.0, RGB_MAX)) / RGB_MAX

    # -------------------------------------------------------------------------
    # Alpha
    # -------------------------------------------------------------------------

    @property
    def alpha(self) -> float:
        return self._a

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._a = float(np.clip(value, 0.0, 1.0))

    a = alpha

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        """The canonical (r, g, b, a) tuple."""
        return self._r, self._g, self._b, self._a

    # -------------------------------------------------------------------------
    # Coordinate views
    # -------------------------------------------------------------------------

    @property
    def rgb(self) -> RGBView:
        return RGBView(self)

    @property
    def hsl(self) -> HSLView:
        return HSLView(self)

    @property
    def hsv(self) -> HSVView:
        return HSVView(self)

    @property
    def hwb(self) -> HWBView:
        return HWBView(self)

    @property
    def cmyk(self) -> CMYKView:
        return CMYKView(self)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Color:
        """
        Parse color text into a new Color.

        Raises:
            InvalidColorSyntax: If no recognized syntax matches.
        """
        from polychrome.syntax.grammar import parse
        return parse(text)

    @staticmethod
    def is_valid(text: str) -> bool:
        """True if text matches a recognized syntax. Never raises."""
        from polychrome.syntax.grammar import is_valid
        return is_valid(text)

    @classmethod
    def from_rgb(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> Color:
        """Build a color from 8-bit channels."""
        color = cls()
        color.red = red
        color.green = green
        color.blue = blue
        color.alpha = alpha
        return color

    @classmethod
    def from_hsl(
        cls,
        hue: float,
        saturation: float,
        lightness: float,
        alpha: float = 1.0,
    ) -> Color:
        """Build a color from hue in degrees and percent saturation/lightness."""
        color = cls()
        color.hsl.set(hue / HUE_MAX, saturation / PERCENT, lightness / PERCENT)
        color.alpha = alpha
        return color

    def copy(self) -> Color:
        """Return an independent color with the same canonical value."""
        other = type(self)()
        other._r, other._g, other._b, other._a = self.rgba
        return other

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_string(
        self,
        format: Union[str, ColorFormat] = "rgb",
        alpha: Optional[bool] = None,
        *,
        precision: int = 2,
    ) -> str:
        """
        Render as color text.

        Args:
            format: "rgb", "hex", "hsl", "hwb" or "cmyk" (or a ColorFormat)
            alpha: Include the alpha field. Defaults to alpha != 1.
            precision: Decimal places kept for fractional numbers
        """
        from polychrome.syntax.formatter import to_string
        return to_string(self, format, alpha, precision=precision)

    def to_dict(self) -> dict:
        """Serialize the canonical value to a dictionary."""
        return {"r": self._r, "g": self._g, "b": self._b, "a": self._a}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary. Alpha defaults to 1."""
        color = cls()
        color.rgb.set(data["r"], data["g"], data["b"])
        color.alpha = data.get("a", 1.0)
        return color

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the canonical value to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgba == other.rgba

    def __repr__(self) -> str:
        return f"Color(r={self._r!r}, g={self._g!r}, b={self._b!r}, a={self._a!r})"

    def __str__(self) -> str:
        return self.to_string()


# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Coordinate views over a Color.

A view is a thin accessor bound to one Color. It holds no numeric state:
every read recomputes from the color's channel fractions and every write
converts the full coordinate tuple back to RGB.

Each model has normalized fields in [0, 1] and "human" fields that are
linear rescalings of them:
- hue in degrees (normalized * 360)
- saturation, lightness, whiteness, blackness, value and inks in percent
  (normalized * 100)
- red, green, blue as 8-bit integers (round(normalized * 255))

Single-field writes read the sibling fields first, so setting HSL hue keeps
the current saturation and lightness. A sibling that reads as NaN or
infinite (HSV saturation at black, CMYK inks at k == 1) is written as 0,
so the stored channels always stay finite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from polychrome.convert.colorspace import (
    HUE_MAX,
    cmyk_to_rgb,
    finite_or_zero,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
    wrap_unit,
)

if TYPE_CHECKING:
    from polychrome.schema.color import Color


PERCENT = 100.0


class _View:
    """Shared plumbing for all coordinate views."""

    __slots__ = ("_color",)

    def __init__(self, color: Color) -> None:
        self._color = color

    def _channels(self) -> NDArray[np.float64]:
        c = self._color
        return np.array([c.r, c.g, c.b], dtype=np.float64)

    def _write(self, rgb: NDArray[np.float64]) -> None:
        # Float noise must not push a saturated channel past 1 and wrap it
        r, g, b = np.clip(finite_or_zero(rgb), 0.0, 1.0)
        self._color.r = float(r)
        self._color.g = float(g)
        self._color.b = float(b)

    def values(self) -> tuple[float, ...]:
        raise NotImplementedError

    def to_dict(self) -> dict:
        raise NotImplementedError

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"


class RGBView(_View):
    """Red, green, blue as fractions (r, g, b) or 8-bit integers."""

    __slots__ = ()

    @property
    def r(self) -> float:
        return self._color.r

    @r.setter
    def r(self, value: float) -> None:
        self._color.r = value

    @property
    def g(self) -> float:
        return self._color.g

    @g.setter
    def g(self, value: float) -> None:
        self._color.g = value

    @property
    def b(self) -> float:
        return self._color.b

    @b.setter
    def b(self, value: float) -> None:
        self._color.b = value

    @property
    def red(self) -> int:
        return self._color.red

    @red.setter
    def red(self, value: float) -> None:
        self._color.red = value

    @property
    def green(self) -> int:
        return self._color.green

    @green.setter
    def green(self, value: float) -> None:
        self._color.green = value

    @property
    def blue(self) -> int:
        return self._color.blue

    @blue.setter
    def blue(self, value: float) -> None:
        self._color.blue = value

    def set(self, r: float, g: float, b: float) -> None:
        """Write all three channel fractions."""
        self._color.r = r
        self._color.g = g
        self._color.b = b

    def values(self) -> tuple[float, float, float]:
        return self.r, self.g, self.b

    def to_dict(self) -> dict:
        return {"red": self.red, "green": self.green, "blue": self.blue}


class HSLView(_View):
    """Hue, saturation, lightness."""

    __slots__ = ()

    def values(self) -> tuple[float, float, float]:
        h, s, l = rgb_to_hsl(self._channels())
        return float(h), float(s), float(l)

    def set(self, h: float, s: float, l: float) -> None:
        """Write a full HSL triple; h is a fraction of a turn."""
        self._write(hsl_to_rgb(finite_or_zero([h, s, l])))

    @property
    def h(self) -> float:
        return self.values()[0]

    @h.setter
    def h(self, value: float) -> None:
        _, s, l = self.values()
        self.set(value, s, l)

    @property
    def s(self) -> float:
        return self.values()[1]

    @s.setter
    def s(self, value: float) -> None:
        h, _, l = self.values()
        self.set(h, value, l)

    @property
    def l(self) -> float:
        return self.values()[2]

    @l.setter
    def l(self, value: float) -> None:
        h, s, _ = self.values()
        self.set(h, s, value)

    @property
    def hue(self) -> float:
        return self.h * HUE_MAX

    @hue.setter
    def hue(self, value: float) -> None:
        self.h = value / HUE_MAX

    @property
    def saturation(self) -> float:
        return self.s * PERCENT

    @saturation.setter
    def saturation(self, value: float) -> None:
        self.s = value / PERCENT

    @property
    def lightness(self) -> float:
        return self.l * PERCENT

    @lightness.setter
    def lightness(self, value: float) -> None:
        self.l = value / PERCENT

    def to_dict(self) -> dict:
        return {
            "hue": self.hue,
            "saturation": self.saturation,
            "lightness": self.lightness,
        }


class HSVView(_View):
    """
    Hue, saturation, value.

    Saturation reads as NaN for black because max(r, g, b) is 0. Writes
    treat it as 0, so raising the value of black gives a gray.
    """

    __slots__ = ()

    def values(self) -> tuple[float, float, float]:
        h, s, v = rgb_to_hsv(self._channels())
        return float(h), float(s), float(v)

    def set(self, h: float, s: float, v: float) -> None:
        """Write a full HSV triple; h is a fraction of a turn."""
        self._write(hsv_to_rgb(finite_or_zero([h, s, v])))

    @property
    def h(self) -> float:
        return self.values()[0]

    @h.setter
    def h(self, value: float) -> None:
        _, s, v = self.values()
        self.set(value, s, v)

    @property
    def s(self) -> float:
        return self.values()[1]

    @s.setter
    def s(self, value: float) -> None:
        h, _, v = self.values()
        self.set(h, value, v)

    @property
    def v(self) -> float:
        return self.values()[2]

    @v.setter
    def v(self, value: float) -> None:
        h, s, _ = self.values()
        self.set(h, s, value)

    @property
    def hue(self) -> float:
        return self.h * HUE_MAX

    @hue.setter
    def hue(self, value: float) -> None:
        self.h = value / HUE_MAX

    @property
    def saturation(self) -> float:
        return self.s * PERCENT

    @saturation.setter
    def saturation(self, value: float) -> None:
        self.s = value / PERCENT

    @property
    def value(self) -> float:
        return self.v * PERCENT

    @value.setter
    def value(self, value: float) -> None:
        self.v = value / PERCENT

    def to_dict(self) -> dict:
        return {
            "hue": self.hue,
            "saturation": self.saturation,
            "value": self.value,
        }


class HWBView(_View):
    """Hue, whiteness, blackness."""

    __slots__ = ()

    def values(self) -> tuple[float, float, float]:
        h, w, b = rgb_to_hwb(self._channels())
        return float(h), float(w), float(b)

    def set(self, h: float, w: float, b: float) -> None:
        """Write a full HWB triple; h is a fraction of a turn."""
        self._write(hwb_to_rgb(finite_or_zero([h, w, b])))

    @property
    def h(self) -> float:
        return self.values()[0]

    @h.setter
    def h(self, value: float) -> None:
        _, w, b = self.values()
        self.set(value, w, b)

    @property
    def w(self) -> float:
        return self.values()[1]

    @w.setter
    def w(self, value: float) -> None:
        h, _, b = self.values()
        self.set(h, value, b)

    @property
    def b(self) -> float:
        return self.values()[2]

    @b.setter
    def b(self, value: float) -> None:
        h, w, _ = self.values()
        self.set(h, w, value)

    @property
    def hue(self) -> float:
        return self.h * HUE_MAX

    @hue.setter
    def hue(self, value: float) -> None:
        self.h = value / HUE_MAX

    @property
    def whiteness(self) -> float:
        return self.w * PERCENT

    @whiteness.setter
    def whiteness(self, value: float) -> None:
        self.w = value / PERCENT

    @property
    def blackness(self) -> float:
        return self.b * PERCENT

    @blackness.setter
    def blackness(self, value: float) -> None:
        self.b = value / PERCENT

    def to_dict(self) -> dict:
        return {
            "hue": self.hue,
            "whiteness": self.whiteness,
            "blackness": self.blackness,
        }


class CMYKView(_View):
    """
    Cyan, magenta, yellow, key.

    The key reads as max(r, g, b). Writing one ink recomputes only its
    channel against the current key. Writing the key recomputes all three
    channels from the current inks, so reading k back returns the new
    max(r, g, b) rather than the value written.

    With a channel at 1 the inks read as NaN or inf. Writing the key then
    treats them as 0.
    """

    __slots__ = ()

    def values(self) -> tuple[float, float, float, float]:
        c, m, y, k = rgb_to_cmyk(self._channels())
        return float(c), float(m), float(y), float(k)

    def set(self, c: float, m: float, y: float, k: float) -> None:
        """Write all four inks at once against the given key."""
        c, m, y, k = finite_or_zero([c, m, y, k])
        k = float(wrap_unit(k))
        self._write(cmyk_to_rgb(np.array([c, m, y, k], dtype=np.float64)))

    def _channel(self, ink: float) -> float:
        k = self.k
        r, _, _ = cmyk_to_rgb(finite_or_zero([ink, 0.0, 0.0, k]))
        return float(np.clip(r, 0.0, 1.0))

    @property
    def c(self) -> float:
        return self.values()[0]

    @c.setter
    def c(self, value: float) -> None:
        self._color.r = self._channel(value)

    @property
    def m(self) -> float:
        return self.values()[1]

    @m.setter
    def m(self, value: float) -> None:
        self._color.g = self._channel(value)

    @property
    def y(self) -> float:
        return self.values()[2]

    @y.setter
    def y(self, value: float) -> None:
        self._color.b = self._channel(value)

    @property
    def k(self) -> float:
        return self.values()[3]

    @k.setter
    def k(self, value: float) -> None:
        c, m, y, _ = self.values()
        self.set(c, m, y, value)

    @property
    def cyan(self) -> float:
        return self.c * PERCENT

    @cyan.setter
    def cyan(self, value: float) -> None:
        self.c = value / PERCENT

    @property
    def magenta(self) -> float:
        return self.m * PERCENT

    @magenta.setter
    def magenta(self, value: float) -> None:
        self.m = value / PERCENT

    @property
    def yellow(self) -> float:
        return self.y * PERCENT

    @yellow.setter
    def yellow(self, value: float) -> None:
        self.y = value / PERCENT

    @property
    def black(self) -> float:
        return self.k * PERCENT

    @black.setter
    def black(self, value: float) -> None:
        self.k = value / PERCENT

    def to_dict(self) -> dict:
        return {
            "cyan": self.cyan,
            "magenta": self.magenta,
            "yellow": self.yellow,
            "black": self.black,
        }

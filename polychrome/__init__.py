# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Polychrome -- One color, five coordinate models.

A Color holds a single canonical sRGB value with alpha. It can be read and
written through RGB, HSL, HSV, HWB and CMYK, parsed from common color text
and formatted back out.

Quick start::

    from polychrome import Color, parse

    c = parse("hsl(120, 100%, 50%)")
    c.to_string("rgb")    # 'rgb(0, 255, 0)'
    c.hsl.hue = 240
    c.to_string("hex")    # '#0000ff'
"""

from __future__ import annotations

__version__ = "1.0.0"

from polychrome.schema import (
    CMYKView,
    Color,
    HSLView,
    HSVView,
    HWBView,
    InvalidColorSyntax,
    RGBView,
)
from polychrome.syntax import ColorFormat, css_rgb, is_valid, parse

__all__ = [
    # Core API
    "Color",
    "parse",
    "is_valid",
    "InvalidColorSyntax",
    "ColorFormat",
    "css_rgb",
    # Views (commonly needed for type hints)
    "RGBView",
    "HSLView",
    "HSVView",
    "HWBView",
    "CMYKView",
    # Version
    "__version__",
]

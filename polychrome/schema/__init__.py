# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
The canonical color value and its coordinate views.

Color is the only stateful type. Views are bound accessors that read and
write through to it; they hold no numbers of their own.
"""

from polychrome.schema.color import Color, InvalidColorSyntax
from polychrome.schema.models import (
    CMYKView,
    HSLView,
    HSVView,
    HWBView,
    RGBView,
)

__all__ = [
    # Canonical value
    "Color",
    "InvalidColorSyntax",
    # Coordinate views
    "RGBView",
    "HSLView",
    "HSVView",
    "HWBView",
    "CMYKView",
]

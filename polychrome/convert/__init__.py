# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""Coordinate model conversions over sRGB channel fractions."""

from polychrome.convert.colorspace import (
    HUE_MAX,
    RGB_MAX,
    cmyk_to_rgb,
    finite_or_zero,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hue,
    rgb_to_hwb,
    unit_to_byte,
    wrap_unit,
)

__all__ = [
    "HUE_MAX",
    "RGB_MAX",
    "cmyk_to_rgb",
    "finite_or_zero",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "hwb_to_rgb",
    "rgb_to_cmyk",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "rgb_to_hue",
    "rgb_to_hwb",
    "unit_to_byte",
    "wrap_unit",
]

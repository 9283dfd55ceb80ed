# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Coordinate model conversions.

Every color is stored as sRGB channel fractions in [0, 1]. This module holds
the math that projects those fractions onto the other coordinate models
(HSL, HSV, HWB, CMYK) and back.

Conventions:
- All functions accept arrays of shape (..., 3), or (..., 4) for CMYK.
  Scalar callers pass a single 3-vector.
- Normalized hue is a fraction of a full turn in [0, 1). rgb_to_hue is the
  one exception and returns degrees in [0, 360).
- Degenerate inputs are not special-cased beyond what each model defines.
  HSV saturation at black and CMYK channels at k == 1 come out as NaN/inf.

All conversions are pure NumPy.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


RGB_MAX = 255.0
HUE_MAX = 360.0
HUE_SECTOR = 60.0


# =============================================================================
# Channel helpers
# =============================================================================


def wrap_unit(values: ArrayLike) -> NDArray[np.float64]:
    """
    Wrap values into [0, 1] by floating modulo.

    Values already inside [0, 1] are returned unchanged, so a fully
    saturated channel (1.0) stays 1.0 instead of wrapping to 0.
    """
    values = np.asarray(values, dtype=np.float64)
    inside = (values >= 0.0) & (values <= 1.0)
    return np.where(inside, values, np.mod(values, 1.0))


def unit_to_byte(values: ArrayLike) -> NDArray[np.int64]:
    """
    Scale fractions [0, 1] to 8-bit integers [0, 255].

    Rounds half up, matching CSS serialization of 8-bit channels.
    """
    values = np.asarray(values, dtype=np.float64)
    scaled = np.floor(np.clip(values, 0.0, 1.0) * RGB_MAX + 0.5)
    return scaled.astype(np.int64)


def finite_or_zero(values: ArrayLike) -> NDArray[np.float64]:
    """Replace NaN and infinities with 0, leaving finite values unchanged."""
    values = np.asarray(values, dtype=np.float64)
    return np.where(np.isfinite(values), values, 0.0)


def _split(arr: NDArray[np.float64]) -> tuple[NDArray[np.float64], ...]:
    return tuple(arr[..., i] for i in range(arr.shape[-1]))


# =============================================================================
# RGB → coordinate models
# =============================================================================


def rgb_to_hue(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Hue angle shared by the HSL, HSV and HWB models.

    Args:
        rgb: Array of shape (..., 3) with channel fractions

    Returns:
        Array of shape (...) with hue in degrees [0, 360).
        0 for achromatic colors (zero chroma).
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    r, g, b = _split(rgb)
    mx = rgb.max(axis=-1)
    mn = rgb.min(axis=-1)
    delta = mx - mn

    with np.errstate(divide="ignore", invalid="ignore"):
        from_r = np.mod((g - b) / delta, 6.0)
        from_g = (b - r) / delta + 2.0
        from_b = (r - g) / delta + 4.0

    sector = np.select(
        [delta == 0, r == mx, g == mx],
        [np.zeros_like(delta), from_r, from_g],
        default=from_b,
    )
    hue = sector * HUE_SECTOR
    hue = np.where(hue < 0.0, hue + HUE_MAX, hue)
    # np.mod of a tiny negative lands on the upper bound
    return np.where(hue >= HUE_MAX, hue - HUE_MAX, hue)


def rgb_to_hsl(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert channel fractions to HSL.

    Returns:
        Array of shape (..., 3) with (h, s, l), all in [0, 1].
        Saturation is 0 when chroma is 0.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    mx = rgb.max(axis=-1)
    mn = rgb.min(axis=-1)
    delta = mx - mn

    lightness = (mx + mn) / 2.0
    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(
            delta == 0,
            0.0,
            delta / (1.0 - np.abs(2.0 * lightness - 1.0)),
        )
    hue = rgb_to_hue(rgb) / HUE_MAX
    return np.stack([hue, saturation, lightness], axis=-1)


def rgb_to_hsv(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert channel fractions to HSV.

    Saturation is delta / max and is NaN for black (max == 0).

    Returns:
        Array of shape (..., 3) with (h, s, v)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    mx = rgb.max(axis=-1)
    mn = rgb.min(axis=-1)
    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = (mx - mn) / mx
    hue = rgb_to_hue(rgb) / HUE_MAX
    return np.stack([hue, saturation, mx], axis=-1)


def rgb_to_hwb(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert channel fractions to HWB.

    Returns:
        Array of shape (..., 3) with (h, w, b): whiteness is min(r, g, b),
        blackness is 1 - max(r, g, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    hue = rgb_to_hue(rgb) / HUE_MAX
    return np.stack([hue, rgb.min(axis=-1), 1.0 - rgb.max(axis=-1)], axis=-1)


def rgb_to_cmyk(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert channel fractions to CMYK.

    The key is k = max(r, g, b), not the print convention 1 - max. Each
    ink is (1 - channel - k) / (1 - k), undefined when k == 1.

    Returns:
        Array of shape (..., 4) with (c, m, y, k)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    k = rgb.max(axis=-1, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        inks = (1.0 - wrap_unit(rgb) - k) / (1.0 - k)
    return np.concatenate([inks, k], axis=-1)


# =============================================================================
# Coordinate models → RGB
# =============================================================================


def hsl_to_rgb(hsl: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSL to channel fractions.

    Hue is normalized into [0, 360) degrees first, so any real hue is
    accepted. Output is chosen by the 60-degree sector the hue falls in.

    Args:
        hsl: Array of shape (..., 3) with (h, s, l); h as a fraction of a turn

    Returns:
        Array of shape (..., 3) with (r, g, b)
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h, s, l = _split(hsl)
    h = np.mod(h * HUE_MAX, HUE_MAX)

    c = (1.0 - np.abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - np.abs(np.mod(h / HUE_SECTOR, 2.0) - 1.0))
    m = l - c / 2.0
    zero = np.zeros_like(c)

    sector = np.minimum(np.floor(h / HUE_SECTOR), 5.0)
    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [c, x, zero, zero, x, c])
    g = np.select(conditions, [x, c, c, x, zero, zero])
    b = np.select(conditions, [zero, zero, x, c, c, x])

    return np.stack([r, g, b], axis=-1) + np.expand_dims(m, -1)


def hwb_to_rgb(hwb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HWB to channel fractions.

    When w + b >= 1 the result is the gray w / (w + b) regardless of hue.
    Otherwise the fully saturated hue is mixed down:
    channel * (1 - w - b) + w.

    Args:
        hwb: Array of shape (..., 3) with (h, w, b)

    Returns:
        Array of shape (..., 3) with (r, g, b)
    """
    hwb = np.asarray(hwb, dtype=np.float64)
    h, w, b = _split(hwb)
    total = w + b

    pure = hsl_to_rgb(np.stack([h, np.ones_like(h), np.full_like(h, 0.5)], axis=-1))
    mixed = pure * np.expand_dims(1.0 - total, -1) + np.expand_dims(w, -1)

    with np.errstate(divide="ignore", invalid="ignore"):
        gray = np.expand_dims(w / total, -1)

    return np.where(np.expand_dims(total >= 1.0, -1), gray, mixed)


def hsv_to_rgb(hsv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSV to channel fractions using the hexagon sector table.

    Args:
        hsv: Array of shape (..., 3) with (h, s, v); h as a fraction of a turn

    Returns:
        Array of shape (..., 3) with (r, g, b)
    """
    hsv = np.asarray(hsv, dtype=np.float64)
    h, s, v = _split(hsv)

    i = np.floor(h * 6.0)
    f = h * 6.0 - i
    p = v * (1.0 - s)
    q = v * (1.0 - f * s)
    t = v * (1.0 - (1.0 - f) * s)

    sector = np.mod(i, 6.0)
    conditions = [sector == n for n in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    return np.stack([r, g, b], axis=-1)


def cmyk_to_rgb(cmyk: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CMYK to channel fractions.

    Inverse of rgb_to_cmyk: channel = 1 - ink * (1 - k) - k, with each
    ink wrapped into [0, 1].

    Args:
        cmyk: Array of shape (..., 4) with (c, m, y, k)

    Returns:
        Array of shape (..., 3) with (r, g, b)
    """
    cmyk = np.asarray(cmyk, dtype=np.float64)
    inks = wrap_unit(cmyk[..., :3])
    k = cmyk[..., 3:4]
    return 1.0 - inks * (1.0 - k) - k

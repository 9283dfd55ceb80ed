# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Color text formatter.

Renders a Color in one of five syntaxes. Each output is accepted back by
the grammar in polychrome.syntax.grammar. CMYK inks are clipped to
[0%, 100%] and inks that read as NaN or inf (any channel at 1) render as
0%, so red comes out as device-cmyk(0% 0% 0% 100%).

Examples::

    rgb(255, 0, 0)                  rgba(255, 0, 0, 0.5)
    #ff0000                         #ff000080
    hsl(0deg, 100%, 50%)            hsla(0deg, 100%, 50%, 0.5)
    hwb(0deg, 0%, 0%)               hwba(0deg, 0%, 0%, 0.5)
    device-cmyk(0% 0% 0% 100%)      device-cmyk(0% 0% 0% 100% / 0.5)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from polychrome.convert.colorspace import finite_or_zero, unit_to_byte
from polychrome.schema.models import PERCENT

if TYPE_CHECKING:
    from polychrome.schema.color import Color

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 2


class ColorFormat(Enum):
    """Output syntax for a Color."""

    RGB = "rgb"
    HEX = "hex"
    HSL = "hsl"
    HWB = "hwb"
    CMYK = "cmyk"


def _resolve(format: Union[str, ColorFormat]) -> ColorFormat:
    if isinstance(format, ColorFormat):
        return format
    try:
        return ColorFormat(str(format).lower())
    except ValueError:
        logger.debug("[Formatter] Unknown format %r, using rgb", format)
        return ColorFormat.RGB


def _num(value: float, precision: int) -> str:
    """Shortest decimal text for value rounded to precision places."""
    # + 0.0 turns -0.0 into 0.0
    rounded = round(float(value), precision) + 0.0
    return np.format_float_positional(rounded, precision=precision, trim="-")


def to_string(
    color: Color,
    format: Union[str, ColorFormat] = ColorFormat.RGB,
    alpha: Optional[bool] = None,
    *,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """
    Render a Color as text.

    Args:
        color: The color to render.
        format: Output syntax. Unknown names fall back to rgb.
        alpha: Include the alpha field. Defaults to color.alpha != 1.
        precision: Decimal places kept for hue, percentages and alpha.

    Returns:
        Color text in the requested syntax.
    """
    fmt = _resolve(format)
    if alpha is None:
        alpha = color.alpha != 1
    a = _num(color.alpha, precision)

    if fmt == ColorFormat.HEX:
        return _to_hex(color, alpha)
    elif fmt == ColorFormat.HSL:
        hsl = color.hsl
        body = (
            f"{_num(hsl.hue, precision)}deg, "
            f"{_num(hsl.saturation, precision)}%, "
            f"{_num(hsl.lightness, precision)}%"
        )
        return f"hsla({body}, {a})" if alpha else f"hsl({body})"
    elif fmt == ColorFormat.HWB:
        hwb = color.hwb
        body = (
            f"{_num(hwb.hue, precision)}deg, "
            f"{_num(hwb.whiteness, precision)}%, "
            f"{_num(hwb.blackness, precision)}%"
        )
        return f"hwba({body}, {a})" if alpha else f"hwb({body})"
    elif fmt == ColorFormat.CMYK:
        # Undefined inks (a channel at 1) render as 0%, negative ones clip to 0%
        inks = np.clip(finite_or_zero(list(color.cmyk.to_dict().values())), 0.0, PERCENT)
        body = " ".join(f"{_num(v, precision)}%" for v in inks)
        return f"device-cmyk({body} / {a})" if alpha else f"device-cmyk({body})"
    else:
        body = f"{color.red}, {color.green}, {color.blue}"
        return f"rgba({body}, {a})" if alpha else f"rgb({body})"


def _to_hex(color: Color, alpha: bool) -> str:
    channels = [color.r, color.g, color.b]
    if alpha:
        channels.append(color.alpha)
    return "#" + "".join(f"{int(byte):02x}" for byte in unit_to_byte(channels))


def css_rgb(*channels: Union[float, Sequence[float]], precision: int = DEFAULT_PRECISION) -> str:
    """
    Build rgb()/rgba() text straight from numbers.

    Accepts one of:
    - gray
    - gray, alpha
    - r, g, b
    - r, g, b, a
    - a single sequence holding any of the above

    Missing channels count as 0. Anything past four values is ignored.

    Example::

        css_rgb(128)              # 'rgb(128, 128, 128)'
        css_rgb(0, 0.5)           # 'rgba(0, 0, 0, 0.5)'
        css_rgb([255, 0, 0, 1])   # 'rgba(255, 0, 0, 1)'
    """
    if len(channels) == 1 and isinstance(channels[0], Sequence):
        channels = tuple(channels[0])
    values = list(channels[:4])

    if len(values) == 0:
        values = [0, 0, 0]
    elif len(values) == 1:
        values = values * 3
    elif len(values) == 2:
        values = [values[0]] * 3 + [values[1]]

    body = ", ".join(_num(v, precision) for v in values)
    return f"rgb({body})" if len(values) == 3 else f"rgba({body})"

# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Color text grammar.

Recognized syntaxes, tried in this order (first match wins):

1. Hex: optional '#', then 3/4 digits (one per channel, duplicated as in
   CSS, so 'f00' is 'ff0000') or 6/8 digits (two per channel). The
   optional last group is alpha; without it the color is opaque.
2. rgb()/rgba(): three channels, each an integer 0-255 or a percentage
   0-100%, separated by commas or spaces, then an optional alpha.
3. hsl()/hsla(): an angle (bare degrees, or suffixed deg/grad/rad/turn),
   saturation and lightness, then an optional alpha.
4. hwb()/hwba(): an angle, whiteness and blackness, then an optional alpha.
5. device-cmyk(): four inks c, m, y, k, then an optional alpha.

Outside rgb() channels, every number is either a percentage (divided by
100) or a bare fraction. Optional alpha follows a ',' or '/'.

The syntaxes are disjoint by shape, so the order never decides between two
matches of well-formed input.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Optional

from polychrome.convert.colorspace import HUE_MAX, RGB_MAX
from polychrome.schema.color import Color, InvalidColorSyntax
from polychrome.schema.models import PERCENT

logger = logging.getLogger(__name__)


# =============================================================================
# Pattern fragments
# =============================================================================

_NUM = r"(?:\d*\.)?\d+"

# 0-255 integer, leading zeros allowed
_BYTE = r"0*(2(?:5[0-5]|[0-4]\d)|1?\d{1,2})"

# 0-100 percentage
_PERCENT_100 = r"0*(100(?:\.0+)?|\d{0,2}\.\d+|\d{1,2})%"

# Groups: (byte, percent)
_CHANNEL = rf"(?:{_BYTE}|{_PERCENT_100})"

# Groups: (percent, bare)
_VALUE = rf"0*(?:({_NUM})%|({_NUM}))"

# Groups: (number, unit)
_ANGLE = rf"(-?{_NUM})(deg|grad|rad|turn)?"

_SEP = r"\s*[,\s]\s*"
_ALPHA = rf"(?:\s*[,/]\s*{_VALUE})?"


HEX_SHORT_RE = re.compile(
    r"#?([0-9a-f])([0-9a-f])([0-9a-f])([0-9a-f])?",
    re.IGNORECASE,
)

HEX_LONG_RE = re.compile(
    r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})?",
    re.IGNORECASE,
)

RGB_RE = re.compile(
    rf"rgba?\(\s*{_CHANNEL}{_SEP}{_CHANNEL}{_SEP}{_CHANNEL}{_ALPHA}\s*\)",
    re.IGNORECASE,
)

HSL_RE = re.compile(
    rf"hsla?\(\s*{_ANGLE}{_SEP}{_VALUE}{_SEP}{_VALUE}{_ALPHA}\s*\)",
    re.IGNORECASE,
)

HWB_RE = re.compile(
    rf"hwba?\(\s*{_ANGLE}{_SEP}{_VALUE}{_SEP}{_VALUE}{_ALPHA}\s*\)",
    re.IGNORECASE,
)

CMYK_RE = re.compile(
    rf"device-cmyk\(\s*{_VALUE}{_SEP}{_VALUE}{_SEP}{_VALUE}{_SEP}{_VALUE}{_ALPHA}\s*\)",
    re.IGNORECASE,
)

# Degrees per unit
ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


# =============================================================================
# Field helpers
# =============================================================================


def _value(percent: Optional[str], bare: Optional[str]) -> float:
    """A percentage divided by 100, or a bare fraction."""
    if percent is not None:
        return float(percent) / PERCENT
    return float(bare)


def _channel(byte: Optional[str], percent: Optional[str]) -> float:
    """An rgb() channel as a fraction."""
    if byte is not None:
        return int(byte) / RGB_MAX
    return float(percent) / PERCENT


def _angle(number: str, unit: Optional[str]) -> float:
    """An angle in degrees."""
    return float(number) * ANGLE_UNITS[(unit or "deg").lower()]


def _apply_alpha(color: Color, percent: Optional[str], bare: Optional[str]) -> None:
    if percent is None and bare is None:
        return
    color.alpha = _value(percent, bare)


# =============================================================================
# Rules
# =============================================================================


def _apply_hex_short(color: Color, match: re.Match) -> None:
    r, g, b, a = match.groups()
    color.red = int(r * 2, 16)
    color.green = int(g * 2, 16)
    color.blue = int(b * 2, 16)
    if a is not None:
        color.alpha = int(a * 2, 16) / RGB_MAX


def _apply_hex_long(color: Color, match: re.Match) -> None:
    r, g, b, a = match.groups()
    color.red = int(r, 16)
    color.green = int(g, 16)
    color.blue = int(b, 16)
    if a is not None:
        color.alpha = int(a, 16) / RGB_MAX


def _apply_rgb(color: Color, match: re.Match) -> None:
    groups = match.groups()
    color.rgb.set(
        _channel(groups[0], groups[1]),
        _channel(groups[2], groups[3]),
        _channel(groups[4], groups[5]),
    )
    _apply_alpha(color, groups[6], groups[7])


def _apply_hsl(color: Color, match: re.Match) -> None:
    groups = match.groups()
    hue = _angle(groups[0], groups[1])
    color.hsl.set(
        hue / HUE_MAX,
        _value(groups[2], groups[3]),
        _value(groups[4], groups[5]),
    )
    _apply_alpha(color, groups[6], groups[7])


def _apply_hwb(color: Color, match: re.Match) -> None:
    groups = match.groups()
    hue = _angle(groups[0], groups[1])
    color.hwb.set(
        hue / HUE_MAX,
        _value(groups[2], groups[3]),
        _value(groups[4], groups[5]),
    )
    _apply_alpha(color, groups[6], groups[7])


def _apply_cmyk(color: Color, match: re.Match) -> None:
    groups = match.groups()
    color.cmyk.set(
        _value(groups[0], groups[1]),
        _value(groups[2], groups[3]),
        _value(groups[4], groups[5]),
        _value(groups[6], groups[7]),
    )
    _apply_alpha(color, groups[8], groups[9])


@dataclass(frozen=True, slots=True)
class _Rule:
    """One recognized syntax: its pattern and how a match updates a color."""

    name: str
    pattern: re.Pattern
    apply: Callable[[Color, re.Match], None]


RULES: tuple[_Rule, ...] = (
    _Rule("hex", HEX_SHORT_RE, _apply_hex_short),
    _Rule("hex", HEX_LONG_RE, _apply_hex_long),
    _Rule("rgb", RGB_RE, _apply_rgb),
    _Rule("hsl", HSL_RE, _apply_hsl),
    _Rule("hwb", HWB_RE, _apply_hwb),
    _Rule("cmyk", CMYK_RE, _apply_cmyk),
)


def _match(text: str) -> Optional[tuple[_Rule, re.Match]]:
    for rule in RULES:
        match = rule.pattern.fullmatch(text)
        if match is not None:
            return rule, match
    return None


# =============================================================================
# Public API
# =============================================================================


def parse(text: str) -> Color:
    """
    Parse color text into a new Color.

    Leading and trailing whitespace is ignored.

    Args:
        text: Color text in any recognized syntax

    Returns:
        A new Color. Nothing is constructed when parsing fails.

    Raises:
        InvalidColorSyntax: If no syntax matches.
    """
    stripped = text.strip()
    found = _match(stripped)
    if found is None:
        logger.debug("[Grammar] No syntax matched %r", text)
        raise InvalidColorSyntax(text)

    rule, match = found
    color = Color()
    rule.apply(color, match)
    logger.debug("[Grammar] Parsed %r as %s", stripped, rule.name)
    return color


def is_valid(text: str) -> bool:
    """True if text matches a recognized syntax. Never raises, never parses."""
    if not isinstance(text, str):
        return False
    return _match(text.strip()) is not None

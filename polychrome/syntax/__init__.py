# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""
Color text: parsing and formatting.

The grammar turns text into a Color; the formatter turns a Color back into
text. Every formatter output is accepted by the grammar.
"""

from polychrome.syntax.formatter import ColorFormat, css_rgb, to_string
from polychrome.syntax.grammar import is_valid, parse

__all__ = [
    "parse",
    "is_valid",
    "to_string",
    "css_rgb",
    "ColorFormat",
]

# Copyright (c) 2026 Polychrome
# SPDX-License-Identifier: MIT

"""Tests for the canonical Color value and its coordinate views."""

import json
import math

import pytest

from polychrome import Color, InvalidColorSyntax


def _color(r, g, b, a=1.0):
    return Color.from_dict({"r": r, "g": g, "b": b, "a": a})


class TestCanonicalStore:

    def test_default_is_opaque_black(self):
        assert Color().rgba == (0.0, 0.0, 0.0, 1.0)

    @pytest.mark.parametrize("value, expected", [
        (-0.5, 0.0),
        (1.7, 1.0),
        (0.25, 0.25),
    ])
    def test_alpha_is_clamped(self, value, expected):
        c = Color()
        c.alpha = value
        assert c.alpha == expected
        assert c.a == expected

    @pytest.mark.parametrize("value, expected", [
        (1.0, 1.0),
        (1.25, 0.25),
        (-0.25, 0.75),
        (0.5, 0.5),
    ])
    def test_fraction_write_wraps(self, value, expected):
        c = Color()
        c.r = value
        assert c.r == pytest.approx(expected)

    @pytest.mark.parametrize("value, expected", [
        (300, 255),
        (-5, 0),
        (128, 128),
    ])
    def test_byte_write_clamps(self, value, expected):
        c = Color()
        c.red = value
        assert c.red == expected

    def test_byte_write_scales(self):
        c = Color()
        c.green = 51
        assert c.g == pytest.approx(0.2)

    def test_constructor_parses_text(self):
        assert Color("#ff0000").rgba == (1.0, 0.0, 0.0, 1.0)

    def test_constructor_alpha_override(self):
        assert Color("#ff0000", alpha=0.5).alpha == 0.5

    def test_constructor_rejects_bad_text(self):
        with pytest.raises(InvalidColorSyntax) as exc_info:
            Color("not a color")
        assert exc_info.value.text == "not a color"

    def test_invalid_syntax_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid color syntax"):
            Color.parse("rgb(")


class TestConstructionHelpers:

    def test_from_rgb(self):
        c = Color.from_rgb(255, 128, 0, alpha=0.5)
        assert (c.red, c.green, c.blue) == (255, 128, 0)
        assert c.alpha == 0.5

    def test_from_hsl(self):
        c = Color.from_hsl(120, 100, 50)
        assert (c.red, c.green, c.blue) == (0, 255, 0)

    def test_copy_is_independent(self):
        c = Color("#336699")
        other = c.copy()
        assert other == c
        other.red = 0
        assert other != c
        assert c.red == 0x33

    def test_dict_roundtrip(self):
        c = _color(0.1, 0.2, 0.3, 0.4)
        assert Color.from_dict(c.to_dict()) == c

    def test_from_dict_alpha_defaults_to_opaque(self):
        assert Color.from_dict({"r": 0.0, "g": 0.0, "b": 0.0}).alpha == 1.0

    def test_to_json(self):
        data = json.loads(_color(1.0, 0.5, 0.0).to_json())
        assert data == {"r": 1.0, "g": 0.5, "b": 0.0, "a": 1.0}

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Color())

    def test_repr(self):
        assert repr(Color()) == "Color(r=0.0, g=0.0, b=0.0, a=1.0)"

    def test_str_is_rgb(self):
        assert str(Color("#00ff00")) == "rgb(0, 255, 0)"


class TestRGBView:

    def test_reads_through(self):
        c = _color(1.0, 0.5, 0.0)
        assert c.rgb.values() == (1.0, 0.5, 0.0)
        assert c.rgb.to_dict() == {"red": 255, "green": 128, "blue": 0}

    def test_writes_through(self):
        c = Color()
        c.rgb.blue = 255
        c.rgb.r = 0.5
        assert c.rgba == (0.5, 0.0, 1.0, 1.0)

    def test_view_holds_no_state(self):
        c = Color()
        view = c.hsl
        c.red = 255
        assert view.saturation == pytest.approx(100.0)


class TestHSLView:

    def test_reads_red(self):
        h, s, l = Color("#ff0000").hsl.values()
        assert (h, s, l) == pytest.approx((0.0, 1.0, 0.5))

    def test_human_fields_match_normalized(self):
        hsl = Color("#3366cc").hsl
        assert hsl.hue == pytest.approx(hsl.h * 360)
        assert hsl.saturation == pytest.approx(hsl.s * 100)
        assert hsl.lightness == pytest.approx(hsl.l * 100)

    def test_hue_write_negative_wraps(self):
        c = Color("#ff0000")
        c.hsl.hue = -30
        assert c.hsl.hue == pytest.approx(330.0)

    def test_hue_write_multiple_turns_wraps(self):
        c = Color("#ff0000")
        c.hsl.hue = 720
        assert c.hsl.hue == pytest.approx(0.0, abs=1e-9)

    def test_hue_write_keeps_saturation_and_lightness(self):
        c = Color("hsl(0, 50%, 40%)")
        c.hsl.hue = 200
        assert c.hsl.hue == pytest.approx(200.0)
        assert c.hsl.saturation == pytest.approx(50.0)
        assert c.hsl.lightness == pytest.approx(40.0)

    def test_desaturate(self):
        c = Color("hsl(0, 100%, 50%)")
        c.hsl.saturation = 0
        assert c.rgb.values() == pytest.approx((0.5, 0.5, 0.5))

    def test_lightness_write(self):
        c = Color("#ff0000")
        c.hsl.lightness = 100
        assert (c.red, c.green, c.blue) == (255, 255, 255)

    def test_gray_saturation_is_zero(self):
        assert Color("#808080").hsl.s == 0.0

    def test_preserves_alpha(self):
        c = Color("rgba(255, 0, 0, 0.5)")
        c.hsl.hue = 120
        assert c.alpha == 0.5


class TestHSVView:

    def test_reads_red(self):
        assert Color("#ff0000").hsv.values() == pytest.approx((0.0, 1.0, 1.0))

    def test_value_write(self):
        c = Color("#ff0000")
        c.hsv.v = 0.5
        assert c.rgb.values() == pytest.approx((0.5, 0.0, 0.0))
        assert c.red == 128

    def test_human_fields(self):
        c = Color("#ff0000")
        c.hsv.hue = 240
        assert c.hsv.to_dict() == pytest.approx({"hue": 240.0, "saturation": 100.0, "value": 100.0})
        assert (c.red, c.green, c.blue) == (0, 0, 255)

    def test_black_saturation_is_nan(self):
        assert math.isnan(Color().hsv.s)

    def test_value_write_on_black_gives_gray(self):
        c = Color()
        c.hsv.value = 50
        assert c.rgb.values() == pytest.approx((0.5, 0.5, 0.5))
        assert str(c) == "rgb(128, 128, 128)"
        assert c.to_string("hex") == "#808080"

    @pytest.mark.parametrize("field", ["h", "v"])
    def test_sibling_writes_on_black_stay_finite(self, field):
        c = Color()
        setattr(c.hsv, field, 0.25)
        assert all(math.isfinite(x) and 0.0 <= x <= 1.0 for x in c.rgba)

    def test_nan_write_stays_finite(self):
        c = Color("#ff0000")
        c.hsv.v = float("nan")
        assert all(math.isfinite(x) for x in c.rgba)


class TestHWBView:

    def test_reads_red(self):
        assert Color("#ff0000").hwb.values() == pytest.approx((0.0, 0.0, 0.0))

    def test_whiteness_write(self):
        c = Color("#ff0000")
        c.hwb.whiteness = 50
        assert c.rgb.values() == pytest.approx((1.0, 0.5, 0.5))

    def test_gray_collapse(self):
        c = Color("#ff0000")
        c.hwb.whiteness = 50
        c.hwb.blackness = 50
        assert c.rgb.values() == pytest.approx((0.5, 0.5, 0.5))

    def test_blackness_reads_one_minus_max(self):
        assert Color.from_rgb(0, 51, 0).hwb.blackness == pytest.approx(80.0)


class TestCMYKView:

    def test_reads_inks(self):
        assert _color(0.5, 0.25, 0.0).cmyk.values() == pytest.approx((0.0, 0.5, 1.0, 0.5))

    def test_human_fields(self):
        assert _color(0.5, 0.25, 0.0).cmyk.to_dict() == pytest.approx(
            {"cyan": 0.0, "magenta": 50.0, "yellow": 100.0, "black": 50.0}
        )

    def test_ink_write_updates_one_channel(self):
        c = _color(0.5, 0.25, 0.0)
        c.cmyk.m = 0.0
        assert c.rgb.values() == pytest.approx((0.5, 0.5, 0.0))

    def test_key_write_recomputes_all_channels(self):
        c = _color(0.5, 0.25, 0.0)
        c.cmyk.black = 20
        assert c.rgb.values() == pytest.approx((0.8, 0.4, 0.0))

    def test_set_all_inks(self):
        c = Color()
        c.cmyk.set(0.0, 1.0, 1.0, 0.0)
        assert c.rgb.values() == (1.0, 0.0, 0.0)

    def test_full_channel_inks_are_undefined(self):
        c, m, y, k = Color("#ff0000").cmyk.values()
        assert k == 1.0
        assert not any(math.isfinite(ink) for ink in (c, m, y))

    def test_key_write_with_full_channel(self):
        c = Color("#ff0000")
        c.cmyk.black = 50
        assert all(math.isfinite(x) and 0.0 <= x <= 1.0 for x in c.rgba)
        assert c.rgb.values() == pytest.approx((0.5, 0.5, 0.5))

    def test_ink_write_with_full_channel(self):
        c = Color("#ff0000")
        c.cmyk.y = 0.5
        assert all(math.isfinite(x) and 0.0 <= x <= 1.0 for x in c.rgba)

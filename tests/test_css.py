# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_css.py — CSS color strings.
"""

import pytest

from tinct_css import (
    from_css_string,
    parse_hex,
    parse_hsl,
    parse_hwb,
    parse_lab,
    parse_lch,
    parse_oklab,
    parse_oklch,
    parse_rgb,
)
from tinct_spaces import RGB


def _channels(rgb):
    return rgb.red, rgb.green, rgb.blue


def test_percent_rgb_is_not_rounded():
    assert from_css_string("rgb(50%, 0%, 0%)") == RGB(127.5, 0.0, 0.0, alpha=None, in_gamut=True)


@pytest.mark.parametrize("css", ["rgb(255, 0, 0)", "rgb(255 0 0)", "RGB( 255 , 0 , 0 )", "rgba(255,0,0,1)"])
def test_rgb_notations(css):
    assert _channels(parse_rgb(css)) == (255.0, 0.0, 0.0)


@pytest.mark.parametrize("css", ["rgba(255, 0, 0, 0.5)", "rgb(255 0 0 / 50%)", "rgba(255 0 0 / .5)"])
def test_rgb_alpha(css):
    rgb = parse_rgb(css)
    assert _channels(rgb) == (255.0, 0.0, 0.0)
    assert rgb.alpha == pytest.approx(0.5)


def test_hex():
    assert parse_hex("#ff0000") == RGB(255, 0, 0)
    assert parse_hex("#F00") == RGB(255, 0, 0)
    assert parse_hex("#ff000080").alpha == pytest.approx(128 / 255.0)
    assert parse_hex("ff0000") is None
    assert parse_hex("#12345") is None


def test_hsl():
    assert _channels(parse_hsl("hsl(120, 100%, 50%)")) == (0, 255, 0)
    assert _channels(parse_hsl("hsl(240deg 100% 50%)")) == (0, 0, 255)
    assert parse_hsl("hsla(0, 100%, 50%, 0.25)").alpha == pytest.approx(0.25)


def test_hwb():
    assert _channels(parse_hwb("hwb(0 0% 0%)")) == (255, 0, 0)
    assert _channels(parse_hwb("hwb(0, 50%, 50%)")) == (128, 128, 128)


def test_lab_and_lch():
    red = parse_lab("lab(53.2408 80.0925 67.2032)")
    assert _channels(red) == (255, 0, 0)
    assert red.in_gamut is True
    assert _channels(parse_lch("lch(53.2408 104.5518 39.999)")) == pytest.approx((255, 0, 0), abs=1)


def test_lab_clips():
    rgb = parse_lab("lab(50 120 -120)")
    assert rgb.in_gamut is False
    assert all(0 <= c <= 255 for c in _channels(rgb))


def test_oklab_and_oklch():
    assert _channels(parse_oklab("oklab(1 0 0)")) == (255, 255, 255)
    assert _channels(parse_oklch("oklch(0.62796 0.25768 29.23)")) == pytest.approx((255, 0, 0), abs=2)


def test_oklch_out_of_gamut_not_clipped():
    rgb = parse_oklch("oklch(0.5 0.37 29)")
    assert rgb.in_gamut is False
    assert rgb.green < 0


@pytest.mark.parametrize("css", [
    "#0f0",
    "rgb(0, 255, 0)",
    "hsl(120, 100%, 50%)",
    "hwb(120 0% 0%)",
    "  hsl(120 100% 50%)  ",
])
def test_from_css_string_dispatches(css):
    assert _channels(from_css_string(css)) == (0, 255, 0)


@pytest.mark.parametrize("css", ["", None, "not-a-color", "#12345", "rgb(1, 2)", "rgb(a, b, c)", "cmyk(0 0 0 0)"])
def test_unrecognised(css):
    assert from_css_string(css) is None


def test_parsers_reject_other_notations():
    assert parse_rgb("hsl(0, 0%, 0%)") is None
    assert parse_hsl("rgb(0, 0, 0)") is None
    assert parse_lab("oklab(0 0 0)") is None
    assert parse_lch("oklch(0 0 0)") is None

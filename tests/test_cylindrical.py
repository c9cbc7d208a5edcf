# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_cylindrical.py — HSL, HSV, HWB, HSI, CMY and CMYK.
"""

import pytest

from tinct_spaces import CMY, CMYK, HSI, HSL, HSV, HWB, RGB

from color_models.cylindrical import (
    hsi_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    rgb_to_hsi,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_hwb,
)
from color_models.subtractive import cmy_to_rgb, cmyk_to_rgb, rgb_to_cmy, rgb_to_cmyk

SAMPLES = [(0, 0, 0), (255, 255, 255), (255, 0, 0), (12, 200, 90), (128, 64, 250), (250, 250, 10), (77, 77, 78)]


def _channels(rgb):
    return rgb.red, rgb.green, rgb.blue


# --- HSL ---

@pytest.mark.parametrize("channels, expected", [
    ((255, 0, 0), (0.0, 100.0, 50.0)),
    ((0, 255, 0), (120.0, 100.0, 50.0)),
    ((0, 0, 255), (240.0, 100.0, 50.0)),
    ((255, 255, 255), (0.0, 0.0, 100.0)),
    ((0, 0, 0), (0.0, 0.0, 0.0)),
])
def test_rgb_to_hsl(channels, expected):
    hsl = rgb_to_hsl(RGB(*channels))
    assert (hsl.hue, hsl.saturation, hsl.lightness) == pytest.approx(expected)


@pytest.mark.parametrize("channels", SAMPLES)
def test_hsl_round_trip(channels):
    assert _channels(hsl_to_rgb(rgb_to_hsl(RGB(*channels)))) == channels


def test_hsl_carries_alpha():
    hsl = rgb_to_hsl(RGB(255, 0, 0, alpha=0.25))
    assert hsl.alpha == 0.25
    assert hsl_to_rgb(hsl).alpha == 0.25


def test_hsl_magenta():
    assert _channels(hsl_to_rgb(HSL(300.0, 100.0, 50.0))) == (255, 0, 255)


@pytest.mark.parametrize("channels, expected", [
    ((510, 0, 0), (0.0, 0.0, 100.0)),
    ((255, -255, 0), (330.0, 0.0, 0.0)),
])
def test_rgb_to_hsl_outside_cube(channels, expected):
    """Lightness of exactly 0 or 100 with a non-zero spread yields zero saturation."""
    hsl = rgb_to_hsl(RGB(*channels))
    assert (hsl.hue, hsl.saturation, hsl.lightness) == pytest.approx(expected)


# --- HSV ---

def test_rgb_to_hsv_blue():
    hsv = rgb_to_hsv(RGB(0, 0, 255))
    assert (hsv.hue, hsv.saturation, hsv.value) == pytest.approx((240.0, 100.0, 100.0))


@pytest.mark.parametrize("channels", SAMPLES)
def test_hsv_round_trip(channels):
    assert _channels(hsv_to_rgb(rgb_to_hsv(RGB(*channels)))) == channels


def test_hsv_wraps_hue():
    assert hsv_to_rgb(HSV(360.0, 100.0, 100.0)) == hsv_to_rgb(HSV(0.0, 100.0, 100.0))


# --- HWB ---

def test_hwb_pure_hue():
    assert _channels(hwb_to_rgb(HWB(120.0, 0.0, 0.0))) == (0, 255, 0)


def test_hwb_saturated_whiteness_and_blackness_give_gray():
    """Whiteness + blackness >= 100 collapses onto w / (w + b)."""
    assert _channels(hwb_to_rgb(HWB(0.0, 60.0, 60.0))) == (128, 128, 128)
    assert _channels(hwb_to_rgb(HWB(200.0, 100.0, 0.0))) == (255, 255, 255)


def test_rgb_to_hwb_white():
    hwb = rgb_to_hwb(RGB(255, 255, 255))
    assert (hwb.whiteness, hwb.blackness) == pytest.approx((100.0, 0.0))


@pytest.mark.parametrize("channels", SAMPLES)
def test_hwb_round_trip(channels):
    assert _channels(hwb_to_rgb(rgb_to_hwb(RGB(*channels)))) == channels


# --- HSI ---

def test_hsi_gray_is_achromatic():
    hsi = rgb_to_hsi(RGB(100, 100, 100))
    assert hsi.hue == 0.0
    assert hsi.saturation == pytest.approx(0.0, abs=1e-12)
    assert hsi.intensity == pytest.approx(100.0 * 100.0 / 255.0)


def test_hsi_black():
    assert rgb_to_hsi(RGB(0, 0, 0)) == HSI(0.0, 0.0, 0.0)


def test_hsi_red():
    hsi = rgb_to_hsi(RGB(255, 0, 0))
    assert (hsi.hue, hsi.saturation, hsi.intensity) == pytest.approx((0.0, 100.0, 100.0 / 3.0))


@pytest.mark.parametrize("channels", SAMPLES)
def test_hsi_round_trip(channels):
    assert _channels(hsi_to_rgb(rgb_to_hsi(RGB(*channels)))) == channels


def test_hsi_flags_out_of_cube():
    """Full saturation at full intensity does not fit in sRGB."""
    clipped = hsi_to_rgb(HSI(0.0, 100.0, 100.0))
    assert clipped.in_gamut is False
    assert clipped.red == 255

    raw = hsi_to_rgb(HSI(0.0, 100.0, 100.0), clip=False)
    assert raw.red > 255


# --- CMY / CMYK ---

def test_rgb_to_cmy():
    assert rgb_to_cmy(RGB(255, 255, 255)) == CMY(0.0, 0.0, 0.0)
    assert rgb_to_cmy(RGB(0, 0, 0)) == CMY(100.0, 100.0, 100.0)


def test_cmy_to_rgb():
    assert _channels(cmy_to_rgb(CMY(100.0, 0.0, 0.0))) == (0, 255, 255)


def test_black_cmyk():
    assert rgb_to_cmyk(RGB(0, 0, 0)) == CMYK(0.0, 0.0, 0.0, 100.0)


def test_red_cmyk():
    cmyk = rgb_to_cmyk(RGB(255, 0, 0))
    assert (cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.key) == pytest.approx((0.0, 100.0, 100.0, 0.0))


@pytest.mark.parametrize("channels", SAMPLES)
def test_cmyk_round_trip(channels):
    assert _channels(cmyk_to_rgb(rgb_to_cmyk(RGB(*channels)))) == channels

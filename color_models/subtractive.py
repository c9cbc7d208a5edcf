# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: subtractive.py — Naive CMY / CMYK ink models (percentages 0–100).
"""

from __future__ import annotations

from tinct_constants import RGB_MAX
from tinct_spaces import CMY, CMYK, RGB

from color_models.rgb import round_half_up

__all__ = ["rgb_to_cmy", "cmy_to_rgb", "rgb_to_cmyk", "cmyk_to_rgb"]


def rgb_to_cmy(rgb: RGB) -> CMY:
    return CMY(
        (1.0 - rgb.red / RGB_MAX) * 100.0,
        (1.0 - rgb.green / RGB_MAX) * 100.0,
        (1.0 - rgb.blue / RGB_MAX) * 100.0,
    )


def cmy_to_rgb(cmy: CMY) -> RGB:
    return RGB(
        round_half_up((1.0 - cmy.cyan / 100.0) * RGB_MAX),
        round_half_up((1.0 - cmy.magenta / 100.0) * RGB_MAX),
        round_half_up((1.0 - cmy.yellow / 100.0) * RGB_MAX),
    )


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """
    Pulls the common gray component into K.  Pure black has undefined
    C/M/Y and is reported as (0, 0, 0, 100).
    """
    r, g, b = rgb.red / RGB_MAX, rgb.green / RGB_MAX, rgb.blue / RGB_MAX
    key = 1.0 - max(r, g, b)
    if key >= 1.0:
        return CMYK(0.0, 0.0, 0.0, 100.0)

    inv = 1.0 / (1.0 - key)
    return CMYK(
        (1.0 - r - key) * inv * 100.0,
        (1.0 - g - key) * inv * 100.0,
        (1.0 - b - key) * inv * 100.0,
        key * 100.0,
    )


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    k = 1.0 - cmyk.key / 100.0
    return RGB(
        round_half_up(RGB_MAX * (1.0 - cmyk.cyan / 100.0) * k),
        round_half_up(RGB_MAX * (1.0 - cmyk.magenta / 100.0) * k),
        round_half_up(RGB_MAX * (1.0 - cmyk.yellow / 100.0) * k),
    )

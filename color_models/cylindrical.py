# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cylindrical.py — Hue-based reparametrisations of sRGB.

HSL, HSV, HWB and HSI are device-dependent: they reshape the sRGB cube and
never pass through XYZ.  Hue is in degrees [0, 360), every other component
is a percentage 0–100.
"""

from __future__ import annotations

import math

from tinct_constants import DEG2RAD, RAD2DEG, RGB_MAX
from tinct_spaces import HSI, HSL, HSV, HWB, RGB

from color_models.rgb import encoded_to_rgb, round_half_up
from color_models.transfer import normalize_hue

__all__ = [
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hwb",
    "hwb_to_rgb",
    "rgb_to_hsi",
    "hsi_to_rgb",
]


def _unit_channels(rgb: RGB) -> tuple[float, float, float]:
    return rgb.red / RGB_MAX, rgb.green / RGB_MAX, rgb.blue / RGB_MAX


def _hue_of(r: float, g: float, b: float, c_max: float, delta: float) -> float:
    """Hexcone hue shared by HSL, HSV and HWB."""
    if delta == 0.0:
        return 0.0
    if c_max == r:
        h = ((g - b) / delta) % 6.0
    elif c_max == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return normalize_hue(h * 60.0)


def _hue_to_unit_rgb(h: float, chroma: float, m: float) -> tuple[float, float, float]:
    """Inverse of ``_hue_of``: place ``chroma`` on the hexcone and lift by ``m``."""
    hp = normalize_hue(h) / 60.0
    x = chroma * (1.0 - abs(hp % 2.0 - 1.0))
    sector = int(hp)
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x
    return r + m, g + m, b + m


def _to_rgb255(r: float, g: float, b: float, alpha=None) -> RGB:
    return RGB(round_half_up(r * RGB_MAX), round_half_up(g * RGB_MAX),
               round_half_up(b * RGB_MAX), alpha=alpha)


# =============================================================================
# 1. HSL
# =============================================================================

def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = _unit_channels(rgb)
    c_max, c_min = max(r, g, b), min(r, g, b)
    delta = c_max - c_min
    lightness = (c_max + c_min) / 2.0

    # denom is 0 when lightness sits on 0 or 1, reachable only from outside the cube
    denom = 1.0 - abs(2.0 * lightness - 1.0)
    if delta == 0.0 or denom == 0.0:
        saturation = 0.0
    else:
        saturation = delta / denom

    return HSL(_hue_of(r, g, b, c_max, delta), saturation * 100.0,
               lightness * 100.0, alpha=rgb.alpha)


def hsl_to_rgb(hsl: HSL) -> RGB:
    s = hsl.saturation / 100.0
    l = hsl.lightness / 100.0
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    r, g, b = _hue_to_unit_rgb(hsl.hue, chroma, l - chroma / 2.0)
    return _to_rgb255(r, g, b, alpha=hsl.alpha)


# =============================================================================
# 2. HSV
# =============================================================================

def rgb_to_hsv(rgb: RGB) -> HSV:
    r, g, b = _unit_channels(rgb)
    c_max, c_min = max(r, g, b), min(r, g, b)
    delta = c_max - c_min
    saturation = 0.0 if c_max == 0.0 else delta / c_max
    return HSV(_hue_of(r, g, b, c_max, delta), saturation * 100.0,
               c_max * 100.0, alpha=rgb.alpha)


def hsv_to_rgb(hsv: HSV) -> RGB:
    s = hsv.saturation / 100.0
    v = hsv.value / 100.0
    chroma = v * s
    r, g, b = _hue_to_unit_rgb(hsv.hue, chroma, v - chroma)
    return _to_rgb255(r, g, b, alpha=hsv.alpha)


# =============================================================================
# 3. HWB
# =============================================================================

def rgb_to_hwb(rgb: RGB) -> HWB:
    r, g, b = _unit_channels(rgb)
    c_max, c_min = max(r, g, b), min(r, g, b)
    return HWB(_hue_of(r, g, b, c_max, c_max - c_min), c_min * 100.0, (1.0 - c_max) * 100.0)


def hwb_to_rgb(hwb: HWB) -> RGB:
    """
    CSS Color 4 definition: whiteness + blackness >= 100 collapses to the
    gray w / (w + b); otherwise the pure hue is scaled into the remaining
    range.
    """
    w = hwb.whiteness / 100.0
    bl = hwb.blackness / 100.0
    if w + bl >= 1.0:
        gray = w / (w + bl)
        return _to_rgb255(gray, gray, gray)

    r, g, b = _hue_to_unit_rgb(hwb.hue, 1.0, 0.0)
    span = 1.0 - w - bl
    return _to_rgb255(r * span + w, g * span + w, b * span + w)


# =============================================================================
# 4. HSI
# =============================================================================

def rgb_to_hsi(rgb: RGB) -> HSI:
    """Gonzalez & Woods geometric HSI."""
    r, g, b = _unit_channels(rgb)
    intensity = (r + g + b) / 3.0
    if intensity == 0.0:
        return HSI(0.0, 0.0, 0.0)

    saturation = 1.0 - min(r, g, b) / intensity

    num = 0.5 * ((r - g) + (r - b))
    den = math.sqrt((r - g) ** 2 + (r - b) * (g - b))
    if den == 0.0:
        hue = 0.0
    else:
        # acos argument can stray past ±1 by an ulp
        cos_h = max(-1.0, min(1.0, num / den))
        hue = math.acos(cos_h) * RAD2DEG
        if b > g:
            hue = 360.0 - hue

    return HSI(normalize_hue(hue), saturation * 100.0, intensity * 100.0)


def hsi_to_rgb(hsi: HSI, clip: bool = True) -> RGB:
    """
    Sector-wise inverse of ``rgb_to_hsi``.  High-saturation, high-intensity
    inputs can land outside the sRGB cube, hence the ``clip`` flag.
    """
    h = normalize_hue(hsi.hue)
    s = hsi.saturation / 100.0
    i = hsi.intensity / 100.0

    def _lift(angle: float) -> float:
        return i * (1.0 + s * math.cos(angle * DEG2RAD) / math.cos((60.0 - angle) * DEG2RAD))

    if h < 120.0:
        b = i * (1.0 - s)
        r = _lift(h)
        g = 3.0 * i - (r + b)
    elif h < 240.0:
        r = i * (1.0 - s)
        g = _lift(h - 120.0)
        b = 3.0 * i - (r + g)
    else:
        g = i * (1.0 - s)
        b = _lift(h - 240.0)
        r = 3.0 * i - (g + b)

    return encoded_to_rgb(r, g, b, clip=clip)

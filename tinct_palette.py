# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_palette.py — Palettes, scales and single-color manipulation.

Mixer
-----
``get_shades`` / ``get_tints`` / ``get_tones`` walk a color towards black,
white or mid gray in ``size`` equal steps of normalised RGB.  The first
entry is the color itself; the target is approached but never reached.

Scales
------
``interpolate`` blends two colors in RGB, HSL (shortest hue path) or CIELAB.
``create_scale`` strings several stops together.  With ``smooth=True`` each
channel follows a monotone cubic (PCHIP) through all stops instead of
piecewise-linear segments, which removes the visible kinks at the stops
without overshooting them.

Manipulation
------------
``lighten`` / ``darken`` move CIELAB L*, ``saturate`` / ``desaturate`` move
HSL saturation, ``adjust_hue`` / ``complement`` rotate HSL hue, ``mix`` is a
weighted RGB average.
"""

from __future__ import annotations

import dataclasses
from typing import Final, Literal, Sequence

import numpy as np
from scipy.interpolate import PchipInterpolator

from tinct_constants import RGB_MAX
from tinct_exceptions import UnsupportedColorSpaceError
from tinct_spaces import HSL, LAB, RGB

from color_models.cie import lab_to_srgb, srgb_to_lab
from color_models.cylindrical import hsl_to_rgb, rgb_to_hsl
from color_models.rgb import rgb_to_hex, rgba_to_hex, round_half_up

__all__ = [
    "get_shades",
    "get_tints",
    "get_tones",
    "interpolate",
    "create_scale",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "adjust_hue",
    "complement",
    "mix",
]

ScaleSpace = Literal["rgb", "hsl", "lab"]

DEFAULT_PALETTE_SIZE: Final[int] = 10
_SHADE_TARGET: Final[float] = 0.0
_TINT_TARGET: Final[float] = 1.0
_TONE_TARGET: Final[float] = 0.5


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


# =============================================================================
# 1. MIXER
# =============================================================================

def _walk(rgb: RGB, size: int, target: float, prefixed: bool) -> list[str]:
    if not size or not np.isfinite(size):
        size = DEFAULT_PALETTE_SIZE
    size = int(size)

    current = np.array([rgb.red, rgb.green, rgb.blue], dtype=np.float64) / RGB_MAX
    step = (target - current) / size

    palette = []
    for _ in range(size):
        r, g, b = (round_half_up(c * RGB_MAX) for c in current)
        if rgb.alpha is not None:
            palette.append(rgba_to_hex(RGB(r, g, b, alpha=rgb.alpha), prefixed=prefixed))
        else:
            palette.append(rgb_to_hex(RGB(r, g, b), prefixed=prefixed))
        current = current + step
    return palette


def get_shades(rgb: RGB, size: int = DEFAULT_PALETTE_SIZE, prefixed: bool = False) -> list[str]:
    """
    Mixes ``rgb`` towards black.

    Args:
        rgb: Start color.  A non-None alpha yields 8-digit hex.
        size: Number of colors; 0 or non-finite falls back to 10.
        prefixed: Start each hex string with ``#``.

    Returns:
        ``size`` hex strings, starting with ``rgb`` itself.
    """
    return _walk(rgb, size, _SHADE_TARGET, prefixed)


def get_tints(rgb: RGB, size: int = DEFAULT_PALETTE_SIZE, prefixed: bool = False) -> list[str]:
    """Mixes ``rgb`` towards white.  See ``get_shades``."""
    return _walk(rgb, size, _TINT_TARGET, prefixed)


def get_tones(rgb: RGB, size: int = DEFAULT_PALETTE_SIZE, prefixed: bool = False) -> list[str]:
    """Mixes ``rgb`` towards mid gray.  See ``get_shades``."""
    return _walk(rgb, size, _TONE_TARGET, prefixed)


# =============================================================================
# 2. SCALES
# =============================================================================

def _check_space(space: str) -> str:
    if space not in ("rgb", "hsl", "lab"):
        raise UnsupportedColorSpaceError(
            f"Unknown scale space '{space}'. Choose from: ['rgb', 'hsl', 'lab']"
        )
    return space


def _shortest_hue_delta(h1: float, h2: float) -> float:
    diff = h2 - h1
    if abs(diff) > 180.0:
        diff = diff - 360.0 if diff > 0 else diff + 360.0
    return diff


def interpolate(color1: RGB, color2: RGB, t: float, space: ScaleSpace = "rgb") -> RGB:
    """
    Blends two colors; ``t`` is clamped to [0, 1].

    Args:
        color1: Color at t = 0.
        color2: Color at t = 1.
        t: Blend position.
        space: ``"rgb"`` (channels rounded, ``in_gamut`` True), ``"hsl"``
               (hue along the shorter arc) or ``"lab"`` (CIELAB D65).
    """
    space = _check_space(space)
    t = _clamp(float(t), 0.0, 1.0)

    if space == "hsl":
        hsl1, hsl2 = rgb_to_hsl(color1), rgb_to_hsl(color2)
        hue = (hsl1.hue + _shortest_hue_delta(hsl1.hue, hsl2.hue) * t + 360.0) % 360.0
        return hsl_to_rgb(HSL(
            hue,
            hsl1.saturation + (hsl2.saturation - hsl1.saturation) * t,
            hsl1.lightness + (hsl2.lightness - hsl1.lightness) * t,
        ))

    if space == "lab":
        lab1, lab2 = srgb_to_lab(color1), srgb_to_lab(color2)
        return lab_to_srgb(LAB(
            lab1.luminance + (lab2.luminance - lab1.luminance) * t,
            lab1.a + (lab2.a - lab1.a) * t,
            lab1.b + (lab2.b - lab1.b) * t,
        ))

    return RGB(
        round_half_up(color1.red + (color2.red - color1.red) * t),
        round_half_up(color1.green + (color2.green - color1.green) * t),
        round_half_up(color1.blue + (color2.blue - color1.blue) * t),
        in_gamut=True,
    )


def _piecewise_scale(colors: Sequence[RGB], steps: int, space: ScaleSpace) -> list[RGB]:
    segments = len(colors) - 1
    scale: list[RGB] = []
    for position in np.linspace(0.0, float(segments), steps):
        # last sample sits on the final stop, not past it
        i = min(int(position), segments - 1)
        scale.append(interpolate(colors[i], colors[i + 1], position - i, space))
    return scale


def _stop_coordinates(colors: Sequence[RGB], space: ScaleSpace) -> np.ndarray:
    if space == "hsl":
        hsl = [rgb_to_hsl(c) for c in colors]
        coords = np.array([[h.hue, h.saturation, h.lightness] for h in hsl], dtype=np.float64)
        # Shortest arc between neighbouring stops
        coords[:, 0] = np.unwrap(coords[:, 0], period=360.0)
        return coords
    if space == "lab":
        lab = [srgb_to_lab(c) for c in colors]
        return np.array([[v.luminance, v.a, v.b] for v in lab], dtype=np.float64)
    return np.array([[c.red, c.green, c.blue] for c in colors], dtype=np.float64)


def _smooth_scale(colors: Sequence[RGB], steps: int, space: ScaleSpace) -> list[RGB]:
    knots = np.linspace(0.0, 1.0, len(colors))
    curve = PchipInterpolator(knots, _stop_coordinates(colors, space), axis=0, extrapolate=True)
    samples = curve(np.linspace(0.0, 1.0, steps))

    if space == "hsl":
        return [hsl_to_rgb(HSL(h % 360.0, s, l)) for h, s, l in samples]
    if space == "lab":
        return [lab_to_srgb(LAB(l, a, b)) for l, a, b in samples]
    return [
        RGB(*(int(_clamp(round_half_up(c), 0, 255)) for c in row), in_gamut=True)
        for row in samples
    ]


def create_scale(colors: Sequence[RGB], steps: int, space: ScaleSpace = "rgb",
                 smooth: bool = False) -> list[RGB]:
    """
    Builds a ``steps``-long gradient through ``colors``.

    The stops are spread evenly along the scale.  The first and the last
    entries are the first and the last stop.

    Args:
        colors: Two or more stops.
        steps: Length of the scale.
        space: Interpolation space, see ``interpolate``.
        smooth: Monotone cubic (PCHIP) through all stops instead of
                straight segments between neighbours.

    Returns:
        The scale.  Fewer than two stops or ``steps`` < 2 return a copy of
        ``colors``.
    """
    space = _check_space(space)
    if len(colors) < 2 or steps < 2:
        return list(colors)
    if smooth:
        return _smooth_scale(colors, int(steps), space)
    return _piecewise_scale(colors, int(steps), space)


# =============================================================================
# 3. MANIPULATION
# =============================================================================

def lighten(rgb: RGB, amount: float) -> RGB:
    """Raises CIELAB L* by ``amount`` (clamped to [0, 100])."""
    lab = srgb_to_lab(rgb)
    lab = dataclasses.replace(lab, luminance=_clamp(lab.luminance + amount, 0.0, 100.0))
    return dataclasses.replace(lab_to_srgb(lab), alpha=rgb.alpha)


def darken(rgb: RGB, amount: float) -> RGB:
    return lighten(rgb, -amount)


def saturate(rgb: RGB, amount: float) -> RGB:
    """Raises HSL saturation by ``amount`` percentage points."""
    hsl = rgb_to_hsl(rgb)
    hsl = dataclasses.replace(hsl, saturation=_clamp(hsl.saturation + amount, 0.0, 100.0))
    return hsl_to_rgb(hsl)


def desaturate(rgb: RGB, amount: float) -> RGB:
    return saturate(rgb, -amount)


def adjust_hue(rgb: RGB, degrees: float) -> RGB:
    """Rotates the HSL hue by ``degrees`` (either sign)."""
    hsl = rgb_to_hsl(rgb)
    hue = (hsl.hue + degrees) % 360.0
    if hue < 0:
        hue += 360.0
    return hsl_to_rgb(dataclasses.replace(hsl, hue=hue))


def complement(rgb: RGB) -> RGB:
    return adjust_hue(rgb, 180.0)


def mix(color1: RGB, color2: RGB, weight: float = 0.5) -> RGB:
    """
    Weighted average in RGB.

    ``weight`` is the share of ``color1`` (clamped to [0, 1]).
    """
    w = _clamp(weight, 0.0, 1.0)
    return RGB(
        round_half_up(color1.red * w + color2.red * (1.0 - w)),
        round_half_up(color1.green * w + color2.green * (1.0 - w)),
        round_half_up(color1.blue * w + color2.blue * (1.0 - w)),
        in_gamut=True,
    )

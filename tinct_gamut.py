# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_gamut.py — sRGB gamut tests and hard clipping.

All checks are derived from the conversion functions themselves, so the
gamut boundary moves with whatever precision the conversions use.
"""

from __future__ import annotations

import numpy as np

from tinct_constants import M_XYZ_TO_SRGB, RGB_MAX
from tinct_matrix import matrix_vector_multiply
from tinct_spaces import RGB, XYZ

from color_models.oklab import is_oklch_in_gamut

__all__ = ["is_rgb_in_gamut", "clip_rgb", "is_xyz_in_srgb_gamut", "is_oklch_in_gamut"]


def is_rgb_in_gamut(rgb: RGB) -> bool:
    return all(0.0 <= c <= RGB_MAX for c in (rgb.red, rgb.green, rgb.blue))


def clip_rgb(rgb: RGB) -> RGB:
    """
    Hard clip to [0, 255].

    Alpha is kept.  ``in_gamut`` records whether the input was already
    inside the cube.
    """
    r, g, b = np.clip([rgb.red, rgb.green, rgb.blue], 0.0, RGB_MAX).tolist()
    return RGB(r, g, b, alpha=rgb.alpha, in_gamut=is_rgb_in_gamut(rgb))


def is_xyz_in_srgb_gamut(xyz: XYZ, tolerance: float = 1e-5) -> bool:
    """
    True when ``xyz`` (D65, 0–100) maps to linear sRGB inside [0, 1].

    Tested on unrounded linear channels, so it is stricter than looking at
    the ``in_gamut`` flag of ``xyz_to_srgb``, which only sees 8-bit values.
    ``tolerance`` absorbs the rounding of the 7-digit sRGB matrices, which
    puts the primaries a few 1e-7 past the cube faces.
    """
    linear = matrix_vector_multiply(M_XYZ_TO_SRGB, (xyz.x / 100.0, xyz.y / 100.0, xyz.z / 100.0))
    return all(-tolerance <= c <= 1.0 + tolerance for c in linear)

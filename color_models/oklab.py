# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: oklab.py — OKLab / OKLCH and the OKLCH-in-sRGB gamut test.

Two pipelines are provided:

    sRGB oriented   OKLab <-> LMS' <-> LMS <-> linear sRGB  (Ottosson's
                    published sRGB matrices, used for display work)
    XYZ oriented    OKLab <-> LMS' <-> LMS <-> XYZ / 100    (standard M1)

The sRGB pipeline does NOT clip by default: ``is_oklch_in_gamut`` needs to
see channels that fall outside [0, 255].
"""

from __future__ import annotations

import logging
import math

from tinct_constants import (
    M_LINEAR_SRGB_TO_LMS,
    M_LMS_PRIME_TO_OKLAB,
    M_LMS_TO_LINEAR_SRGB,
    M_LMS_TO_XYZ_OKLAB,
    M_OKLAB_TO_LMS_PRIME,
    M_XYZ_TO_LMS_OKLAB,
    OKLCH_LIGHTNESS_RANGE,
    OKLCH_TOLERANCE,
)
from tinct_matrix import matrix_vector_multiply, matrix_vector_multiply_as_space
from tinct_spaces import OKLCH, RGB, XYZ, OKLab

from color_models.cie import cartesian_to_polar, polar_to_cartesian
from color_models.rgb import encoded_to_rgb, srgb_to_linear_rgb
from color_models.transfer import linear_val_to_srgb_val

__all__ = [
    "oklab_to_srgb",
    "srgb_to_oklab",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "oklch_to_srgb",
    "srgb_to_oklch",
    "xyz_to_oklab",
    "oklab_to_xyz",
    "is_oklch_in_gamut",
    "oklch_within_tolerance",
]

logger = logging.getLogger(__name__)


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _cbrt3(v: tuple[float, float, float]) -> tuple[float, float, float]:
    return _cbrt(v[0]), _cbrt(v[1]), _cbrt(v[2])


def _cube3(v: tuple[float, float, float]) -> tuple[float, float, float]:
    return v[0] ** 3, v[1] ** 3, v[2] ** 3


# =============================================================================
# 1. sRGB PIPELINE
# =============================================================================

def oklab_to_srgb(oklab: OKLab, clip: bool = False) -> RGB:
    """
    Converts OKLab to sRGB.

    Steps: OKLab -> LMS' (linear map), cube each component, LMS -> linear
    sRGB (linear map), sRGB OETF, scale to 0–255 and round half-up.

    Args:
        oklab: Input color.
        clip: Clamp channels into [0, 255].  Off by default so out-of-gamut
              colors remain visible; ``in_gamut`` is set either way.
    """
    lms_prime = matrix_vector_multiply(M_OKLAB_TO_LMS_PRIME, (oklab.luminance, oklab.a, oklab.b))
    r, g, b = matrix_vector_multiply(M_LMS_TO_LINEAR_SRGB, _cube3(lms_prime))
    return encoded_to_rgb(
        linear_val_to_srgb_val(r),
        linear_val_to_srgb_val(g),
        linear_val_to_srgb_val(b),
        clip=clip,
    )


def srgb_to_oklab(rgb: RGB) -> OKLab:
    lms = matrix_vector_multiply(M_LINEAR_SRGB_TO_LMS, srgb_to_linear_rgb(rgb))
    return matrix_vector_multiply_as_space(M_LMS_PRIME_TO_OKLAB, _cbrt3(lms), OKLab)


def oklab_to_oklch(oklab: OKLab) -> OKLCH:
    chroma, hue = cartesian_to_polar(oklab.a, oklab.b)
    return OKLCH(oklab.luminance, chroma, hue)


def oklch_to_oklab(oklch: OKLCH) -> OKLab:
    a, b = polar_to_cartesian(oklch.chroma, oklch.hue)
    return OKLab(oklch.lightness, a, b)


def oklch_to_srgb(oklch: OKLCH, clip: bool = False) -> RGB:
    return oklab_to_srgb(oklch_to_oklab(oklch), clip=clip)


def srgb_to_oklch(rgb: RGB) -> OKLCH:
    return oklab_to_oklch(srgb_to_oklab(rgb))


# =============================================================================
# 2. XYZ PIPELINE
# =============================================================================

def xyz_to_oklab(xyz: XYZ) -> OKLab:
    """Converts XYZ (D65, 0–100) to OKLab via the standard M1 / M2 pair."""
    lms = matrix_vector_multiply(M_XYZ_TO_LMS_OKLAB, (xyz.x / 100.0, xyz.y / 100.0, xyz.z / 100.0))
    return matrix_vector_multiply_as_space(M_LMS_PRIME_TO_OKLAB, _cbrt3(lms), OKLab)


def oklab_to_xyz(oklab: OKLab) -> XYZ:
    lms_prime = matrix_vector_multiply(M_OKLAB_TO_LMS_PRIME, (oklab.luminance, oklab.a, oklab.b))
    x, y, z = matrix_vector_multiply(M_LMS_TO_XYZ_OKLAB, _cube3(lms_prime))
    return XYZ(x * 100.0, y * 100.0, z * 100.0)


# =============================================================================
# 3. GAMUT & TOLERANCE
# =============================================================================

def is_oklch_in_gamut(oklch: OKLCH) -> bool:
    """
    True when ``oklch`` is reproducible in sRGB.

    Lightness outside [0, 1] or negative chroma is rejected up front.
    Otherwise the color goes through the same unclipped ``oklch_to_srgb``
    pipeline as any other conversion and every rounded channel must land
    in [0, 255].
    """
    lo, hi = OKLCH_LIGHTNESS_RANGE
    if oklch.lightness < lo or oklch.lightness > hi or oklch.chroma < 0.0:
        return False

    rgb = oklch_to_srgb(oklch, clip=False)
    inside = all(0 <= c <= 255 for c in (rgb.red, rgb.green, rgb.blue))
    if not inside:
        logger.debug("OKLCH %s outside sRGB: %s", oklch, rgb)
    return inside


def oklch_within_tolerance(first: OKLCH, second: OKLCH) -> bool:
    """
    Perceptual equality of two OKLCH colors.

    Hue is compared on the circle and ignored when either color is
    achromatic (chroma below the chroma tolerance).
    """
    tol = OKLCH_TOLERANCE
    if abs(first.lightness - second.lightness) > tol["lightness"]:
        return False
    if abs(first.chroma - second.chroma) > tol["chroma"]:
        return False
    if min(first.chroma, second.chroma) < tol["chroma"]:
        return True
    dh = abs(first.hue - second.hue) % 360.0
    return min(dh, 360.0 - dh) <= tol["hue"]

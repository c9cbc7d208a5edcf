# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cie.py — CIE colorimetric models derived from XYZ.

Covers CIELAB, LCH(ab), CIELUV, LCH(uv), Hunter Lab, xyY and CIE 1964
U*V*W*.  XYZ is on the 0–100 scale; reference whites are normalised to
Y = 1 and default to D65.  Lab/Luv companding uses κ = 903.3 and
ϵ = 0.008856 (see ``tinct_constants``).

Design Decision — Black Handling:
    Chromaticity is undefined at X + Y + Z = 0.  ``xyz_to_xyy`` substitutes
    the D65 chromaticity (0.3127, 0.3290) there, and the Luv / U*V*W*
    transforms return zeros.  No NaN ever leaves this module for finite
    input.
"""

from __future__ import annotations

import math
from typing import Tuple

from tinct_constants import (
    D65_CHROMATICITY,
    DEG2RAD,
    LAB_KAPPA,
    LAB_KAPPA_EPSILON,
    RAD2DEG,
    REF_WHITE_D65,
)
from tinct_spaces import LAB, LCH, LUV, RGB, UVW, XYY, XYZ, ReferenceWhite

from color_models.rgb import srgb_to_xyz, xyz_to_srgb
from color_models.transfer import lab_f, lab_f_inv, normalize_hue

__all__ = [
    "cartesian_to_polar",
    "polar_to_cartesian",
    # --- CIELAB ---
    "lab_to_xyz",
    "xyz_to_lab",
    "lab_to_lch_ab",
    "lch_ab_to_lab",
    "lch_ab_to_xyz",
    "xyz_to_lch_ab",
    "lab_to_srgb",
    "srgb_to_lab",
    # --- CIELUV ---
    "xyz_to_luv",
    "luv_to_xyz",
    "luv_to_lch_uv",
    "lch_uv_to_luv",
    "lch_uv_to_xyz",
    "xyz_to_lch_uv",
    # --- Others ---
    "hunter_lab_to_xyz",
    "xyz_to_hunter_lab",
    "xyz_to_xyy",
    "xyy_to_xyz",
    "xyz_to_uvw",
    "uvw_to_xyz",
]

_TINY: float = 1e-12


# =============================================================================
# 1. SHARED HELPERS
# =============================================================================

def cartesian_to_polar(a: float, b: float) -> Tuple[float, float]:
    """(a, b) -> (chroma, hue in degrees on [0, 360))."""
    chroma = math.hypot(a, b)
    hue = math.atan2(b, a) * RAD2DEG
    if hue < 0.0:
        hue += 360.0
    return chroma, normalize_hue(hue)


def polar_to_cartesian(chroma: float, hue: float) -> Tuple[float, float]:
    """(chroma, hue in degrees) -> (a, b)."""
    h = hue * DEG2RAD
    return chroma * math.cos(h), chroma * math.sin(h)


def _y_from_lightness(L: float) -> float:
    """Relative luminance Y / Yn from CIE lightness, branching at κϵ."""
    if L > LAB_KAPPA_EPSILON:
        fy = (L + 16.0) / 116.0
        return fy * fy * fy
    return L / LAB_KAPPA


def _uv_prime(X: float, Y: float, Z: float) -> Tuple[float, float]:
    """CIE 1976 (u', v'); black returns (0, 0)."""
    denom = X + 15.0 * Y + 3.0 * Z
    if denom <= _TINY:
        return 0.0, 0.0
    return 4.0 * X / denom, 9.0 * Y / denom


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


# =============================================================================
# 2. CIELAB & LCH(ab)
# =============================================================================

def lab_to_xyz(lab: LAB, white: ReferenceWhite = REF_WHITE_D65) -> XYZ:
    """
    Converts CIELAB to XYZ (0–100).

    Formulas:
        fY = (L + 16) / 116
        X  = f(a / 500 + fY) · Xn · 100
        Y  = (fY³ if L > κϵ else L / κ) · Yn · 100
        Z  = f(fY - b / 200) · Zn · 100

    where f(t) = t³ if t³ > ϵ else (116t - 16) / κ.

    Args:
        lab: Input color.
        white: Reference white (default D65).
    """
    fy = (lab.luminance + 16.0) / 116.0
    x = lab_f_inv(lab.a / 500.0 + fy) * white.X * 100.0
    y = _y_from_lightness(lab.luminance) * white.Y * 100.0
    z = lab_f_inv(fy - lab.b / 200.0) * white.Z * 100.0
    return XYZ(x, y, z)


def xyz_to_lab(xyz: XYZ, white: ReferenceWhite = REF_WHITE_D65) -> LAB:
    """
    Converts XYZ (0–100) to CIELAB.

    Args:
        xyz: Input color.
        white: Reference white (default D65).
    """
    fx = lab_f(xyz.x / (white.X * 100.0))
    fy = lab_f(xyz.y / (white.Y * 100.0))
    fz = lab_f(xyz.z / (white.Z * 100.0))
    return LAB(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_lch_ab(lab: LAB) -> LCH:
    chroma, hue = cartesian_to_polar(lab.a, lab.b)
    return LCH(lab.luminance, chroma, hue)


def lch_ab_to_lab(lch: LCH) -> LAB:
    a, b = polar_to_cartesian(lch.chroma, lch.hue)
    return LAB(lch.lightness, a, b)


def lch_ab_to_xyz(lch: LCH, white: ReferenceWhite = REF_WHITE_D65) -> XYZ:
    return lab_to_xyz(lch_ab_to_lab(lch), white)


def xyz_to_lch_ab(xyz: XYZ, white: ReferenceWhite = REF_WHITE_D65) -> LCH:
    return lab_to_lch_ab(xyz_to_lab(xyz, white))


def lab_to_srgb(lab: LAB, clip: bool = True) -> RGB:
    """Direct conversion CIELAB (D65) -> sRGB."""
    return xyz_to_srgb(lab_to_xyz(lab), clip=clip)


def srgb_to_lab(rgb: RGB) -> LAB:
    """Direct conversion sRGB -> CIELAB (D65)."""
    return xyz_to_lab(srgb_to_xyz(rgb))


# =============================================================================
# 3. CIELUV & LCH(uv)
# =============================================================================

def xyz_to_luv(xyz: XYZ, white: ReferenceWhite = REF_WHITE_D65) -> LUV:
    """
    Converts XYZ (0–100) to CIELUV.

    L* shares the CIELAB lightness; u*, v* are the (u', v') offsets from the
    white point scaled by 13 L*.
    """
    un, vn = _uv_prime(white.X, white.Y, white.Z)
    up, vp = _uv_prime(xyz.x, xyz.y, xyz.z)

    L = 116.0 * lab_f(xyz.y / (white.Y * 100.0)) - 16.0
    if up == 0.0 and vp == 0.0:
        # Black: chromaticity undefined, collapse onto the achromatic axis.
        return LUV(L, 0.0, 0.0)
    return LUV(L, 13.0 * L * (up - un), 13.0 * L * (vp - vn))


def luv_to_xyz(luv: LUV, white: ReferenceWhite = REF_WHITE_D65) -> XYZ:
    """Converts CIELUV to XYZ (0–100).  L* <= 0 maps to black."""
    L = luv.L
    if L <= _TINY:
        return XYZ(0.0, 0.0, 0.0)

    un, vn = _uv_prime(white.X, white.Y, white.Z)
    inv_13L = 1.0 / (13.0 * L)
    up = luv.u * inv_13L + un
    vp = luv.v * inv_13L + vn

    Y = _y_from_lightness(L) * white.Y * 100.0
    if vp <= _TINY:
        return XYZ(0.0, Y, 0.0)

    inv_4vp = 1.0 / (4.0 * vp)
    X = Y * 9.0 * up * inv_4vp
    Z = Y * (12.0 - 3.0 * up - 20.0 * vp) * inv_4vp
    return XYZ(X, Y, Z)


def luv_to_lch_uv(luv: LUV) -> LCH:
    chroma, hue = cartesian_to_polar(luv.u, luv.v)
    return LCH(luv.L, chroma, hue)


def lch_uv_to_luv(lch: LCH) -> LUV:
    u, v = polar_to_cartesian(lch.chroma, lch.hue)
    return LUV(lch.lightness, u, v)


def lch_uv_to_xyz(lch: LCH, white: ReferenceWhite = REF_WHITE_D65) -> XYZ:
    return luv_to_xyz(lch_uv_to_luv(lch), white)


def xyz_to_lch_uv(xyz: XYZ, white: ReferenceWhite = REF_WHITE_D65) -> LCH:
    return luv_to_lch_uv(xyz_to_luv(xyz, white))


# =============================================================================
# 4. HUNTER LAB
# =============================================================================
# Hunter's 1948 opponent space with the Illuminant C coefficients
# Ka = 17.5, Kb = 7.0 and white point factors 1.02 / 0.847.

def hunter_lab_to_xyz(lab: LAB) -> XYZ:
    L = lab.luminance
    y = (L / 10.0) ** 2
    x = ((lab.a / 17.5) * L / 10.0 + y) / 1.02
    z = -((lab.b / 7.0) * L / 10.0 - y) / 0.847
    return XYZ(x, y, z)


def xyz_to_hunter_lab(xyz: XYZ) -> LAB:
    if xyz.y <= 0.0:
        return LAB(0.0, 0.0, 0.0)
    sqrt_y = math.sqrt(xyz.y)
    return LAB(
        10.0 * sqrt_y,
        17.5 * (1.02 * xyz.x - xyz.y) / sqrt_y,
        7.0 * (xyz.y - 0.847 * xyz.z) / sqrt_y,
    )


# =============================================================================
# 5. xyY
# =============================================================================

def xyz_to_xyy(xyz: XYZ) -> XYY:
    """
    Converts XYZ to xyY (chromaticity + luminance).

    Black (X + Y + Z ≈ 0) takes the D65 chromaticity so the result stays
    finite.  This follows Bruce Lindbloom and is not mandated by CIE.
    """
    total = xyz.x + xyz.y + xyz.z
    if total <= _TINY:
        return XYY(D65_CHROMATICITY[0], D65_CHROMATICITY[1], 0.0)
    return XYY(xyz.x / total, xyz.y / total, xyz.y)


def xyy_to_xyz(xyy: XYY) -> XYZ:
    if xyy.y <= _TINY:
        return XYZ(0.0, 0.0, 0.0)
    factor = xyy.Y / xyy.y
    return XYZ(xyy.x * factor, xyy.Y, (1.0 - xyy.x - xyy.y) * factor)


# =============================================================================
# 6. CIE 1964 U*V*W*
# =============================================================================

def _uv_1960_white(white: ReferenceWhite) -> Tuple[float, float]:
    # 1964 system uses 1960 u, v:  u = u', v = (2/3) v'
    un, vpn = _uv_prime(white.X, white.Y, white.Z)
    return un, (2.0 / 3.0) * vpn


def xyz_to_uvw(xyz: XYZ, white: ReferenceWhite = REF_WHITE_D65) -> UVW:
    """
    Converts XYZ (0–100) to CIE 1964 U*V*W*.

        W* = 25 Y^(1/3) - 17
        U* = 13 W* (u - un)
        V* = 13 W* (v - vn)
    """
    un, vn = _uv_1960_white(white)
    X, Y, Z = xyz.x, xyz.y, xyz.z

    denom = X + 15.0 * Y + 3.0 * Z
    if denom <= _TINY:
        u, v = un, vn
    else:
        u = 4.0 * X / denom
        v = 6.0 * Y / denom

    W = 25.0 * _cbrt(Y) - 17.0
    return UVW(13.0 * W * (u - un), 13.0 * W * (v - vn), W)


def uvw_to_xyz(uvw: UVW, white: ReferenceWhite = REF_WHITE_D65) -> XYZ:
    un, vn = _uv_1960_white(white)
    W = uvw.w

    Y = ((W + 17.0) / 25.0) ** 3
    if abs(W) <= _TINY:
        u, v = un, vn
    else:
        u = uvw.u / (13.0 * W) + un
        v = uvw.v / (13.0 * W) + vn

    # (u, v) -> (x, y)
    denom = 2.0 * u - 8.0 * v + 4.0
    if abs(denom) <= _TINY:
        return XYZ(0.0, Y, 0.0)
    x = 3.0 * u / denom
    y = 2.0 * v / denom
    if abs(y) <= _TINY:
        return XYZ(0.0, Y, 0.0)
    return XYZ(x * Y / y, Y, (1.0 - x - y) * Y / y)

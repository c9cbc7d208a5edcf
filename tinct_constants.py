# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_constants.py — Reference whites, fixed matrices and thresholds.

Everything here is data.  Matrices are stored column-vector oriented
(``out = M @ v``); inverses that are not published as exact tables are
computed once at import with ``np.linalg.inv``.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
    - ITU-R BT.601 / BT.709
    - B. Ottosson (2020), "A perceptual color space for image processing"
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

import numpy as np

from tinct_spaces import ReferenceWhite

__all__ = [
    # --- CIE ---
    "LAB_EPSILON",
    "LAB_KAPPA",
    "LAB_KAPPA_EPSILON",
    "DEG2RAD",
    "RAD2DEG",
    # --- sRGB ---
    "SRGB_LINEAR_BELOW",
    "SRGB_ENCODED_BELOW",
    "SRGB_GAMMA",
    "RGB_MAX",
    "WCAG_LINEAR_BELOW",
    # --- Reference whites ---
    "REFERENCE_WHITES",
    "ILLUMINANTS",
    "REF_WHITE_D65",
    "REF_WHITE_D50",
    "D65_CHROMATICITY",
    # --- Matrices ---
    "M_BRADFORD",
    "M_BRADFORD_INV",
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",
    "M_OKLAB_TO_LMS_PRIME",
    "M_LMS_TO_LINEAR_SRGB",
    "M_LINEAR_SRGB_TO_LMS",
    "M_LMS_PRIME_TO_OKLAB",
    "M_XYZ_TO_LMS_OKLAB",
    "M_LMS_TO_XYZ_OKLAB",
    "M_XYZ_TO_LMS_HPE",
    "M_LMS_TO_XYZ_HPE",
    "M_RGB_TO_YCBCR",
    "M_YCBCR_TO_RGB",
    "YCBCR_OFFSET",
    "M_RGB_TO_YPBPR",
    "M_YPBPR_TO_RGB",
    "M_RGB_TO_YUV",
    "M_YUV_TO_RGB",
    "M_RGB_TO_YIQ",
    "M_YIQ_TO_RGB",
    "M_RGB_TO_YDBDR",
    "M_YDBDR_TO_RGB",
    "M_RGB_TO_YCOCG",
    "M_YCOCG_TO_RGB",
    # --- Difference metrics ---
    "CIE94_GRAPHIC_ARTS",
    "CIE94_TEXTILES",
    "C25_7",
    "CMC_DARK_LIGHTNESS",
    "CMC_DARK_SL",
    "CMC_HUE_BAND",
    "CMC_F_OFFSET",
    "PERCEPTIBILITY_THRESHOLDS",
    # --- OKLCH ---
    "OKLCH_LIGHTNESS_RANGE",
    "OKLCH_CHROMA_MAX",
    "OKLCH_TOLERANCE",
]


def _frozen(rows) -> np.ndarray:
    """float64 matrix that refuses in-place writes."""
    m = np.array(rows, dtype=np.float64)
    m.setflags(write=False)
    return m


# =============================================================================
# 1. CIE 1976 CONSTANTS
# =============================================================================
# The historical decimal values, not the rational 216/24389 and 24389/27.
# Lab <-> XYZ must branch at exactly these thresholds.
LAB_EPSILON: Final[float] = 0.008856
LAB_KAPPA: Final[float] = 903.3
LAB_KAPPA_EPSILON: Final[float] = LAB_KAPPA * LAB_EPSILON  # ~7.9996

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi


# =============================================================================
# 2. sRGB TRANSFER
# =============================================================================
SRGB_LINEAR_BELOW: Final[float] = 0.0031308   # encode: linear side
SRGB_ENCODED_BELOW: Final[float] = 0.04045    # decode: encoded side
SRGB_GAMMA: Final[float] = 2.4
RGB_MAX: Final[float] = 255.0

# WCAG 2.x relative luminance still quotes the older sRGB draft threshold.
WCAG_LINEAR_BELOW: Final[float] = 0.03928


# =============================================================================
# 3. REFERENCE WHITES (CIE 1931 2° observer, Y = 1)
# =============================================================================
REFERENCE_WHITES: Final[Mapping[str, ReferenceWhite]] = MappingProxyType({
    "A":     ReferenceWhite(1.09850, 1.0, 0.35585),   # incandescent, 2856 K
    "B":     ReferenceWhite(0.990927, 1.0, 0.85313),  # direct sunlight at noon
    "C":     ReferenceWhite(0.98074, 1.0, 1.18232),   # average daylight
    "D50":   ReferenceWhite(0.96422, 1.0, 0.82521),   # horizon light, ICC PCS
    "D55":   ReferenceWhite(0.95682, 1.0, 0.92149),
    "D60":   ReferenceWhite(0.95265, 1.0, 1.00883),
    "D65":   ReferenceWhite(0.95047, 1.0, 1.08883),   # noon daylight, sRGB
    "D75":   ReferenceWhite(0.94972, 1.0, 1.22638),
    "D93":   ReferenceWhite(0.95288, 1.0, 1.41299),
    "E":     ReferenceWhite(1.00000, 1.0, 1.00000),   # equal energy
    "F1":    ReferenceWhite(0.92834, 1.0, 1.03665),
    "F2":    ReferenceWhite(0.99187, 1.0, 0.67395),   # cool white fluorescent
    "F3":    ReferenceWhite(1.03754, 1.0, 0.49861),
    "F4":    ReferenceWhite(1.09147, 1.0, 0.38813),
    "F5":    ReferenceWhite(0.90872, 1.0, 0.98723),
    "F6":    ReferenceWhite(0.97309, 1.0, 0.60191),
    "F7":    ReferenceWhite(0.95044, 1.0, 1.08755),   # broad-band daylight
    "F8":    ReferenceWhite(0.96413, 1.0, 0.82333),
    "F9":    ReferenceWhite(1.00365, 1.0, 0.67868),
    "F10":   ReferenceWhite(0.96174, 1.0, 0.81712),
    "F11":   ReferenceWhite(1.00966, 1.0, 0.64370),   # narrow-band white
    "F12":   ReferenceWhite(1.08046, 1.0, 0.39228),
    "9300K": ReferenceWhite(0.97135, 1.0, 1.43929),   # CRT blue-white
})

ILLUMINANTS: Final[tuple[str, ...]] = tuple(REFERENCE_WHITES)

REF_WHITE_D65: Final[ReferenceWhite] = REFERENCE_WHITES["D65"]
REF_WHITE_D50: Final[ReferenceWhite] = REFERENCE_WHITES["D50"]

# Substituted for the chromaticity of black in XYZ -> xyY.
D65_CHROMATICITY: Final[tuple[float, float]] = (0.3127, 0.3290)


# =============================================================================
# 4. FIXED MATRICES
# =============================================================================

# --- Bradford cone response ---
M_BRADFORD: Final[np.ndarray] = _frozen([
    [ 0.8951000,  0.2664000, -0.1614000],
    [-0.7502000,  1.7135000,  0.0367000],
    [ 0.0389000, -0.0685000,  1.0296000],
])
M_BRADFORD_INV: Final[np.ndarray] = _frozen(np.linalg.inv(M_BRADFORD))

# --- sRGB (IEC 61966-2-1, D65) ---
M_SRGB_TO_XYZ: Final[np.ndarray] = _frozen([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])
M_XYZ_TO_SRGB: Final[np.ndarray] = _frozen([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252],
])

# --- OKLab, sRGB oriented ---
M_OKLAB_TO_LMS_PRIME: Final[np.ndarray] = _frozen([
    [1.0,  0.3963377774,  0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])
M_LMS_TO_LINEAR_SRGB: Final[np.ndarray] = _frozen([
    [ 4.0767416621, -3.3077115913,  0.2309699292],
    [-1.2684380046,  2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147,  1.7076147010],
])
M_LINEAR_SRGB_TO_LMS: Final[np.ndarray] = _frozen([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])
M_LMS_PRIME_TO_OKLAB: Final[np.ndarray] = _frozen([
    [0.2104542553,  0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050,  0.4505937099],
    [0.0259040371,  0.7827717662, -0.8086757660],
])

# --- OKLab, XYZ oriented (XYZ on the 0–1 scale) ---
M_XYZ_TO_LMS_OKLAB: Final[np.ndarray] = _frozen([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715,  0.0361456387],
    [0.0482003018, 0.2643662691,  0.6338517070],
])
M_LMS_TO_XYZ_OKLAB: Final[np.ndarray] = _frozen(np.linalg.inv(M_XYZ_TO_LMS_OKLAB))

# --- Hunt-Pointer-Estevez, normalised to D65 ---
M_XYZ_TO_LMS_HPE: Final[np.ndarray] = _frozen([
    [ 0.4002, 0.7076, -0.0808],
    [-0.2263, 1.1653,  0.0457],
    [ 0.0,    0.0,     0.9182],
])
M_LMS_TO_XYZ_HPE: Final[np.ndarray] = _frozen(np.linalg.inv(M_XYZ_TO_LMS_HPE))

# --- Luma-chroma family (RGB on the 0–255 scale) ---
# BT.601 digital studio swing; coefficients act on RGB / 255.
M_RGB_TO_YCBCR: Final[np.ndarray] = _frozen(np.array([
    [ 65.481, 128.553,  24.966],
    [-37.797, -74.203, 112.000],
    [112.000, -93.786, -18.214],
]) / 255.0)
M_YCBCR_TO_RGB: Final[np.ndarray] = _frozen(np.linalg.inv(M_RGB_TO_YCBCR))
YCBCR_OFFSET: Final[tuple[float, float, float]] = (16.0, 128.0, 128.0)

# BT.709 analog, Pb = (B - Y) / 1.8556, Pr = (R - Y) / 1.5748
M_RGB_TO_YPBPR: Final[np.ndarray] = _frozen([
    [ 0.2126,     0.7152,     0.0722],
    [-0.1145721, -0.3854279,  0.5],
    [ 0.5,       -0.4541529, -0.0458471],
])
M_YPBPR_TO_RGB: Final[np.ndarray] = _frozen(np.linalg.inv(M_RGB_TO_YPBPR))

# BT.601 analog PAL
M_RGB_TO_YUV: Final[np.ndarray] = _frozen([
    [ 0.299,    0.587,    0.114],
    [-0.14713, -0.28886,  0.436],
    [ 0.615,   -0.51499, -0.10001],
])
M_YUV_TO_RGB: Final[np.ndarray] = _frozen(np.linalg.inv(M_RGB_TO_YUV))

# FCC NTSC
M_RGB_TO_YIQ: Final[np.ndarray] = _frozen([
    [0.299,     0.587,     0.114],
    [0.595716, -0.274453, -0.321263],
    [0.211456, -0.522591,  0.311135],
])
M_YIQ_TO_RGB: Final[np.ndarray] = _frozen(np.linalg.inv(M_RGB_TO_YIQ))

# SECAM
M_RGB_TO_YDBDR: Final[np.ndarray] = _frozen([
    [ 0.299,  0.587, 0.114],
    [-0.450, -0.883, 1.333],
    [-1.333,  1.116, 0.217],
])
M_YDBDR_TO_RGB: Final[np.ndarray] = _frozen(np.linalg.inv(M_RGB_TO_YDBDR))

# YCoCg has an exact dyadic inverse.
M_RGB_TO_YCOCG: Final[np.ndarray] = _frozen([
    [ 0.25, 0.5,  0.25],
    [ 0.5,  0.0, -0.5],
    [-0.25, 0.5, -0.25],
])
M_YCOCG_TO_RGB: Final[np.ndarray] = _frozen([
    [1.0,  1.0, -1.0],
    [1.0,  0.0,  1.0],
    [1.0, -1.0, -1.0],
])


# =============================================================================
# 5. COLOR DIFFERENCE
# =============================================================================
# (k_L, K1, K2) for CIE94
CIE94_GRAPHIC_ARTS: Final[tuple[float, float, float]] = (1.0, 0.045, 0.015)
CIE94_TEXTILES: Final[tuple[float, float, float]] = (2.0, 0.048, 0.014)

C25_7: Final[float] = 25.0 ** 7

# CMC l:c: S_L is flat below L* = 16; hues in the band use the 168° T term
CMC_DARK_LIGHTNESS: Final[float] = 16.0
CMC_DARK_SL: Final[float] = 0.511
CMC_HUE_BAND: Final[tuple[float, float]] = (164.0, 345.0)
CMC_F_OFFSET: Final[float] = 1900.0

# Upper bound of each band -> description, ascending.
PERCEPTIBILITY_THRESHOLDS: Final[tuple[tuple[float, str], ...]] = (
    (1.0, "not perceptible by human eyes"),
    (2.0, "perceptible through close observation"),
    (10.0, "perceptible at a glance"),
    (49.0, "colors are more similar than opposite"),
    (100.0, "colors are exact opposite"),
)


# =============================================================================
# 6. OKLCH
# =============================================================================
OKLCH_LIGHTNESS_RANGE: Final[tuple[float, float]] = (0.0, 1.0)
OKLCH_CHROMA_MAX: Final[float] = 0.37
OKLCH_TOLERANCE: Final[Mapping[str, float]] = MappingProxyType({
    "lightness": 0.005,
    "chroma": 0.005,
    "hue": 0.5,
})

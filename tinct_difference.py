# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_difference.py — Perceptual color-difference metrics on CIELAB.

Metrics
-------
    ΔE*76        Euclidean distance in L*a*b*.
    ΔE*94        CIE 116-1995.  Graphic arts (default) or textiles.
    ΔE*00        CIEDE2000 with parametric factors k_L, k_C, k_H.
    ΔE CMC l:c   Clarke, McDonald, Rigg (1984).

ΔE*94 and CMC weight chroma and hue by the chroma of the *reference* sample
(the first argument), so both are asymmetric:

    delta_e_cie94_lab(a, b) != delta_e_cie94_lab(b, a)      in general
    delta_e_cie94_lab(a, a) == 0                            always

Each metric is a numba-compiled scalar kernel on six floats; the public
functions only unpack the records.

References:
    - CIE Publication 116-1995, "Industrial colour-difference evaluation".
    - Sharma, G., Wu, W., & Dalal, E. N. (2005). "The CIEDE2000
      color-difference formula".
    - Clarke, McDonald, Rigg (1984). "CMC l:c colour difference formula".
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numba import float64, njit

from tinct_constants import (
    C25_7,
    CIE94_GRAPHIC_ARTS,
    CIE94_TEXTILES,
    CMC_DARK_LIGHTNESS,
    CMC_DARK_SL,
    CMC_F_OFFSET,
    CMC_HUE_BAND,
    DEG2RAD,
    PERCEPTIBILITY_THRESHOLDS,
)
from tinct_spaces import LAB, LCH

__all__ = [
    "delta_e_cie76",
    "delta_e_cie94_lab",
    "delta_e_ciede2000",
    "delta_e_cmc",
    "perceptibility",
]


# =============================================================================
# 1. SHARED DECOMPOSITION
# =============================================================================

@njit(cache=True, fastmath=True)
def _hue_degrees(a: float, b: float) -> float:
    return np.degrees(np.arctan2(b, a)) % 360.0


@njit(cache=True, fastmath=True)
def _lch_deltas(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float):
    """
    Splits a Lab difference into (ΔL, C1, ΔC, ΔH²).

    ΔH² is taken as Δa² + Δb² − ΔC² and clamped at 0 against rounding.
    C1 is returned because ΔE*94 and CMC weight by the reference chroma.
    """
    C1 = np.sqrt(a1*a1 + b1*b1)
    dC = C1 - np.sqrt(a2*a2 + b2*b2)
    da = a1 - a2
    db = b1 - b2
    return L1 - L2, C1, dC, max(da*da + db*db - dC*dC, 0.0)


@njit(cache=True, fastmath=True)
def _weighted_norm(dL: float, SL: float, dC: float, SC: float, dH_sq: float, SH: float) -> float:
    tL = dL / SL
    tC = dC / SC
    return np.sqrt(tL*tL + tC*tC + dH_sq / (SH*SH))


# =============================================================================
# 2. KERNELS
# =============================================================================

@njit(float64(float64, float64, float64, float64, float64, float64), cache=True, fastmath=True)
def _delta_e_76_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float) -> float:
    dL = L1 - L2
    da = a1 - a2
    db = b1 - b2
    return np.sqrt(dL*dL + da*da + db*db)


@njit(float64(float64, float64, float64, float64, float64, float64,
              float64, float64, float64, float64, float64), cache=True, fastmath=True)
def _delta_e_94_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                       k_L: float, k_C: float, k_H: float, K1: float, K2: float) -> float:
    dL, C1, dC, dH_sq = _lch_deltas(L1, a1, b1, L2, a2, b2)
    return _weighted_norm(dL, k_L, dC, k_C * (1.0 + K1 * C1), dH_sq, k_H * (1.0 + K2 * C1))


@njit(cache=True, fastmath=True)
def _cmc_weights(L1: float, C1: float, h1: float):
    """(S_L, S_C, S_H) of CMC l:c, all driven by the standard."""
    if L1 < CMC_DARK_LIGHTNESS:
        SL = CMC_DARK_SL
    else:
        SL = (0.040975 * L1) / (1.0 + 0.01765 * L1)

    SC = (0.0638 * C1) / (1.0 + 0.0131 * C1) + 0.638

    if CMC_HUE_BAND[0] <= h1 <= CMC_HUE_BAND[1]:
        T = 0.56 + abs(0.2 * np.cos((h1 + 168.0) * DEG2RAD))
    else:
        T = 0.36 + abs(0.4 * np.cos((h1 + 35.0) * DEG2RAD))

    C1_4 = C1**4
    F = np.sqrt(C1_4 / (C1_4 + CMC_F_OFFSET))
    return SL, SC, SC * (F * T + 1.0 - F)


@njit(float64(float64, float64, float64, float64, float64, float64,
              float64, float64), cache=True, fastmath=True)
def _delta_e_cmc_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                        pl: float, pc: float) -> float:
    dL, C1, dC, dH_sq = _lch_deltas(L1, a1, b1, L2, a2, b2)
    SL, SC, SH = _cmc_weights(L1, C1, _hue_degrees(a1, b1))
    return _weighted_norm(dL, pl * SL, dC, pc * SC, dH_sq, SH)


@njit(cache=True, fastmath=True)
def _hue_step_and_mean(h1: float, h2: float, chromatic: bool):
    """
    Signed hue step h2 − h1 along the shorter arc and the matching mean hue.

    Achromatic pairs have no hue: the step is 0 and the mean is h1 + h2.
    """
    if not chromatic:
        return 0.0, h1 + h2

    step = h2 - h1
    if step > 180.0:
        step -= 360.0
    elif step < -180.0:
        step += 360.0

    total = h1 + h2
    if abs(h1 - h2) <= 180.0:
        mean = total * 0.5
    elif total < 360.0:
        mean = (total + 360.0) * 0.5
    else:
        mean = (total - 360.0) * 0.5
    return step, mean


@njit(cache=True, fastmath=True)
def _chroma_saturation(C: float) -> float:
    """sqrt(C⁷ / (C⁷ + 25⁷)), the term behind both G and R_C."""
    C_7 = C**7
    return np.sqrt(C_7 / (C_7 + C25_7))


@njit(float64(float64, float64, float64, float64, float64, float64,
              float64, float64, float64), cache=True, fastmath=True)
def _delta_e_2000_single(L1: float, a1: float, b1: float, L2: float, a2: float, b2: float,
                         k_L: float, k_C: float, k_H: float) -> float:
    # a' stretches a* for near-neutral colors
    stretch = 1.0 + 0.5 * (1.0 - _chroma_saturation((np.hypot(a1, b1) + np.hypot(a2, b2)) * 0.5))
    a1_p = stretch * a1
    a2_p = stretch * a2
    C1_p = np.hypot(a1_p, b1)
    C2_p = np.hypot(a2_p, b2)

    dh_p, h_bar_p = _hue_step_and_mean(_hue_degrees(a1_p, b1), _hue_degrees(a2_p, b2),
                                       C1_p * C2_p > 1e-12)
    dH_p = 2.0 * np.sqrt(C1_p * C2_p) * np.sin(dh_p * DEG2RAD * 0.5)

    C_bar_p = (C1_p + C2_p) * 0.5
    L_off = ((L1 + L2) * 0.5 - 50.0)**2
    T = (1.0 - 0.17 * np.cos((h_bar_p - 30.0) * DEG2RAD)
         + 0.24 * np.cos(2.0 * h_bar_p * DEG2RAD)
         + 0.32 * np.cos((3.0 * h_bar_p + 6.0) * DEG2RAD)
         - 0.20 * np.cos((4.0 * h_bar_p - 63.0) * DEG2RAD))

    SL = 1.0 + 0.015 * L_off / np.sqrt(20.0 + L_off)
    SC = 1.0 + 0.045 * C_bar_p
    SH = 1.0 + 0.015 * C_bar_p * T

    rotation = 30.0 * np.exp(-((h_bar_p - 275.0) / 25.0)**2)
    RT = -2.0 * _chroma_saturation(C_bar_p) * np.sin(2.0 * rotation * DEG2RAD)

    tL = (L2 - L1) / (k_L * SL)
    tC = (C2_p - C1_p) / (k_C * SC)
    tH = dH_p / (k_H * SH)
    return np.sqrt(tL*tL + tC*tC + tH*tH + RT * tC * tH)


# =============================================================================
# 3. PUBLIC METRICS
# =============================================================================

def _unpack(lab: LAB) -> tuple[float, float, float]:
    return float(lab.luminance), float(lab.a), float(lab.b)


def delta_e_cie76(lab1: LAB, lab2: LAB) -> float:
    """CIE Delta E 1976 (Euclidean distance in Lab)."""
    return float(_delta_e_76_single(*_unpack(lab1), *_unpack(lab2)))


def delta_e_cie94_lab(lab1: LAB, lab2: LAB, weights: Optional[LCH] = None,
                      textiles: bool = False) -> float:
    """
    Calculates CIE 1994 Color Difference (CIE Publication 116-1995).

    Note: This metric is **asymmetric** — lab1 is the *reference* and lab2
    is the *sample*.  Swapping them may give a different result.

    Args:
        lab1: Reference color.
        lab2: Sample color.
        weights: Parametric factors as an LCH record: ``lightness`` -> k_L,
                 ``chroma`` -> k_C, ``hue`` -> k_H.  Unity when omitted.
        textiles: Use k_L=2.0, K1=0.048, K2=0.014 (textile industry)
                  instead of the graphic-arts constants.  An explicit
                  ``weights`` record still overrides k_L.

    Returns:
        ΔE*94 (non-negative).
    """
    k_L, K1, K2 = CIE94_TEXTILES if textiles else CIE94_GRAPHIC_ARTS
    k_C = k_H = 1.0
    if weights is not None:
        k_L, k_C, k_H = float(weights.lightness), float(weights.chroma), float(weights.hue)
    return float(_delta_e_94_single(*_unpack(lab1), *_unpack(lab2), k_L, k_C, k_H, K1, K2))


def delta_e_ciede2000(lab1: LAB, lab2: LAB,
                      k_L: float = 1.0, k_C: float = 1.0, k_H: float = 1.0,
                      textiles: bool = False) -> float:
    """
    Calculates CIEDE2000 Color Difference.

    Args:
        lab1: Reference color.
        lab2: Sample color.
        k_L: Parametric lightness weight (default 1.0).
        k_C: Parametric chroma weight (default 1.0).
        k_H: Parametric hue weight (default 1.0).
        textiles: If True, overrides k_L=2.0, k_C=1.0, k_H=1.0 as per
                  CIE recommendation for textile applications.
    """
    if textiles:
        k_L, k_C, k_H = 2.0, 1.0, 1.0
    return float(_delta_e_2000_single(*_unpack(lab1), *_unpack(lab2),
                                      float(k_L), float(k_C), float(k_H)))


def delta_e_cmc(lab1: LAB, lab2: LAB, pl: float = 2.0, pc: float = 1.0) -> float:
    """
    Calculates CMC l:c (1984) Color Difference.

    Asymmetric like ΔE*94: lab1 is the *standard*, lab2 the *batch*.

    Args:
        pl: Lightness factor (2.0 for acceptability, 1.0 for
            imperceptibility).
        pc: Chroma factor (default 1.0).
    """
    return float(_delta_e_cmc_single(*_unpack(lab1), *_unpack(lab2), float(pl), float(pc)))


def perceptibility(delta_e: float) -> str:
    """
    Describes how visible a color difference is.

    The bands are closed on the right: 1.0 is still "not perceptible",
    anything above 49 is reported as "colors are exact opposite".
    """
    magnitude = abs(delta_e)
    for bound, description in PERCEPTIBILITY_THRESHOLDS:
        if magnitude <= bound:
            return description
    return PERCEPTIBILITY_THRESHOLDS[-1][1]

# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: transfer.py — Scalar non-linear transfer functions.

Contains the sRGB OETF/EOTF pair (IEC 61966-2-1) and the CIELAB companding
pair f / f⁻¹.  Each exists as a ``fastmath`` Numba kernel and a strict
IEEE 754 twin; ``set_strict_ieee`` picks which one the public dispatchers
call.
"""

from __future__ import annotations

from numba import float64, njit

from tinct_constants import (
    LAB_EPSILON,
    LAB_KAPPA,
    SRGB_ENCODED_BELOW,
    SRGB_GAMMA,
    SRGB_LINEAR_BELOW,
)

__all__ = [
    "set_strict_ieee",
    "is_strict_ieee",
    "linear_val_to_srgb_val",
    "srgb_val_to_linear_val",
    "lab_f",
    "lab_f_inv",
    "normalize_hue",
]


# --- Runtime Configuration ---
# When True the dispatchers below route to the fastmath=False kernels, which
# keep inf / NaN propagation and forbid FP reassociation.
#
#     from color_models import transfer
#     transfer.set_strict_ieee(True)
_STRICT_IEEE: bool = False


def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    Args:
        enabled: If True, every transfer function uses ``fastmath=False``.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)


def is_strict_ieee() -> bool:
    return _STRICT_IEEE


# =============================================================================
# 1. FAST KERNELS
# =============================================================================

@njit(float64(float64), cache=True, fastmath=True)
def _encode_srgb(v: float) -> float:
    """sRGB OETF: linear light -> gamma-encoded, both on [0, 1]."""
    if v <= SRGB_LINEAR_BELOW:
        return 12.92 * v
    return 1.055 * (v ** (1.0 / SRGB_GAMMA)) - 0.055


@njit(float64(float64), cache=True, fastmath=True)
def _decode_srgb(v: float) -> float:
    """sRGB EOTF: gamma-encoded -> linear light."""
    if v <= SRGB_ENCODED_BELOW:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** SRGB_GAMMA


@njit(float64(float64), cache=True, fastmath=True)
def _lab_f_fast(t: float) -> float:
    """
    CIELAB companding f(t).

    Cube root above ϵ, a straight line below it so the slope stays finite
    near black.
    """
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0


@njit(float64(float64), cache=True, fastmath=True)
def _lab_f_inv_fast(t: float) -> float:
    """
    Inverse companding.  Branches on t³ > ϵ and uses (116t - 16) / κ on the
    linear segment.
    """
    t3 = t * t * t
    if t3 > LAB_EPSILON:
        return t3
    return (116.0 * t - 16.0) / LAB_KAPPA


# --- Strict IEEE 754 kernel variants (fastmath=False) ---

@njit(float64(float64), cache=True, fastmath=False)
def _encode_srgb_strict(v: float) -> float:
    """sRGB OETF — strict IEEE 754 variant."""
    if v <= SRGB_LINEAR_BELOW:
        return 12.92 * v
    return 1.055 * (v ** (1.0 / SRGB_GAMMA)) - 0.055


@njit(float64(float64), cache=True, fastmath=False)
def _decode_srgb_strict(v: float) -> float:
    """sRGB EOTF — strict IEEE 754 variant."""
    if v <= SRGB_ENCODED_BELOW:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** SRGB_GAMMA


@njit(float64(float64), cache=True, fastmath=False)
def _lab_f_strict(t: float) -> float:
    """Lab f(t) — strict IEEE 754 variant."""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0


@njit(float64(float64), cache=True, fastmath=False)
def _lab_f_inv_strict(t: float) -> float:
    """Lab f_inv(t) — strict IEEE 754 variant."""
    t3 = t * t * t
    if t3 > LAB_EPSILON:
        return t3
    return (116.0 * t - 16.0) / LAB_KAPPA


# =============================================================================
# 2. DISPATCHERS
# =============================================================================

def linear_val_to_srgb_val(v: float) -> float:
    """Gamma-encode one linear channel on [0, 1]."""
    if _STRICT_IEEE:
        return _encode_srgb_strict(float(v))
    return _encode_srgb(float(v))


def srgb_val_to_linear_val(v: float) -> float:
    """Linearise one gamma-encoded channel on [0, 1]."""
    if _STRICT_IEEE:
        return _decode_srgb_strict(float(v))
    return _decode_srgb(float(v))


def lab_f(t: float) -> float:
    if _STRICT_IEEE:
        return _lab_f_strict(float(t))
    return _lab_f_fast(float(t))


def lab_f_inv(t: float) -> float:
    if _STRICT_IEEE:
        return _lab_f_inv_strict(float(t))
    return _lab_f_inv_fast(float(t))


# =============================================================================
# 3. ANGLES
# =============================================================================

def normalize_hue(h: float) -> float:
    """Wraps an angle in degrees into [0, 360)."""
    h = h % 360.0
    # -1e-17 % 360.0 == 360.0 in IEEE arithmetic
    return 0.0 if h >= 360.0 else h

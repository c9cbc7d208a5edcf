# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: rgb.py — sRGB <-> XYZ and the hex / integer encodings of RGB.

sRGB values are gamma encoded on 0–255, XYZ is D65 relative on 0–100.
RGB outputs are rounded half-up exactly once, at the very end of a pipeline.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

from tinct_constants import M_SRGB_TO_XYZ, M_XYZ_TO_SRGB, RGB_MAX
from tinct_matrix import matrix_vector_multiply
from tinct_spaces import RGB, XYZ

from color_models.transfer import linear_val_to_srgb_val, srgb_val_to_linear_val

__all__ = [
    "round_half_up",
    "encoded_to_rgb",
    "srgb_to_xyz",
    "xyz_to_srgb",
    "srgb_to_linear_rgb",
    "linear_rgb_to_srgb",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgba_to_hex",
    "number_to_rgb",
    "decimal_to_hex",
]

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from -inf (0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def _clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def encoded_to_rgb(r: float, g: float, b: float, clip: bool = True,
                   alpha: Optional[float] = None) -> RGB:
    """
    Final output stage shared by every producer of RGB.

    Scales gamma-encoded [0, 1] channels to 0–255 and rounds.  ``in_gamut``
    reports whether all three rounded channels already sat inside [0, 255];
    with ``clip=True`` they are then clamped into that range.

    Args:
        r, g, b: Gamma-encoded channels on [0, 1] (may lie outside).
        clip: Clamp the rounded channels into [0, 255].
        alpha: Optional opacity carried through unchanged.
    """
    channels = [round_half_up(c * RGB_MAX) for c in (r, g, b)]
    in_gamut = all(0 <= c <= 255 for c in channels)
    if clip:
        channels = [int(_clamp(c, 0, 255)) for c in channels]
    return RGB(channels[0], channels[1], channels[2], alpha=alpha, in_gamut=in_gamut)


# =============================================================================
# 1. sRGB <-> XYZ
# =============================================================================

def srgb_to_linear_rgb(rgb: RGB) -> Tuple[float, float, float]:
    """
    Linearise sRGB.

    Returns:
        Linear-light channels on [0, 1] (unrounded).
    """
    return (
        srgb_val_to_linear_val(rgb.red / RGB_MAX),
        srgb_val_to_linear_val(rgb.green / RGB_MAX),
        srgb_val_to_linear_val(rgb.blue / RGB_MAX),
    )


def linear_rgb_to_srgb(linear: Tuple[float, float, float], clip: bool = True) -> RGB:
    """Gamma-encode linear-light channels on [0, 1] into 0–255 sRGB."""
    r, g, b = linear
    return encoded_to_rgb(
        linear_val_to_srgb_val(r),
        linear_val_to_srgb_val(g),
        linear_val_to_srgb_val(b),
        clip=clip,
    )


def srgb_to_xyz(rgb: RGB, clip: bool = True) -> XYZ:
    """
    Converts sRGB (0–255) to XYZ (D65, 0–100).

    Args:
        rgb: Input color.
        clip: If True (default), clamps channels to [0, 255] before the
              EOTF.  Set False to keep out-of-range values.
    """
    if clip:
        rgb = RGB(_clamp(rgb.red, 0.0, RGB_MAX),
                  _clamp(rgb.green, 0.0, RGB_MAX),
                  _clamp(rgb.blue, 0.0, RGB_MAX))
    x, y, z = matrix_vector_multiply(M_SRGB_TO_XYZ, srgb_to_linear_rgb(rgb))
    return XYZ(x * 100.0, y * 100.0, z * 100.0)


def xyz_to_srgb(xyz: XYZ, clip: bool = True) -> RGB:
    """
    Converts XYZ (D65, 0–100) to sRGB (0–255).

    Args:
        xyz: Input color.
        clip: If True (default), clamps the output into [0, 255].  The
              result's ``in_gamut`` flag tells whether clamping mattered.
    """
    linear = matrix_vector_multiply(M_XYZ_TO_SRGB, (xyz.x / 100.0, xyz.y / 100.0, xyz.z / 100.0))
    return linear_rgb_to_srgb(linear, clip=clip)


# =============================================================================
# 2. HEX & INTEGER ENCODINGS
# =============================================================================

def hex_to_rgb(hex_str: str) -> Optional[RGB]:
    """
    Parses ``RGB``, ``RGBA``, ``RRGGBB`` or ``RRGGBBAA`` (leading ``#``
    optional).

    Returns:
        The color, alpha on [0, 1] when present, or None when the string is
        not a hex color.
    """
    if not isinstance(hex_str, str):
        return None
    digits = hex_str.strip().removeprefix("#")
    if len(digits) not in (3, 4, 6, 8) or not _HEX_DIGITS.match(digits):
        return None

    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)

    red = int(digits[0:2], 16)
    green = int(digits[2:4], 16)
    blue = int(digits[4:6], 16)
    alpha = int(digits[6:8], 16) / RGB_MAX if len(digits) == 8 else None
    return RGB(red, green, blue, alpha=alpha)


def _hex_byte(v: float) -> str:
    return f"{int(_clamp(round_half_up(v), 0, 255)):02X}"


def rgb_to_hex(rgb: RGB, prefixed: bool = True) -> str:
    """``RGB(255, 0, 0)`` -> ``"#FF0000"``."""
    body = _hex_byte(rgb.red) + _hex_byte(rgb.green) + _hex_byte(rgb.blue)
    return f"#{body}" if prefixed else body


def rgba_to_hex(rgb: RGB, prefixed: bool = True) -> str:
    """Eight-digit hex; a missing alpha counts as fully opaque."""
    alpha = 1.0 if rgb.alpha is None else rgb.alpha
    body = rgb_to_hex(rgb, prefixed=False) + decimal_to_hex(alpha).upper()
    return f"#{body}" if prefixed else body


def number_to_rgb(color: int) -> RGB:
    """Unpacks a 24-bit ``0xRRGGBB`` integer."""
    color = int(color)
    return RGB((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def decimal_to_hex(d: float) -> str:
    """Maps a fraction on [0, 1] to a two-digit lowercase hex byte."""
    return f"{int(_clamp(round_half_up(float(d) * RGB_MAX), 0, 255)):02x}"

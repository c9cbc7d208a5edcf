# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_spaces.py — Immutable color records and the closed set of
color-space names.

Every color value is a frozen, slotted dataclass compared by value.  CIE LAB
(0–100) and OKLab (0–1) are distinct types, as are LCH and OKLCH,
so the two scales cannot be mixed up.  ``LCH`` is shared by LCH(ab) and
LCH(uv); Hunter Lab values travel in a ``LAB`` record.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Final, Mapping, NamedTuple, Optional, TypeAlias, Union

__all__ = [
    "ReferenceWhite",
    # --- Records ---
    "XYZ",
    "RGB",
    "HSL",
    "HSV",
    "HWB",
    "HSI",
    "CMY",
    "CMYK",
    "LAB",
    "LCH",
    "LUV",
    "OKLab",
    "OKLCH",
    "XYY",
    "LMS",
    "UVW",
    "YCbCr",
    "YPbPr",
    "YUV",
    "YIQ",
    "YDbDr",
    "YCoCg",
    # --- Dispatch ---
    "ColorRecord",
    "ColorSpaceUnion",
    "ColorSpace",
    "RECORD_TYPES",
    "record_axes",
]


class ReferenceWhite(NamedTuple):
    """Tristimulus values of a reference white, normalised to Y = 1."""
    X: float
    Y: float
    Z: float


# =============================================================================
# 1. TRISTIMULUS & DEVICE RECORDS
# =============================================================================

@dataclass(frozen=True, slots=True)
class XYZ:
    """CIE 1931 tristimulus values on the 0–100 scale."""
    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class RGB:
    """
    Gamma-encoded sRGB, channels 0–255.

    ``in_gamut`` is only set by producers that know whether clamping took
    place (XYZ, OKLab and luma-chroma decoders, CSS parsers).
    """
    red: float
    green: float
    blue: float
    alpha: Optional[float] = None
    in_gamut: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class HSL:
    hue: float
    saturation: float
    lightness: float
    alpha: Optional[float] = None


@dataclass(frozen=True, slots=True)
class HSV:
    hue: float
    saturation: float
    value: float
    alpha: Optional[float] = None


@dataclass(frozen=True, slots=True)
class HWB:
    hue: float
    whiteness: float
    blackness: float


@dataclass(frozen=True, slots=True)
class HSI:
    hue: float
    saturation: float
    intensity: float


@dataclass(frozen=True, slots=True)
class CMY:
    cyan: float
    magenta: float
    yellow: float


@dataclass(frozen=True, slots=True)
class CMYK:
    cyan: float
    magenta: float
    yellow: float
    key: float


# =============================================================================
# 2. PERCEPTUAL RECORDS
# =============================================================================

@dataclass(frozen=True, slots=True)
class LAB:
    """CIE L*a*b* (or Hunter Lab): luminance 0–100, a/b roughly ±128."""
    luminance: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class LCH:
    """Cylindrical CIE LAB or LUV: lightness 0–100, chroma ≥ 0, hue in degrees."""
    lightness: float
    chroma: float
    hue: float


@dataclass(frozen=True, slots=True)
class LUV:
    L: float
    u: float
    v: float


@dataclass(frozen=True, slots=True)
class OKLab:
    """Björn Ottosson's OKLab: luminance 0–1."""
    luminance: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class OKLCH:
    lightness: float
    chroma: float
    hue: float


@dataclass(frozen=True, slots=True)
class XYY:
    """Chromaticity (x, y) plus luminance Y."""
    x: float
    y: float
    Y: float


@dataclass(frozen=True, slots=True)
class LMS:
    long: float
    medium: float
    short: float


@dataclass(frozen=True, slots=True)
class UVW:
    """CIE 1964 U*V*W*."""
    u: float
    v: float
    w: float


# =============================================================================
# 3. LUMA-CHROMA RECORDS
# =============================================================================

@dataclass(frozen=True, slots=True)
class YCbCr:
    Y: float
    Cb: float
    Cr: float


@dataclass(frozen=True, slots=True)
class YPbPr:
    Y: float
    Pb: float
    Pr: float


@dataclass(frozen=True, slots=True)
class YUV:
    y: float
    u: float
    v: float


@dataclass(frozen=True, slots=True)
class YIQ:
    Y: float
    I: float
    Q: float


@dataclass(frozen=True, slots=True)
class YDbDr:
    Y: float
    Db: float
    Dr: float


@dataclass(frozen=True, slots=True)
class YCoCg:
    Y: float
    Co: float
    Cg: float


ColorRecord: TypeAlias = Union[
    XYZ, RGB, HSL, HSV, HWB, HSI, CMY, CMYK, LAB, LCH, LUV, OKLab, OKLCH,
    XYY, LMS, UVW, YCbCr, YPbPr, YUV, YIQ, YDbDr, YCoCg,
]

# Hex strings and the short-key ``*_m`` dictionaries travel alongside records.
ColorSpaceUnion: TypeAlias = Union[ColorRecord, str, Mapping[str, float]]


# =============================================================================
# 4. COLOR SPACE NAMES
# =============================================================================

class ColorSpace(str, Enum):
    """
    Closed set of color-space names.

    Lookup is case-insensitive: ``ColorSpace("RGB") is ColorSpace.RGB``.
    """
    RGB = "rgb"
    RGBA = "rgba"
    RGB_M = "rgb_m"
    RGBA_M = "rgba_m"
    HSL = "hsl"
    HSLA = "hsla"
    HSL_M = "hsl_m"
    HSV = "hsv"
    HSVA = "hsva"
    HSV_M = "hsv_m"
    HWB = "hwb"
    HWB_M = "hwb_m"
    HSI = "hsi"
    CMY = "cmy"
    CMY_M = "cmy_m"
    CMYK = "cmyk"
    CMYK_M = "cmyk_m"
    LAB = "lab"
    LAB_M = "lab_m"
    LCH = "lch"
    LCH_M = "lch_m"
    LCH_UV = "lch_uv"
    HUNTER_LAB = "hunter_lab"
    HCL = "hcl"
    HCL_M = "hcl_m"
    HCY = "hcy"
    HCY_M = "hcy_m"
    LMS = "lms"
    LUV = "luv"
    OKLAB = "oklab"
    OKLCH = "oklch"
    RYB = "ryb"
    RYB_M = "ryb_m"
    TSL = "tsl"
    UVW = "uvw"
    XVYCC = "xvycc"
    XYY = "xyy"
    XYZ = "xyz"
    YCBCR = "ycbcr"
    YCCBCCRC = "yccbccrc"
    YCOCG = "ycocg"
    YDBDR = "ydbdr"
    YIQ = "yiq"
    YPBPR = "ypbpr"
    YUV = "yuv"
    HEX = "hex"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ColorSpace"]:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


# Record class backing each space that has one.
RECORD_TYPES: Final[Mapping[ColorSpace, type]] = {
    ColorSpace.XYZ: XYZ,
    ColorSpace.RGB: RGB,
    ColorSpace.RGBA: RGB,
    ColorSpace.HSL: HSL,
    ColorSpace.HSLA: HSL,
    ColorSpace.HSV: HSV,
    ColorSpace.HSVA: HSV,
    ColorSpace.HWB: HWB,
    ColorSpace.HSI: HSI,
    ColorSpace.CMY: CMY,
    ColorSpace.CMYK: CMYK,
    ColorSpace.LAB: LAB,
    ColorSpace.HUNTER_LAB: LAB,
    ColorSpace.LCH: LCH,
    ColorSpace.LCH_UV: LCH,
    ColorSpace.LUV: LUV,
    ColorSpace.OKLAB: OKLab,
    ColorSpace.OKLCH: OKLCH,
    ColorSpace.XYY: XYY,
    ColorSpace.LMS: LMS,
    ColorSpace.UVW: UVW,
    ColorSpace.YCBCR: YCbCr,
    ColorSpace.YPBPR: YPbPr,
    ColorSpace.YUV: YUV,
    ColorSpace.YIQ: YIQ,
    ColorSpace.YDBDR: YDbDr,
    ColorSpace.YCOCG: YCoCg,
}


def record_axes(record_type: type) -> tuple[str, ...]:
    """Field names of a record class, in declaration order."""
    return tuple(f.name for f in fields(record_type))

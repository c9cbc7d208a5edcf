# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_converter.py — Generic conversion graph through XYZ.

Every supported space registers one function into XYZ and one out of it.
A conversion between any two spaces is the composition

    source ──TO_XYZ──> XYZ ──(optional Bradford adaptation)──> XYZ ──FROM_XYZ──> target

Device spaces (HSL, CMYK, the luma-chroma family, hex, ...) reach XYZ through
sRGB.  Spaces that only exist for validation (``*_m`` short-key mappings,
HCL, HCY, RYB, TSL, xvYCC, YcCbcCrc) have no path and raise
``UnsupportedColorSpaceError``.

Usage:
    >>> convert(HSL(0, 100, 50), "hsl", "lab")
    LAB(luminance=53.24..., a=80.09..., b=67.20...)

    >>> a = Adapter(RGB(255, 0, 0), "rgb")
    >>> a.adapt("D65_D50", return_space="lab")
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping, Optional, Union

from tinct_adaptation import adapt
from tinct_exceptions import InvalidColorError, UnsupportedColorSpaceError
from tinct_spaces import RGB, XYZ, ColorSpace

from color_models import cie, cone, cylindrical, luma_chroma, oklab, rgb, subtractive

__all__ = ["TO_XYZ", "FROM_XYZ", "resolve_space", "to_xyz", "from_xyz", "convert", "Adapter"]

logger = logging.getLogger(__name__)

SpaceLike = Union[ColorSpace, str]


# =============================================================================
# 1. EDGES
# =============================================================================

def _via_rgb(to_rgb: Callable[[Any], RGB]) -> Callable[[Any], XYZ]:
    def edge(color: Any) -> XYZ:
        return rgb.srgb_to_xyz(to_rgb(color))
    return edge


def _from_rgb(from_rgb: Callable[[RGB], Any]) -> Callable[[XYZ], Any]:
    def edge(xyz: XYZ) -> Any:
        return from_rgb(rgb.xyz_to_srgb(xyz))
    return edge


def _hex_to_xyz(color: str) -> XYZ:
    parsed = rgb.hex_to_rgb(color)
    if parsed is None:
        raise InvalidColorError(f"Not a hex color: {color!r}")
    return rgb.srgb_to_xyz(parsed)


def _identity(color: XYZ) -> XYZ:
    return color


TO_XYZ: Final[Mapping[ColorSpace, Callable[[Any], XYZ]]] = MappingProxyType({
    ColorSpace.XYZ: _identity,
    ColorSpace.RGB: rgb.srgb_to_xyz,
    ColorSpace.RGBA: rgb.srgb_to_xyz,
    ColorSpace.HEX: _hex_to_xyz,
    ColorSpace.HSL: _via_rgb(cylindrical.hsl_to_rgb),
    ColorSpace.HSLA: _via_rgb(cylindrical.hsl_to_rgb),
    ColorSpace.HSV: _via_rgb(cylindrical.hsv_to_rgb),
    ColorSpace.HSVA: _via_rgb(cylindrical.hsv_to_rgb),
    ColorSpace.HWB: _via_rgb(cylindrical.hwb_to_rgb),
    ColorSpace.HSI: _via_rgb(cylindrical.hsi_to_rgb),
    ColorSpace.CMY: _via_rgb(subtractive.cmy_to_rgb),
    ColorSpace.CMYK: _via_rgb(subtractive.cmyk_to_rgb),
    ColorSpace.LAB: cie.lab_to_xyz,
    ColorSpace.LCH: cie.lch_ab_to_xyz,
    ColorSpace.LUV: cie.luv_to_xyz,
    ColorSpace.LCH_UV: cie.lch_uv_to_xyz,
    ColorSpace.HUNTER_LAB: cie.hunter_lab_to_xyz,
    ColorSpace.XYY: cie.xyy_to_xyz,
    ColorSpace.UVW: cie.uvw_to_xyz,
    ColorSpace.OKLAB: oklab.oklab_to_xyz,
    ColorSpace.OKLCH: lambda c: oklab.oklab_to_xyz(oklab.oklch_to_oklab(c)),
    ColorSpace.LMS: cone.lms_to_xyz,
    ColorSpace.YCBCR: _via_rgb(luma_chroma.ycbcr_to_rgb),
    ColorSpace.YPBPR: _via_rgb(luma_chroma.ypbpr_to_rgb),
    ColorSpace.YUV: _via_rgb(luma_chroma.yuv_to_rgb),
    ColorSpace.YIQ: _via_rgb(luma_chroma.yiq_to_rgb),
    ColorSpace.YDBDR: _via_rgb(luma_chroma.ydbdr_to_rgb),
    ColorSpace.YCOCG: _via_rgb(luma_chroma.ycocg_to_rgb),
})

FROM_XYZ: Final[Mapping[ColorSpace, Callable[[XYZ], Any]]] = MappingProxyType({
    ColorSpace.XYZ: _identity,
    ColorSpace.RGB: rgb.xyz_to_srgb,
    ColorSpace.RGBA: rgb.xyz_to_srgb,
    ColorSpace.HEX: _from_rgb(rgb.rgb_to_hex),
    ColorSpace.HSL: _from_rgb(cylindrical.rgb_to_hsl),
    ColorSpace.HSLA: _from_rgb(cylindrical.rgb_to_hsl),
    ColorSpace.HSV: _from_rgb(cylindrical.rgb_to_hsv),
    ColorSpace.HSVA: _from_rgb(cylindrical.rgb_to_hsv),
    ColorSpace.HWB: _from_rgb(cylindrical.rgb_to_hwb),
    ColorSpace.HSI: _from_rgb(cylindrical.rgb_to_hsi),
    ColorSpace.CMY: _from_rgb(subtractive.rgb_to_cmy),
    ColorSpace.CMYK: _from_rgb(subtractive.rgb_to_cmyk),
    ColorSpace.LAB: cie.xyz_to_lab,
    ColorSpace.LCH: cie.xyz_to_lch_ab,
    ColorSpace.LUV: cie.xyz_to_luv,
    ColorSpace.LCH_UV: cie.xyz_to_lch_uv,
    ColorSpace.HUNTER_LAB: cie.xyz_to_hunter_lab,
    ColorSpace.XYY: cie.xyz_to_xyy,
    ColorSpace.UVW: cie.xyz_to_uvw,
    ColorSpace.OKLAB: oklab.xyz_to_oklab,
    ColorSpace.OKLCH: lambda xyz: oklab.oklab_to_oklch(oklab.xyz_to_oklab(xyz)),
    ColorSpace.LMS: cone.xyz_to_lms,
    ColorSpace.YCBCR: _from_rgb(luma_chroma.rgb_to_ycbcr),
    ColorSpace.YPBPR: _from_rgb(luma_chroma.rgb_to_ypbpr),
    ColorSpace.YUV: _from_rgb(luma_chroma.rgb_to_yuv),
    ColorSpace.YIQ: _from_rgb(luma_chroma.rgb_to_yiq),
    ColorSpace.YDBDR: _from_rgb(luma_chroma.rgb_to_ydbdr),
    ColorSpace.YCOCG: _from_rgb(luma_chroma.rgb_to_ycocg),
})


# =============================================================================
# 2. DISPATCH
# =============================================================================

def resolve_space(space: SpaceLike) -> ColorSpace:
    """
    Maps a space name (any case) or member onto ``ColorSpace``.

    Raises:
        UnsupportedColorSpaceError: For names outside the enumeration.
    """
    try:
        return ColorSpace(space)
    except ValueError:
        raise UnsupportedColorSpaceError(f"Unknown color space: {space!r}") from None


def to_xyz(color: Any, space: SpaceLike) -> XYZ:
    key = resolve_space(space)
    edge = TO_XYZ.get(key)
    if edge is None:
        raise UnsupportedColorSpaceError(f"No conversion from {key.value!r} to XYZ")
    return edge(color)


def from_xyz(xyz: XYZ, space: SpaceLike) -> Any:
    key = resolve_space(space)
    edge = FROM_XYZ.get(key)
    if edge is None:
        raise UnsupportedColorSpaceError(f"No conversion from XYZ to {key.value!r}")
    return edge(xyz)


def convert(color: Any, source: SpaceLike, target: SpaceLike,
            adaptation: Optional[str] = None) -> Any:
    """
    Converts ``color`` from ``source`` to ``target`` through XYZ.

    Args:
        color: Record (or hex string) in the source space.
        source: Source space name or ``ColorSpace`` member.
        target: Target space name or member.
        adaptation: Optional illuminant pair key (``"D65_D50"``) applied
                    in XYZ between the two legs.

    Raises:
        UnsupportedColorSpaceError: If either space has no XYZ path.
        UnknownAdaptationError: If ``adaptation`` is not in the table.
        InvalidColorError: If a hex source string is malformed.
    """
    src, dst = resolve_space(source), resolve_space(target)
    xyz = to_xyz(color, src)
    if adaptation is not None:
        xyz = adapt(xyz, adaptation)
    logger.debug("convert %s -> xyz -> %s (adaptation=%s)", src.value, dst.value, adaptation)
    return from_xyz(xyz, dst)


# =============================================================================
# 3. ADAPTER
# =============================================================================

class Adapter:
    """
    Holds one color in XYZ and re-expresses it under other illuminants.

    Attributes:
        color: The held color in XYZ (0–100).  Defaults to the D65 white.
    """

    DEFAULT_COLOR: Final[XYZ] = XYZ(95.05, 100.0, 108.9)

    def __init__(self, color: Any = None, color_space: SpaceLike = ColorSpace.XYZ):
        self.color: XYZ = self.DEFAULT_COLOR if color is None else to_xyz(color, color_space)

    def __repr__(self) -> str:
        return f"Adapter(color={self.color!r})"

    def adapt(self, adaptation: str, return_space: SpaceLike = ColorSpace.XYZ) -> Any:
        """
        Adapts the held color with the pair ``adaptation`` (e.g. ``"A_D65"``)
        and returns it in ``return_space``.  The held color is unchanged.
        """
        return from_xyz(adapt(self.color, adaptation), return_space)

    def set(self, color: Any, color_space: SpaceLike = ColorSpace.XYZ) -> None:
        """Replaces the held color."""
        self.color = to_xyz(color, color_space)

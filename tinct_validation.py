# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_validation.py — Field and range checks per color space.

Two entry points, both keyed by a ``ColorSpace`` (or its name in any case):

    is_valid_color(space, color)    required fields present and in range
    sanitize_color(space, color)    clamp fields into range

Colors may be Tinct records (``RGB(255, 0, 0)``) or plain mappings
(``{"r": 255, "g": 0, "b": 0}`` for ``rgb_m``).  Hex colors are strings.

Sanitizing leaves unknown spaces alone: the color is returned unchanged.
Validating an unknown space answers False.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from numbers import Real
from types import MappingProxyType
from typing import Any, Final, Mapping, NamedTuple, Optional, Union

from tinct_spaces import ColorSpace

__all__ = ["FieldBound", "VALIDATION_RULES", "SANITIZE_RULES", "is_valid_color", "sanitize_color"]

logger = logging.getLogger(__name__)

SpaceLike = Union[ColorSpace, str]


class FieldBound(NamedTuple):
    """
    One field of a color space.

    ``lo`` / ``hi`` of None leave that side open.  Optional fields (alpha on
    the non-alpha spaces) are only checked when present.
    """
    field: str
    lo: Optional[float] = None
    hi: Optional[float] = None
    optional: bool = False


def _fields(*bounds: tuple) -> tuple[FieldBound, ...]:
    return tuple(FieldBound(*b) for b in bounds)


# =============================================================================
# 1. RULE TABLES
# =============================================================================

_RGB: Final = (("red", 0, 255), ("green", 0, 255), ("blue", 0, 255))
_RGB_M: Final = (("r", 0, 255), ("g", 0, 255), ("b", 0, 255))
_HSL: Final = (("hue", 0, 360), ("saturation", 0, 100), ("lightness", 0, 100))
_HSV: Final = (("hue", 0, 360), ("saturation", 0, 100), ("value", 0, 100))
_CMY: Final = (("cyan", 0, 100), ("magenta", 0, 100), ("yellow", 0, 100))
_CMY_M: Final = (("c", 0, 100), ("m", 0, 100), ("y", 0, 100))
_ALPHA: Final = ("alpha", 0, 1)
_ALPHA_OPT: Final = ("alpha", 0, 1, True)

VALIDATION_RULES: Final[Mapping[ColorSpace, tuple[FieldBound, ...]]] = MappingProxyType({
    ColorSpace.RGB: _fields(*_RGB),
    ColorSpace.RGB_M: _fields(*_RGB_M),
    ColorSpace.RGBA: _fields(*_RGB, _ALPHA),
    ColorSpace.RGBA_M: _fields(*_RGB_M, ("a", 0, 1)),
    ColorSpace.HSL: _fields(*_HSL),
    ColorSpace.HSL_M: _fields(("h", 0, 360), ("s", 0, 100), ("l", 0, 100)),
    ColorSpace.HSV: _fields(*_HSV),
    ColorSpace.HSV_M: _fields(("h", 0, 360), ("s", 0, 100), ("v", 0, 100)),
    ColorSpace.HSLA: _fields(*_HSL, _ALPHA),
    ColorSpace.HSVA: _fields(*_HSV, _ALPHA),
    ColorSpace.CMY: _fields(*_CMY),
    ColorSpace.CMY_M: _fields(*_CMY_M),
    ColorSpace.CMYK: _fields(*_CMY, ("key", 0, 100)),
    ColorSpace.CMYK_M: _fields(*_CMY_M, ("k", 0, 100)),
    ColorSpace.LAB: _fields(("luminance", 0, 100), ("a",), ("b",)),
    ColorSpace.LAB_M: _fields(("l", 0, 100), ("a",), ("b",)),
    ColorSpace.LCH: _fields(("lightness", 0, 100), ("chroma",), ("hue", 0, 360)),
    ColorSpace.LCH_M: _fields(("l", 0, 100), ("c",), ("h", 0, 360)),
    ColorSpace.HCL: _fields(("hue", 0, 360), ("chroma",), ("luminance", 0, 100)),
    ColorSpace.HCL_M: _fields(("h", 0, 360), ("c",), ("l", 0, 100)),
    ColorSpace.HCY: _fields(("hue", 0, 360), ("chroma",), ("Yluminance",)),
    ColorSpace.HCY_M: _fields(("h", 0, 360), ("c",), ("y",)),
    ColorSpace.HSI: _fields(("hue", 0, 360), ("saturation", 0, 100), ("intensity", 0, 100)),
    ColorSpace.HWB: _fields(("hue", 0, 360), ("whiteness", 0, 100), ("blackness", 0, 100)),
    ColorSpace.HWB_M: _fields(("h", 0, 360), ("w", 0, 100), ("b", 0, 100)),
    ColorSpace.LMS: _fields(("long",), ("medium",), ("short",)),
    ColorSpace.LUV: _fields(("L",), ("u",), ("v",)),
    ColorSpace.RYB: _fields(("red", 0, 255), ("yellow", 0, 255), ("blue", 0, 255)),
    ColorSpace.RYB_M: _fields(("r", 0, 255), ("y", 0, 255), ("b", 0, 255)),
    ColorSpace.TSL: _fields(("tint",), ("saturation",), ("lightness",)),
    ColorSpace.UVW: _fields(("u",), ("v",), ("w",)),
    ColorSpace.XVYCC: _fields(("Y",), ("Cb",), ("Cr",)),
    ColorSpace.XYY: _fields(("x",), ("y",), ("Y",)),
    ColorSpace.XYZ: _fields(("x",), ("y",), ("z",)),
    ColorSpace.YCBCR: _fields(("Y",), ("Cb",), ("Cr",)),
    ColorSpace.YCCBCCRC: _fields(("Yc",), ("Cbc",), ("Crc",)),
    ColorSpace.YCOCG: _fields(("Y",), ("Co",), ("Cg",)),
    ColorSpace.YDBDR: _fields(("Y",), ("Db",), ("Dr",)),
    ColorSpace.YIQ: _fields(("Y",), ("I",), ("Q",)),
    ColorSpace.YPBPR: _fields(("Y",), ("Pb",), ("Pr",)),
    ColorSpace.YUV: _fields(("y",), ("u",), ("v",)),
})

# Clamp ranges.  Spaces missing here (HCL, YUV, OKLab, ...) pass through.
SANITIZE_RULES: Final[Mapping[ColorSpace, tuple[FieldBound, ...]]] = MappingProxyType({
    ColorSpace.RGB: _fields(*_RGB, _ALPHA_OPT),
    ColorSpace.RGBA: _fields(*_RGB, _ALPHA_OPT),
    ColorSpace.RGB_M: _fields(*_RGB_M),
    ColorSpace.RGBA_M: _fields(*_RGB_M),
    ColorSpace.HSL: _fields(*_HSL, _ALPHA_OPT),
    ColorSpace.HSLA: _fields(*_HSL, _ALPHA_OPT),
    ColorSpace.HSL_M: _fields(("h", 0, 360), ("s", 0, 100), ("l", 0, 100)),
    ColorSpace.HSV: _fields(*_HSV, _ALPHA_OPT),
    ColorSpace.HSVA: _fields(*_HSV, _ALPHA_OPT),
    ColorSpace.HSV_M: _fields(("h", 0, 360), ("s", 0, 100), ("v", 0, 100)),
    ColorSpace.HWB: _fields(("hue", 0, 360), ("whiteness", 0, 100), ("blackness", 0, 100)),
    ColorSpace.HWB_M: _fields(("h", 0, 360), ("w", 0, 100), ("b", 0, 100)),
    ColorSpace.CMY: _fields(*_CMY),
    ColorSpace.CMY_M: _fields(*_CMY_M),
    ColorSpace.CMYK: _fields(*_CMY, ("key", 0, 100)),
    ColorSpace.CMYK_M: _fields(*_CMY_M, ("k", 0, 100)),
    ColorSpace.LAB: _fields(("luminance", 0, 100), ("a", -128, 127), ("b", -128, 127)),
    ColorSpace.LAB_M: _fields(("l", 0, 100), ("a", -128, 127), ("b", -128, 127)),
    ColorSpace.LCH: _fields(("lightness", 0, 100), ("chroma", 0), ("hue", 0, 360)),
    ColorSpace.LCH_M: _fields(("l", 0, 100), ("c", 0), ("h", 0, 360)),
    ColorSpace.HCY: _fields(("hue", 0, 360), ("chroma", 0, 100), ("Yluminance", 0, 100)),
    ColorSpace.HCY_M: _fields(("h", 0, 360), ("c", 0, 100), ("y", 0, 100)),
    ColorSpace.RYB: _fields(("red", 0, 255), ("yellow", 0, 255), ("blue", 0, 255)),
    ColorSpace.RYB_M: _fields(("r", 0, 255), ("y", 0, 255), ("b", 0, 255)),
    ColorSpace.HSI: _fields(("hue", 0, 360), ("saturation", 0, 100), ("intensity", 0, 100)),
    ColorSpace.LMS: _fields(("long", 0), ("medium", 0), ("short", 0)),
    # u and v are signed
    ColorSpace.LUV: _fields(("L", 0)),
    ColorSpace.TSL: _fields(("tint", 0, 1), ("saturation", 0, 1), ("lightness", 0, 1)),
    ColorSpace.UVW: _fields(("u", -100, 100), ("v", -100, 100), ("w", 0, 100)),
    ColorSpace.XVYCC: _fields(("Y", 0, 255), ("Cb", 0, 255), ("Cr", 0, 255)),
    ColorSpace.XYZ: _fields(("x", 0), ("y", 0), ("z", 0)),
    ColorSpace.XYY: _fields(("x", 0, 1), ("y", 0, 1), ("Y", 0)),
    ColorSpace.YCBCR: _fields(("Y", 0, 255), ("Cb", 0, 255), ("Cr", 0, 255)),
    ColorSpace.YCCBCCRC: _fields(("Yc", 0, 255), ("Cbc", 0, 255), ("Crc", 0, 255)),
    ColorSpace.YCOCG: _fields(("Y", 0, 255), ("Co", -255, 255), ("Cg", -255, 255)),
    ColorSpace.YDBDR: _fields(("Y", 0, 255), ("Db", -255, 255), ("Dr", -255, 255)),
    ColorSpace.YIQ: _fields(("Y", 0, 255), ("I", -255, 255), ("Q", -255, 255)),
    ColorSpace.YPBPR: _fields(("Y", 0, 255), ("Pb", -255, 255), ("Pr", -255, 255)),
})

_HEX_VALID = re.compile(r"^[0-9A-F]{3,6}$", re.IGNORECASE)
_NON_HEX = re.compile(r"[^0-9A-F]", re.IGNORECASE)


# =============================================================================
# 2. FIELD ACCESS
# =============================================================================

def _is_color_object(color: Any) -> bool:
    return isinstance(color, Mapping) or (dataclasses.is_dataclass(color) and not isinstance(color, type))


def _get(color: Any, name: str) -> Any:
    """Field value, or None when the field is absent."""
    if isinstance(color, Mapping):
        return color.get(name)
    return getattr(color, name, None)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _in_range(value: Any, bound: FieldBound) -> bool:
    if not _is_number(value):
        return False
    if bound.lo is not None and value < bound.lo:
        return False
    if bound.hi is not None and value > bound.hi:
        return False
    return True


def _clamp(value: float, bound: FieldBound) -> float:
    if bound.lo is not None and value < bound.lo:
        return bound.lo
    if bound.hi is not None and value > bound.hi:
        return bound.hi
    return value


def _lookup(space: SpaceLike) -> Optional[ColorSpace]:
    try:
        return ColorSpace(space)
    except ValueError:
        return None


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def is_valid_color(space: SpaceLike, color: Any) -> bool:
    """
    Checks that ``color`` carries every field of ``space`` within range.

    Args:
        space: Space name (case-insensitive) or ``ColorSpace`` member.
        color: Record, mapping, or hex string for ``"hex"``.

    Returns:
        True when valid.  Unknown spaces and non-color inputs give False.
    """
    key = _lookup(space)
    if key is ColorSpace.HEX:
        return isinstance(color, str) and _HEX_VALID.match(color) is not None
    if key is None or not _is_color_object(color):
        return False

    rules = VALIDATION_RULES.get(key)
    if rules is None:
        return False
    for bound in rules:
        value = _get(color, bound.field)
        if value is None:
            if bound.optional:
                continue
            return False
        if not _in_range(value, bound):
            return False
    return True


def sanitize_color(space: SpaceLike, color: Any) -> Any:
    """
    Clamps every field of ``color`` into the range of ``space``.

    Records come back as a new record of the same type, mappings as a new
    dict; the input is never mutated.

    Hex strings are stripped of non-hex characters and upper-cased; three
    digits are expanded to six.  Any other length gives None.

    Returns:
        The sanitized color, ``color`` itself for a space without clamp
        rules, or None when ``color`` is not a record or mapping or lacks a
        required field.
    """
    key = _lookup(space)
    if key is ColorSpace.HEX:
        if not isinstance(color, str):
            return None
        digits = _NON_HEX.sub("", color).upper()
        if len(digits) == 3:
            return "".join(ch * 2 for ch in digits)
        return digits if len(digits) == 6 else None

    if not _is_color_object(color):
        return None

    rules = SANITIZE_RULES.get(key) if key is not None else None
    if rules is None:
        logger.debug("No sanitizer for space %r; color passed through", space)
        return color

    updates: dict[str, float] = {}
    for bound in rules:
        value = _get(color, bound.field)
        if value is None:
            if bound.optional:
                continue
            logger.debug("Color %r lacks field %r of space %r", color, bound.field, space)
            return None
        updates[bound.field] = _clamp(value, bound)

    if isinstance(color, Mapping):
        return {**color, **updates}
    return dataclasses.replace(color, **updates)

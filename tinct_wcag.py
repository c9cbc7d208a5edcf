# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_wcag.py — WCAG 2.x relative luminance and contrast.

WCAG defines its own luminance: sRGB linearised with the 0.03928 threshold
of the 1999 sRGB draft and weighted with the Rec. 709 coefficients.  The
0.04045 threshold used elsewhere in Tinct is not applied here
so results match published WCAG tooling.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Literal, Mapping

from tinct_constants import RGB_MAX, SRGB_GAMMA, WCAG_LINEAR_BELOW
from tinct_spaces import RGB

__all__ = ["CONTRAST_REQUIREMENTS", "get_luminance", "contrast_ratio", "is_accessible"]

Level = Literal["AA", "AAA"]
TextSize = Literal["normal", "large"]

CONTRAST_REQUIREMENTS: Final[Mapping[str, Mapping[str, float]]] = MappingProxyType({
    "AA": MappingProxyType({"normal": 4.5, "large": 3.0}),
    "AAA": MappingProxyType({"normal": 7.0, "large": 4.5}),
})


def _linear(channel: float) -> float:
    v = channel / RGB_MAX
    return v / 12.92 if v <= WCAG_LINEAR_BELOW else ((v + 0.055) / 1.055) ** SRGB_GAMMA


def get_luminance(rgb: RGB) -> float:
    """Relative luminance on [0, 1] (black 0, white 1)."""
    return 0.2126 * _linear(rgb.red) + 0.7152 * _linear(rgb.green) + 0.0722 * _linear(rgb.blue)


def contrast_ratio(color1: RGB, color2: RGB) -> float:
    """``(L_lighter + 0.05) / (L_darker + 0.05)``, from 1 up to 21."""
    l1, l2 = get_luminance(color1), get_luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def is_accessible(text_color: RGB, background_color: RGB,
                  level: Level = "AA", size: TextSize = "normal") -> bool:
    """
    Whether the text / background pair meets the WCAG contrast minimum.

    Args:
        level: ``"AA"`` or ``"AAA"``.
        size: ``"normal"`` or ``"large"`` text.

    Raises:
        KeyError: For an unknown level or size.
    """
    return contrast_ratio(text_color, background_color) >= CONTRAST_REQUIREMENTS[level][size]

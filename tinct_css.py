# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_css.py — CSS Color Module 4 strings to sRGB.

Supported notations (comma or space separated, case-insensitive):

    #rgb  #rgba  #rrggbb  #rrggbbaa
    rgb() / rgba()      numbers 0–255 or percentages of 255
    hsl() / hsla()      hue in degrees, saturation and lightness in percent
    hwb()
    lab()  lch()        CIE, D65
    oklab()  oklch()

Every parser returns an ``RGB`` or None when the string does not match its
grammar.  ``from_css_string`` tries them in the order above.

    >>> from_css_string("rgb(50%, 0%, 0%)")
    RGB(red=127.5, green=0.0, blue=0.0, alpha=None, in_gamut=True)
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Final, Optional

from tinct_spaces import HSL, HWB, LAB, LCH, OKLCH, RGB, OKLab

from color_models.cie import lab_to_srgb, lch_ab_to_lab
from color_models.cylindrical import hsl_to_rgb, hwb_to_rgb
from color_models.oklab import oklab_to_srgb, oklch_to_srgb
from color_models.rgb import hex_to_rgb

__all__ = [
    "parse_hex",
    "parse_rgb",
    "parse_hsl",
    "parse_hwb",
    "parse_lab",
    "parse_lch",
    "parse_oklab",
    "parse_oklch",
    "from_css_string",
]

logger = logging.getLogger(__name__)

_ARG: Final[str] = r"([^,)\s]+)"
_SEP: Final[str] = r"\s*[, ]\s*"
_ALPHA_ARG: Final[str] = r"(?:\s*[,/]\s*([^)\s]+))?"


def _functional(names: str, with_alpha: bool) -> re.Pattern:
    tail = _ALPHA_ARG if with_alpha else ""
    return re.compile(rf"^{names}\(\s*{_ARG}{_SEP}{_ARG}{_SEP}{_ARG}{tail}\s*\)$", re.IGNORECASE)


_RGB_RE: Final = _functional("rgba?", True)
_HSL_RE: Final = _functional("hsla?", True)
_HWB_RE: Final = _functional("hwb", True)
_LAB_RE: Final = _functional("lab", False)
_LCH_RE: Final = _functional("lch", False)
_OKLAB_RE: Final = _functional("oklab", False)
_OKLCH_RE: Final = _functional("oklch", False)

_HEX_BODY: Final = re.compile(r"^[0-9a-f]{3,8}$", re.IGNORECASE)
# Leading decimal number, the way CSS tokens such as "120deg" or "50%" start.
_NUMBER: Final = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


# =============================================================================
# 1. TOKENS
# =============================================================================

def _number(token: str) -> Optional[float]:
    match = _NUMBER.match(token)
    return float(match.group(0)) if match else None


def _value(token: str, maximum: float) -> Optional[float]:
    """Absolute number, or a percentage of ``maximum``."""
    n = _number(token)
    if n is None:
        return None
    return n * maximum / 100.0 if token.endswith("%") else n


def _numbers(*values: Optional[float]) -> bool:
    return all(v is not None for v in values)


# =============================================================================
# 2. PARSERS
# =============================================================================

def parse_hex(css: str) -> Optional[RGB]:
    if not css.startswith("#"):
        return None
    body = css[1:].strip()
    if not _HEX_BODY.match(body):
        return None
    return hex_to_rgb(body)


def parse_rgb(css: str) -> Optional[RGB]:
    """
    ``rgb(255 0 0)``, ``rgb(100%, 0%, 0%)``, ``rgba(255, 0, 0, 0.5)``.

    Channels are kept exactly as written (no rounding), so percentages can
    give fractional values.  ``in_gamut`` is always True.
    """
    match = _RGB_RE.match(css)
    if not match:
        return None
    red, green, blue = (_value(t, 255.0) for t in match.group(1, 2, 3))
    if not _numbers(red, green, blue):
        return None
    alpha = _value(match.group(4), 1.0) if match.group(4) else None
    return RGB(red, green, blue, alpha=alpha, in_gamut=True)


def parse_hsl(css: str) -> Optional[RGB]:
    match = _HSL_RE.match(css)
    if not match:
        return None
    hue = _value(match.group(1), 360.0)
    saturation, lightness = _number(match.group(2)), _number(match.group(3))
    if not _numbers(hue, saturation, lightness):
        return None
    alpha = _value(match.group(4), 1.0) if match.group(4) else None
    return hsl_to_rgb(HSL(hue, saturation, lightness, alpha=alpha))


def parse_hwb(css: str) -> Optional[RGB]:
    match = _HWB_RE.match(css)
    if not match:
        return None
    hue = _value(match.group(1), 360.0)
    whiteness, blackness = _number(match.group(2)), _number(match.group(3))
    if not _numbers(hue, whiteness, blackness):
        return None
    return hwb_to_rgb(HWB(hue, whiteness, blackness))


def parse_lab(css: str) -> Optional[RGB]:
    match = _LAB_RE.match(css)
    if not match:
        return None
    luminance, a, b = (_number(t) for t in match.group(1, 2, 3))
    if not _numbers(luminance, a, b):
        return None
    return lab_to_srgb(LAB(luminance, a, b))


def parse_lch(css: str) -> Optional[RGB]:
    match = _LCH_RE.match(css)
    if not match:
        return None
    lightness, chroma, hue = (_number(t) for t in match.group(1, 2, 3))
    if not _numbers(lightness, chroma, hue):
        return None
    return lab_to_srgb(lch_ab_to_lab(LCH(lightness, chroma, hue)))


def parse_oklab(css: str) -> Optional[RGB]:
    """``oklab(L a b)`` with L on 0–1.  Out-of-gamut channels are not clipped."""
    match = _OKLAB_RE.match(css)
    if not match:
        return None
    luminance, a, b = (_number(t) for t in match.group(1, 2, 3))
    if not _numbers(luminance, a, b):
        return None
    return oklab_to_srgb(OKLab(luminance, a, b))


def parse_oklch(css: str) -> Optional[RGB]:
    match = _OKLCH_RE.match(css)
    if not match:
        return None
    lightness, chroma, hue = (_number(t) for t in match.group(1, 2, 3))
    if not _numbers(lightness, chroma, hue):
        return None
    return oklch_to_srgb(OKLCH(lightness, chroma, hue))


_PARSERS: Final[tuple[Callable[[str], Optional[RGB]], ...]] = (
    parse_hex,
    parse_rgb,
    parse_hsl,
    parse_hwb,
    parse_lab,
    parse_lch,
    parse_oklab,
    parse_oklch,
)


def from_css_string(css: Optional[str]) -> Optional[RGB]:
    """
    Parses any supported CSS color string.

    Returns:
        The first parser's result, or None for empty input and strings no
        parser accepts.
    """
    if not css:
        return None
    css = css.strip()
    for parser in _PARSERS:
        result = parser(css)
        if result is not None:
            return result
    logger.debug("Unrecognised CSS color %r", css)
    return None

# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_validation.py — range checks and clamping per color space.
"""

import pytest

from tinct_spaces import HSL, LAB, LCH, LUV, RGB, XYZ, ColorSpace, OKLab
from tinct_validation import SANITIZE_RULES, VALIDATION_RULES, is_valid_color, sanitize_color


# --- is_valid_color ---

@pytest.mark.parametrize("space, color", [
    ("rgb", RGB(255, 0, 0)),
    ("RGB", {"red": 0, "green": 128.5, "blue": 255}),
    (ColorSpace.RGB, RGB(0, 0, 0)),
    ("rgba", RGB(1, 2, 3, alpha=0.5)),
    ("rgb_m", {"r": 1, "g": 2, "b": 3}),
    ("hsl", HSL(360.0, 0.0, 100.0)),
    ("lab", LAB(50.0, 200.0, -300.0)),
    ("lch", LCH(50.0, 10.0, 359.0)),
    ("xyz", XYZ(95.0, 100.0, 108.0)),
    ("luv", LUV(50.0, -80.0, 90.0)),
    ("hcl", {"hue": 10, "chroma": 20, "luminance": 30}),
    ("yccbccrc", {"Yc": 1, "Cbc": 2, "Crc": 3}),
])
def test_valid(space, color):
    assert is_valid_color(space, color) is True


@pytest.mark.parametrize("space, color", [
    ("rgb", RGB(256, 0, 0)),
    ("rgb", {"red": -1, "green": 0, "blue": 0}),
    ("rgb", {"red": 1, "green": 2}),
    ("rgb", {"red": True, "green": 0, "blue": 0}),
    ("rgb", {"red": "1", "green": 0, "blue": 0}),
    ("rgba", RGB(1, 2, 3)),
    ("rgba", RGB(1, 2, 3, alpha=1.5)),
    ("lch", LCH(50.0, 10.0, 400.0)),
    ("lab", LAB(101.0, 0.0, 0.0)),
    ("lab", RGB(1, 2, 3)),
    ("rgb", "red"),
    ("rgb", None),
    ("rgb", RGB),
    ("nope", {"red": 1, "green": 2, "blue": 3}),
    ("oklab", OKLab(0.5, 0.0, 0.0)),
])
def test_invalid(space, color):
    assert is_valid_color(space, color) is False


@pytest.mark.parametrize("color, expected", [
    ("FFF", True),
    ("abcdef", True),
    ("12345", True),
    ("#FFF", False),
    ("GGG", False),
    ("FF", False),
    ("1234567", False),
    (0xFFFFFF, False),
])
def test_hex(color, expected):
    assert is_valid_color("hex", color) is expected


def test_every_rule_names_a_space():
    for rules in (VALIDATION_RULES, SANITIZE_RULES):
        assert all(isinstance(space, ColorSpace) for space in rules)


# --- sanitize_color ---

def test_sanitize_lab_record():
    assert sanitize_color("lab", LAB(150.0, 200.0, -300.0)) == LAB(100.0, 127.0, -128.0)


def test_sanitize_rgb_with_alpha():
    assert sanitize_color("rgb", RGB(300, -5, 10, alpha=2.0)) == RGB(255, 0, 10, alpha=1.0)


def test_sanitize_rgb_without_alpha():
    assert sanitize_color("rgb", RGB(300, -5, 10)) == RGB(255, 0, 10)


def test_sanitize_keeps_in_range_values():
    color = RGB(10, 20, 30, alpha=0.5)
    assert sanitize_color("rgba", color) == color


def test_sanitize_mapping_returns_new_dict():
    color = {"r": 300, "g": 1, "b": 2, "extra": "x"}
    result = sanitize_color("rgb_m", color)
    assert result == {"r": 255, "g": 1, "b": 2, "extra": "x"}
    assert color["r"] == 300


def test_sanitize_lower_bound_only():
    assert sanitize_color("xyz", XYZ(-1.0, 5.0, -0.5)) == XYZ(0.0, 5.0, 0.0)
    assert sanitize_color("luv", LUV(-5.0, -20.0, 30.0)) == LUV(0.0, -20.0, 30.0)


def test_sanitize_missing_field():
    assert sanitize_color("lab", RGB(1, 2, 3)) is None
    assert sanitize_color("rgb", {"red": 1}) is None


def test_sanitize_non_color():
    assert sanitize_color("rgb", 5) is None
    assert sanitize_color("rgb", "red") is None


def test_sanitize_without_rules_passes_through():
    color = {"q": 1}
    assert sanitize_color("unknown", color) is color
    oklab = OKLab(2.0, 1.0, 1.0)
    assert sanitize_color("oklab", oklab) is oklab


@pytest.mark.parametrize("color, expected", [
    ("#abc", "AABBCC"),
    ("zz12ab34", "12AB34"),
    ("#FF00ff", "FF00FF"),
    ("1234", None),
    ("", None),
    (123, None),
])
def test_sanitize_hex(color, expected):
    assert sanitize_color("hex", color) == expected

# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_transfer.py — sRGB companding, Lab companding, hue wrapping.
"""

import numpy as np
import pytest

from color_models import transfer
from color_models.transfer import (
    lab_f,
    lab_f_inv,
    linear_val_to_srgb_val,
    normalize_hue,
    srgb_val_to_linear_val,
)


@pytest.fixture
def strict_ieee():
    transfer.set_strict_ieee(True)
    try:
        yield
    finally:
        transfer.set_strict_ieee(False)


def test_mid_gray():
    """sRGB 0.5 linearises to ((0.5 + 0.055) / 1.055) ** 2.4."""
    assert srgb_val_to_linear_val(0.5) == pytest.approx(0.21404114, abs=1e-7)


def test_black_and_white_are_fixed_points():
    assert srgb_val_to_linear_val(0.0) == 0.0
    assert linear_val_to_srgb_val(0.0) == 0.0
    assert srgb_val_to_linear_val(1.0) == pytest.approx(1.0)
    assert linear_val_to_srgb_val(1.0) == pytest.approx(1.0)


def test_encode_continuous_at_threshold():
    """Both branches of the OETF meet near (0.0031308, 0.04045)."""
    below = linear_val_to_srgb_val(0.0031308 - 1e-9)
    above = linear_val_to_srgb_val(0.0031308 + 1e-9)
    assert below == pytest.approx(0.04045, abs=1e-4)
    assert above == pytest.approx(0.04045, abs=1e-4)


def test_decode_continuous_at_threshold():
    assert srgb_val_to_linear_val(0.04045) == pytest.approx(0.0031308, abs=1e-6)
    assert srgb_val_to_linear_val(0.04046) == pytest.approx(0.0031308, abs=1e-5)


def test_linear_segment():
    assert srgb_val_to_linear_val(0.02) == pytest.approx(0.02 / 12.92)
    assert linear_val_to_srgb_val(0.001) == pytest.approx(0.01292)


def test_monotonic():
    values = np.linspace(0.0, 1.0, 101)
    encoded = [linear_val_to_srgb_val(v) for v in values]
    assert np.all(np.diff(encoded) > 0)


@pytest.mark.parametrize("v", [0.0, 0.001, 0.2, 0.5, 0.9, 1.0])
def test_encode_decode_inverse(v):
    assert srgb_val_to_linear_val(linear_val_to_srgb_val(v)) == pytest.approx(v, abs=1e-12)


@pytest.mark.parametrize("t", [0.0, 0.001, 0.008, 0.2, 0.5, 1.0])
def test_lab_companding_inverse(t):
    assert lab_f_inv(lab_f(t)) == pytest.approx(t, abs=1e-12)


def test_lab_f_branches():
    assert lab_f(1.0) == pytest.approx(1.0)
    assert lab_f(0.0) == pytest.approx(16.0 / 116.0)


def test_strict_mode_toggle(strict_ieee):
    assert transfer.is_strict_ieee()
    assert srgb_val_to_linear_val(0.5) == pytest.approx(0.21404114, abs=1e-7)
    assert lab_f(0.5) == pytest.approx(0.5 ** (1.0 / 3.0), abs=1e-12)


def test_strict_mode_matches_fast_mode():
    fast = [linear_val_to_srgb_val(v) for v in (0.001, 0.18, 0.7)]
    transfer.set_strict_ieee(True)
    try:
        strict = [linear_val_to_srgb_val(v) for v in (0.001, 0.18, 0.7)]
    finally:
        transfer.set_strict_ieee(False)
    assert not transfer.is_strict_ieee()
    np.testing.assert_allclose(fast, strict, rtol=1e-12)


@pytest.mark.parametrize("hue, expected", [
    (0.0, 0.0),
    (360.0, 0.0),
    (-30.0, 330.0),
    (725.0, 5.0),
    (-1e-17, 0.0),
])
def test_normalize_hue(hue, expected):
    result = normalize_hue(hue)
    assert 0.0 <= result < 360.0
    assert result == pytest.approx(expected)

# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_luma_chroma.py — video encodings and LMS cone space.
"""

import dataclasses

import pytest

from tinct_spaces import RGB, XYZ, YCbCr, YCoCg

from color_models import luma_chroma
from color_models.cone import lms_to_xyz, xyz_to_lms

SAMPLES = [(0, 0, 0), (255, 255, 255), (255, 0, 0), (12, 200, 90), (128, 64, 250)]

ENCODINGS = [
    (luma_chroma.rgb_to_ycbcr, luma_chroma.ycbcr_to_rgb),
    (luma_chroma.rgb_to_ypbpr, luma_chroma.ypbpr_to_rgb),
    (luma_chroma.rgb_to_yuv, luma_chroma.yuv_to_rgb),
    (luma_chroma.rgb_to_yiq, luma_chroma.yiq_to_rgb),
    (luma_chroma.rgb_to_ydbdr, luma_chroma.ydbdr_to_rgb),
    (luma_chroma.rgb_to_ycocg, luma_chroma.ycocg_to_rgb),
]


@pytest.mark.parametrize("encode, decode", ENCODINGS)
@pytest.mark.parametrize("channels", SAMPLES)
def test_round_trip(encode, decode, channels):
    rgb = decode(encode(RGB(*channels)))
    assert (rgb.red, rgb.green, rgb.blue) == channels
    assert rgb.in_gamut is True


@pytest.mark.parametrize("encode, decode", ENCODINGS)
def test_luma_of_white(encode, decode):
    """Luma rows sum to one, so white carries full-scale luma."""
    value = encode(RGB(255, 255, 255))
    luma = dataclasses.astuple(value)[0]
    expected = 235.0 if isinstance(value, YCbCr) else 255.0
    assert luma == pytest.approx(expected, abs=1e-3)


def test_ycbcr_studio_swing():
    white = luma_chroma.rgb_to_ycbcr(RGB(255, 255, 255))
    black = luma_chroma.rgb_to_ycbcr(RGB(0, 0, 0))
    assert (white.Y, white.Cb, white.Cr) == pytest.approx((235.0, 128.0, 128.0), abs=1e-9)
    assert (black.Y, black.Cb, black.Cr) == pytest.approx((16.0, 128.0, 128.0), abs=1e-9)


def test_ypbpr_white_is_neutral():
    white = luma_chroma.rgb_to_ypbpr(RGB(255, 255, 255))
    assert (white.Y, white.Pb, white.Pr) == pytest.approx((255.0, 0.0, 0.0), abs=1e-6)


def test_ycocg_red():
    assert luma_chroma.rgb_to_ycocg(RGB(255, 0, 0)) == YCoCg(63.75, 127.5, -63.75)


def test_decoder_clips_by_default():
    clipped = luma_chroma.ycocg_to_rgb(YCoCg(255.0, 200.0, 0.0))
    assert clipped.in_gamut is False
    assert clipped.red == 255

    raw = luma_chroma.ycocg_to_rgb(YCoCg(255.0, 200.0, 0.0), clip=False)
    assert raw.red == 455


# --- LMS ---

def test_d65_white_is_balanced():
    lms = xyz_to_lms(XYZ(95.047, 100.0, 108.883))
    assert (lms.long, lms.medium, lms.short) == pytest.approx((100.0, 100.0, 100.0), abs=0.05)


@pytest.mark.parametrize("xyz", [XYZ(41.24, 21.26, 1.93), XYZ(20.0, 30.0, 40.0), XYZ(0.0, 0.0, 0.0)])
def test_lms_round_trip(xyz):
    back = lms_to_xyz(xyz_to_lms(xyz))
    assert (back.x, back.y, back.z) == pytest.approx((xyz.x, xyz.y, xyz.z), abs=1e-9)

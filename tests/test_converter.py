# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_converter.py — XYZ-hub dispatch and the Adapter.
"""

import pytest

from tinct_converter import FROM_XYZ, TO_XYZ, Adapter, convert, from_xyz, resolve_space, to_xyz
from tinct_exceptions import InvalidColorError, UnknownAdaptationError, UnsupportedColorSpaceError
from tinct_spaces import LAB, RGB, XYZ, ColorSpace

# Spaces whose values can be compared after a trip out of and back into RGB.
ROUND_TRIP_SPACES = sorted(set(TO_XYZ) & set(FROM_XYZ), key=lambda s: s.value)


def _channels(rgb):
    return rgb.red, rgb.green, rgb.blue


def test_rgb_to_lab():
    lab = convert(RGB(255, 0, 0), "rgb", "lab")
    assert (lab.luminance, lab.a, lab.b) == pytest.approx((53.2408, 80.0925, 67.2032), abs=0.01)


def test_hex_in_and_out():
    assert convert(RGB(255, 0, 0), "rgb", "hex") == "#FF0000"
    assert _channels(convert("#ff0000", "hex", "rgb")) == (255, 0, 0)


def test_space_names_are_case_insensitive():
    assert convert(RGB(10, 20, 30), "RGB", "Lab") == convert(RGB(10, 20, 30), ColorSpace.RGB, ColorSpace.LAB)


@pytest.mark.parametrize("space", ROUND_TRIP_SPACES, ids=lambda s: s.value)
@pytest.mark.parametrize("channels", [(12, 200, 90), (255, 255, 255), (128, 64, 250)])
def test_round_trip_through_every_space(space, channels):
    there = convert(RGB(*channels), "rgb", space)
    back = convert(there, space, "rgb")
    assert _channels(back) == channels


def test_to_and_from_xyz():
    xyz = to_xyz(RGB(255, 255, 255), "rgb")
    assert (xyz.x, xyz.y, xyz.z) == pytest.approx((95.047, 100.0, 108.883), abs=1e-3)
    assert _channels(from_xyz(xyz, "rgb")) == (255, 255, 255)


def test_adaptation_between_legs():
    white_a = XYZ(109.850, 100.0, 35.585)
    result = convert(white_a, "xyz", "xyz", adaptation="A_D65")
    assert (result.x, result.y, result.z) == pytest.approx((95.047, 100.0, 108.883), abs=1e-6)


def test_unknown_adaptation():
    with pytest.raises(UnknownAdaptationError):
        convert(RGB(1, 2, 3), "rgb", "lab", adaptation="D65_NOPE")


@pytest.mark.parametrize("space", ["nope", "", "rgbx"])
def test_unknown_space(space):
    with pytest.raises(UnsupportedColorSpaceError):
        convert(RGB(1, 2, 3), "rgb", space)
    with pytest.raises(UnsupportedColorSpaceError):
        resolve_space(space)


@pytest.mark.parametrize("space", ["hcl", "ryb", "tsl", "yccbccrc", "rgb_m"])
def test_validation_only_spaces_have_no_path(space):
    assert isinstance(resolve_space(space), ColorSpace)
    with pytest.raises(UnsupportedColorSpaceError):
        convert(RGB(1, 2, 3), "rgb", space)
    with pytest.raises(UnsupportedColorSpaceError):
        to_xyz(RGB(1, 2, 3), space)


def test_invalid_hex():
    with pytest.raises(InvalidColorError) as info:
        convert("#GG0000", "hex", "rgb")
    assert isinstance(info.value, ValueError)


# --- Adapter ---

def test_adapter_default_color():
    assert Adapter().color == XYZ(95.05, 100.0, 108.9)


def test_adapter_adapts_without_changing_held_color():
    adapter = Adapter()
    result = adapter.adapt("D65_D50")
    assert (result.x, result.y, result.z) == pytest.approx((96.422, 100.0, 82.521), abs=0.05)
    assert adapter.color == Adapter.DEFAULT_COLOR


def test_adapter_return_space():
    adapter = Adapter(RGB(255, 255, 255), "rgb")
    lab = adapter.adapt("D65_D50", return_space="lab")
    assert isinstance(lab, LAB)
    # The adapted white is read against the D65 white, so it turns yellowish
    assert lab.b > 0.0


def test_adapter_set():
    adapter = Adapter()
    adapter.set(RGB(255, 255, 255), "rgb")
    assert (adapter.color.x, adapter.color.y, adapter.color.z) == pytest.approx((95.047, 100.0, 108.883), abs=1e-3)
    adapter.set(XYZ(1.0, 2.0, 3.0))
    assert adapter.color == XYZ(1.0, 2.0, 3.0)


def test_adapter_unknown_pair():
    with pytest.raises(UnknownAdaptationError):
        Adapter().adapt("D65_D65")


def test_adapter_repr():
    assert repr(Adapter(XYZ(1.0, 2.0, 3.0))) == "Adapter(color=XYZ(x=1.0, y=2.0, z=3.0))"

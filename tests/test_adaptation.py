# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: test_adaptation.py — Bradford transforms and the illuminant-pair table.
"""

from itertools import permutations

import numpy as np
import pytest

import tinct_adaptation
from tinct_adaptation import (
    ADAPTIVE_MATRICES,
    adapt,
    adaptation_key,
    bradford_chromatic_adaptation,
    build_bradford_transform,
    chromatic_adaptation_pre_cal,
)
from tinct_constants import ILLUMINANTS, REFERENCE_WHITES
from tinct_exceptions import UnknownAdaptationError
from tinct_spaces import XYZ

SAMPLE = XYZ(41.24, 21.26, 1.93)


def _xyz(c):
    return c.x, c.y, c.z


def _white(name):
    w = REFERENCE_WHITES[name]
    return XYZ(w.X * 100.0, w.Y * 100.0, w.Z * 100.0)


# --- Builder ---

def test_same_white_is_identity():
    m = build_bradford_transform(REFERENCE_WHITES["D65"], REFERENCE_WHITES["D65"])
    np.testing.assert_allclose(m, np.eye(3), atol=1e-12)
    result = bradford_chromatic_adaptation(SAMPLE, REFERENCE_WHITES["D65"], REFERENCE_WHITES["D65"])
    assert _xyz(result) == pytest.approx(_xyz(SAMPLE), abs=1e-9)


def test_d65_to_d50_matches_published_matrix():
    expected = np.array([
        [ 1.0478112,  0.0228866, -0.0501270],
        [ 0.0295424,  0.9904844, -0.0170491],
        [-0.0092345,  0.0150436,  0.7521316],
    ])
    m = build_bradford_transform(REFERENCE_WHITES["D65"], REFERENCE_WHITES["D50"])
    np.testing.assert_allclose(m, expected, atol=1e-6)


@pytest.mark.parametrize("src, dst", [("A", "D65"), ("D65", "D50"), ("F11", "9300K"), ("E", "C")])
def test_source_white_lands_on_destination_white(src, dst):
    result = bradford_chromatic_adaptation(_white(src), REFERENCE_WHITES[src], REFERENCE_WHITES[dst])
    assert _xyz(result) == pytest.approx(_xyz(_white(dst)), abs=1e-9)


def test_builder_accepts_arrays_and_caches():
    a = build_bradford_transform(np.array([0.95047, 1.0, 1.08883]), (0.96422, 1.0, 0.82521))
    b = build_bradford_transform(REFERENCE_WHITES["D65"], REFERENCE_WHITES["D50"])
    assert a is b


def test_matrices_are_read_only():
    m = build_bradford_transform(REFERENCE_WHITES["A"], REFERENCE_WHITES["D65"])
    assert not m.flags.writeable
    with pytest.raises(ValueError):
        m[0, 0] = 0.0


def test_adaptation_composes():
    """A -> D50 -> D65 equals A -> D65."""
    two_step = adapt(adapt(SAMPLE, "A_D50"), "D50_D65")
    direct = adapt(SAMPLE, "A_D65")
    assert _xyz(two_step) == pytest.approx(_xyz(direct), rel=1e-9)


def test_adaptation_reverses():
    back = adapt(adapt(SAMPLE, "D65_F2"), "F2_D65")
    assert _xyz(back) == pytest.approx(_xyz(SAMPLE), rel=1e-9)


# --- Table ---

def test_table_covers_every_ordered_pair():
    assert len(ADAPTIVE_MATRICES) == len(ILLUMINANTS) * (len(ILLUMINANTS) - 1) == 506
    for src, dst in permutations(ILLUMINANTS, 2):
        assert f"{src}_{dst}" in ADAPTIVE_MATRICES
    assert "D65_D65" not in ADAPTIVE_MATRICES


@pytest.mark.parametrize("key", sorted(ADAPTIVE_MATRICES))
def test_table_agrees_with_builder(key):
    src, dst = key.split("_")
    expected = build_bradford_transform(REFERENCE_WHITES[src], REFERENCE_WHITES[dst])
    np.testing.assert_allclose(ADAPTIVE_MATRICES[key], expected, rtol=0, atol=1e-9)
    np.testing.assert_allclose(
        _xyz(chromatic_adaptation_pre_cal(SAMPLE, ADAPTIVE_MATRICES[key])),
        _xyz(bradford_chromatic_adaptation(SAMPLE, REFERENCE_WHITES[src], REFERENCE_WHITES[dst])),
        rtol=0, atol=1e-9,
    )


def test_table_is_immutable():
    with pytest.raises(TypeError):
        ADAPTIVE_MATRICES["A_D65"] = np.eye(3)


def test_pre_calculated_matrix():
    m = ADAPTIVE_MATRICES["A_D65"]
    assert chromatic_adaptation_pre_cal(SAMPLE, m) == adapt(SAMPLE, "A_D65")


# --- Keys ---

def test_adaptation_key():
    assert adaptation_key("d65", "a") == "D65_A"
    assert adaptation_key(" 9300k ", "F2") == "9300K_F2"


@pytest.mark.parametrize("src, dst", [("D65", "D65"), ("X", "D65"), ("D65", "")])
def test_adaptation_key_rejects(src, dst):
    with pytest.raises(UnknownAdaptationError):
        adaptation_key(src, dst)


def test_adapt_accepts_any_case():
    assert adapt(SAMPLE, "d50_d65") == adapt(SAMPLE, "D50_D65")


@pytest.mark.parametrize("key", ["nope", "D65_D65", "A_D65_D50", "Q_D65", ""])
def test_unknown_pair(key):
    with pytest.raises(UnknownAdaptationError) as info:
        adapt(SAMPLE, key)
    # Lookups into the table fail the way dict lookups do
    assert isinstance(info.value, KeyError)


# --- Named shortcuts ---

def test_shortcut_matches_keyed_adapt():
    assert tinct_adaptation.adapt_a_to_d65(SAMPLE) == adapt(SAMPLE, "A_D65")
    assert tinct_adaptation.adapt_9300K_to_f2(SAMPLE) == adapt(SAMPLE, "9300K_F2")


def test_shortcut_is_cached_and_named():
    fn = tinct_adaptation.adapt_d65_to_d50
    assert fn is tinct_adaptation.adapt_d65_to_d50
    assert fn.__name__ == "adapt_d65_to_d50"
    assert "D65" in fn.__doc__ and "D50" in fn.__doc__


@pytest.mark.parametrize("name", ["adapt_q_to_d65", "adapt_d65_to_d65", "something_else"])
def test_unknown_shortcut(name):
    with pytest.raises(AttributeError):
        getattr(tinct_adaptation, name)
    assert not hasattr(tinct_adaptation, name)


def test_shortcuts_listed_in_dir():
    names = dir(tinct_adaptation)
    assert "adapt_a_to_d65" in names
    assert "adapt_9300k_to_f12" in names
    assert "adapt" in names

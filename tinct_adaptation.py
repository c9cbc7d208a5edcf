# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_adaptation.py — Bradford chromatic adaptation.

A chromatic adaptation transform predicts corresponding colors: the XYZ a
sample must have under a destination illuminant to look the same as it did
under the source illuminant.  Bradford works in a sharpened cone space:

    ρσβ_s = Ma · W_s          ρσβ_d = Ma · W_d
    D     = diag(ρσβ_d / ρσβ_s)
    M     = Ma⁻¹ · D · Ma      (Ma⁻¹ computed once at import)

``ADAPTIVE_MATRICES`` holds M for every ordered pair of distinct standard
illuminants under keys ``"<Source>_<Dest>"`` (e.g. ``"A_D65"``).  Named
shortcuts such as ``adapt_a_to_d65`` are resolved lazily from that table by
the module ``__getattr__``:

    >>> import tinct_adaptation as ta
    >>> ta.adapt_d50_to_d65(xyz) == ta.adapt(xyz, "D50_D65")
    True

Precondition: reference white components must be non-zero; it is not
checked.
"""

from __future__ import annotations

import functools
import logging
import re
from itertools import permutations
from types import MappingProxyType
from typing import Callable, Dict, Final, Mapping, Sequence, Tuple, Union

import numpy as np

from tinct_constants import ILLUMINANTS, M_BRADFORD, M_BRADFORD_INV, REFERENCE_WHITES
from tinct_exceptions import UnknownAdaptationError
from tinct_matrix import ArrayFloat, matrix_multiply, matrix_vector_multiply, matrix_vector_multiply_as_space
from tinct_spaces import XYZ, ReferenceWhite

__all__ = [
    "WhiteLike",
    "build_bradford_transform",
    "bradford_chromatic_adaptation",
    "chromatic_adaptation_pre_cal",
    "ADAPTIVE_MATRICES",
    "adaptation_key",
    "adapt",
]

logger = logging.getLogger(__name__)

WhiteLike = Union[ReferenceWhite, Sequence[float], ArrayFloat]


# =============================================================================
# 1. TRANSFORM BUILDER
# =============================================================================

def _to_hashable(white: WhiteLike) -> Tuple[float, float, float]:
    """Helper to ensure whites are hashable float triples for caching."""
    if isinstance(white, np.ndarray):
        white = white.ravel()
    x, y, z = (float(c) for c in white)
    return x, y, z


@functools.lru_cache(maxsize=1024)
def _cached_bradford_matrix(src: Tuple[float, float, float],
                            dst: Tuple[float, float, float]) -> ArrayFloat:
    """
    Cached worker for ``build_bradford_transform``.

    The returned array is shared between callers and therefore read-only.
    """
    rho_s = matrix_vector_multiply(M_BRADFORD, src)
    rho_d = matrix_vector_multiply(M_BRADFORD, dst)
    gain = np.diag([rho_d[i] / rho_s[i] for i in range(3)])

    m = matrix_multiply(matrix_multiply(M_BRADFORD_INV, gain), M_BRADFORD)
    m.setflags(write=False)
    return m


def build_bradford_transform(source_white: WhiteLike, dest_white: WhiteLike) -> ArrayFloat:
    """
    Computes the Bradford adaptation matrix between two reference whites.

    Args:
        source_white: Source white (X, Y, Z), Y normalised to 1.
        dest_white: Destination white, same convention.

    Returns:
        Read-only 3x3 matrix M with ``M @ xyz_source == xyz_dest`` for
        column vectors.
    """
    return _cached_bradford_matrix(_to_hashable(source_white), _to_hashable(dest_white))


def bradford_chromatic_adaptation(xyz: XYZ, source_white: WhiteLike, dest_white: WhiteLike) -> XYZ:
    """
    Adapts ``xyz`` from ``source_white`` to ``dest_white``.

    Source and destination being equal yields ``xyz`` back within
    floating-point tolerance.
    """
    return chromatic_adaptation_pre_cal(xyz, build_bradford_transform(source_white, dest_white))


def chromatic_adaptation_pre_cal(xyz: XYZ, matrix: ArrayFloat) -> XYZ:
    """Applies an already-built adaptation matrix to ``xyz``."""
    return matrix_vector_multiply_as_space(matrix, (xyz.x, xyz.y, xyz.z), XYZ)


# =============================================================================
# 2. ILLUMINANT-PAIR TABLE
# =============================================================================

def _build_table() -> Mapping[str, ArrayFloat]:
    table = {
        f"{src}_{dst}": build_bradford_transform(REFERENCE_WHITES[src], REFERENCE_WHITES[dst])
        for src, dst in permutations(ILLUMINANTS, 2)
    }
    logger.debug("Built %d adaptive matrices for %d illuminants", len(table), len(ILLUMINANTS))
    return MappingProxyType(table)


ADAPTIVE_MATRICES: Final[Mapping[str, ArrayFloat]] = _build_table()

# "D65" -> "D65", "9300K" -> "9300K", case-folded
_CANONICAL: Final[Dict[str, str]] = {name.upper(): name for name in ILLUMINANTS}


def _canonical(name: str) -> str:
    try:
        return _CANONICAL[str(name).strip().upper()]
    except KeyError:
        raise UnknownAdaptationError(f"Unknown illuminant: {name!r}") from None


def adaptation_key(source: str, dest: str) -> str:
    """
    Builds the table key for an illuminant pair.

    Names are matched case-insensitively (``"d65"``, ``"9300k"``).

    Raises:
        UnknownAdaptationError: If either name is unknown or both are the
            same illuminant.
    """
    src, dst = _canonical(source), _canonical(dest)
    if src == dst:
        raise UnknownAdaptationError(f"No adaptation from {src} to itself")
    return f"{src}_{dst}"


def adapt(xyz: XYZ, pair_key: str) -> XYZ:
    """
    Adapts ``xyz`` with the precomputed matrix for ``pair_key``.

    Args:
        xyz: Color under the source illuminant.
        pair_key: ``"<Source>_<Dest>"``, e.g. ``"A_D65"`` or ``"d50_d65"``.

    Raises:
        UnknownAdaptationError: If the pair is not in the table.
    """
    matrix = ADAPTIVE_MATRICES.get(pair_key)
    if matrix is None:
        parts = str(pair_key).split("_")
        if len(parts) != 2:
            raise UnknownAdaptationError(f"Unknown adaptation: {pair_key!r}")
        matrix = ADAPTIVE_MATRICES[adaptation_key(*parts)]
    return chromatic_adaptation_pre_cal(xyz, matrix)


# =============================================================================
# 3. NAMED SHORTCUTS
# =============================================================================

_SHORTCUT_NAME = re.compile(r"^adapt_([0-9a-z]+)_to_([0-9a-z]+)$", re.IGNORECASE)
_SHORTCUTS: Dict[str, Callable[[XYZ], XYZ]] = {}


def _make_shortcut(name: str, key: str) -> Callable[[XYZ], XYZ]:
    matrix = ADAPTIVE_MATRICES[key]
    src, dst = key.split("_")

    def shortcut(xyz: XYZ) -> XYZ:
        return chromatic_adaptation_pre_cal(xyz, matrix)

    shortcut.__name__ = shortcut.__qualname__ = name
    shortcut.__doc__ = f"Bradford adaptation of XYZ from illuminant {src} to {dst}."
    return shortcut


def __getattr__(name: str) -> Callable[[XYZ], XYZ]:
    match = _SHORTCUT_NAME.match(name)
    if match is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    try:
        key = adaptation_key(match.group(1), match.group(2))
    except UnknownAdaptationError as exc:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from exc

    fn = _SHORTCUTS.get(name)
    if fn is None:
        fn = _SHORTCUTS[name] = _make_shortcut(name, key)
    return fn


def __dir__() -> list[str]:
    shortcuts = [f"adapt_{src.lower()}_to_{dst.lower()}" for src, dst in permutations(ILLUMINANTS, 2)]
    return sorted(list(globals()) + shortcuts)

# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_matrix.py — 3x3 linear-algebra primitives.

Every linear color transform (RGB <-> XYZ, cone responses, luma-chroma
encodings, chromatic adaptation) reduces to one of three operations:

    matrix_vector_multiply(M, v)            -> (x, y, z)
    matrix_multiply(A, B)                   -> 3x3 ndarray
    matrix_vector_multiply_as_space(M, v, space)
                                            -> record or {axis: value}

Inputs are validated once in Python (``_as_matrix`` / ``_as_vector``) and
then handed to Numba kernels that assume contiguous float64 data.
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple, TypeAlias, Union

import numpy as np
import numpy.typing as npt
from numba import njit

from tinct_exceptions import InvalidMatrixShapeError

__all__ = [
    "ArrayFloat",
    "MatrixLike",
    "VectorLike",
    "matrix_vector_multiply",
    "matrix_multiply",
    "matrix_vector_multiply_as_space",
]

ArrayFloat: TypeAlias = npt.NDArray[np.floating]
MatrixLike: TypeAlias = Union[ArrayFloat, Sequence[Sequence[float]]]
VectorLike: TypeAlias = Union[ArrayFloat, Sequence[float]]


# =============================================================================
# 1. SHAPE GUARDS
# =============================================================================

def _as_matrix(m: MatrixLike, name: str = "matrix") -> ArrayFloat:
    arr = np.ascontiguousarray(m, dtype=np.float64)
    if arr.shape != (3, 3):
        raise InvalidMatrixShapeError(f"{name} must have shape (3, 3), got {arr.shape}")
    return arr


def _as_vector(v: VectorLike, name: str = "vector") -> ArrayFloat:
    arr = np.ascontiguousarray(v, dtype=np.float64)
    if arr.shape != (3,):
        raise InvalidMatrixShapeError(f"{name} must have shape (3,), got {arr.shape}")
    return arr


# =============================================================================
# 2. KERNELS
# =============================================================================
# Explicit loops; a 3x3 product is too small for BLAS dispatch to pay off.

@njit(cache=True)
def _mat_vec_kernel(m: ArrayFloat, v: ArrayFloat) -> ArrayFloat:
    out = np.empty(3, dtype=np.float64)
    for i in range(3):
        acc = 0.0
        for k in range(3):
            acc += m[i, k] * v[k]
        out[i] = acc
    return out


@njit(cache=True)
def _mat_mat_kernel(a: ArrayFloat, b: ArrayFloat) -> ArrayFloat:
    out = np.empty((3, 3), dtype=np.float64)
    for i in range(3):
        for j in range(3):
            acc = 0.0
            for k in range(3):
                acc += a[i, k] * b[k, j]
            out[i, j] = acc
    return out


# =============================================================================
# 3. PUBLIC API
# =============================================================================

def matrix_vector_multiply(m: MatrixLike, v: VectorLike) -> Tuple[float, float, float]:
    """
    Multiply a 3x3 matrix by a column 3-vector.

    Args:
        m: Matrix of shape (3, 3).
        v: Vector of length 3.

    Returns:
        The product as a plain tuple of Python floats.

    Raises:
        InvalidMatrixShapeError: If either operand has the wrong shape.
    """
    res = _mat_vec_kernel(_as_matrix(m), _as_vector(v))
    return float(res[0]), float(res[1]), float(res[2])


def matrix_multiply(a: MatrixLike, b: MatrixLike) -> ArrayFloat:
    """
    Multiply two 3x3 matrices (``a @ b``).

    Raises:
        InvalidMatrixShapeError: If either operand is not 3x3.
    """
    return _mat_mat_kernel(_as_matrix(a, "left matrix"), _as_matrix(b, "right matrix"))


def matrix_vector_multiply_as_space(m: MatrixLike, v: VectorLike, space: Any) -> Any:
    """
    Multiply and label the result with the axes of a target space.

    Args:
        m: Matrix of shape (3, 3).
        v: Vector of length 3.
        space: Either a record class taking three positional values
            (e.g. ``XYZ``), or a sequence of three axis names.

    Returns:
        ``space(x, y, z)`` for a record class, otherwise a dict mapping each
        axis name to its component.
    """
    values = matrix_vector_multiply(m, v)
    if isinstance(space, type):
        return space(*values)

    axes = tuple(space)
    if len(axes) != 3:
        raise InvalidMatrixShapeError(f"Expected 3 axis names, got {len(axes)}")
    return dict(zip(axes, values))

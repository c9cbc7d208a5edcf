# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cone.py — XYZ <-> LMS cone fundamentals (Hunt-Pointer-Estevez).

LMS shares the 0–100 scale of XYZ.  The HPE matrix is normalised so that
the D65 white lands near (100, 100, 100).
"""

from __future__ import annotations

from tinct_constants import M_LMS_TO_XYZ_HPE, M_XYZ_TO_LMS_HPE
from tinct_matrix import matrix_vector_multiply_as_space
from tinct_spaces import LMS, XYZ

__all__ = ["xyz_to_lms", "lms_to_xyz"]


def xyz_to_lms(xyz: XYZ) -> LMS:
    return matrix_vector_multiply_as_space(M_XYZ_TO_LMS_HPE, (xyz.x, xyz.y, xyz.z), LMS)


def lms_to_xyz(lms: LMS) -> XYZ:
    return matrix_vector_multiply_as_space(M_LMS_TO_XYZ_HPE, (lms.long, lms.medium, lms.short), XYZ)

# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: tinct_exceptions.py — Exception hierarchy.

Conversions are total numeric functions and never raise for out-of-range
values.  The classes below cover programming errors (malformed matrices) and
lookups into closed tables (adaptation keys, color spaces).
"""

__all__ = [
    "TinctError",
    "InvalidMatrixShapeError",
    "UnknownAdaptationError",
    "UnsupportedColorSpaceError",
    "InvalidColorError",
]


class TinctError(Exception):
    """
    Base class for every error raised by Tinct.
    """
    pass


class InvalidMatrixShapeError(TinctError, ValueError):
    """
    Thrown when a matrix or vector handed to the linear-algebra layer is not
    3x3 / length 3
    """
    pass


class UnknownAdaptationError(TinctError, KeyError):
    """
    Thrown when an illuminant pair has no entry in the adaptive matrix table
    """

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class UnsupportedColorSpaceError(TinctError, ValueError):
    """
    Thrown when a color space has no conversion path through XYZ
    """
    pass


class InvalidColorError(TinctError, ValueError):
    """
    Thrown when a value cannot be read as a color of its declared space,
    e.g. a malformed hex string handed to the converter
    """
    pass

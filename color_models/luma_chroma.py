# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: luma_chroma.py — Video luma / color-difference encodings of sRGB.

All six encodings are a single 3x3 matrix applied to gamma-encoded RGB on
the 0–255 scale (plus a fixed offset for studio-swing YCbCr).  Decoding uses
the matrix inverse and can leave the sRGB cube, so the ``*_to_rgb``
functions take a ``clip`` flag like every other RGB producer.

    YCbCr   ITU-R BT.601, digital 8-bit studio swing (Y 16–235, C 16–240)
    YPbPr   ITU-R BT.709, analog (Pb, Pr in ±127.5)
    YUV     BT.601 PAL
    YIQ     FCC NTSC
    YDbDr   SECAM
    YCoCg   lossless-friendly, exact inverse
"""

from __future__ import annotations

from tinct_constants import (
    M_RGB_TO_YCBCR,
    M_RGB_TO_YCOCG,
    M_RGB_TO_YDBDR,
    M_RGB_TO_YIQ,
    M_RGB_TO_YPBPR,
    M_RGB_TO_YUV,
    M_YCBCR_TO_RGB,
    M_YCOCG_TO_RGB,
    M_YDBDR_TO_RGB,
    M_YIQ_TO_RGB,
    M_YPBPR_TO_RGB,
    M_YUV_TO_RGB,
    RGB_MAX,
    YCBCR_OFFSET,
)
from tinct_matrix import ArrayFloat, matrix_vector_multiply, matrix_vector_multiply_as_space
from tinct_spaces import RGB, YIQ, YUV, YCbCr, YCoCg, YDbDr, YPbPr

from color_models.rgb import encoded_to_rgb

__all__ = [
    "rgb_to_ycbcr",
    "ycbcr_to_rgb",
    "rgb_to_ypbpr",
    "ypbpr_to_rgb",
    "rgb_to_yuv",
    "yuv_to_rgb",
    "rgb_to_yiq",
    "yiq_to_rgb",
    "rgb_to_ydbdr",
    "ydbdr_to_rgb",
    "rgb_to_ycocg",
    "ycocg_to_rgb",
]


def _channels(rgb: RGB) -> tuple[float, float, float]:
    return float(rgb.red), float(rgb.green), float(rgb.blue)


def _decode(m: ArrayFloat, v: tuple[float, float, float], clip: bool) -> RGB:
    r, g, b = matrix_vector_multiply(m, v)
    return encoded_to_rgb(r / RGB_MAX, g / RGB_MAX, b / RGB_MAX, clip=clip)


# --- YCbCr ---

def rgb_to_ycbcr(rgb: RGB) -> YCbCr:
    c = matrix_vector_multiply_as_space(M_RGB_TO_YCBCR, _channels(rgb), ("Y", "Cb", "Cr"))
    oy, ob, orr = YCBCR_OFFSET
    return YCbCr(c["Y"] + oy, c["Cb"] + ob, c["Cr"] + orr)


def ycbcr_to_rgb(ycbcr: YCbCr, clip: bool = True) -> RGB:
    oy, ob, orr = YCBCR_OFFSET
    return _decode(M_YCBCR_TO_RGB, (ycbcr.Y - oy, ycbcr.Cb - ob, ycbcr.Cr - orr), clip)


# --- YPbPr ---

def rgb_to_ypbpr(rgb: RGB) -> YPbPr:
    return matrix_vector_multiply_as_space(M_RGB_TO_YPBPR, _channels(rgb), YPbPr)


def ypbpr_to_rgb(ypbpr: YPbPr, clip: bool = True) -> RGB:
    return _decode(M_YPBPR_TO_RGB, (ypbpr.Y, ypbpr.Pb, ypbpr.Pr), clip)


# --- YUV ---

def rgb_to_yuv(rgb: RGB) -> YUV:
    return matrix_vector_multiply_as_space(M_RGB_TO_YUV, _channels(rgb), YUV)


def yuv_to_rgb(yuv: YUV, clip: bool = True) -> RGB:
    return _decode(M_YUV_TO_RGB, (yuv.y, yuv.u, yuv.v), clip)


# --- YIQ ---

def rgb_to_yiq(rgb: RGB) -> YIQ:
    return matrix_vector_multiply_as_space(M_RGB_TO_YIQ, _channels(rgb), YIQ)


def yiq_to_rgb(yiq: YIQ, clip: bool = True) -> RGB:
    return _decode(M_YIQ_TO_RGB, (yiq.Y, yiq.I, yiq.Q), clip)


# --- YDbDr ---

def rgb_to_ydbdr(rgb: RGB) -> YDbDr:
    return matrix_vector_multiply_as_space(M_RGB_TO_YDBDR, _channels(rgb), YDbDr)


def ydbdr_to_rgb(ydbdr: YDbDr, clip: bool = True) -> RGB:
    return _decode(M_YDBDR_TO_RGB, (ydbdr.Y, ydbdr.Db, ydbdr.Dr), clip)


# --- YCoCg ---

def rgb_to_ycocg(rgb: RGB) -> YCoCg:
    return matrix_vector_multiply_as_space(M_RGB_TO_YCOCG, _channels(rgb), YCoCg)


def ycocg_to_rgb(ycocg: YCoCg, clip: bool = True) -> RGB:
    return _decode(M_YCOCG_TO_RGB, (ycocg.Y, ycocg.Co, ycocg.Cg), clip)

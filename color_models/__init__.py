# -*- coding: utf-8 -*-
"""
Tinct: Colorimetric conversions anchored on CIE XYZ
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Package: color_models — One module per family of color models.

    transfer      sRGB and CIELAB transfer kernels, strict-IEEE toggle
    rgb           sRGB <-> XYZ, hex and integer encodings
    cylindrical   HSL, HSV, HWB, HSI
    subtractive   CMY, CMYK
    cie           CIELAB, LCH(ab), CIELUV, LCH(uv), Hunter Lab, xyY, U*V*W*
    oklab         OKLab, OKLCH, OKLCH gamut test
    luma_chroma   YCbCr, YPbPr, YUV, YIQ, YDbDr, YCoCg
    cone          LMS (Hunt-Pointer-Estevez)
"""

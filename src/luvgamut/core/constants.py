"""
Numeric constants for sRGB / CIE LUV conversion.

sRGB primaries with the D65 reference white. Matrices are exposed as
read-only float64 arrays so they can be shared freely between threads.
"""

from __future__ import annotations

import numpy as np


def _frozen(rows: list[list[float]]) -> np.ndarray:
    arr = np.array(rows, dtype=np.float64)
    arr.setflags(write=False)
    return arr


# XYZ -> linear RGB (rows: r, g, b)
M_XYZ_TO_RGB = _frozen([
    [3.2409699419045214, -1.5373831775700935, -0.49861076029300328],
    [-0.96924363628087983, 1.8759675015077207, 0.041555057407175613],
    [0.055630079696993609, -0.20397695888897657, 1.0569715142428786],
])

# Linear RGB -> XYZ (rows: x, y, z)
M_RGB_TO_XYZ = _frozen([
    [0.41239079926595948, 0.35758433938387796, 0.18048078840183429],
    [0.21263900587151036, 0.71516867876775593, 0.072192315360733715],
    [0.019330818715591851, 0.11919477979462599, 0.95053215224966058],
])

# D65 white chromaticity in u'v'
REF_U = 0.19783000664283681
REF_V = 0.468319994938791

# CIE LUV rational constants
KAPPA = 903.2962962962963
EPSILON = 0.0088564516790356308
L_LINEAR = 8.0  # L at which Y stops being linear

# sRGB transfer function
SRGB_DECODE_TH = 0.04045
SRGB_ENCODE_TH = 0.0031308
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_GAMMA = 2.4

# Singularity guards. Each protects a different expression; do not merge.
L_BLACK = 1e-8
L_WHITE = 99.9999999
CHROMA_GRAY = 1e-8
SATURATION_GRAY = 1e-8

# Returned when no boundary line qualifies
NO_BOUND = float(np.finfo(np.float32).max)

HUE_MAX = 360.0
DEG_TO_RAD = 2.0 * np.pi / HUE_MAX
RAD_TO_DEG = HUE_MAX / 2.0 / np.pi

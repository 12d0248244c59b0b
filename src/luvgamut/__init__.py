"""
luvgamut - sRGB to HSLuv / HPLuv color conversion.

HSLuv and HPLuv are reparameterizations of CIE LUV in which saturation is
measured against the sRGB gamut boundary, so every (h, s, l) in range maps
to a displayable color.
"""

__version__ = "0.1.0"

from luvgamut.color.conversions import (
    convert,
    hpluv_to_rgb,
    hsluv_to_rgb,
    list_colorspaces,
    rgb_to_hpluv,
    rgb_to_hsluv,
)
from luvgamut.color.gamut import compute_boundaries, max_chroma_for_lh, max_safe_chroma_for_l
from luvgamut.core.data_types import LCH, LUV, RGB, XYZ, ColorSpace, HPLuv, HSLuv, Line, Triple

__all__ = [
    "__version__",
    "hsluv_to_rgb",
    "hpluv_to_rgb",
    "rgb_to_hsluv",
    "rgb_to_hpluv",
    "convert",
    "list_colorspaces",
    "compute_boundaries",
    "max_chroma_for_lh",
    "max_safe_chroma_for_l",
    "ColorSpace",
    "Triple",
    "RGB",
    "XYZ",
    "LUV",
    "LCH",
    "HSLuv",
    "HPLuv",
    "Line",
]

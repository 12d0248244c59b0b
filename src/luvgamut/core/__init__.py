"""Constants and data types."""

from luvgamut.core.data_types import (
    LCH,
    LUV,
    RGB,
    XYZ,
    ColorSpace,
    HPLuv,
    HSLuv,
    Line,
    Triple,
    triple_type,
)

__all__ = [
    "ColorSpace",
    "Triple",
    "RGB",
    "XYZ",
    "LUV",
    "LCH",
    "HSLuv",
    "HPLuv",
    "Line",
    "triple_type",
]

"""Color space conversions and gamut boundary geometry."""

from luvgamut.color.conversions import (
    convert,
    hpluv_to_rgb,
    hsluv_to_rgb,
    list_colorspaces,
    rgb_to_hpluv,
    rgb_to_hsluv,
)
from luvgamut.color.gamut import compute_boundaries, max_chroma_for_lh, max_safe_chroma_for_l

__all__ = [
    "hsluv_to_rgb",
    "hpluv_to_rgb",
    "rgb_to_hsluv",
    "rgb_to_hpluv",
    "convert",
    "list_colorspaces",
    "compute_boundaries",
    "max_chroma_for_lh",
    "max_safe_chroma_for_l",
]

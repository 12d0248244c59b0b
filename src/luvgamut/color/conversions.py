"""
Color space conversion functions.

Each stage converter takes one tagged triple and returns the same color in
the neighbouring space:

    RGB <-> XYZ <-> LUV <-> LCH <-> HSLuv
                               <-> HPLuv

Nothing is clamped or validated. Out-of-range input yields whatever IEEE
arithmetic produces (NaN, inf, values outside [0, 1]).
"""

from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from typing import Callable, Sequence

import numpy as np

from luvgamut.color.gamut import max_chroma_for_lh, max_safe_chroma_for_l
from luvgamut.color.transfer import dot, from_linear, to_linear
from luvgamut.core.constants import (
    CHROMA_GRAY,
    DEG_TO_RAD,
    EPSILON,
    HUE_MAX,
    KAPPA,
    L_BLACK,
    L_LINEAR,
    L_WHITE,
    M_RGB_TO_XYZ,
    M_XYZ_TO_RGB,
    RAD_TO_DEG,
    REF_U,
    REF_V,
    SATURATION_GRAY,
)
from luvgamut.core.data_types import (
    LCH,
    LUV,
    RGB,
    XYZ,
    ColorSpace,
    HPLuv,
    HSLuv,
    Triple,
    triple_type,
)

logger = logging.getLogger(__name__)

Converter = Callable[[Triple], Triple]


def _expect(value: Triple, cls: type[Triple], func: str) -> None:
    if not isinstance(value, cls):
        raise TypeError(f"{func} expects {cls.__name__}, got {type(value).__name__}")


# =============================================================================
# RGB <-> XYZ
# =============================================================================

@np.errstate(all="ignore")
def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Convert sRGB to XYZ."""
    _expect(rgb, RGB, "rgb_to_xyz")
    linear = [to_linear(c) for c in rgb]
    x, y, z = (dot(row, linear) for row in M_RGB_TO_XYZ)
    return XYZ(x, y, z)


@np.errstate(all="ignore")
def xyz_to_rgb(xyz: XYZ) -> RGB:
    """Convert XYZ to sRGB."""
    _expect(xyz, XYZ, "xyz_to_rgb")
    r, g, b = (from_linear(dot(row, tuple(xyz))) for row in M_XYZ_TO_RGB)
    return RGB(r, g, b)


# =============================================================================
# XYZ <-> LUV
# =============================================================================

@np.errstate(all="ignore")
def y_to_l(y: float) -> np.float64:
    """CIE lightness from relative luminance (Yn = 1)."""
    y = np.float64(y)
    if y <= EPSILON:
        return y * KAPPA
    return 116.0 * np.power(y, 1.0 / 3.0) - 16.0


@np.errstate(all="ignore")
def l_to_y(l: float) -> np.float64:
    """Relative luminance from CIE lightness."""
    l = np.float64(l)
    if l <= L_LINEAR:
        return l / KAPPA
    return np.power((l + 16.0) / 116.0, 3.0)


@np.errstate(all="ignore")
def xyz_to_luv(xyz: XYZ) -> LUV:
    """Convert XYZ to CIE LUV."""
    _expect(xyz, XYZ, "xyz_to_luv")
    x, y, z = xyz

    l = y_to_l(y)
    # Chromaticity is noise this close to black
    if l < L_BLACK:
        return LUV(l, 0.0, 0.0)

    denominator = x + 15.0 * y + 3.0 * z
    var_u = 4.0 * x / denominator
    var_v = 9.0 * y / denominator

    return LUV(l, 13.0 * l * (var_u - REF_U), 13.0 * l * (var_v - REF_V))


@np.errstate(all="ignore")
def luv_to_xyz(luv: LUV) -> XYZ:
    """Convert CIE LUV to XYZ."""
    _expect(luv, LUV, "luv_to_xyz")
    l, u, v = luv

    # Black would divide by zero below
    if l <= L_BLACK:
        return XYZ(0.0, 0.0, 0.0)

    var_u = u / (13.0 * l) + REF_U
    var_v = v / (13.0 * l) + REF_V
    y = l_to_y(l)
    x = -(9.0 * y * var_u) / ((var_u - 4.0) * var_v - var_u * var_v)
    z = (9.0 * y - 15.0 * var_v * y - var_v * x) / (3.0 * var_v)

    return XYZ(x, y, z)


# =============================================================================
# LUV <-> LCH
# =============================================================================

@np.errstate(all="ignore")
def luv_to_lch(luv: LUV) -> LCH:
    """Convert LUV to its cylindrical form, hue in [0, 360)."""
    _expect(luv, LUV, "luv_to_lch")
    l, u, v = luv

    c = np.sqrt(u * u + v * v)

    # Grays: disambiguate hue
    if c < CHROMA_GRAY:
        h = 0.0
    else:
        h = np.arctan2(v, u) * RAD_TO_DEG
        if h < 0.0:
            h += HUE_MAX
            # -tiny + 360 rounds to 360
            if h >= HUE_MAX:
                h = 0.0

    return LCH(l, c, h)


@np.errstate(all="ignore")
def lch_to_luv(lch: LCH) -> LUV:
    """Convert LCH back to LUV."""
    _expect(lch, LCH, "lch_to_luv")
    l, c, h = lch

    hrad = h * DEG_TO_RAD
    return LUV(l, np.cos(hrad) * c, np.sin(hrad) * c)


# =============================================================================
# LCH <-> HSLuv / HPLuv
# =============================================================================

@np.errstate(all="ignore")
def hsluv_to_lch(hsluv: HSLuv) -> LCH:
    """Convert HSLuv to LCH."""
    _expect(hsluv, HSLuv, "hsluv_to_lch")
    h, s, l = hsluv

    # White and black: disambiguate chroma
    if l > L_WHITE or l < L_BLACK:
        c = 0.0
    else:
        c = max_chroma_for_lh(l, h) / 100.0 * s

    # Grays: disambiguate hue
    if s < SATURATION_GRAY:
        h = 0.0

    return LCH(l, c, h)


@np.errstate(all="ignore")
def lch_to_hsluv(lch: LCH) -> HSLuv:
    """Convert LCH to HSLuv."""
    _expect(lch, LCH, "lch_to_hsluv")
    l, c, h = lch

    # White and black: disambiguate saturation
    if l > L_WHITE or l < L_BLACK:
        s = 0.0
    else:
        s = c / max_chroma_for_lh(l, h) * 100.0

    if c < CHROMA_GRAY:
        h = 0.0

    return HSLuv(h, s, l)


@np.errstate(all="ignore")
def hpluv_to_lch(hpluv: HPLuv) -> LCH:
    """Convert HPLuv to LCH."""
    _expect(hpluv, HPLuv, "hpluv_to_lch")
    h, s, l = hpluv

    if l > L_WHITE or l < L_BLACK:
        c = 0.0
    else:
        c = max_safe_chroma_for_l(l) / 100.0 * s

    if s < SATURATION_GRAY:
        h = 0.0

    return LCH(l, c, h)


@np.errstate(all="ignore")
def lch_to_hpluv(lch: LCH) -> HPLuv:
    """Convert LCH to HPLuv. Saturation exceeds 100 outside the safe circle."""
    _expect(lch, LCH, "lch_to_hpluv")
    l, c, h = lch

    if l > L_WHITE or l < L_BLACK:
        s = 0.0
    else:
        s = c / max_safe_chroma_for_l(l) * 100.0

    if c < CHROMA_GRAY:
        h = 0.0

    return HPLuv(h, s, l)


# =============================================================================
# End-to-end conversions
# =============================================================================

def hsluv_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HSLuv (h in degrees, s and l in [0, 100]) to sRGB."""
    lch = hsluv_to_lch(HSLuv(h, s, l))
    return xyz_to_rgb(luv_to_xyz(lch_to_luv(lch))).as_tuple()


def hpluv_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert HPLuv (h in degrees, s and l in [0, 100]) to sRGB."""
    lch = hpluv_to_lch(HPLuv(h, s, l))
    return xyz_to_rgb(luv_to_xyz(lch_to_luv(lch))).as_tuple()


def rgb_to_hsluv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert sRGB in [0, 1] to HSLuv."""
    lch = luv_to_lch(xyz_to_luv(rgb_to_xyz(RGB(r, g, b))))
    return lch_to_hsluv(lch).as_tuple()


def rgb_to_hpluv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert sRGB in [0, 1] to HPLuv."""
    lch = luv_to_lch(xyz_to_luv(rgb_to_xyz(RGB(r, g, b))))
    return lch_to_hpluv(lch).as_tuple()


# =============================================================================
# Conversion dispatch
# =============================================================================

# Every stage converter, keyed by (source, target)
CONVERTERS: dict[tuple[ColorSpace, ColorSpace], Converter] = {
    (ColorSpace.RGB, ColorSpace.XYZ): rgb_to_xyz,
    (ColorSpace.XYZ, ColorSpace.RGB): xyz_to_rgb,
    (ColorSpace.XYZ, ColorSpace.LUV): xyz_to_luv,
    (ColorSpace.LUV, ColorSpace.XYZ): luv_to_xyz,
    (ColorSpace.LUV, ColorSpace.LCH): luv_to_lch,
    (ColorSpace.LCH, ColorSpace.LUV): lch_to_luv,
    (ColorSpace.LCH, ColorSpace.HSLUV): lch_to_hsluv,
    (ColorSpace.HSLUV, ColorSpace.LCH): hsluv_to_lch,
    (ColorSpace.LCH, ColorSpace.HPLUV): lch_to_hpluv,
    (ColorSpace.HPLUV, ColorSpace.LCH): hpluv_to_lch,
}


@lru_cache(maxsize=None)
def _route(from_space: ColorSpace, to_space: ColorSpace) -> tuple[Converter, ...]:
    """Shortest chain of stage converters, found breadth-first."""
    previous: dict[ColorSpace, tuple[ColorSpace, Converter] | None] = {from_space: None}
    queue = deque([from_space])

    while queue:
        space = queue.popleft()
        if space == to_space:
            break
        for (src, dst), func in CONVERTERS.items():
            if src == space and dst not in previous:
                previous[dst] = (space, func)
                queue.append(dst)

    steps = []
    space = to_space
    while previous[space] is not None:
        space, func = previous[space]
        steps.append(func)
    steps.reverse()

    logger.debug(
        "Route %s -> %s: %s",
        from_space.value,
        to_space.value,
        " -> ".join(func.__name__ for func in steps),
    )
    return tuple(steps)


def convert(
    values: Triple | Sequence[float],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> Triple:
    """
    Convert a color between any two supported color spaces.

    Args:
        values: A tagged triple, or 3 components in from_space
        from_space: Source color space name
        to_space: Target color space name

    Returns:
        Tagged triple in to_space
    """
    from_space = ColorSpace.parse(from_space)
    to_space = ColorSpace.parse(to_space)

    if isinstance(values, Triple):
        if values.colorspace != from_space:
            raise ValueError(
                f"Got {values.colorspace.value} values for source colorspace {from_space.value}"
            )
        triple = values
    else:
        triple = triple_type(from_space).from_sequence(values)

    if from_space == to_space:
        return triple_type(to_space)(*triple)

    for step in _route(from_space, to_space):
        triple = step(triple)

    return triple


def list_colorspaces() -> list[str]:
    """Get list of supported color spaces."""
    return sorted(space.value for space in ColorSpace)

"""
sRGB gamut boundary in the LUV chroma plane.

At a fixed lightness each face of the RGB cube (one channel pinned to 0
or 1) maps to a straight line in (u, v). The six lines enclose the slice
of the gamut at that lightness; the maximum chroma is the distance from
the pole to the nearest of them, either along a given hue ray (HSLuv) or
in any direction (HPLuv).
"""

from __future__ import annotations

import logging

import numpy as np

from luvgamut.core.constants import DEG_TO_RAD, EPSILON, KAPPA, M_XYZ_TO_RGB, NO_BOUND
from luvgamut.core.data_types import Line

logger = logging.getLogger(__name__)

# Cube faces per channel
FACES = (0.0, 1.0)


@np.errstate(all="ignore")
def compute_boundaries(l: float) -> tuple[Line, ...]:
    """
    Compute the six gamut boundary lines at lightness l.

    Lines are ordered channel-major (r, g, b), face 0 before face 1.
    The denominator vanishes only for l == 0 on the 0-faces; callers
    special-case black before getting here.

    Args:
        l: CIE L* lightness

    Returns:
        Tuple of 6 Line objects
    """
    l = np.float64(l)
    sub1 = np.power(l + 16.0, 3.0) / 1560896.0
    # Linear segment of the L -> Y curve near black
    sub2 = sub1 if sub1 > EPSILON else l / KAPPA

    lines = []
    for m1, m2, m3 in M_XYZ_TO_RGB:
        for t in FACES:
            top1 = (284517.0 * m1 - 94839.0 * m3) * sub2
            top2 = (838422.0 * m3 + 769860.0 * m2 + 731718.0 * m1) * l * sub2 - 769860.0 * t * l
            bottom = (632260.0 * m3 - 126452.0 * m2) * sub2 + 126452.0 * t
            lines.append(Line(top1 / bottom, top2 / bottom))

    return tuple(lines)


@np.errstate(all="ignore")
def max_safe_chroma_for_l(l: float) -> float:
    """
    Largest chroma that stays in gamut for every hue at lightness l.

    This is the radius of the circle centred on the pole and inscribed in
    the boundary polygon. Used by HPLuv.
    """
    distances = [line.distance_from_origin() for line in compute_boundaries(l)]
    return _shortest(distances, l)


@np.errstate(all="ignore")
def max_chroma_for_lh(l: float, h: float) -> float:
    """
    Largest in-gamut chroma at lightness l along hue h (degrees).

    Walks the ray from the pole at angle h and returns the distance to the
    first boundary line it crosses. Used by HSLuv.
    """
    hrad = np.float64(h) * DEG_TO_RAD
    lengths = [line.ray_length(hrad) for line in compute_boundaries(l)]
    return _shortest(lengths, l)


def _shortest(lengths: list[np.float64], l: float) -> float:
    """Smallest non-negative length; NaN and negatives never qualify."""
    valid = [length for length in lengths if length >= 0]
    if not valid:
        logger.debug("No gamut boundary ahead at L=%r, using NO_BOUND", l)
        return NO_BOUND
    return float(min(min(valid), NO_BOUND))

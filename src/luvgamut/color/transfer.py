"""
sRGB transfer function and the small linear algebra it needs.

The decode and encode thresholds come straight from the sRGB standard and
are not exact inverses of each other at the knee.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from luvgamut.core.constants import (
    SRGB_DECODE_TH,
    SRGB_ENCODE_TH,
    SRGB_GAMMA,
    SRGB_OFFSET,
    SRGB_SLOPE,
)

CORR_RATIO = 1.0 / SRGB_GAMMA


def dot(row: ArrayLike, vector: Sequence[float]) -> np.float64:
    """Dot product of a 3-coefficient matrix row with a 3-vector."""
    return np.float64(np.dot(np.asarray(row, dtype=np.float64), np.asarray(vector, dtype=np.float64)))


@np.errstate(all="ignore")
def to_linear(c: float) -> np.float64:
    """Convert sRGB to linear RGB (gamma decoding)."""
    c = np.float64(c)
    if c > SRGB_DECODE_TH:
        return np.power((c + SRGB_OFFSET) / (1.0 + SRGB_OFFSET), SRGB_GAMMA)
    return c / SRGB_SLOPE


@np.errstate(all="ignore")
def from_linear(c: float) -> np.float64:
    """Convert linear RGB to sRGB (gamma encoding)."""
    c = np.float64(c)
    if c <= SRGB_ENCODE_TH:
        return SRGB_SLOPE * c
    return (1.0 + SRGB_OFFSET) * np.power(c, CORR_RATIO) - SRGB_OFFSET

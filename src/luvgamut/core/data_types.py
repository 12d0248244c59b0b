"""
Core data types for luvgamut.

Provides ColorSpace, one immutable tagged triple per coordinate space
(RGB, XYZ, LUV, LCH, HSLuv, HPLuv), and Line for the gamut boundary
geometry in the LUV chroma plane.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Iterator, Sequence

import numpy as np


class ColorSpace(str, Enum):
    """Supported color spaces."""

    RGB = "RGB"
    XYZ = "XYZ"
    LUV = "LUV"
    LCH = "LCH"
    HSLUV = "HSLUV"
    HPLUV = "HPLUV"

    @classmethod
    def parse(cls, name: ColorSpace | str) -> ColorSpace:
        """Resolve a member or a case-insensitive name."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).upper())
        except ValueError:
            raise ValueError(f"Unknown colorspace: {name}") from None


@dataclass(frozen=True, repr=False)
class Triple:
    """
    Three float64 components tagged with the space they live in.

    Subclasses declare the component names; the base class handles
    coercion, iteration and formatting. Components are never range
    checked - an RGB triple may hold values outside [0, 1].

    Components are stored as numpy.float64 so downstream arithmetic
    follows IEEE rules (inf/NaN) rather than raising.
    """

    colorspace: ClassVar[ColorSpace]

    def __post_init__(self) -> None:
        if type(self) is Triple:
            raise TypeError("Triple is abstract; use RGB, XYZ, LUV, LCH, HSLuv or HPLuv")
        for f in fields(self):
            object.__setattr__(self, f.name, np.float64(getattr(self, f.name)))

    @classmethod
    def from_sequence(cls, values: Sequence[Any]) -> Triple:
        """Build from any 3-item sequence."""
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(
                f"{cls.__name__} needs exactly 3 components, got {len(values)}"
            )
        return cls(*values)

    def __iter__(self) -> Iterator[np.float64]:
        return (getattr(self, f.name) for f in fields(self))

    def __len__(self) -> int:
        return len(fields(self))

    def __getitem__(self, index: int) -> np.float64:
        return tuple(self)[index]

    def as_tuple(self) -> tuple[float, float, float]:
        """Components as plain Python floats."""
        a, b, c = (float(v) for v in self)
        return (a, b, c)

    def __repr__(self) -> str:
        parts = ", ".join(f"{f.name}={float(getattr(self, f.name)):.6g}" for f in fields(self))
        return f"{type(self).__name__}({parts})"


@dataclass(frozen=True, repr=False)
class RGB(Triple):
    """Gamma-encoded sRGB, nominally [0, 1] per channel."""

    colorspace: ClassVar[ColorSpace] = ColorSpace.RGB

    r: float
    g: float
    b: float


@dataclass(frozen=True, repr=False)
class XYZ(Triple):
    """CIE 1931 tristimulus values, Y of reference white = 1."""

    colorspace: ClassVar[ColorSpace] = ColorSpace.XYZ

    x: float
    y: float
    z: float


@dataclass(frozen=True, repr=False)
class LUV(Triple):
    """CIE L*u*v*."""

    colorspace: ClassVar[ColorSpace] = ColorSpace.LUV

    l: float
    u: float
    v: float


@dataclass(frozen=True, repr=False)
class LCH(Triple):
    """Cylindrical LUV: lightness, chroma, hue in degrees."""

    colorspace: ClassVar[ColorSpace] = ColorSpace.LCH

    l: float
    c: float
    h: float


@dataclass(frozen=True, repr=False)
class HSLuv(Triple):
    """Hue [0, 360), saturation [0, 100] relative to the gamut edge, lightness [0, 100]."""

    colorspace: ClassVar[ColorSpace] = ColorSpace.HSLUV

    h: float
    s: float
    l: float


@dataclass(frozen=True, repr=False)
class HPLuv(Triple):
    """Like HSLuv, but saturation is relative to the hue-independent safe chroma."""

    colorspace: ClassVar[ColorSpace] = ColorSpace.HPLUV

    h: float
    s: float
    l: float


_TRIPLE_TYPES: dict[ColorSpace, type[Triple]] = {
    cls.colorspace: cls for cls in (RGB, XYZ, LUV, LCH, HSLuv, HPLuv)
}


def triple_type(space: ColorSpace | str) -> type[Triple]:
    """Return the tagged triple class for a color space."""
    return _TRIPLE_TYPES[ColorSpace.parse(space)]


@dataclass(frozen=True, repr=False)
class Line:
    """
    A boundary line v = slope * u + intercept in the LUV chroma plane.

    Each line is the image of one face of the RGB cube (one channel
    pinned to 0 or 1) at a fixed lightness.

    Attributes:
        slope: Line slope
        intercept: Value of v where the line crosses u = 0
    """

    slope: float
    intercept: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "slope", np.float64(self.slope))
        object.__setattr__(self, "intercept", np.float64(self.intercept))

    @np.errstate(all="ignore")
    def intersect(self, other: Line) -> np.float64:
        """u coordinate where this line crosses another."""
        return (self.intercept - other.intercept) / (other.slope - self.slope)

    @np.errstate(all="ignore")
    def distance_from_origin(self) -> np.float64:
        """Distance from the pole to the closest point on the line."""
        # perpendicular through (0, 0)
        perpendicular = Line(-1.0 / self.slope, 0.0)
        x = self.intersect(perpendicular)
        y = self.intercept + x * self.slope
        return np.sqrt(x * x + y * y)

    @np.errstate(all="ignore")
    def ray_length(self, theta: float) -> np.float64:
        """
        Distance along the ray at angle theta (radians) until it hits the line.

        Negative when the line lies behind the origin; inf or NaN when the
        ray runs parallel to it.
        """
        theta = np.float64(theta)
        return self.intercept / (np.sin(theta) - self.slope * np.cos(theta))

    def __repr__(self) -> str:
        return f"Line(slope={float(self.slope):.6g}, intercept={float(self.intercept):.6g})"

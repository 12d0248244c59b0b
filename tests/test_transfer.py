"""
Tests for the sRGB transfer function and dot product.
"""

import math

import numpy as np
import pytest

from luvgamut.color.transfer import dot, from_linear, to_linear


class TestDot:
    """Tests for the row/vector dot product."""

    def test_dot(self):
        """Plain 3-vector dot product."""
        assert dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0

    def test_dot_numpy_row(self):
        """Matrix rows from numpy work as coefficients."""
        m = np.eye(3)
        assert dot(m[1], (0.1, 0.2, 0.3)) == pytest.approx(0.2)


class TestTransfer:
    """Tests for gamma decode/encode."""

    def test_endpoints(self):
        """0 and 1 are fixed points."""
        assert to_linear(0.0) == 0.0
        assert from_linear(0.0) == 0.0
        assert to_linear(1.0) == pytest.approx(1.0)
        assert from_linear(1.0) == pytest.approx(1.0)

    def test_decode_knee_is_linear(self):
        """The decode threshold itself takes the linear branch."""
        assert to_linear(0.04045) == 0.04045 / 12.92

    def test_encode_knee_is_linear(self):
        """The encode threshold itself takes the linear branch."""
        assert from_linear(0.0031308) == 12.92 * 0.0031308

    def test_mid_grey(self):
        """sRGB 0.5 decodes to about 0.214 linear."""
        assert to_linear(0.5) == pytest.approx(0.21404114048223255, abs=1e-10)

    @pytest.mark.parametrize("c", [0.0, 0.01, 0.03, 0.2, 0.5, 0.9, 1.0])
    def test_inverse(self, c):
        """Encoding undoes decoding across both branches."""
        assert from_linear(to_linear(c)) == pytest.approx(c, abs=1e-12)

    def test_knees_are_not_inverses(self):
        """Decoding the decode knee lands just above the encode knee."""
        linear = to_linear(0.04045)

        assert linear > 0.0031308
        assert from_linear(linear) != 0.04045
        assert from_linear(linear) == pytest.approx(0.04045, abs=1e-7)

    def test_negative_passes_through(self):
        """Negative input stays on the linear segment."""
        assert to_linear(-0.5) == -0.5 / 12.92
        assert from_linear(-0.5) == -0.5 * 12.92

    def test_nan_propagates(self):
        """NaN goes in, NaN comes out."""
        assert math.isnan(to_linear(float("nan")))
        assert math.isnan(from_linear(float("nan")))

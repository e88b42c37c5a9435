#!/usr/bin/env python3
"""
noisegraph Interpolation Test Suite
===================================

Tests for interpolation and easing kernels.
"""

import math

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from noisegraph.interpolation import (
    linear,
    cubic,
    s_curve3,
    s_curve5,
    scale_shift,
    mul_add,
    ieee_pow,
    ieee_div,
)


class TestLinear:
    """Test linear interpolation"""

    def test_endpoints(self):
        """Test linear(a, b, 0) == a and linear(a, b, 1) == b"""
        assert linear(2.0, 5.0, 0.0) == 2.0
        assert linear(2.0, 5.0, 1.0) == 5.0
        assert linear(-0.75, 0.25, 0.0) == -0.75
        assert linear(-0.75, 0.25, 1.0) == 0.25

    def test_equal_endpoints(self):
        """Test linear(a, a, x) == a for any x"""
        for x in (-3.0, 0.0, 0.3, 1.0, 17.5):
            assert linear(0.625, 0.625, x) == 0.625

    def test_midpoint(self):
        """Test interpolation halfway between two values"""
        assert linear(1.0, 3.0, 0.5) == 2.0

    def test_general(self):
        """Test arbitrary values"""
        assert linear(0.1, 0.7, 0.3) == pytest.approx(0.28)

    def test_mul_add(self):
        """Test the scale/bias helper"""
        assert mul_add(0.5, 2.0, 0.25) == 1.25


class TestCubic:
    """Test cubic interpolation"""

    def test_endpoints(self):
        """Test alpha=0 returns n1 and alpha=1 returns n2"""
        assert cubic(0.3, -0.2, 0.9, 0.1, 0.0) == -0.2
        assert cubic(0.3, -0.2, 0.9, 0.1, 1.0) == pytest.approx(0.9)

    def test_linear_data(self):
        """Test evenly spaced samples interpolate linearly"""
        assert cubic(0.0, 1.0, 2.0, 3.0, 0.5) == pytest.approx(1.5)
        assert cubic(0.0, 1.0, 2.0, 3.0, 0.25) == pytest.approx(1.25)


class TestSCurves:
    """Test cubic and quintic easing curves"""

    def test_endpoints(self):
        """Test both curves map 0 to 0 and 1 to 1"""
        assert s_curve3(0.0) == 0.0
        assert s_curve3(1.0) == 1.0
        assert s_curve5(0.0) == 0.0
        assert s_curve5(1.0) == 1.0

    def test_midpoint(self):
        """Test both curves pass through (0.5, 0.5)"""
        assert s_curve3(0.5) == 0.5
        assert s_curve5(0.5) == 0.5

    def test_polynomials(self):
        """Test the exact polynomial forms"""
        for x in np.linspace(0.0, 1.0, 17):
            assert s_curve3(x) == pytest.approx(3 * x**2 - 2 * x**3)
            assert s_curve5(x) == pytest.approx(6 * x**5 - 15 * x**4 + 10 * x**3)

    def test_monotonic(self):
        """Test both curves are non-decreasing on [0, 1]"""
        xs = np.linspace(0.0, 1.0, 1001)
        for curve in (s_curve3, s_curve5):
            ys = np.array([curve(float(x)) for x in xs])
            assert np.all(np.diff(ys) >= 0.0)

    def test_flat_at_endpoints(self):
        """Test the quintic curve is flatter than the cubic near the ends"""
        assert s_curve5(0.01) < s_curve3(0.01)
        assert s_curve5(0.99) > s_curve3(0.99)


class TestIeeeHelpers:
    """Test IEEE-754 power, division and scale_shift"""

    def test_scale_shift(self):
        """Test [0, 1] maps onto [-1, 1] with n=2"""
        assert scale_shift(0.0, 2.0) == -1.0
        assert scale_shift(0.5, 2.0) == 0.0
        assert scale_shift(1.0, 2.0) == 1.0

    def test_pow_regular(self):
        """Test ordinary powers"""
        assert ieee_pow(2.0, 3.0) == 8.0
        assert ieee_pow(9.0, 0.5) == 3.0

    def test_pow_negative_base_fractional_exponent(self):
        """Test NaN instead of a complex result"""
        assert math.isnan(ieee_pow(-8.0, 0.5))

    def test_pow_zero_negative_exponent(self):
        """Test inf instead of ZeroDivisionError"""
        assert ieee_pow(0.0, -1.0) == math.inf

    def test_pow_overflow(self):
        """Test inf instead of OverflowError"""
        assert ieee_pow(1e300, 2.0) == math.inf

    def test_div_by_zero(self):
        """Test division by zero follows IEEE-754"""
        assert ieee_div(1.0, 0.0) == math.inf
        assert ieee_div(-1.0, 0.0) == -math.inf
        assert math.isnan(ieee_div(0.0, 0.0))
        assert ieee_div(3.0, 2.0) == 1.5

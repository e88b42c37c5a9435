#!/usr/bin/env python3
"""
noisegraph Combiner & Modifier Test Suite
=========================================

Tests for Add, Max, Power and the single-source modifiers.
"""

import math

import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from noisegraph.core import NoiseFn
from noisegraph.generators import Constant, Perlin
from noisegraph.combiners import Add, Max, Power
from noisegraph.modifiers import Abs, Clamp, Exponent, Negate, ScaleBias


class CoordinateSum(NoiseFn):
    """Outputs the sum of the point's coordinates"""

    def evaluate(self, point):
        return float(sum(point))


class TestAdd:
    """Test Add"""

    def test_sum(self):
        """Test the two source values are summed"""
        assert Add(Constant(0.25), Constant(0.5)).evaluate((0.0, 0.0)) == 0.75

    def test_exceeds_leaf_range(self):
        """Test sums of [-1, 1] sources may leave [-1, 1]"""
        assert Add(Constant(1.0), Constant(0.75)).evaluate((0.0, 0.0)) == 1.75

    def test_point_forwarded(self):
        """Test both sources see the same point"""
        node = Add(CoordinateSum(), CoordinateSum())
        assert node.evaluate((1.0, 2.0, 3.0)) == 12.0

    def test_same_source_twice(self):
        """Test one node may feed both inputs"""
        source = Constant(0.5)
        node = Add(source, source)

        assert node.evaluate((0.0, 0.0)) == 1.0
        assert node.sources == (source, source)

    def test_perlin_sum_bounded_by_two(self):
        """Test two leaves sum into [-2, 2]"""
        node = Add(Perlin(1), Perlin(2))
        rng = np.random.RandomState(0)
        for point in rng.uniform(-10, 10, size=(100, 2)):
            assert -2.0 <= node.evaluate(point) <= 2.0


class TestMax:
    """Test Max"""

    def test_larger(self):
        """Test the larger value wins regardless of order"""
        assert Max(Constant(0.2), Constant(-0.7)).evaluate((0.0, 0.0)) == 0.2
        assert Max(Constant(-0.7), Constant(0.2)).evaluate((0.0, 0.0)) == 0.2

    def test_nan_loses(self):
        """Test a NaN input yields the other value"""
        assert Max(Constant(math.nan), Constant(1.0)).evaluate((0.0, 0.0)) == 1.0
        assert Max(Constant(1.0), Constant(math.nan)).evaluate((0.0, 0.0)) == 1.0


class TestPower:
    """Test Power"""

    def test_power(self):
        """Test source1 ** source2"""
        assert Power(Constant(2.0), Constant(3.0)).evaluate((0.0, 0.0)) == 8.0

    def test_negative_base_fractional_exponent(self):
        """Test NaN propagates instead of raising"""
        value = Power(Constant(-8.0), Constant(0.5)).evaluate((0.0, 0.0))
        assert math.isnan(value)

    def test_zero_negative_exponent(self):
        """Test 0 ** -1 is inf"""
        assert Power(Constant(0.0), Constant(-1.0)).evaluate((0.0, 0.0)) == math.inf


class TestSimpleModifiers:
    """Test Abs and Negate"""

    def test_abs(self):
        assert Abs(Constant(-0.5)).evaluate((1.0, 1.0)) == 0.5
        assert Abs(Constant(0.5)).evaluate((1.0, 1.0)) == 0.5

    def test_negate(self):
        assert Negate(Constant(0.25)).evaluate((1.0, 1.0)) == -0.25

    def test_negate_perlin(self):
        """Test Negate mirrors its source at every point"""
        source = Perlin(13)
        node = Negate(source)
        for point in [(0.1, 0.2), (5.5, -3.25), (1.5, 2.5, 3.5)]:
            assert node.evaluate(point) == -source.evaluate(point)

    def test_sources(self):
        source = Constant(1.0)
        assert Abs(source).source is source
        assert Abs(source).sources == (source,)

    def test_non_node_source(self):
        """Test non-node sources are rejected"""
        with pytest.raises(TypeError, match="must be a NoiseFn"):
            Abs(1.0)


class TestClamp:
    """Test Clamp"""

    def test_default_bounds(self):
        """Test default bounds are (-1, 1)"""
        node = Clamp(Constant(3.0))

        assert node.bounds == (-1.0, 1.0)
        assert node.evaluate((0.0, 0.0)) == 1.0
        assert Clamp(Constant(-3.0)).evaluate((0.0, 0.0)) == -1.0
        assert Clamp(Constant(0.3)).evaluate((0.0, 0.0)) == 0.3

    def test_set_bounds(self):
        """Test set_bounds returns a new node with the same source"""
        node = Clamp(Constant(-3.0))
        narrowed = node.set_bounds(-0.5, 0.5)

        assert narrowed.evaluate((0.0, 0.0)) == -0.5
        assert narrowed.source is node.source
        assert node.bounds == (-1.0, 1.0)

    def test_set_individual_bounds(self):
        """Test lower and upper bounds can be set separately"""
        node = Clamp(Constant(0.0)).set_lower_bound(0.25).set_upper_bound(0.75)

        assert node.bounds == (0.25, 0.75)
        assert node.evaluate((0.0, 0.0)) == 0.25


class TestScaleBias:
    """Test ScaleBias"""

    def test_defaults(self):
        """Test default scale 1 and bias 0 is the identity"""
        node = ScaleBias(Constant(0.3))

        assert (node.scale, node.bias) == (1.0, 0.0)
        assert node.evaluate((0.0, 0.0)) == 0.3

    def test_scale_and_bias(self):
        """Test source * scale + bias"""
        node = ScaleBias(Constant(0.5), scale=2.0, bias=0.25)
        assert node.evaluate((0.0, 0.0)) == 1.25

    def test_setters(self):
        """Test builder setters"""
        node = ScaleBias(Constant(0.5)).set_scale(-4.0).set_bias(1.0)

        assert node.evaluate((0.0, 0.0)) == -1.0
        assert ScaleBias(Constant(0.5)).scale == 1.0


class TestExponent:
    """Test Exponent"""

    def test_default_identity(self):
        """Test exponent 1 maps [-1, 1] onto itself"""
        for value in (-1.0, -0.5, 0.0, 0.5, 1.0):
            assert Exponent(Constant(value)).evaluate((0.0, 0.0)) == value

    def test_square(self):
        """Test 0 -> 0.5 -> 0.25 -> -0.5 for exponent 2"""
        node = Exponent(Constant(0.0)).set_exponent(2.0)

        assert node.exponent == 2.0
        assert node.evaluate((0.0, 0.0)) == -0.5

    def test_endpoints_fixed(self):
        """Test -1 and 1 are fixed points for positive exponents"""
        assert Exponent(Constant(1.0), exponent=3.0).evaluate((0.0, 0.0)) == 1.0
        assert Exponent(Constant(-1.0), exponent=3.0).evaluate((0.0, 0.0)) == -1.0

    def test_below_range_uses_magnitude(self):
        """Test values below -1 are made non-negative before the power"""
        # -3 -> -1 -> 1 -> 1 -> 1
        assert Exponent(Constant(-3.0), exponent=2.0).evaluate((0.0, 0.0)) == 1.0

    def test_zero_negative_exponent(self):
        """Test -1 with a negative exponent gives inf rather than raising"""
        assert Exponent(Constant(-1.0), exponent=-1.0).evaluate((0.0, 0.0)) == math.inf

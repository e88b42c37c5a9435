#!/usr/bin/env python3
"""
noisegraph: Combiners
=====================

Nodes combining the outputs of two source nodes at the same point.
Combiners do not preserve the [-1, 1] range of their sources.

Author: noisegraph contributors
License: MIT
"""

from abc import abstractmethod

from .core import NoiseFn, Point
from .graph import link
from .interpolation import ieee_pow


class Combiner(NoiseFn):
    """Base class for nodes with two sources"""

    def __init__(self, source1: NoiseFn, source2: NoiseFn):
        self._source1 = link(self, source1)
        self._source2 = link(self, source2)

    @property
    def source1(self) -> NoiseFn:
        return self._source1

    @property
    def source2(self) -> NoiseFn:
        return self._source2

    @property
    def sources(self):
        return (self._source1, self._source2)

    @abstractmethod
    def combine(self, value1: float, value2: float) -> float:
        pass

    def evaluate(self, point: Point) -> float:
        return self.combine(self._source1.evaluate(point), self._source2.evaluate(point))


class Add(Combiner):
    """Sum of the two source values."""

    def combine(self, value1: float, value2: float) -> float:
        return value1 + value2


class Max(Combiner):
    """Larger of the two source values."""

    def combine(self, value1: float, value2: float) -> float:
        # IEEE maxNum (numpy.fmax): a NaN loses to a number
        if value1 != value1:
            return value2
        return value1 if value1 >= value2 or value2 != value2 else value2


class Power(Combiner):
    """
    source1 raised to the power of source2.

    A negative base with a fractional exponent gives NaN and 0 ** -x gives inf,
    as in IEEE-754 arithmetic; neither raises.
    """

    def combine(self, value1: float, value2: float) -> float:
        return ieee_pow(value1, value2)

#!/usr/bin/env python3
"""
noisegraph: Selectors
=====================

Select outputs the value of one of two sources, chosen per point by the
value of a control source.

Author: noisegraph contributors
License: MIT
"""

import copy
from typing import Tuple

from .core import NoiseFn, Point
from .graph import link
from .interpolation import linear, s_curve3


class Select(NoiseFn):
    """
    Chooses between ``source1`` and ``source2`` using ``control``.

    With no falloff, ``source2`` is output where lower <= control <= upper and
    ``source1`` everywhere else. With a positive falloff each bound becomes a
    band of half-width ``falloff`` across which the two sources are blended
    with a cubic S-curve:

        control < lower - falloff            source1
        control < lower + falloff            source1 -> source2 blend
        control < upper - falloff            source2
        control < upper + falloff            source2 -> source1 blend
        otherwise                            source1

    Only the sources a region needs are evaluated.

    Defaults: bounds (0.0, 1.0), falloff 0.0.
    """

    DEFAULT_BOUNDS = (0.0, 1.0)
    DEFAULT_FALLOFF = 0.0

    def __init__(self, source1: NoiseFn, source2: NoiseFn, control: NoiseFn,
                 bounds: Tuple[float, float] = DEFAULT_BOUNDS,
                 falloff: float = DEFAULT_FALLOFF):
        self._source1 = link(self, source1)
        self._source2 = link(self, source2)
        self._control = link(self, control)
        self._bounds = (float(bounds[0]), float(bounds[1]))
        self._falloff = float(falloff)

    @property
    def source1(self) -> NoiseFn:
        return self._source1

    @property
    def source2(self) -> NoiseFn:
        return self._source2

    @property
    def control(self) -> NoiseFn:
        return self._control

    @property
    def sources(self):
        return (self._control, self._source1, self._source2)

    @property
    def bounds(self) -> Tuple[float, float]:
        return self._bounds

    @property
    def falloff(self) -> float:
        return self._falloff

    def set_bounds(self, lower_bound: float, upper_bound: float) -> 'Select':
        selected = copy.copy(self)
        selected._bounds = (float(lower_bound), float(upper_bound))
        return selected

    def set_falloff(self, falloff: float) -> 'Select':
        selected = copy.copy(self)
        selected._falloff = float(falloff)
        return selected

    def evaluate(self, point: Point) -> float:
        control_value = self._control.evaluate(point)
        lower, upper = self._bounds
        falloff = self._falloff

        if falloff > 0.0:
            if control_value < lower - falloff:
                return self._source1.evaluate(point)
            if control_value < lower + falloff:
                lower_curve = lower - falloff
                upper_curve = lower + falloff
                alpha = s_curve3((control_value - lower_curve) / (upper_curve - lower_curve))
                return linear(self._source1.evaluate(point), self._source2.evaluate(point), alpha)
            if control_value < upper - falloff:
                return self._source2.evaluate(point)
            if control_value < upper + falloff:
                lower_curve = upper - falloff
                upper_curve = upper + falloff
                alpha = s_curve3((control_value - lower_curve) / (upper_curve - lower_curve))
                return linear(self._source2.evaluate(point), self._source1.evaluate(point), alpha)
            return self._source1.evaluate(point)

        if control_value < lower or control_value > upper:
            return self._source1.evaluate(point)
        return self._source2.evaluate(point)

    def __repr__(self) -> str:
        return f"Select(bounds={self._bounds}, falloff={self._falloff})"

#!/usr/bin/env python3
"""
noisegraph: Modifiers
=====================

Nodes transforming the output of a single source node. Setters are
builder-style and return a new node sharing the same source.

Author: noisegraph contributors
License: MIT
"""

import copy
from abc import abstractmethod
from typing import Tuple

from .core import NoiseFn, Point
from .graph import link
from .interpolation import ieee_pow, mul_add, scale_shift


class Modifier(NoiseFn):
    """Base class for nodes with one source"""

    def __init__(self, source: NoiseFn):
        self._source = link(self, source)

    @property
    def source(self) -> NoiseFn:
        return self._source

    @property
    def sources(self):
        return (self._source,)

    @abstractmethod
    def modify(self, value: float) -> float:
        pass

    def evaluate(self, point: Point) -> float:
        return self.modify(self._source.evaluate(point))

    def _with(self, **changes) -> 'Modifier':
        """Shallow copy with some parameters replaced; the source stays shared."""
        modified = copy.copy(self)
        for name, value in changes.items():
            setattr(modified, name, value)
        return modified


class Abs(Modifier):
    """Absolute value of the source."""

    def modify(self, value: float) -> float:
        return abs(value)


class Negate(Modifier):
    """Negated source value."""

    def modify(self, value: float) -> float:
        return -value


class Clamp(Modifier):
    """
    Clamps the source value into [lower, upper].

    Default bounds are (-1.0, 1.0).
    """

    DEFAULT_BOUNDS = (-1.0, 1.0)

    def __init__(self, source: NoiseFn, bounds: Tuple[float, float] = DEFAULT_BOUNDS):
        super().__init__(source)
        self._bounds = (float(bounds[0]), float(bounds[1]))

    @property
    def bounds(self) -> Tuple[float, float]:
        return self._bounds

    def set_lower_bound(self, lower_bound: float) -> 'Clamp':
        return self._with(_bounds=(float(lower_bound), self._bounds[1]))

    def set_upper_bound(self, upper_bound: float) -> 'Clamp':
        return self._with(_bounds=(self._bounds[0], float(upper_bound)))

    def set_bounds(self, lower_bound: float, upper_bound: float) -> 'Clamp':
        return self._with(_bounds=(float(lower_bound), float(upper_bound)))

    def modify(self, value: float) -> float:
        lower, upper = self._bounds
        if value < lower:
            return lower
        if value > upper:
            return upper
        return value

    def __repr__(self) -> str:
        return f"Clamp(bounds={self._bounds})"


class ScaleBias(Modifier):
    """
    source * scale + bias, fused where the interpreter supports it.

    Defaults: scale 1.0, bias 0.0.
    """

    def __init__(self, source: NoiseFn, scale: float = 1.0, bias: float = 0.0):
        super().__init__(source)
        self._scale = float(scale)
        self._bias = float(bias)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def bias(self) -> float:
        return self._bias

    def set_scale(self, scale: float) -> 'ScaleBias':
        return self._with(_scale=float(scale))

    def set_bias(self, bias: float) -> 'ScaleBias':
        return self._with(_bias=float(bias))

    def modify(self, value: float) -> float:
        return mul_add(value, self._scale, self._bias)

    def __repr__(self) -> str:
        return f"ScaleBias(scale={self._scale}, bias={self._bias})"


class Exponent(Modifier):
    """
    Maps the source value onto an exponential curve.

    The value is normalised from [-1, 1] to [0, 1], made non-negative, raised
    to ``exponent`` and mapped back to [-1, 1]. Default exponent is 1.0.
    """

    def __init__(self, source: NoiseFn, exponent: float = 1.0):
        super().__init__(source)
        self._exponent = float(exponent)

    @property
    def exponent(self) -> float:
        return self._exponent

    def set_exponent(self, exponent: float) -> 'Exponent':
        return self._with(_exponent=float(exponent))

    def modify(self, value: float) -> float:
        value = (value + 1.0) / 2.0
        value = abs(value)
        value = ieee_pow(value, self._exponent)
        return scale_shift(value, 2.0)

    def __repr__(self) -> str:
        return f"Exponent(exponent={self._exponent})"

#!/usr/bin/env python3
"""
noisegraph: Leaf Generators (MIT License)
=========================================

Leaf nodes that compute noise directly from the input point: coherent
Perlin-surflet gradient noise, value noise, and a constant field.
Perlin and Value work for 2, 3 and 4-dimensional points with one shared
corner-walking implementation instead of one copy per dimension.

Author: noisegraph contributors
License: MIT

Copyright (c) 2026 noisegraph contributors

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

import itertools
import logging
import math
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Sequence, Tuple

import numpy as np

from .core import NoiseFn, Point, Seedable, check_dimension, check_seed
from .interpolation import linear, s_curve5
from .permutation import PermutationTable

logger = logging.getLogger(__name__)


# ============================================================================
# Enums
# ============================================================================

class GeneratorType(Enum):
    """Leaf generator types"""
    PERLIN_SURFLET = "perlin_surflet"
    VALUE = "value"
    CONSTANT = "constant"


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class GeneratorParameters:
    """Parameters for building a leaf generator"""
    generator_type: GeneratorType
    seed: int = 0
    parameters: Dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Lattice Tables
# ============================================================================

_DIAG2 = 0.7071067811865476  # 1/sqrt(2)
_DIAG3 = 0.5773502691896258  # 1/sqrt(3)


def _edge_vectors(dim: int, magnitude: float) -> np.ndarray:
    """Vectors with one zero component and +/-magnitude on the others."""
    rows = []
    for zero_axis in range(dim):
        for signs in itertools.product((1.0, -1.0), repeat=dim - 1):
            signs = list(signs)
            signs.insert(zero_axis, 0.0)
            rows.append(signs)
    return np.array(rows, dtype=np.float64) * magnitude


def _corner_vectors(dim: int, magnitude: float) -> np.ndarray:
    return np.array(list(itertools.product((1.0, -1.0), repeat=dim)), dtype=np.float64) * magnitude


# Gradient vectors (8 directions)
GRADIENTS_2D = np.array([
    [1.0, 0.0], [-1.0, 0.0], [0.0, 1.0], [0.0, -1.0],
    [_DIAG2, _DIAG2], [-_DIAG2, _DIAG2],
    [_DIAG2, -_DIAG2], [-_DIAG2, -_DIAG2]
], dtype=np.float64)

# 12 cube edges (twice) + 8 cube corners = 32
GRADIENTS_3D = np.concatenate([
    _edge_vectors(3, _DIAG2),
    _edge_vectors(3, _DIAG2),
    _corner_vectors(3, _DIAG3),
])

# 32 hypercube edges + 16 hypercube corners (twice) = 64
GRADIENTS_4D = np.concatenate([
    _edge_vectors(4, _DIAG3),
    _corner_vectors(4, 0.5),
    _corner_vectors(4, 0.5),
])

for _table in (GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D):
    _table.flags.writeable = False

_GRADIENTS = {
    2: tuple(tuple(row) for row in GRADIENTS_2D.tolist()),
    3: tuple(tuple(row) for row in GRADIENTS_3D.tolist()),
    4: tuple(tuple(row) for row in GRADIENTS_4D.tolist()),
}

# Corner offsets in x-fastest order: (0,0), (1,0), (0,1), (1,1), ...
_CORNERS = {
    dim: tuple(
        tuple((i >> axis) & 1 for axis in range(dim))
        for i in range(1 << dim)
    )
    for dim in (2, 3, 4)
}

# Empirical factors bringing the surflet sum into [-1, 1]
PERLIN_SCALE_FACTORS = {
    2: 3.1604938271604937,
    3: 3.8898553255531074,
    4: 4.424369240215691,
}


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    # Left-to-right accumulation; sum() compensates and would change rounding
    total = a[0] * b[0]
    for i in range(1, len(a)):
        total += a[i] * b[i]
    return total


_CELL_MIN = -sys.maxsize - 1
_CELL_MAX = sys.maxsize


def _lattice_coordinate(value: float) -> Tuple[int, float]:
    """
    Floor cell and fractional offset of one coordinate.

    Cells saturate to the machine-word range: NaN maps to cell 0 and +/-inf
    to the largest/smallest word. The offset of a non-finite coordinate is
    NaN, so no lattice corner gets any weight.
    """
    if value != value:
        return 0, math.nan
    if math.isinf(value):
        return (_CELL_MAX if value > 0.0 else _CELL_MIN), math.nan
    floored = math.floor(value)
    return min(max(floored, _CELL_MIN), _CELL_MAX), value - floored


def _split(point: Point) -> Tuple[list, list]:
    """Floor-lattice cell and fractional offset of a point."""
    cell = []
    offset = []
    for v in point:
        c, d = _lattice_coordinate(float(v))
        cell.append(c)
        offset.append(d)
    return cell, offset


# ============================================================================
# Generator Base Class
# ============================================================================

class LatticeGenerator(NoiseFn, Seedable):
    """
    Base class for generators driven by a permutation table.

    The table is built once per seed and owned by the generator. set_seed()
    with the current seed returns the same instance and rebuilds nothing.
    """

    DEFAULT_SEED = 0

    def __init__(self, seed: int = DEFAULT_SEED):
        self._seed = check_seed(seed)
        self._perm_table = PermutationTable(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def perm_table(self) -> PermutationTable:
        return self._perm_table

    def set_seed(self, seed: int) -> 'LatticeGenerator':
        if seed == self._seed:
            return self
        return type(self)(seed)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"


# ============================================================================
# Perlin-Surflet Generator
# ============================================================================

class Perlin(LatticeGenerator):
    """
    Perlin noise built from surflets.

    Each of the 2^D lattice corners around the point contributes
    (1 - |d|^2)^4 * dot(d, g) when 1 - |d|^2 > 0, where d is the offset from
    the corner and g a gradient chosen by hashing the corner. The summed
    contributions are scaled per dimension and clamped to [-1, 1].
    """

    def evaluate(self, point: Point) -> float:
        dim = check_dimension(point)
        cell, offset = _split(point)
        gradients = _GRADIENTS[dim]
        n_gradients = len(gradients)
        hash_corner = self._perm_table.hash

        total = 0.0
        for corner in _CORNERS[dim]:
            distance = [d - c for d, c in zip(offset, corner)]
            attn = 1.0 - _dot(distance, distance)
            if attn > 0.0:
                lattice = [p + c for p, c in zip(cell, corner)]
                gradient = gradients[hash_corner(lattice) % n_gradients]
                attn2 = attn * attn
                total += attn2 * attn2 * _dot(distance, gradient)

        return min(max(total * PERLIN_SCALE_FACTORS[dim], -1.0), 1.0)


# ============================================================================
# Value Generator
# ============================================================================

class Value(LatticeGenerator):
    """
    Value noise.

    Corner hashes are normalised to [0, 1], blended along x, then y, then z
    and w with quintic-eased weights, and remapped to [-1, 1].
    """

    def evaluate(self, point: Point) -> float:
        dim = check_dimension(point)
        cell, offset = _split(point)
        hash_corner = self._perm_table.hash

        values = [
            hash_corner([p + c for p, c in zip(cell, corner)]) / 255.0
            for corner in _CORNERS[dim]
        ]
        for weight in (s_curve5(d) for d in offset):
            values = [
                linear(values[i], values[i + 1], weight)
                for i in range(0, len(values), 2)
            ]

        return values[0] * 2.0 - 1.0


# ============================================================================
# Constant Generator
# ============================================================================

class Constant(NoiseFn):
    """Outputs the same value at every point, of any dimension."""

    def __init__(self, value: float):
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def evaluate(self, point: Point) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"Constant({self._value!r})"


# ============================================================================
# Generator Factory
# ============================================================================

class GeneratorFactory:
    """
    Factory for creating leaf generators.

    New generator types can be registered without modifying existing code.
    """
    _registry: Dict[GeneratorType, type] = {}

    @classmethod
    def register(cls, generator_type: GeneratorType):
        """Decorator to register a builder function for a type"""
        def decorator(builder):
            cls._registry[generator_type] = builder
            return builder
        return decorator

    @classmethod
    def create(cls, params: GeneratorParameters) -> NoiseFn:
        """Build the generator described by ``params``."""
        builder = cls._registry.get(params.generator_type)
        if builder is None:
            raise ValueError(f"Unknown generator type: {params.generator_type}")
        logger.debug(f"Creating {params.generator_type.value} generator (seed={params.seed})")
        return builder(params)


@GeneratorFactory.register(GeneratorType.PERLIN_SURFLET)
def _build_perlin(params: GeneratorParameters) -> Perlin:
    return Perlin(params.seed)


@GeneratorFactory.register(GeneratorType.VALUE)
def _build_value(params: GeneratorParameters) -> Value:
    return Value(params.seed)


@GeneratorFactory.register(GeneratorType.CONSTANT)
def _build_constant(params: GeneratorParameters) -> Constant:
    return Constant(params.parameters.get('value', 0.0))


def get_generator(generator_type: GeneratorType, seed: int = 0, **parameters) -> NoiseFn:
    """
    Get a generator instance by type.

    Example:
        >>> perlin = get_generator(GeneratorType.PERLIN_SURFLET, seed=7)
        >>> flat = get_generator(GeneratorType.CONSTANT, value=0.25)
    """
    if not isinstance(generator_type, GeneratorType):
        try:
            generator_type = GeneratorType(generator_type)
        except ValueError:
            raise ValueError(f"Unknown generator type: {generator_type}")
    return GeneratorFactory.create(GeneratorParameters(
        generator_type=generator_type,
        seed=seed,
        parameters=parameters,
    ))

#!/usr/bin/env python3
"""
noisegraph: Node Abstractions
=============================

The single capability every node in a noise graph provides: evaluate a
point, return a scalar. Leaf generators, combinators, modifiers, selectors
and caches all implement ``NoiseFn.evaluate``.

Author: noisegraph contributors
License: MIT
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

import numpy as np

Point = Union[Sequence[float], np.ndarray]

SUPPORTED_DIMENSIONS = (2, 3, 4)
SEED_MAX = 0xFFFFFFFF


# ============================================================================
# Exceptions
# ============================================================================

class NoiseGraphError(Exception):
    """Base class for noise graph errors"""


class CycleError(NoiseGraphError, ValueError):
    """A node was linked so that it would become its own descendant"""


class DimensionError(NoiseGraphError, ValueError):
    """A point of unsupported dimensionality was passed to a node"""


# ============================================================================
# Validation Helpers
# ============================================================================

def check_dimension(point: Point) -> int:
    """Return the dimension of ``point``, rejecting anything but 2, 3 or 4."""
    dim = len(point)
    if dim not in SUPPORTED_DIMENSIONS:
        raise DimensionError(
            f"Unsupported point dimension: {dim} (expected one of {SUPPORTED_DIMENSIONS})"
        )
    return dim


def check_seed(seed) -> int:
    """Validate an unsigned 32-bit seed."""
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise ValueError(f"Seed must be an integer, got {type(seed).__name__}")
    seed = int(seed)
    if not 0 <= seed <= SEED_MAX:
        raise ValueError(f"Seed out of range [0, {SEED_MAX}]: {seed}")
    return seed


# ============================================================================
# Node Base Classes
# ============================================================================

class NoiseFn(ABC):
    """
    Base class for noise graph nodes.

    Subclasses implement evaluate() to compute a scalar for a 2, 3 or
    4-dimensional point. Composite nodes override ``sources`` to expose
    the children they were constructed with.
    """

    @abstractmethod
    def evaluate(self, point: Point) -> float:
        """Evaluate the node at ``point``"""
        pass

    def __call__(self, point: Point) -> float:
        return self.evaluate(point)

    @property
    def sources(self) -> Tuple['NoiseFn', ...]:
        """Child nodes, in evaluation order. Leaves have none."""
        return ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Seedable(ABC):
    """Nodes whose output is driven by a 32-bit seed"""

    @abstractmethod
    def set_seed(self, seed: int) -> 'Seedable':
        """Return a node using ``seed``; returns self when the seed is unchanged"""
        pass

    @property
    @abstractmethod
    def seed(self) -> int:
        pass


class MultiFractal(ABC):
    """Builder-style configuration shared by multi-octave nodes"""

    @abstractmethod
    def set_octaves(self, octaves: int) -> 'MultiFractal':
        pass

    @abstractmethod
    def set_frequency(self, frequency: float) -> 'MultiFractal':
        pass

    @abstractmethod
    def set_lacunarity(self, lacunarity: float) -> 'MultiFractal':
        pass

    @abstractmethod
    def set_persistence(self, persistence: float) -> 'MultiFractal':
        pass

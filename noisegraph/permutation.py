#!/usr/bin/env python3
"""
noisegraph: Permutation Table
=============================

Seeded 256-entry byte permutation used to hash integer lattice points.

The table is shuffled with a local ``numpy.random.RandomState`` so that the
same seed always yields the same table without touching global RNG state.

Author: noisegraph contributors
License: MIT
"""

import logging
from typing import Sequence

import numpy as np

from .core import check_seed

logger = logging.getLogger(__name__)

TABLE_SIZE = 256


class PermutationTable:
    """
    Immutable permutation of the values 0..255.

    ``hash`` folds lattice coordinates one dimension at a time:
    ``t[t[x & 255] ^ (y & 255)]`` and so on for z and w.

    Example:
        >>> table = PermutationTable(42)
        >>> table.hash((3, -7))
    """

    __slots__ = ('_seed', '_values', '_lookup')

    def __init__(self, seed: int):
        self._seed = check_seed(seed)

        # Use local RandomState to avoid polluting global state
        rng = np.random.RandomState(self._seed)
        values = np.arange(TABLE_SIZE, dtype=np.uint8)
        rng.shuffle(values)
        values.flags.writeable = False

        self._values = values
        # Plain ints for the per-point hot path
        self._lookup = tuple(int(v) for v in values)

        logger.debug(f"Built permutation table for seed {self._seed}")

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def values(self) -> np.ndarray:
        """Read-only uint8 view of the table"""
        return self._values

    def hash(self, corner: Sequence[int]) -> int:
        """Hash an integer lattice point of any dimension to a byte."""
        lookup = self._lookup
        coords = iter(corner)
        index = lookup[next(coords) & 0xFF]
        for c in coords:
            index = lookup[index ^ (c & 0xFF)]
        return index

    def __len__(self) -> int:
        return TABLE_SIZE

    def __eq__(self, other) -> bool:
        if not isinstance(other, PermutationTable):
            return NotImplemented
        return self._lookup == other._lookup

    def __hash__(self) -> int:
        return hash(self._lookup)

    def __repr__(self) -> str:
        return f"PermutationTable(seed={self._seed})"

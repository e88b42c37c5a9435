#!/usr/bin/env python3
"""
noisegraph: Evaluation Cache
============================

Cache wraps a node and remembers the last (point, value) pair it produced.
Wrap a subgraph that several parents link to, so one evaluation pass of the
whole graph computes it once per point instead of once per parent.

The memo has a single slot: it only helps when the same point is requested
again before any other point. Points are compared component-wise with IEEE
equality, so a point with a NaN coordinate never hits the memo.

Thread affinity:
    Cache writes its memo on every miss and must not be evaluated from
    several threads at once. Use ThreadLocalCache, which keeps one memo slot
    per thread, when a graph is shared between threads.

Author: noisegraph contributors
License: MIT
"""

import threading
from typing import Optional, Tuple

from .core import NoiseFn, Point
from .graph import link


class Cache(NoiseFn):
    """
    Single-slot memo around ``source``.

    Example:
        >>> base = Cache(Fbm().set_seed(3))
        >>> graph = Add(base, Abs(base))
        >>> graph.evaluate((0.5, 0.25))   # base is computed once
    """

    def __init__(self, source: NoiseFn):
        self._source = link(self, source)
        self._point: Optional[Tuple[float, ...]] = None
        self._value: Optional[float] = None

    @property
    def source(self) -> NoiseFn:
        return self._source

    @property
    def sources(self):
        return (self._source,)

    @property
    def cached(self) -> Optional[Tuple[Tuple[float, ...], float]]:
        """The memo as (point, value), or None before the first evaluation"""
        if self._point is None:
            return None
        return self._point, self._value

    def reset(self) -> None:
        """Forget the cached value."""
        self._point = None
        self._value = None

    def _hit(self, key: Tuple[float, ...]) -> bool:
        # Component-wise IEEE equality: a NaN coordinate never matches
        cached = self._point
        return (
            cached is not None
            and len(cached) == len(key)
            and all(a == b for a, b in zip(cached, key))
        )

    def evaluate(self, point: Point) -> float:
        key = tuple(point)
        if self._hit(key):
            return self._value

        value = self._source.evaluate(point)
        self._point = key
        self._value = value
        return value

    def __repr__(self) -> str:
        return "Cache()"


class ThreadLocalCache(Cache):
    """
    Cache whose memo slot is private to each evaluating thread.

    Behaves like Cache within a thread; threads never observe each other's
    memo, at the cost of a thread-local lookup per evaluation.
    """

    def __init__(self, source: NoiseFn):
        self._local = threading.local()
        super().__init__(source)

    # Route the memo attributes through the thread-local namespace
    @property
    def _point(self):
        return getattr(self._local, 'point', None)

    @_point.setter
    def _point(self, point):
        self._local.point = point

    @property
    def _value(self):
        return getattr(self._local, 'value', None)

    @_value.setter
    def _value(self, value):
        self._local.value = value

    def __repr__(self) -> str:
        return "ThreadLocalCache()"

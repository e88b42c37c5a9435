#!/usr/bin/env python3
"""
noisegraph: Interpolation & Easing Kernels
==========================================

Pure scalar math shared by the generators and the Select blend.
The polynomial forms below are kept exactly as written; reordering them
changes floating-point rounding and therefore every generated value.

Author: noisegraph contributors
License: MIT
"""

import math

import numpy as np

# math.fma is only present on newer interpreters
_HAS_FMA = hasattr(math, 'fma')


if _HAS_FMA:
    def linear(a: float, b: float, x: float) -> float:
        """Linear interpolation: a + x * (b - a), fused."""
        return math.fma(x, b - a, a)

    def mul_add(value: float, scale: float, bias: float) -> float:
        """value * scale + bias, fused."""
        return math.fma(value, scale, bias)
else:
    def linear(a: float, b: float, x: float) -> float:
        """Linear interpolation: a + x * (b - a)."""
        return (x * (b - a)) + a

    def mul_add(value: float, scale: float, bias: float) -> float:
        """value * scale + bias."""
        return (value * scale) + bias


def cubic(n0: float, n1: float, n2: float, n3: float, alpha: float) -> float:
    """
    Cubic interpolation between n1 and n2, shaped by neighbours n0 and n3.

    Args:
        n0: The value before n1
        n1: The first value (returned at alpha=0)
        n2: The second value (returned at alpha=1)
        n3: The value after n2
        alpha: Position between n1 and n2, normally in [0, 1]
    """
    p = (n3 - n2) - (n0 - n1)
    q = (n0 - n1) - p
    r = n2 - n0
    s = n1
    return p * alpha * alpha * alpha + q * alpha * alpha + r * alpha + s


def s_curve3(x: float) -> float:
    "3x^2 - 2x^3"
    return x * x * (3.0 - (x * 2.0))


def s_curve5(x: float) -> float:
    "6x^5 - 15x^4 + 10x^3"
    return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)


def scale_shift(value: float, n: float) -> float:
    """Map value * n into a range starting at -1 (e.g. [0, 1] -> [-1, 1] for n=2)."""
    return value * n - 1.0


def ieee_pow(base: float, exponent: float) -> float:
    """
    base ** exponent with IEEE-754 results instead of Python exceptions.

    Python raises on 0 ** -1 and overflow and returns complex numbers for a
    negative base with a fractional exponent; numpy yields inf/nan instead.
    """
    with np.errstate(all='ignore'):
        return float(np.power(np.float64(base), np.float64(exponent)))


def ieee_div(numerator: float, denominator: float) -> float:
    """numerator / denominator, yielding inf/nan for a zero denominator."""
    if denominator == 0.0:
        with np.errstate(all='ignore'):
            return float(np.float64(numerator) / np.float64(denominator))
    return numerator / denominator

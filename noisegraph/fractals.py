#!/usr/bin/env python3
"""
noisegraph: Fractal Accumulator
===============================

fBm (fractal Brownian motion): several noise octaves of increasing frequency
and decreasing amplitude summed together.

Each octave samples its own generator, seeded ``seed + octave`` so octaves
are decorrelated. The sum is divided by ``1 - persistence ** octaves``.

Configuration is builder-style: every set_*() returns a new Fbm and leaves
the original untouched. Only a change of octave count or seed rebuilds the
per-octave generators (up to 32 permutation tables).

Author: noisegraph contributors
License: MIT
"""

import logging
import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional, Tuple

from .core import MultiFractal, NoiseFn, Point, Seedable, check_dimension, check_seed
from .generators import LatticeGenerator, Perlin
from .interpolation import ieee_div, ieee_pow

logger = logging.getLogger(__name__)

DEFAULT_SEED = 0
DEFAULT_OCTAVE_COUNT = 6
DEFAULT_FREQUENCY = 1.0
DEFAULT_LACUNARITY = math.pi * 2.0 / 3.0
DEFAULT_PERSISTENCE = 0.5
MIN_OCTAVES = 1
MAX_OCTAVES = 32


def clamp_octaves(octaves: int) -> int:
    """Clamp an octave count into [1, 32], warning when it changes."""
    clamped = min(max(int(octaves), MIN_OCTAVES), MAX_OCTAVES)
    if clamped != octaves:
        logger.warning(
            f"octaves={octaves} outside [{MIN_OCTAVES}, {MAX_OCTAVES}]. "
            f"Clamping to {clamped}."
        )
    return clamped


def calc_scale_factor(persistence: float, octaves: int) -> float:
    """Normalisation divisor for an fBm sum: 1 - persistence^octaves."""
    return 1.0 - ieee_pow(persistence, octaves)


def build_sources(seed: int, octaves: int,
                  source_type: type = Perlin) -> List[LatticeGenerator]:
    """One generator per octave, seeded seed, seed + 1, ... (mod 2**32)."""
    logger.debug(
        f"Building {octaves} {source_type.__name__} octave sources from seed {seed}"
    )
    return [source_type((seed + i) & 0xFFFFFFFF) for i in range(octaves)]


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class FbmSettings:
    """
    Recognised fBm options.

    Attributes:
        octaves: Number of octaves; more octaves add detail and cost. Clamped
            into [1, 32] on construction.
        frequency: Cycles per unit length of the first octave.
        lacunarity: Frequency multiplier between successive octaves.
        persistence: Amplitude multiplier between successive octaves; higher
            values give rougher noise.
        seed: Seed of the first octave.
    """
    octaves: int = DEFAULT_OCTAVE_COUNT
    frequency: float = DEFAULT_FREQUENCY
    lacunarity: float = DEFAULT_LACUNARITY
    persistence: float = DEFAULT_PERSISTENCE
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        object.__setattr__(self, 'octaves', clamp_octaves(self.octaves))
        object.__setattr__(self, 'seed', check_seed(self.seed))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FbmSettings':
        """Build settings from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown fBm settings: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============================================================================
# fBm
# ============================================================================

class Fbm(NoiseFn, Seedable, MultiFractal):
    """
    Noise function that outputs fBm noise.

    Example:
        >>> fbm = Fbm().set_seed(7).set_octaves(4).set_frequency(0.05)
        >>> fbm.evaluate((12.5, 3.25))
    """

    DEFAULT_SEED = DEFAULT_SEED
    DEFAULT_OCTAVE_COUNT = DEFAULT_OCTAVE_COUNT
    DEFAULT_FREQUENCY = DEFAULT_FREQUENCY
    DEFAULT_LACUNARITY = DEFAULT_LACUNARITY
    DEFAULT_PERSISTENCE = DEFAULT_PERSISTENCE
    MAX_OCTAVES = MAX_OCTAVES

    def __init__(self, settings: Optional[FbmSettings] = None,
                 source_type: type = Perlin):
        self._settings = settings if settings is not None else FbmSettings()
        self._source_type = source_type
        self._sources = tuple(build_sources(
            self._settings.seed, self._settings.octaves, source_type
        ))
        self._update_normalisation()

    @classmethod
    def from_settings(cls, settings: FbmSettings, source_type: type = Perlin) -> 'Fbm':
        return cls(settings, source_type)

    def _update_normalisation(self):
        persistence = self._settings.persistence
        octaves = self._settings.octaves
        self._scale_factor = calc_scale_factor(persistence, octaves)
        self._amplitudes = tuple(ieee_pow(persistence, i) for i in range(octaves))

    def _derive(self, settings: FbmSettings, rebuild_sources: bool = False,
                renormalise: bool = False) -> 'Fbm':
        """Copy of this Fbm with new settings, rebuilding only what changed."""
        derived = object.__new__(type(self))
        derived._settings = settings
        derived._source_type = self._source_type
        derived._scale_factor = self._scale_factor
        derived._amplitudes = self._amplitudes
        if rebuild_sources:
            derived._sources = tuple(build_sources(
                settings.seed, settings.octaves, self._source_type
            ))
        else:
            derived._sources = self._sources
        if renormalise:
            derived._update_normalisation()
        return derived

    # ------------------------------------------------------------------
    # Read-only configuration
    # ------------------------------------------------------------------

    @property
    def settings(self) -> FbmSettings:
        return self._settings

    @property
    def octaves(self) -> int:
        return self._settings.octaves

    @property
    def frequency(self) -> float:
        return self._settings.frequency

    @property
    def lacunarity(self) -> float:
        return self._settings.lacunarity

    @property
    def persistence(self) -> float:
        return self._settings.persistence

    @property
    def seed(self) -> int:
        return self._settings.seed

    @property
    def source_type(self) -> type:
        return self._source_type

    @property
    def octave_sources(self) -> Tuple[LatticeGenerator, ...]:
        """Per-octave generators (internal to the accumulator, not graph children)"""
        return self._sources

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    # ------------------------------------------------------------------
    # Builder setters
    # ------------------------------------------------------------------

    def set_octaves(self, octaves: int) -> 'Fbm':
        """Octave count, clamped into [1, 32]. Rebuilds sources and normalisation."""
        octaves = clamp_octaves(octaves)
        if octaves == self._settings.octaves:
            return self
        return self._derive(replace(self._settings, octaves=octaves),
                            rebuild_sources=True, renormalise=True)

    def set_frequency(self, frequency: float) -> 'Fbm':
        """Base frequency. Touches no derived state."""
        if frequency == self._settings.frequency:
            return self
        return self._derive(replace(self._settings, frequency=frequency))

    def set_lacunarity(self, lacunarity: float) -> 'Fbm':
        """Per-octave frequency multiplier. Touches no derived state."""
        if lacunarity == self._settings.lacunarity:
            return self
        return self._derive(replace(self._settings, lacunarity=lacunarity))

    def set_persistence(self, persistence: float) -> 'Fbm':
        """Per-octave amplitude multiplier. Recomputes normalisation only."""
        if persistence == self._settings.persistence:
            return self
        return self._derive(replace(self._settings, persistence=persistence),
                            renormalise=True)

    def set_seed(self, seed: int) -> 'Fbm':
        """Seed of the first octave. Rebuilds sources."""
        if seed == self._settings.seed:
            return self
        return self._derive(replace(self._settings, seed=seed), rebuild_sources=True)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, point: Point) -> float:
        check_dimension(point)
        frequency = self._settings.frequency
        lacunarity = self._settings.lacunarity

        point = [float(v) * frequency for v in point]
        result = 0.0
        for source, amplitude in zip(self._sources, self._amplitudes):
            result += source.evaluate(point) * amplitude
            point = [v * lacunarity for v in point]

        # Scale the result into the [-1, 1] range
        return ieee_div(result, self._scale_factor)

    def __repr__(self) -> str:
        s = self._settings
        return (
            f"Fbm(octaves={s.octaves}, frequency={s.frequency}, "
            f"lacunarity={s.lacunarity}, persistence={s.persistence}, seed={s.seed})"
        )

"""
noisegraph: Composable Procedural Noise
=======================================

Evaluate deterministic noise fields over 2, 3 and 4-dimensional points.

Leaf generators (Perlin-surflet, Value, Constant) are composed into
evaluation graphs with combiners, modifiers and selectors. Fbm sums
independently seeded octaves, and Cache stops a subgraph shared by several
parents from being computed more than once per point.

Example:
    >>> from noisegraph import Fbm, Perlin, Select, ScaleBias, Cache
    >>> hills = Cache(Fbm().set_seed(1).set_frequency(0.02))
    >>> mountains = ScaleBias(Perlin(2), scale=2.0, bias=0.5)
    >>> terrain = Select(hills, mountains, hills, bounds=(0.2, 1.0)).set_falloff(0.1)
    >>> terrain.evaluate((128.0, 64.0))

Author: noisegraph contributors
License: MIT
"""

from .core import (
    NoiseFn,
    Seedable,
    MultiFractal,
    NoiseGraphError,
    CycleError,
    DimensionError,
    SUPPORTED_DIMENSIONS,
)

from .permutation import PermutationTable

from .interpolation import (
    linear,
    cubic,
    s_curve3,
    s_curve5,
    scale_shift,
)

# Leaf generators
from .generators import (
    GeneratorType,
    GeneratorParameters,
    GeneratorFactory,
    LatticeGenerator,
    Perlin,
    Value,
    Constant,
    get_generator,
)

from .fractals import (
    Fbm,
    FbmSettings,
    build_sources,
)

# Composite nodes
from .combiners import Combiner, Add, Max, Power
from .modifiers import Modifier, Abs, Negate, Clamp, ScaleBias, Exponent
from .selectors import Select
from .cache import Cache, ThreadLocalCache

from .graph import (
    sources_of,
    walk,
    fan_in,
    shared_nodes,
    depth,
    validate_acyclic,
    link,
)

__all__ = [
    # Core
    'NoiseFn',
    'Seedable',
    'MultiFractal',
    'NoiseGraphError',
    'CycleError',
    'DimensionError',
    'SUPPORTED_DIMENSIONS',
    'PermutationTable',

    # Interpolation
    'linear',
    'cubic',
    's_curve3',
    's_curve5',
    'scale_shift',

    # Generators
    'GeneratorType',
    'GeneratorParameters',
    'GeneratorFactory',
    'LatticeGenerator',
    'Perlin',
    'Value',
    'Constant',
    'get_generator',
    'Fbm',
    'FbmSettings',
    'build_sources',

    # Combiners, modifiers, selectors
    'Combiner',
    'Add',
    'Max',
    'Power',
    'Modifier',
    'Abs',
    'Negate',
    'Clamp',
    'ScaleBias',
    'Exponent',
    'Select',
    'Cache',
    'ThreadLocalCache',

    # Graph
    'sources_of',
    'walk',
    'fan_in',
    'shared_nodes',
    'depth',
    'validate_acyclic',
    'link',
]

__version__ = '1.0.0'
__license__ = 'MIT'

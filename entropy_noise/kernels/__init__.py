# entropy_noise/kernels/__init__.py

# This file makes the 'kernels' directory a Python package.
# It also defines the public API of the single-octave noise kernels.

from .value import value_2d, value_3d, value_cubic_2d, value_cubic_3d
from .perlin import perlin_2d, perlin_3d
from .simplex import opensimplex2_2d, opensimplex2_3d, opensimplex2s_2d, opensimplex2s_3d
from .cellular import cellular_2d, cellular_3d

__all__ = [
    "value_2d", "value_3d", "value_cubic_2d", "value_cubic_3d",
    "perlin_2d", "perlin_3d",
    "opensimplex2_2d", "opensimplex2_3d", "opensimplex2s_2d", "opensimplex2s_3d",
    "cellular_2d", "cellular_3d",
]

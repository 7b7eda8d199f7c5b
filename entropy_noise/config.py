# entropy_noise/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the noise
generator. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC FIELD.
Instead, pass a configuration dictionary (or use the setters) on a NoiseGen
instance.
================================================================================
"""

from .enums import (
    CellularDistanceFunction,
    CellularReturnType,
    FractalType,
    NoiseType,
    RotationType3D,
)

# --- General ---
DEFAULT_SEED = 1337
# Multiplies input coordinates before sampling. 0.01 means one lattice cell
# spans 100 input units.
DEFAULT_FREQUENCY = 0.01
DEFAULT_NOISE_TYPE = NoiseType.OPENSIMPLEX2
DEFAULT_ROTATION_TYPE_3D = RotationType3D.NONE

# --- Fractal Accumulation ---
DEFAULT_FRACTAL_TYPE = FractalType.NONE
DEFAULT_FRACTAL_OCTAVES = 3
DEFAULT_FRACTAL_LACUNARITY = 2.0
DEFAULT_FRACTAL_GAIN = 0.5
DEFAULT_FRACTAL_WEIGHTED_STRENGTH = 0.0
DEFAULT_FRACTAL_PING_PONG_STRENGTH = 2.0

# --- Cellular ---
DEFAULT_CELLULAR_DISTANCE_FUNCTION = CellularDistanceFunction.EUCLIDEAN_SQ
DEFAULT_CELLULAR_RETURN_TYPE = CellularReturnType.DISTANCE
# 1.0 keeps every feature point inside its own cell; up to ~1.5 is usable.
DEFAULT_CELLULAR_JITTER = 1.0

# Smallest second-nearest distance used as a Distance2Div denominator.
CELLULAR_DIV_EPSILON = 1e-6

# All keys accepted in a user configuration dictionary, with their defaults.
SETTING_DEFAULTS = {
    'seed': DEFAULT_SEED,
    'frequency': DEFAULT_FREQUENCY,
    'noise_type': DEFAULT_NOISE_TYPE,
    'rotation_type_3d': DEFAULT_ROTATION_TYPE_3D,
    'fractal_type': DEFAULT_FRACTAL_TYPE,
    'fractal_octaves': DEFAULT_FRACTAL_OCTAVES,
    'fractal_lacunarity': DEFAULT_FRACTAL_LACUNARITY,
    'fractal_gain': DEFAULT_FRACTAL_GAIN,
    'fractal_weighted_strength': DEFAULT_FRACTAL_WEIGHTED_STRENGTH,
    'fractal_ping_pong_strength': DEFAULT_FRACTAL_PING_PONG_STRENGTH,
    'cellular_distance_function': DEFAULT_CELLULAR_DISTANCE_FUNCTION,
    'cellular_return_type': DEFAULT_CELLULAR_RETURN_TYPE,
    'cellular_jitter': DEFAULT_CELLULAR_JITTER,
}

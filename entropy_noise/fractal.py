# entropy_noise/fractal.py

"""
================================================================================
FRACTAL ACCUMULATION
================================================================================
This module layers several octaves of one base kernel into a single value.
Each octave samples the kernel at a higher frequency (times lacunarity), a
smaller amplitude (times gain) and the next seed, and the strategy decides how
the octave is folded into the running total:

- FBm:      plain weighted sum.
- Ridged:   1 - |noise| per octave, rescaled to [-1, 1], giving sharp crests.
- PingPong: the shifted noise is folded back and forth by a triangle wave
            whose frequency is the ping-pong strength, giving terraced bands.

Weighted strength lowers the amplitude of the next octave where the current
octave is low (or, for Ridged, where it is sharp), trading uniform detail for
detail concentrated on features.

Data Contract:
---------------
- Inputs:
    - noise_type: A NoiseType value selecting the base kernel.
    - seed (int32) and transformed coordinates (float).
    - fractal: (octaves, lacunarity, gain, weighted_strength,
      ping_pong_strength, bounding) tuple.
    - cellular: (distance_function, return_type, jitter) tuple.
- Outputs:
    - A float. Normalized by `bounding` so that a plain FBm sum stays near
      [-1, 1]; weighting and gains above 0.5 may push it further.
- Side Effects: None.
================================================================================
"""

import math

import numpy as np
from numba import njit

from .enums import NoiseType
from .hashing import wrap_int32
from .kernels.cellular import cellular_2d, cellular_3d
from .kernels.perlin import perlin_2d, perlin_3d
from .kernels.simplex import opensimplex2_2d, opensimplex2_3d, opensimplex2s_2d, opensimplex2s_3d
from .kernels.value import lerp, value_2d, value_3d, value_cubic_2d, value_cubic_3d

# Integer mirrors of the enum values for use inside compiled code.
_OPENSIMPLEX2 = int(NoiseType.OPENSIMPLEX2)
_OPENSIMPLEX2S = int(NoiseType.OPENSIMPLEX2S)
_CELLULAR = int(NoiseType.CELLULAR)
_PERLIN = int(NoiseType.PERLIN)
_VALUE_CUBIC = int(NoiseType.VALUE_CUBIC)
_VALUE = int(NoiseType.VALUE)


def fractal_bounding(octaves: int, gain: float) -> float:
    """
    Computes the amplitude normalizer for a fractal sum.

    Args:
        octaves (int): Number of octaves that will be summed.
        gain (float): Per-octave amplitude multiplier. Its magnitude is used,
            so a negative gain normalizes like the positive one.

    Returns:
        float: 1 / (1 + |gain| + |gain|^2 + ... + |gain|^(octaves - 1)).
    """
    gain = abs(gain)
    amp = gain
    amp_fractal = 1.0
    for _ in range(1, octaves):
        amp_fractal += amp
        amp *= gain
    return 1.0 / amp_fractal


@njit(cache=True)
def ping_pong(t):
    """Triangle wave of period 2: rises 0 -> 1, then falls back to 0."""
    t = np.fmod(t, 2.0)
    if t < 1:
        return t
    return 2 - t


@njit(cache=True)
def single_2d(noise_type, seed, x, y, cellular):
    """Samples one octave of the selected base kernel."""
    # Octaves scaled past the float range contribute nothing.
    if not (math.isfinite(x) and math.isfinite(y)):
        return 0.0
    if noise_type == _OPENSIMPLEX2:
        return opensimplex2_2d(seed, x, y)
    if noise_type == _OPENSIMPLEX2S:
        return opensimplex2s_2d(seed, x, y)
    if noise_type == _CELLULAR:
        distance_function, return_type, jitter = cellular
        return cellular_2d(seed, x, y, distance_function, return_type, jitter)
    if noise_type == _PERLIN:
        return perlin_2d(seed, x, y)
    if noise_type == _VALUE_CUBIC:
        return value_cubic_2d(seed, x, y)
    if noise_type == _VALUE:
        return value_2d(seed, x, y)
    return 0.0


@njit(cache=True)
def single_3d(noise_type, seed, x, y, z, cellular):
    """Samples one octave of the selected base kernel."""
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return 0.0
    if noise_type == _OPENSIMPLEX2:
        return opensimplex2_3d(seed, x, y, z)
    if noise_type == _OPENSIMPLEX2S:
        return opensimplex2s_3d(seed, x, y, z)
    if noise_type == _CELLULAR:
        distance_function, return_type, jitter = cellular
        return cellular_3d(seed, x, y, z, distance_function, return_type, jitter)
    if noise_type == _PERLIN:
        return perlin_3d(seed, x, y, z)
    if noise_type == _VALUE_CUBIC:
        return value_cubic_3d(seed, x, y, z)
    if noise_type == _VALUE:
        return value_3d(seed, x, y, z)
    return 0.0


@njit(cache=True)
def fbm_2d(noise_type, seed, x, y, fractal, cellular):
    octaves, lacunarity, gain, weighted_strength, _strength, bounding = fractal
    total = 0.0
    amp = bounding

    for _ in range(octaves):
        noise = single_2d(noise_type, seed, x, y, cellular)
        seed = wrap_int32(seed + 1)
        total += noise * amp
        amp *= lerp(1.0, min(noise + 1, 2.0) * 0.5, weighted_strength)

        x *= lacunarity
        y *= lacunarity
        amp *= gain

    return total


@njit(cache=True)
def fbm_3d(noise_type, seed, x, y, z, fractal, cellular):
    octaves, lacunarity, gain, weighted_strength, _strength, bounding = fractal
    total = 0.0
    amp = bounding

    for _ in range(octaves):
        noise = single_3d(noise_type, seed, x, y, z, cellular)
        seed = wrap_int32(seed + 1)
        total += noise * amp
        amp *= lerp(1.0, min(noise + 1, 2.0) * 0.5, weighted_strength)

        x *= lacunarity
        y *= lacunarity
        z *= lacunarity
        amp *= gain

    return total


@njit(cache=True)
def ridged_2d(noise_type, seed, x, y, fractal, cellular):
    octaves, lacunarity, gain, weighted_strength, _strength, bounding = fractal
    total = 0.0
    amp = bounding

    for _ in range(octaves):
        noise = abs(single_2d(noise_type, seed, x, y, cellular))
        seed = wrap_int32(seed + 1)
        total += (noise * -2 + 1) * amp
        amp *= lerp(1.0, 1 - noise, weighted_strength)

        x *= lacunarity
        y *= lacunarity
        amp *= gain

    return total


@njit(cache=True)
def ridged_3d(noise_type, seed, x, y, z, fractal, cellular):
    octaves, lacunarity, gain, weighted_strength, _strength, bounding = fractal
    total = 0.0
    amp = bounding

    for _ in range(octaves):
        noise = abs(single_3d(noise_type, seed, x, y, z, cellular))
        seed = wrap_int32(seed + 1)
        total += (noise * -2 + 1) * amp
        amp *= lerp(1.0, 1 - noise, weighted_strength)

        x *= lacunarity
        y *= lacunarity
        z *= lacunarity
        amp *= gain

    return total


@njit(cache=True)
def ping_pong_2d(noise_type, seed, x, y, fractal, cellular):
    octaves, lacunarity, gain, weighted_strength, ping_pong_strength, bounding = fractal
    total = 0.0
    amp = bounding

    for _ in range(octaves):
        noise = ping_pong((single_2d(noise_type, seed, x, y, cellular) + 1) * ping_pong_strength)
        seed = wrap_int32(seed + 1)
        total += (noise - 0.5) * 2 * amp
        amp *= lerp(1.0, noise, weighted_strength)

        x *= lacunarity
        y *= lacunarity
        amp *= gain

    return total


@njit(cache=True)
def ping_pong_3d(noise_type, seed, x, y, z, fractal, cellular):
    octaves, lacunarity, gain, weighted_strength, ping_pong_strength, bounding = fractal
    total = 0.0
    amp = bounding

    for _ in range(octaves):
        noise = ping_pong((single_3d(noise_type, seed, x, y, z, cellular) + 1) * ping_pong_strength)
        seed = wrap_int32(seed + 1)
        total += (noise - 0.5) * 2 * amp
        amp *= lerp(1.0, noise, weighted_strength)

        x *= lacunarity
        y *= lacunarity
        z *= lacunarity
        amp *= gain

    return total

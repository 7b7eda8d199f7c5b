# entropy_noise/sampler.py

"""
================================================================================
SAMPLING PIPELINE
================================================================================
The compiled entry points behind NoiseGen.get_noise. One call runs the whole
pipeline for a single coordinate:

    transform (frequency, skew / rotation) -> fractal strategy -> base kernel

Data Contract:
---------------
- Inputs:
    - seed (int32), noise_type, fractal_type, transform_type (3D only).
    - frequency (float) and raw caller coordinates (float).
    - fractal and cellular parameter tuples, see fractal.py.
- Outputs:
    - A float; NaN if any coordinate is not finite.
- Side Effects: None.
================================================================================
"""

import math

from numba import njit

from .enums import FractalType
from .fractal import (
    fbm_2d, fbm_3d,
    ping_pong_2d, ping_pong_3d,
    ridged_2d, ridged_3d,
    single_2d, single_3d,
)
from .rotation import transform_2d, transform_3d

# Integer mirrors of the enum values for use inside compiled code.
_FBM = int(FractalType.FBM)
_RIDGED = int(FractalType.RIDGED)
_PING_PONG = int(FractalType.PING_PONG)


@njit(cache=True)
def sample_2d(seed, noise_type, fractal_type, frequency, x, y, fractal, cellular):
    if not (math.isfinite(x) and math.isfinite(y)):
        return math.nan

    x, y = transform_2d(noise_type, frequency, x, y)

    if fractal_type == _FBM:
        return fbm_2d(noise_type, seed, x, y, fractal, cellular)
    if fractal_type == _RIDGED:
        return ridged_2d(noise_type, seed, x, y, fractal, cellular)
    if fractal_type == _PING_PONG:
        return ping_pong_2d(noise_type, seed, x, y, fractal, cellular)
    return single_2d(noise_type, seed, x, y, cellular)


@njit(cache=True)
def sample_3d(seed, noise_type, fractal_type, transform_type, frequency, x, y, z, fractal, cellular):
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return math.nan

    x, y, z = transform_3d(transform_type, frequency, x, y, z)

    if fractal_type == _FBM:
        return fbm_3d(noise_type, seed, x, y, z, fractal, cellular)
    if fractal_type == _RIDGED:
        return ridged_3d(noise_type, seed, x, y, z, fractal, cellular)
    if fractal_type == _PING_PONG:
        return ping_pong_3d(noise_type, seed, x, y, z, fractal, cellular)
    return single_3d(noise_type, seed, x, y, z, cellular)

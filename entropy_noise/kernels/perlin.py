# entropy_noise/kernels/perlin.py

"""
================================================================================
PERLIN (GRADIENT) NOISE KERNELS
================================================================================
Classic gradient noise: every lattice corner carries a pseudo-random gradient,
the sample takes the dot product of each corner's gradient with its offset
from that corner, and the results are blended with the improved (quintic)
fade curve.

Data Contract:
---------------
- Inputs: seed (int32), frequency-scaled coordinates (float).
- Outputs: A float in [-1, 1].
- Side Effects: None.
- Invariants: Output is exactly 0 on lattice points, since every offset
  there is the zero vector for the nearest corner and the fade weights
  select that corner alone.
================================================================================
"""

from numba import njit

from ..hashing import PRIME_X, PRIME_Y, PRIME_Z, gradient_coord_2d, gradient_coord_3d, lattice_floor, wrap_int32
from .value import lerp

# Empirical scale factors that stretch the gradient sum onto [-1, 1] for the
# gradient tables in hashing.py.
_PERLIN_2D_SCALE = 1.4247691104677813
_PERLIN_3D_SCALE = 0.964921414852142333984375


@njit(cache=True)
def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


@njit(cache=True)
def perlin_2d(seed, x, y):
    x0, xd0 = lattice_floor(x)
    y0, yd0 = lattice_floor(y)

    xd1 = xd0 - 1
    yd1 = yd0 - 1

    xs = fade(xd0)
    ys = fade(yd0)

    x0 = wrap_int32(x0 * PRIME_X)
    y0 = wrap_int32(y0 * PRIME_Y)
    x1 = wrap_int32(x0 + PRIME_X)
    y1 = wrap_int32(y0 + PRIME_Y)

    xf0 = lerp(gradient_coord_2d(seed, x0, y0, xd0, yd0), gradient_coord_2d(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(gradient_coord_2d(seed, x0, y1, xd0, yd1), gradient_coord_2d(seed, x1, y1, xd1, yd1), xs)

    return lerp(xf0, xf1, ys) * _PERLIN_2D_SCALE


@njit(cache=True)
def perlin_3d(seed, x, y, z):
    x0, xd0 = lattice_floor(x)
    y0, yd0 = lattice_floor(y)
    z0, zd0 = lattice_floor(z)

    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1

    xs = fade(xd0)
    ys = fade(yd0)
    zs = fade(zd0)

    x0 = wrap_int32(x0 * PRIME_X)
    y0 = wrap_int32(y0 * PRIME_Y)
    z0 = wrap_int32(z0 * PRIME_Z)
    x1 = wrap_int32(x0 + PRIME_X)
    y1 = wrap_int32(y0 + PRIME_Y)
    z1 = wrap_int32(z0 + PRIME_Z)

    xf00 = lerp(gradient_coord_3d(seed, x0, y0, z0, xd0, yd0, zd0), gradient_coord_3d(seed, x1, y0, z0, xd1, yd0, zd0), xs)
    xf10 = lerp(gradient_coord_3d(seed, x0, y1, z0, xd0, yd1, zd0), gradient_coord_3d(seed, x1, y1, z0, xd1, yd1, zd0), xs)
    xf01 = lerp(gradient_coord_3d(seed, x0, y0, z1, xd0, yd0, zd1), gradient_coord_3d(seed, x1, y0, z1, xd1, yd0, zd1), xs)
    xf11 = lerp(gradient_coord_3d(seed, x0, y1, z1, xd0, yd1, zd1), gradient_coord_3d(seed, x1, y1, z1, xd1, yd1, zd1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)

    return lerp(yf0, yf1, zs) * _PERLIN_3D_SCALE

# entropy_noise/kernels/value.py

"""
================================================================================
VALUE NOISE KERNELS
================================================================================
Value noise assigns a pseudo-random scalar to every lattice point and
interpolates between them. Two flavours are provided:

- value_2d / value_3d: the 2x2(x2) surrounding corners blended with a Hermite
  (cubic smoothstep) curve. Cheapest kernel, visibly blocky on its own.
- value_cubic_2d / value_cubic_3d: the 4x4(x4) neighbourhood blended with a
  cubic spline, giving a continuous first derivative across cell borders.

Data Contract:
---------------
- Inputs: seed (int32), frequency-scaled coordinates (float).
- Outputs: A float in [-1, 1].
- Side Effects: None.
================================================================================
"""

from numba import njit

from ..hashing import PRIME_X, PRIME_Y, PRIME_Z, lattice_floor, value_coord_2d, value_coord_3d, wrap_int32

# A cubic spline over values in [-1, 1] can overshoot to 1.5 per axis.
_CUBIC_2D_BOUNDING = 1.0 / (1.5 * 1.5)
_CUBIC_3D_BOUNDING = 1.0 / (1.5 * 1.5 * 1.5)


@njit(cache=True)
def lerp(a, b, t):
    "Linear interpolation."
    return a + t * (b - a)


@njit(cache=True)
def interp_hermite(t):
    "3t^2 - 2t^3"
    return t * t * (3 - 2 * t)


@njit(cache=True)
def cubic_lerp(a, b, c, d, t):
    """Cubic spline through b (t=0) and c (t=1), shaped by neighbours a and d."""
    p = (d - c) - (a - b)
    return t * t * t * p + t * t * ((a - b) - p) + t * (c - a) + b


@njit(cache=True)
def value_2d(seed, x, y):
    x0, xd = lattice_floor(x)
    y0, yd = lattice_floor(y)

    xs = interp_hermite(xd)
    ys = interp_hermite(yd)

    x0 = wrap_int32(x0 * PRIME_X)
    y0 = wrap_int32(y0 * PRIME_Y)
    x1 = wrap_int32(x0 + PRIME_X)
    y1 = wrap_int32(y0 + PRIME_Y)

    xf0 = lerp(value_coord_2d(seed, x0, y0), value_coord_2d(seed, x1, y0), xs)
    xf1 = lerp(value_coord_2d(seed, x0, y1), value_coord_2d(seed, x1, y1), xs)

    return lerp(xf0, xf1, ys)


@njit(cache=True)
def value_3d(seed, x, y, z):
    x0, xd = lattice_floor(x)
    y0, yd = lattice_floor(y)
    z0, zd = lattice_floor(z)

    xs = interp_hermite(xd)
    ys = interp_hermite(yd)
    zs = interp_hermite(zd)

    x0 = wrap_int32(x0 * PRIME_X)
    y0 = wrap_int32(y0 * PRIME_Y)
    z0 = wrap_int32(z0 * PRIME_Z)
    x1 = wrap_int32(x0 + PRIME_X)
    y1 = wrap_int32(y0 + PRIME_Y)
    z1 = wrap_int32(z0 + PRIME_Z)

    xf00 = lerp(value_coord_3d(seed, x0, y0, z0), value_coord_3d(seed, x1, y0, z0), xs)
    xf10 = lerp(value_coord_3d(seed, x0, y1, z0), value_coord_3d(seed, x1, y1, z0), xs)
    xf01 = lerp(value_coord_3d(seed, x0, y0, z1), value_coord_3d(seed, x1, y0, z1), xs)
    xf11 = lerp(value_coord_3d(seed, x0, y1, z1), value_coord_3d(seed, x1, y1, z1), xs)

    yf0 = lerp(xf00, xf10, ys)
    yf1 = lerp(xf01, xf11, ys)

    return lerp(yf0, yf1, zs)


@njit(cache=True)
def _cubic_row_2d(seed, x0, x1, x2, x3, y_primed, xs):
    return cubic_lerp(
        value_coord_2d(seed, x0, y_primed), value_coord_2d(seed, x1, y_primed),
        value_coord_2d(seed, x2, y_primed), value_coord_2d(seed, x3, y_primed),
        xs
    )


@njit(cache=True)
def value_cubic_2d(seed, x, y):
    x1, xs = lattice_floor(x)
    y1, ys = lattice_floor(y)

    x1 = wrap_int32(x1 * PRIME_X)
    y1 = wrap_int32(y1 * PRIME_Y)
    x0 = wrap_int32(x1 - PRIME_X)
    y0 = wrap_int32(y1 - PRIME_Y)
    x2 = wrap_int32(x1 + PRIME_X)
    y2 = wrap_int32(y1 + PRIME_Y)
    x3 = wrap_int32(x1 + (PRIME_X << 1))
    y3 = wrap_int32(y1 + (PRIME_Y << 1))

    return cubic_lerp(
        _cubic_row_2d(seed, x0, x1, x2, x3, y0, xs),
        _cubic_row_2d(seed, x0, x1, x2, x3, y1, xs),
        _cubic_row_2d(seed, x0, x1, x2, x3, y2, xs),
        _cubic_row_2d(seed, x0, x1, x2, x3, y3, xs),
        ys
    ) * _CUBIC_2D_BOUNDING


@njit(cache=True)
def _cubic_row_3d(seed, x0, x1, x2, x3, y_primed, z_primed, xs):
    return cubic_lerp(
        value_coord_3d(seed, x0, y_primed, z_primed), value_coord_3d(seed, x1, y_primed, z_primed),
        value_coord_3d(seed, x2, y_primed, z_primed), value_coord_3d(seed, x3, y_primed, z_primed),
        xs
    )


@njit(cache=True)
def _cubic_plane_3d(seed, x0, x1, x2, x3, y0, y1, y2, y3, z_primed, xs, ys):
    return cubic_lerp(
        _cubic_row_3d(seed, x0, x1, x2, x3, y0, z_primed, xs),
        _cubic_row_3d(seed, x0, x1, x2, x3, y1, z_primed, xs),
        _cubic_row_3d(seed, x0, x1, x2, x3, y2, z_primed, xs),
        _cubic_row_3d(seed, x0, x1, x2, x3, y3, z_primed, xs),
        ys
    )


@njit(cache=True)
def value_cubic_3d(seed, x, y, z):
    x1, xs = lattice_floor(x)
    y1, ys = lattice_floor(y)
    z1, zs = lattice_floor(z)

    x1 = wrap_int32(x1 * PRIME_X)
    y1 = wrap_int32(y1 * PRIME_Y)
    z1 = wrap_int32(z1 * PRIME_Z)

    x0 = wrap_int32(x1 - PRIME_X)
    y0 = wrap_int32(y1 - PRIME_Y)
    z0 = wrap_int32(z1 - PRIME_Z)
    x2 = wrap_int32(x1 + PRIME_X)
    y2 = wrap_int32(y1 + PRIME_Y)
    z2 = wrap_int32(z1 + PRIME_Z)
    x3 = wrap_int32(x1 + (PRIME_X << 1))
    y3 = wrap_int32(y1 + (PRIME_Y << 1))
    z3 = wrap_int32(z1 + (PRIME_Z << 1))

    return cubic_lerp(
        _cubic_plane_3d(seed, x0, x1, x2, x3, y0, y1, y2, y3, z0, xs, ys),
        _cubic_plane_3d(seed, x0, x1, x2, x3, y0, y1, y2, y3, z1, xs, ys),
        _cubic_plane_3d(seed, x0, x1, x2, x3, y0, y1, y2, y3, z2, xs, ys),
        _cubic_plane_3d(seed, x0, x1, x2, x3, y0, y1, y2, y3, z3, xs, ys),
        zs
    ) * _CUBIC_3D_BOUNDING

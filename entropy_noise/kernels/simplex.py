# entropy_noise/kernels/simplex.py

"""
================================================================================
OPENSIMPLEX2 NOISE KERNELS
================================================================================
Simplex-lattice gradient noise in two variants:

- OpenSimplex2 ("fast"): each sample sums radial-falloff gradient
  contributions from the few lattice vertices closest to it. In 2D these are
  the three corners of the containing triangle; in 3D the closest vertex and
  one neighbour on each of two interleaved cubic lattices.
- OpenSimplex2S ("smooth"): uses a larger falloff radius and therefore more
  contributing vertices (4 in 2D, 8 in 3D), which removes the derivative
  discontinuities of the fast variant at the cost of speed.

Both expect coordinates that already went through rotation.transform_2d /
transform_3d, which applies the simplex skew (2D) or lattice reorientation
(3D) for these noise types.

Data Contract:
---------------
- Inputs: seed (int32), transformed coordinates (float).
- Outputs: A float in [-1, 1].
- Side Effects: None.
================================================================================
"""

import math

from numba import njit

from ..hashing import PRIME_X, PRIME_Y, PRIME_Z, gradient_coord_2d, gradient_coord_3d, lattice_floor, lattice_round, wrap_int32

_SQRT3 = math.sqrt(3.0)
# 2D unskew factor: (3 - sqrt(3)) / 6
_G2 = (3.0 - _SQRT3) / 6.0

# Falloff of the far (1, 1) corner, expressed relative to the origin's falloff.
_CORNER_T = 2.0 * (1.0 - 2.0 * _G2) * (1.0 / _G2 - 2.0)
_CORNER_A = -2.0 * (1.0 - 2.0 * _G2) * (1.0 - 2.0 * _G2)

_OS2_2D_SCALE = 99.83685446303647
_OS2_3D_SCALE = 32.69428253173828125
_OS2S_2D_SCALE = 18.24196194486065
_OS2S_3D_SCALE = 9.046026385208288

# Offset added to the seed for the second lattice of OpenSimplex2S 3D.
_OS2S_LATTICE_SEED_OFFSET = 1293373


@njit(cache=True)
def opensimplex2_2d(seed, x, y):
    i, xi = lattice_floor(x)
    j, yi = lattice_floor(y)

    t = (xi + yi) * _G2
    x0 = xi - t
    y0 = yi - t

    i = wrap_int32(i * PRIME_X)
    j = wrap_int32(j * PRIME_Y)

    n0 = 0.0
    n1 = 0.0
    n2 = 0.0

    a = 0.5 - x0 * x0 - y0 * y0
    if a > 0:
        n0 = (a * a) * (a * a) * gradient_coord_2d(seed, i, j, x0, y0)

    c = _CORNER_T * t + (_CORNER_A + a)
    if c > 0:
        x2 = x0 + (2 * _G2 - 1)
        y2 = y0 + (2 * _G2 - 1)
        n2 = (c * c) * (c * c) * gradient_coord_2d(seed, wrap_int32(i + PRIME_X), wrap_int32(j + PRIME_Y), x2, y2)

    # Third corner depends on which triangle of the skewed cell we are in.
    if y0 > x0:
        x1 = x0 + _G2
        y1 = y0 + (_G2 - 1)
        b = 0.5 - x1 * x1 - y1 * y1
        if b > 0:
            n1 = (b * b) * (b * b) * gradient_coord_2d(seed, i, wrap_int32(j + PRIME_Y), x1, y1)
    else:
        x1 = x0 + (_G2 - 1)
        y1 = y0 + _G2
        b = 0.5 - x1 * x1 - y1 * y1
        if b > 0:
            n1 = (b * b) * (b * b) * gradient_coord_2d(seed, wrap_int32(i + PRIME_X), j, x1, y1)

    return (n0 + n1 + n2) * _OS2_2D_SCALE


@njit(cache=True)
def opensimplex2_3d(seed, x, y, z):
    i, x0 = lattice_round(x)
    j, y0 = lattice_round(y)
    k, z0 = lattice_round(z)

    # Direction (+1 / -1) from the rounded vertex towards the sample.
    x_n_sign = int(-1.0 - x0) | 1
    y_n_sign = int(-1.0 - y0) | 1
    z_n_sign = int(-1.0 - z0) | 1

    ax0 = x_n_sign * -x0
    ay0 = y_n_sign * -y0
    az0 = z_n_sign * -z0

    i = wrap_int32(i * PRIME_X)
    j = wrap_int32(j * PRIME_Y)
    k = wrap_int32(k * PRIME_Z)

    value = 0.0
    a = (0.6 - x0 * x0) - (y0 * y0 + z0 * z0)

    # Two passes: the closest vertex of the first lattice and one neighbour,
    # then the same on the offset lattice with an inverted seed.
    for lattice in range(2):
        if a > 0:
            value += (a * a) * (a * a) * gradient_coord_3d(seed, i, j, k, x0, y0, z0)

        b = a
        i1 = i
        j1 = j
        k1 = k
        x1 = x0
        y1 = y0
        z1 = z0

        if ax0 >= ay0 and ax0 >= az0:
            x1 += x_n_sign
            b -= x_n_sign * 2 * x1
            i1 = wrap_int32(i1 - x_n_sign * PRIME_X)
        elif ay0 > ax0 and ay0 >= az0:
            y1 += y_n_sign
            b -= y_n_sign * 2 * y1
            j1 = wrap_int32(j1 - y_n_sign * PRIME_Y)
        else:
            z1 += z_n_sign
            b -= z_n_sign * 2 * z1
            k1 = wrap_int32(k1 - z_n_sign * PRIME_Z)

        if b > 0:
            value += (b * b) * (b * b) * gradient_coord_3d(seed, i1, j1, k1, x1, y1, z1)

        if lattice == 1:
            break

        ax0 = 0.5 - ax0
        ay0 = 0.5 - ay0
        az0 = 0.5 - az0

        x0 = x_n_sign * ax0
        y0 = y_n_sign * ay0
        z0 = z_n_sign * az0

        a += (0.75 - ax0) - (ay0 + az0)

        i = wrap_int32(i + ((x_n_sign >> 1) & PRIME_X))
        j = wrap_int32(j + ((y_n_sign >> 1) & PRIME_Y))
        k = wrap_int32(k + ((z_n_sign >> 1) & PRIME_Z))

        x_n_sign = -x_n_sign
        y_n_sign = -y_n_sign
        z_n_sign = -z_n_sign

        seed = ~seed

    return value * _OS2_3D_SCALE


@njit(cache=True)
def _falloff_2d(seed, i, j, dx, dy):
    """Contribution of one lattice vertex within the 2/3 radius, else 0."""
    a = (2.0 / 3.0) - dx * dx - dy * dy
    if a > 0:
        return (a * a) * (a * a) * gradient_coord_2d(seed, i, j, dx, dy)
    return 0.0


@njit(cache=True)
def opensimplex2s_2d(seed, x, y):
    i, xi = lattice_floor(x)
    j, yi = lattice_floor(y)

    i = wrap_int32(i * PRIME_X)
    j = wrap_int32(j * PRIME_Y)
    i1 = wrap_int32(i + PRIME_X)
    j1 = wrap_int32(j + PRIME_Y)

    t = (xi + yi) * _G2
    x0 = xi - t
    y0 = yi - t

    # The (0, 0) and (1, 1) corners always contribute.
    a0 = (2.0 / 3.0) - x0 * x0 - y0 * y0
    value = (a0 * a0) * (a0 * a0) * gradient_coord_2d(seed, i, j, x0, y0)

    a1 = _CORNER_T * t + (_CORNER_A + a0)
    x1 = x0 - (1 - 2 * _G2)
    y1 = y0 - (1 - 2 * _G2)
    value += (a1 * a1) * (a1 * a1) * gradient_coord_2d(seed, i1, j1, x1, y1)

    # Two more vertices, picked from the neighbourhood of the containing triangle.
    xmyi = xi - yi
    if t > _G2:
        if xi + xmyi > 1:
            value += _falloff_2d(seed, wrap_int32(i + (PRIME_X << 1)), j1,
                                 x0 + (3 * _G2 - 2), y0 + (3 * _G2 - 1))
        else:
            value += _falloff_2d(seed, i, j1, x0 + _G2, y0 + (_G2 - 1))

        if yi - xmyi > 1:
            value += _falloff_2d(seed, i1, wrap_int32(j + (PRIME_Y << 1)),
                                 x0 + (3 * _G2 - 1), y0 + (3 * _G2 - 2))
        else:
            value += _falloff_2d(seed, i1, j, x0 + (_G2 - 1), y0 + _G2)
    else:
        if xi + xmyi < 0:
            value += _falloff_2d(seed, wrap_int32(i - PRIME_X), j, x0 + (1 - _G2), y0 - _G2)
        else:
            value += _falloff_2d(seed, i1, j, x0 + (_G2 - 1), y0 + _G2)

        if yi < xmyi:
            value += _falloff_2d(seed, i, wrap_int32(j - PRIME_Y), x0 - _G2, y0 - (_G2 - 1))
        else:
            value += _falloff_2d(seed, i, j1, x0 + _G2, y0 + (_G2 - 1))

    return value * _OS2S_2D_SCALE


@njit(cache=True)
def _contribution_3d(a, seed, i, j, k, dx, dy, dz):
    return (a * a) * (a * a) * gradient_coord_3d(seed, i, j, k, dx, dy, dz)


@njit(cache=True)
def opensimplex2s_3d(seed, x, y, z):
    i, xi = lattice_floor(x)
    j, yi = lattice_floor(y)
    k, zi = lattice_floor(z)

    i = wrap_int32(i * PRIME_X)
    j = wrap_int32(j * PRIME_Y)
    k = wrap_int32(k * PRIME_Z)
    seed2 = wrap_int32(seed + _OS2S_LATTICE_SEED_OFFSET)

    # 0 when the coordinate is in the lower half of its cell, -1 otherwise.
    x_n_mask = int(-0.5 - xi)
    y_n_mask = int(-0.5 - yi)
    z_n_mask = int(-0.5 - zi)

    # Sign (+1 / -1) towards the near corner on each axis.
    x_sign = x_n_mask | 1
    y_sign = y_n_mask | 1
    z_sign = z_n_mask | 1

    # Lattice indices of the near corner and of the far corner on each axis.
    i_near = wrap_int32(i + (x_n_mask & PRIME_X))
    j_near = wrap_int32(j + (y_n_mask & PRIME_Y))
    k_near = wrap_int32(k + (z_n_mask & PRIME_Z))
    i_far = wrap_int32(i + (~x_n_mask & PRIME_X))
    j_far = wrap_int32(j + (~y_n_mask & PRIME_Y))
    k_far = wrap_int32(k + (~z_n_mask & PRIME_Z))

    x0 = xi + x_n_mask
    y0 = yi + y_n_mask
    z0 = zi + z_n_mask
    a0 = 0.75 - x0 * x0 - y0 * y0 - z0 * z0
    value = _contribution_3d(a0, seed, i_near, j_near, k_near, x0, y0, z0)

    # Centre vertex of the offset lattice.
    x1 = xi - 0.5
    y1 = yi - 0.5
    z1 = zi - 0.5
    a1 = 0.75 - x1 * x1 - y1 * y1 - z1 * z1
    value += _contribution_3d(a1, seed2, wrap_int32(i + PRIME_X), wrap_int32(j + PRIME_Y),
                              wrap_int32(k + PRIME_Z), x1, y1, z1)

    x_a_flip_mask0 = ((x_n_mask | 1) << 1) * x1
    y_a_flip_mask0 = ((y_n_mask | 1) << 1) * y1
    z_a_flip_mask0 = ((z_n_mask | 1) << 1) * z1
    x_a_flip_mask1 = (-2 - (x_n_mask << 2)) * x1 - 1.0
    y_a_flip_mask1 = (-2 - (y_n_mask << 2)) * y1 - 1.0
    z_a_flip_mask1 = (-2 - (z_n_mask << 2)) * z1 - 1.0

    # Offset-lattice neighbours two steps out on each axis.
    i_out = wrap_int32(i + (x_n_mask & (PRIME_X << 1)))
    j_out = wrap_int32(j + (y_n_mask & (PRIME_Y << 1)))
    k_out = wrap_int32(k + (z_n_mask & (PRIME_Z << 1)))
    i_mid = wrap_int32(i + PRIME_X)
    j_mid = wrap_int32(j + PRIME_Y)
    k_mid = wrap_int32(k + PRIME_Z)

    # --- X axis group ---
    skip5 = False
    a2 = x_a_flip_mask0 + a0
    if a2 > 0:
        value += _contribution_3d(a2, seed, i_far, j_near, k_near, x0 - x_sign, y0, z0)
    else:
        a3 = y_a_flip_mask0 + z_a_flip_mask0 + a0
        if a3 > 0:
            value += _contribution_3d(a3, seed, i_near, j_far, k_far, x0, y0 - y_sign, z0 - z_sign)

        a4 = x_a_flip_mask1 + a1
        if a4 > 0:
            value += _contribution_3d(a4, seed2, i_out, j_mid, k_mid, x_sign + x1, y1, z1)
            skip5 = True

    # --- Y axis group ---
    skip9 = False
    a6 = y_a_flip_mask0 + a0
    if a6 > 0:
        value += _contribution_3d(a6, seed, i_near, j_far, k_near, x0, y0 - y_sign, z0)
    else:
        a7 = x_a_flip_mask0 + z_a_flip_mask0 + a0
        if a7 > 0:
            value += _contribution_3d(a7, seed, i_far, j_near, k_far, x0 - x_sign, y0, z0 - z_sign)

        a8 = y_a_flip_mask1 + a1
        if a8 > 0:
            value += _contribution_3d(a8, seed2, i_mid, j_out, k_mid, x1, y_sign + y1, z1)
            skip9 = True

    # --- Z axis group ---
    skip_d = False
    a_a = z_a_flip_mask0 + a0
    if a_a > 0:
        value += _contribution_3d(a_a, seed, i_near, j_near, k_far, x0, y0, z0 - z_sign)
    else:
        a_b = x_a_flip_mask0 + y_a_flip_mask0 + a0
        if a_b > 0:
            value += _contribution_3d(a_b, seed, i_far, j_far, k_near, x0 - x_sign, y0 - y_sign, z0)

        a_c = z_a_flip_mask1 + a1
        if a_c > 0:
            value += _contribution_3d(a_c, seed2, i_mid, j_mid, k_out, x1, y1, z_sign + z1)
            skip_d = True

    if not skip5:
        a5 = y_a_flip_mask1 + z_a_flip_mask1 + a1
        if a5 > 0:
            value += _contribution_3d(a5, seed2, i_mid, j_out, k_out, x1, y_sign + y1, z_sign + z1)

    if not skip9:
        a9 = x_a_flip_mask1 + z_a_flip_mask1 + a1
        if a9 > 0:
            value += _contribution_3d(a9, seed2, i_out, j_mid, k_out, x_sign + x1, y1, z_sign + z1)

    if not skip_d:
        a_d = x_a_flip_mask1 + y_a_flip_mask1 + a1
        if a_d > 0:
            value += _contribution_3d(a_d, seed2, i_out, j_out, k_mid, x_sign + x1, y_sign + y1, z1)

    return value * _OS2S_3D_SCALE

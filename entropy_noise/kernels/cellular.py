# entropy_noise/kernels/cellular.py

"""
================================================================================
CELLULAR (WORLEY) NOISE KERNELS
================================================================================
This module scatters one feature point per lattice cell, jittered away from
the cell centre by a hashed unit vector, and measures the sample's distance to
the nearest feature points in the surrounding 3x3 (2D) or 3x3x3 (3D) cells.
No point set is stored: every feature point is recomputed from the hash of
its cell, so the field is infinite and needs no precomputation.

Data Contract:
---------------
- Inputs:
    - seed (int32), frequency-scaled coordinates (float).
    - distance_function: A CellularDistanceFunction value.
    - return_type: A CellularReturnType value.
    - jitter_modifier: Scales how far feature points may leave their cell
      centre. 0 yields a regular grid of points.
- Outputs:
    - A float. CellValue is in [-1, 1); distance returns are offset by -1,
      and the Distance return lands in [-1, 1] for every distance function
      at jitter modifiers up to 1.
- Side Effects: None.
- Invariants: Finite input and finite parameters give finite output; the
  Distance2Div denominator is bounded away from zero.
================================================================================
"""

import math

from numba import njit

from ..config import CELLULAR_DIV_EPSILON
from ..enums import CellularDistanceFunction, CellularReturnType
from ..hashing import PRIME_X, PRIME_Y, PRIME_Z, RAND_VECS_2D, RAND_VECS_3D, hash_2d, hash_3d, lattice_round, wrap_int32

# Integer mirrors of the enum values for use inside compiled code.
_EUCLIDEAN = int(CellularDistanceFunction.EUCLIDEAN)
_MANHATTAN = int(CellularDistanceFunction.MANHATTAN)
_HYBRID = int(CellularDistanceFunction.HYBRID)

_CELL_VALUE = int(CellularReturnType.CELL_VALUE)
_DISTANCE = int(CellularReturnType.DISTANCE)
_DISTANCE2 = int(CellularReturnType.DISTANCE2)
_DISTANCE2_ADD = int(CellularReturnType.DISTANCE2_ADD)
_DISTANCE2_SUB = int(CellularReturnType.DISTANCE2_SUB)
_DISTANCE2_MUL = int(CellularReturnType.DISTANCE2_MUL)
_DISTANCE2_DIV = int(CellularReturnType.DISTANCE2_DIV)

# Largest jitter radius (at modifier 1.0) that keeps a feature point inside
# the searched neighbourhood.
_JITTER_2D = 0.43701595
_JITTER_3D = 0.39614353

_FAR = 1e10
_INV_INT32_RANGE = 1.0 / 2147483648.0

# Hybrid is the mean of the Manhattan and squared Euclidean distances; its
# Distance return stays within [-1, 1].
_HYBRID_WEIGHT = 0.5


@njit(cache=True)
def _distance_2d(distance_function, vec_x, vec_y):
    if distance_function == _MANHATTAN:
        return abs(vec_x) + abs(vec_y)
    if distance_function == _HYBRID:
        return _HYBRID_WEIGHT * ((abs(vec_x) + abs(vec_y)) + (vec_x * vec_x + vec_y * vec_y))
    # Euclidean is compared squared and rooted once at the end.
    return vec_x * vec_x + vec_y * vec_y


@njit(cache=True)
def _distance_3d(distance_function, vec_x, vec_y, vec_z):
    if distance_function == _MANHATTAN:
        return abs(vec_x) + abs(vec_y) + abs(vec_z)
    if distance_function == _HYBRID:
        return _HYBRID_WEIGHT * ((abs(vec_x) + abs(vec_y) + abs(vec_z)) + (vec_x * vec_x + vec_y * vec_y + vec_z * vec_z))
    return vec_x * vec_x + vec_y * vec_y + vec_z * vec_z


@njit(cache=True)
def _reduce(distance_function, return_type, distance0, distance1, closest_hash):
    """Combines the two nearest distances (or the nearest cell) into the result."""
    if distance_function == _EUCLIDEAN and return_type >= _DISTANCE:
        distance0 = math.sqrt(distance0)
        if return_type >= _DISTANCE2:
            distance1 = math.sqrt(distance1)

    if return_type == _CELL_VALUE:
        return closest_hash * _INV_INT32_RANGE
    if return_type == _DISTANCE:
        return distance0 - 1
    if return_type == _DISTANCE2:
        return distance1 - 1
    if return_type == _DISTANCE2_ADD:
        return (distance1 + distance0) * 0.5 - 1
    if return_type == _DISTANCE2_SUB:
        return distance1 - distance0 - 1
    if return_type == _DISTANCE2_MUL:
        return distance1 * distance0 * 0.5 - 1
    if return_type == _DISTANCE2_DIV:
        return distance0 / max(distance1, CELLULAR_DIV_EPSILON) - 1
    return 0.0


@njit(cache=True)
def cellular_2d(seed, x, y, distance_function, return_type, jitter_modifier):
    xr, xd = lattice_round(x)
    yr, yd = lattice_round(y)

    distance0 = _FAR
    distance1 = _FAR
    closest_hash = 0

    jitter = _JITTER_2D * jitter_modifier

    x_primed = wrap_int32((xr - 1) * PRIME_X)
    y_primed_base = wrap_int32((yr - 1) * PRIME_Y)

    # Neighbour cells are visited by offset from the rounded cell.
    for xo in range(-1, 2):
        y_primed = y_primed_base
        for yo in range(-1, 2):
            h = hash_2d(seed, x_primed, y_primed)
            idx = h & (255 << 1)

            vec_x = (xo - xd) + RAND_VECS_2D[idx] * jitter
            vec_y = (yo - yd) + RAND_VECS_2D[idx | 1] * jitter

            new_distance = _distance_2d(distance_function, vec_x, vec_y)

            distance1 = max(min(distance1, new_distance), distance0)
            if new_distance < distance0:
                distance0 = new_distance
                closest_hash = h

            y_primed = wrap_int32(y_primed + PRIME_Y)
        x_primed = wrap_int32(x_primed + PRIME_X)

    return _reduce(distance_function, return_type, distance0, distance1, closest_hash)


@njit(cache=True)
def cellular_3d(seed, x, y, z, distance_function, return_type, jitter_modifier):
    xr, xd = lattice_round(x)
    yr, yd = lattice_round(y)
    zr, zd = lattice_round(z)

    distance0 = _FAR
    distance1 = _FAR
    closest_hash = 0

    jitter = _JITTER_3D * jitter_modifier

    x_primed = wrap_int32((xr - 1) * PRIME_X)
    y_primed_base = wrap_int32((yr - 1) * PRIME_Y)
    z_primed_base = wrap_int32((zr - 1) * PRIME_Z)

    for xo in range(-1, 2):
        y_primed = y_primed_base
        for yo in range(-1, 2):
            z_primed = z_primed_base
            for zo in range(-1, 2):
                h = hash_3d(seed, x_primed, y_primed, z_primed)
                idx = h & (255 << 2)

                vec_x = (xo - xd) + RAND_VECS_3D[idx] * jitter
                vec_y = (yo - yd) + RAND_VECS_3D[idx | 1] * jitter
                vec_z = (zo - zd) + RAND_VECS_3D[idx | 2] * jitter

                new_distance = _distance_3d(distance_function, vec_x, vec_y, vec_z)

                distance1 = max(min(distance1, new_distance), distance0)
                if new_distance < distance0:
                    distance0 = new_distance
                    closest_hash = h

                z_primed = wrap_int32(z_primed + PRIME_Z)
            y_primed = wrap_int32(y_primed + PRIME_Y)
        x_primed = wrap_int32(x_primed + PRIME_X)

    return _reduce(distance_function, return_type, distance0, distance1, closest_hash)

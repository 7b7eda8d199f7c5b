# entropy_noise/hashing.py

"""
================================================================================
LATTICE HASHING UTILITIES
================================================================================
This module turns an integer lattice coordinate plus a seed into a
reproducible pseudo-random integer, and derives from it the scalar values and
gradient vectors the noise kernels interpolate. It is a pure, stateless
utility.

Data Contract:
---------------
- Inputs:
    - seed: A signed 32-bit integer.
    - Primed lattice coordinates: integer cell indices already multiplied by
      their axis prime (PRIME_X, PRIME_Y, PRIME_Z) and wrapped to 32 bits.
    - Offsets (dx, dy, dz): float distance from the lattice point to the
      sample position, for gradient lookups.
- Outputs:
    - Hash integers in the signed 32-bit range.
    - Scalar values in [-1, 1) or gradient dot products.
- Side Effects: None.
- Invariants: All arithmetic behaves as signed 32-bit two's complement, so the
  same (seed, coordinate) always hashes to the same value regardless of how
  large the intermediate Python/numba integers grow.
================================================================================
"""

import math

import numpy as np
from numba import njit

# Large primes used to decorrelate the lattice axes before hashing.
PRIME_X = 501125321
PRIME_Y = 1136930381
PRIME_Z = 1720413743

_HASH_MULTIPLIER = 0x27d4eb2d
_INV_INT32_RANGE = 1.0 / 2147483648.0
_INT32_SPAN = 4294967296.0


def _build_gradients_2d() -> np.ndarray:
    """24 unit directions offset 7.5 degrees from the axes, tiled to 128 entries."""
    angles = np.radians(82.5 - 15.0 * np.arange(24))
    directions = np.column_stack((np.cos(angles), np.sin(angles)))
    table = np.resize(directions, (128, 2))
    return table.ravel()


def _build_gradients_3d() -> np.ndarray:
    """The 12 cube-edge directions tiled to 64 entries, stride 4."""
    edges = np.array([
        [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
        [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
        [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    ], dtype=np.float64)
    extra = np.array([[1, 1, 0], [0, -1, 1], [-1, 1, 0], [0, -1, -1]], dtype=np.float64)
    table = np.vstack([edges] * 5 + [extra])
    padded = np.zeros((64, 4))
    padded[:, :3] = table
    return padded.ravel()


def _build_rand_vecs_2d() -> np.ndarray:
    """256 unit vectors spread around the circle by the golden angle."""
    golden_angle = math.pi * (3.0 - math.sqrt(5.0))
    angles = np.arange(256) * golden_angle
    return np.column_stack((np.cos(angles), np.sin(angles))).ravel()


def _build_rand_vecs_3d() -> np.ndarray:
    """256 unit vectors on a Fibonacci sphere, stride 4."""
    golden_angle = math.pi * (3.0 - math.sqrt(5.0))
    k = np.arange(256)
    z = 1.0 - (2.0 * k + 1.0) / 256.0
    radius = np.sqrt(1.0 - z * z)
    theta = k * golden_angle
    vectors = np.zeros((256, 4))
    vectors[:, 0] = radius * np.cos(theta)
    vectors[:, 1] = radius * np.sin(theta)
    vectors[:, 2] = z
    return vectors.ravel()


# Process-wide lookup tables. Numba freezes these into compiled code as
# constants, so they are also marked read-only on the Python side.
GRADIENTS_2D = _build_gradients_2d()
GRADIENTS_3D = _build_gradients_3d()
RAND_VECS_2D = _build_rand_vecs_2d()
RAND_VECS_3D = _build_rand_vecs_3d()
for _table in (GRADIENTS_2D, GRADIENTS_3D, RAND_VECS_2D, RAND_VECS_3D):
    _table.setflags(write=False)


@njit(cache=True)
def wrap_int32(value):
    "Two's complement wrap of an integer to the signed 32-bit range."
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


@njit(cache=True)
def lattice_index(cell):
    """
    Integer lattice index of an integral float `cell`, reduced to 32 bits.

    Hashing only sees the index modulo 2^32. fmod is exact on floats, so the
    reduction is valid for every finite `cell`, far beyond the int64 range.
    """
    return wrap_int32(int(np.fmod(cell, _INT32_SPAN)))


@njit(cache=True)
def lattice_floor(f):
    """Splits f into (lattice index of floor(f), offset f - floor(f) in [0, 1])."""
    cell = np.floor(f)
    return lattice_index(cell), f - cell


@njit(cache=True)
def lattice_round(f):
    """Splits f into (index of the nearest lattice point, offset in [-0.5, 0.5])."""
    if f >= 0:
        cell = np.floor(f + 0.5)
    else:
        cell = np.ceil(f - 0.5)
    return lattice_index(cell), f - cell


@njit(cache=True)
def hash_2d(seed, x_primed, y_primed):
    h = seed ^ x_primed ^ y_primed
    return wrap_int32(h * _HASH_MULTIPLIER)


@njit(cache=True)
def hash_3d(seed, x_primed, y_primed, z_primed):
    h = seed ^ x_primed ^ y_primed ^ z_primed
    return wrap_int32(h * _HASH_MULTIPLIER)


@njit(cache=True)
def value_coord_2d(seed, x_primed, y_primed):
    """Pseudo-random scalar in [-1, 1) for a 2D lattice point."""
    h = hash_2d(seed, x_primed, y_primed)
    h = wrap_int32(h * h)
    h = wrap_int32(h ^ (h << 19))
    return h * _INV_INT32_RANGE


@njit(cache=True)
def value_coord_3d(seed, x_primed, y_primed, z_primed):
    """Pseudo-random scalar in [-1, 1) for a 3D lattice point."""
    h = hash_3d(seed, x_primed, y_primed, z_primed)
    h = wrap_int32(h * h)
    h = wrap_int32(h ^ (h << 19))
    return h * _INV_INT32_RANGE


@njit(cache=True)
def gradient_coord_2d(seed, x_primed, y_primed, dx, dy):
    """Dot product of the lattice point's gradient with the offset (dx, dy)."""
    h = hash_2d(seed, x_primed, y_primed)
    h ^= h >> 15
    h &= 127 << 1
    return dx * GRADIENTS_2D[h] + dy * GRADIENTS_2D[h | 1]


@njit(cache=True)
def gradient_coord_3d(seed, x_primed, y_primed, z_primed, dx, dy, dz):
    """Dot product of the lattice point's gradient with the offset (dx, dy, dz)."""
    h = hash_3d(seed, x_primed, y_primed, z_primed)
    h ^= h >> 15
    h &= 63 << 2
    return dx * GRADIENTS_3D[h] + dy * GRADIENTS_3D[h | 1] + dz * GRADIENTS_3D[h | 2]

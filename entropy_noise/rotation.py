# entropy_noise/rotation.py

"""
================================================================================
COORDINATE TRANSFORMS
================================================================================
This module maps caller coordinates into the space a base kernel samples in:
frequency scaling for every kernel, the 2D simplex skew for the OpenSimplex2
kernels, and the optional 3D rotations that hide axis-aligned artifacts.

Data Contract:
---------------
- Inputs:
    - Raw (x, y) or (x, y, z) coordinates and the configured frequency.
    - The noise type (2D) or the resolved TransformType3D (3D).
- Outputs:
    - A tuple of transformed coordinates.
- Side Effects: None.
- Invariants: The 3D rotation setting never changes 2D coordinates. Every
  transform is a fixed linear map, so finite input stays finite.
================================================================================
"""

import math

from numba import njit

from .enums import NoiseType, RotationType3D, TransformType3D

# Integer mirrors of the enum values for use inside compiled code.
_OPENSIMPLEX2 = int(NoiseType.OPENSIMPLEX2)
_OPENSIMPLEX2S = int(NoiseType.OPENSIMPLEX2S)
_IMPROVE_XY_PLANES = int(TransformType3D.IMPROVE_XY_PLANES)
_IMPROVE_XZ_PLANES = int(TransformType3D.IMPROVE_XZ_PLANES)
_DEFAULT_OPENSIMPLEX2 = int(TransformType3D.DEFAULT_OPENSIMPLEX2)

# 2D simplex skew factor: (sqrt(3) - 1) / 2
_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
# Rotation constants shared by the two plane-improving transforms.
_PLANE_SKEW = -0.211324865405187
_PLANE_AXIS = 0.577350269189626
_R3 = 2.0 / 3.0


def resolve_transform_type(rotation_type: RotationType3D, noise_type: NoiseType) -> TransformType3D:
    """
    Picks the transform applied to 3D coordinates.

    An explicit rotation always wins. Without one, the OpenSimplex2 kernels
    still need their lattice reoriented, the cubic-lattice kernels do not.
    """
    if rotation_type == RotationType3D.IMPROVE_XY_PLANES:
        return TransformType3D.IMPROVE_XY_PLANES
    if rotation_type == RotationType3D.IMPROVE_XZ_PLANES:
        return TransformType3D.IMPROVE_XZ_PLANES
    if noise_type in (NoiseType.OPENSIMPLEX2, NoiseType.OPENSIMPLEX2S):
        return TransformType3D.DEFAULT_OPENSIMPLEX2
    return TransformType3D.NONE


@njit(cache=True)
def transform_2d(noise_type, frequency, x, y):
    x *= frequency
    y *= frequency

    if noise_type == _OPENSIMPLEX2 or noise_type == _OPENSIMPLEX2S:
        t = (x + y) * _F2
        x += t
        y += t

    return x, y


@njit(cache=True)
def transform_3d(transform_type, frequency, x, y, z):
    x *= frequency
    y *= frequency
    z *= frequency

    if transform_type == _IMPROVE_XY_PLANES:
        xy = x + y
        s2 = xy * _PLANE_SKEW
        z *= _PLANE_AXIS
        x += s2 - z
        y = y + s2 - z
        z += xy * _PLANE_AXIS
    elif transform_type == _IMPROVE_XZ_PLANES:
        xz = x + z
        s2 = xz * _PLANE_SKEW
        y *= _PLANE_AXIS
        x += s2 - y
        z += s2 - y
        y += xz * _PLANE_AXIS
    elif transform_type == _DEFAULT_OPENSIMPLEX2:
        # Reflection through the main diagonal, not a skew.
        r = (x + y + z) * _R3
        x = r - x
        y = r - y
        z = r - z

    return x, y, z

# entropy_noise/enums.py

"""
================================================================================
CONFIGURATION ENUMERATIONS
================================================================================
Closed sets of options understood by the noise generator. Every axis of
configuration is an IntEnum so that its integer value can be handed directly
to the compiled sampling functions, which dispatch on plain integers.
================================================================================
"""

from enum import IntEnum


class NoiseType(IntEnum):
    OPENSIMPLEX2 = 0
    OPENSIMPLEX2S = 1
    CELLULAR = 2
    PERLIN = 3
    VALUE_CUBIC = 4
    VALUE = 5


class RotationType3D(IntEnum):
    NONE = 0
    IMPROVE_XY_PLANES = 1
    IMPROVE_XZ_PLANES = 2


class FractalType(IntEnum):
    NONE = 0
    FBM = 1
    RIDGED = 2
    PING_PONG = 3


class CellularDistanceFunction(IntEnum):
    EUCLIDEAN = 0
    EUCLIDEAN_SQ = 1
    MANHATTAN = 2
    HYBRID = 3


class CellularReturnType(IntEnum):
    CELL_VALUE = 0
    DISTANCE = 1
    DISTANCE2 = 2
    DISTANCE2_ADD = 3
    DISTANCE2_SUB = 4
    DISTANCE2_MUL = 5
    DISTANCE2_DIV = 6


class TransformType3D(IntEnum):
    """
    The coordinate transform actually applied to 3D input. Derived from the
    rotation type and the noise type; never set directly by callers.
    """
    NONE = 0
    IMPROVE_XY_PLANES = 1
    IMPROVE_XZ_PLANES = 2
    DEFAULT_OPENSIMPLEX2 = 3

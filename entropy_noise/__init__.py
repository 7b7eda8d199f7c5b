# entropy_noise/__init__.py

# This file makes the 'entropy_noise' directory a Python package.
# It also defines the public API of the package.

from . import config as DEFAULTS
from .enums import (
    CellularDistanceFunction,
    CellularReturnType,
    FractalType,
    NoiseType,
    RotationType3D,
    TransformType3D,
)
from .generator import NoiseGen

__version__ = "0.1.0"

__all__ = [
    "NoiseGen",
    "NoiseType",
    "FractalType",
    "RotationType3D",
    "CellularDistanceFunction",
    "CellularReturnType",
    "TransformType3D",
    "DEFAULTS",
]

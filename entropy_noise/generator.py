# entropy_noise/generator.py

"""
================================================================================
NOISE GENERATOR FACADE
================================================================================
This module contains the NoiseGen class, the single entry point callers use to
configure and sample coherent noise. It owns the flat configuration record and
the state derived from it, and hands both to the compiled sampling pipeline.

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int, optional): Overrides config['seed'] when given.
    - config (dict, optional): Parameters which override the internal
      defaults. Accepted keys are those of DEFAULTS.SETTING_DEFAULTS.
    - logger (optional): A configured Python logging object.
- Outputs (from methods):
    - Python floats. FractalType.NONE stays within [-1, 1]; fractal sums stay
      roughly within [-2, 2].
- Side Effects: Logs messages using the provided logger. Sampling never
  mutates configuration.
- Invariants: Given the same configuration and coordinate, the output is
  bit-identical across calls and across instances.
================================================================================
"""

import logging
from typing import Optional

from . import config as DEFAULTS
from .enums import (
    CellularDistanceFunction,
    CellularReturnType,
    FractalType,
    NoiseType,
    RotationType3D,
)
from .fractal import fractal_bounding
from .rotation import resolve_transform_type
from .sampler import sample_2d, sample_3d


def _wrap_int32(value: int) -> int:
    """Wraps an arbitrary Python int into the signed 32-bit range."""
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _coerce_enum(enum_cls, value):
    """
    Resolves an enum member, its integer value, or its (case-insensitive)
    name to a member of `enum_cls`.

    Raises:
        ValueError: If `value` names no member of `enum_cls`.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown {enum_cls.__name__} name: {value!r}") from None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValueError(f"Invalid {enum_cls.__name__} value: {value!r}")
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {enum_cls.__name__} value: {value!r}") from None


class NoiseGen:
    """
    Configurable generator of deterministic 2D and 3D coherent noise.

    All configuration is held in one flat record. Each setter is a plain
    assignment; the only work done outside sampling is refreshing the two
    derived values (fractal bounding and the 3D transform type).
    """
    def __init__(self, seed: Optional[int] = None, config: Optional[dict] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initializes the noise generator.

        Args:
            seed (int, optional): Seed for every kernel. Takes precedence
                over config['seed'].
            config (dict, optional): User-defined parameters to override
                defaults.
            logger (logging.Logger, optional): The logger instance for all
                output. Defaults to this module's logger.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.user_config = dict(config or {})

        # --- Consolidate Configuration ---
        for key in sorted(set(self.user_config) - set(DEFAULTS.SETTING_DEFAULTS)):
            self.logger.warning(f"Ignoring unknown noise setting '{key}'.")

        values = {
            key: self.user_config.get(key, default)
            for key, default in DEFAULTS.SETTING_DEFAULTS.items()
        }
        if seed is not None:
            values['seed'] = seed

        self._settings = {}
        self._fractal_bounding = 1.0
        self._transform_type_3d = None

        # Every value goes through its setter so that validation and
        # derived state are handled in one place.
        self.set_seed(values['seed'])
        self.set_frequency(values['frequency'])
        self.set_noise_type(values['noise_type'])
        self.set_rotation_type_3d(values['rotation_type_3d'])
        self.set_fractal_type(values['fractal_type'])
        self.set_fractal_octaves(values['fractal_octaves'])
        self.set_fractal_lacunarity(values['fractal_lacunarity'])
        self.set_fractal_gain(values['fractal_gain'])
        self.set_fractal_weighted_strength(values['fractal_weighted_strength'])
        self.set_fractal_ping_pong_strength(values['fractal_ping_pong_strength'])
        self.set_cellular_distance_function(values['cellular_distance_function'])
        self.set_cellular_return_type(values['cellular_return_type'])
        self.set_cellular_jitter(values['cellular_jitter'])

        self.logger.info(
            f"NoiseGen initialized with seed: {self._settings['seed']}, "
            f"noise type: {self._settings['noise_type'].name}"
        )

    # --------------------------------------------------------------------------
    # Configuration
    # --------------------------------------------------------------------------

    @property
    def settings(self) -> dict:
        """A copy of the current configuration, keyed like SETTING_DEFAULTS."""
        return dict(self._settings)

    @property
    def fractal_bounding(self) -> float:
        return self._fractal_bounding

    @property
    def transform_type_3d(self):
        return self._transform_type_3d

    def set_seed(self, seed: int):
        self._settings['seed'] = _wrap_int32(int(seed))
        self.logger.debug(f"Seed set to {self._settings['seed']}.")

    def set_frequency(self, frequency: float):
        self._settings['frequency'] = float(frequency)
        self.logger.debug(f"Frequency set to {self._settings['frequency']}.")

    def set_noise_type(self, noise_type):
        self._settings['noise_type'] = _coerce_enum(NoiseType, noise_type)
        self.logger.debug(f"Noise type set to {self._settings['noise_type'].name}.")
        self._update_transform_type_3d()

    def set_rotation_type_3d(self, rotation_type):
        self._settings['rotation_type_3d'] = _coerce_enum(RotationType3D, rotation_type)
        self.logger.debug(f"3D rotation type set to {self._settings['rotation_type_3d'].name}.")
        self._update_transform_type_3d()

    def set_fractal_type(self, fractal_type):
        self._settings['fractal_type'] = _coerce_enum(FractalType, fractal_type)
        self.logger.debug(f"Fractal type set to {self._settings['fractal_type'].name}.")

    def set_fractal_octaves(self, octaves: int):
        self._settings['fractal_octaves'] = int(octaves)
        self.logger.debug(f"Fractal octaves set to {self._settings['fractal_octaves']}.")
        self._update_fractal_bounding()

    def set_fractal_lacunarity(self, lacunarity: float):
        self._settings['fractal_lacunarity'] = float(lacunarity)
        self.logger.debug(f"Fractal lacunarity set to {self._settings['fractal_lacunarity']}.")

    def set_fractal_gain(self, gain: float):
        self._settings['fractal_gain'] = float(gain)
        self.logger.debug(f"Fractal gain set to {self._settings['fractal_gain']}.")
        self._update_fractal_bounding()

    def set_fractal_weighted_strength(self, weighted_strength: float):
        self._settings['fractal_weighted_strength'] = float(weighted_strength)
        self.logger.debug(f"Fractal weighted strength set to {self._settings['fractal_weighted_strength']}.")

    def set_fractal_ping_pong_strength(self, ping_pong_strength: float):
        self._settings['fractal_ping_pong_strength'] = float(ping_pong_strength)
        self.logger.debug(f"Fractal ping-pong strength set to {self._settings['fractal_ping_pong_strength']}.")

    def set_cellular_distance_function(self, distance_function):
        self._settings['cellular_distance_function'] = _coerce_enum(CellularDistanceFunction, distance_function)
        self.logger.debug(
            f"Cellular distance function set to {self._settings['cellular_distance_function'].name}."
        )

    def set_cellular_return_type(self, return_type):
        self._settings['cellular_return_type'] = _coerce_enum(CellularReturnType, return_type)
        self.logger.debug(f"Cellular return type set to {self._settings['cellular_return_type'].name}.")

    def set_cellular_jitter(self, jitter: float):
        self._settings['cellular_jitter'] = float(jitter)
        self.logger.debug(f"Cellular jitter set to {self._settings['cellular_jitter']}.")

    def _update_fractal_bounding(self):
        # Both octaves and gain are needed; skip until the second one is set.
        if 'fractal_octaves' not in self._settings or 'fractal_gain' not in self._settings:
            return
        self._fractal_bounding = fractal_bounding(
            self._settings['fractal_octaves'], self._settings['fractal_gain']
        )
        self.logger.debug(f"Fractal bounding recomputed: {self._fractal_bounding:.6f}")

    def _update_transform_type_3d(self):
        if 'noise_type' not in self._settings or 'rotation_type_3d' not in self._settings:
            return
        self._transform_type_3d = resolve_transform_type(
            self._settings['rotation_type_3d'], self._settings['noise_type']
        )
        self.logger.debug(f"3D transform type resolved to {self._transform_type_3d.name}.")

    def _fractal_params(self) -> tuple:
        s = self._settings
        return (
            s['fractal_octaves'],
            s['fractal_lacunarity'],
            s['fractal_gain'],
            s['fractal_weighted_strength'],
            s['fractal_ping_pong_strength'],
            self._fractal_bounding,
        )

    def _cellular_params(self) -> tuple:
        s = self._settings
        return (
            int(s['cellular_distance_function']),
            int(s['cellular_return_type']),
            s['cellular_jitter'],
        )

    # --------------------------------------------------------------------------
    # Sampling
    # --------------------------------------------------------------------------

    def get_noise(self, x: float, y: float, z: float = None) -> float:
        """
        Samples the configured noise at a 2D point, or a 3D point if `z` is
        given. Non-finite coordinates yield NaN.
        """
        if z is None:
            return self.get_noise_2d(x, y)
        return self.get_noise_3d(x, y, z)

    def get_noise_2d(self, x: float, y: float) -> float:
        s = self._settings
        return float(sample_2d(
            s['seed'],
            int(s['noise_type']),
            int(s['fractal_type']),
            s['frequency'],
            float(x), float(y),
            self._fractal_params(),
            self._cellular_params(),
        ))

    def get_noise_3d(self, x: float, y: float, z: float) -> float:
        s = self._settings
        return float(sample_3d(
            s['seed'],
            int(s['noise_type']),
            int(s['fractal_type']),
            int(self._transform_type_3d),
            s['frequency'],
            float(x), float(y), float(z),
            self._fractal_params(),
            self._cellular_params(),
        ))

    def __repr__(self) -> str:
        s = self._settings
        return (
            f"NoiseGen(seed={s['seed']}, noise_type={s['noise_type'].name}, "
            f"fractal_type={s['fractal_type'].name}, frequency={s['frequency']})"
        )

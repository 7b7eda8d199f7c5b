"""
Integration tests for NoiseGen: sampling behaviour end to end.
"""
import math

import numpy as np
import pytest

from entropy_noise import (
    CellularDistanceFunction,
    CellularReturnType,
    FractalType,
    NoiseGen,
    NoiseType,
    RotationType3D,
)

POINT_2D = (12.3, 45.6)
POINT_3D = (12.3, 45.6, 78.9)


class TestBasicSampling:
    """Construction, determinism and the documented example scenarios."""

    @pytest.mark.integration
    def test_default_sample_is_finite_and_in_range(self, make_gen):
        gen = make_gen()
        for args in [(0.0, 0.0), (1.5, -2.5), (0.0, 0.0, 0.0), (1.5, -2.5, 3.5)]:
            v = gen.get_noise(*args)
            assert math.isfinite(v)
            assert -1.0 <= v <= 1.0

    @pytest.mark.integration
    def test_get_noise_dispatches_on_z(self, make_gen):
        gen = make_gen()
        assert gen.get_noise(*POINT_2D) == gen.get_noise_2d(*POINT_2D)
        assert gen.get_noise(*POINT_3D) == gen.get_noise_3d(*POINT_3D)

    @pytest.mark.integration
    def test_returns_python_float(self, make_gen):
        assert type(make_gen().get_noise(1, 2)) is float
        assert type(make_gen().get_noise(1, 2, 3)) is float

    @pytest.mark.integration
    def test_repeated_calls_are_identical(self, make_gen, sample_points_2d):
        gen = make_gen(seed=3, fractal_type=FractalType.FBM)
        first = [gen.get_noise(x, y) for x, y in sample_points_2d]
        second = [gen.get_noise(x, y) for x, y in sample_points_2d]
        assert first == second

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", list(NoiseType))
    def test_instances_with_same_config_agree(self, make_gen, sample_points_3d, noise_type):
        a = make_gen(seed=8, noise_type=noise_type, fractal_type=FractalType.RIDGED)
        b = make_gen(seed=8, noise_type=noise_type, fractal_type=FractalType.RIDGED)
        for x, y, z in sample_points_3d[:50]:
            assert a.get_noise(x, y, z) == b.get_noise(x, y, z)

    @pytest.mark.integration
    def test_sampling_does_not_mutate_settings(self, make_gen):
        gen = make_gen(fractal_type=FractalType.PING_PONG)
        before = gen.settings
        gen.get_noise(*POINT_2D)
        gen.get_noise(*POINT_3D)
        assert gen.settings == before

    @pytest.mark.integration
    def test_seed_changes_output(self):
        assert NoiseGen(seed=1).get_noise(0.7, 0.3) != NoiseGen(seed=2).get_noise(0.7, 0.3)

    @pytest.mark.integration
    def test_perlin_origin_and_neighbour(self):
        gen = NoiseGen(seed=42)
        gen.set_noise_type(NoiseType.PERLIN)
        a = gen.get_noise(0, 0)
        b = gen.get_noise(1, 1)
        assert a != b
        assert -1.0 <= a <= 1.0
        assert -1.0 <= b <= 1.0

    @pytest.mark.integration
    def test_fbm_3d_scenario(self):
        gen = NoiseGen(seed=999)
        gen.set_fractal_type(FractalType.FBM)
        gen.set_fractal_octaves(4)
        gen.set_frequency(0.05)
        v = gen.get_noise(10, 20, 30)
        assert math.isfinite(v)
        assert -2.0 <= v <= 2.0

    @pytest.mark.integration
    def test_far_coordinates(self):
        gen = NoiseGen(seed=777)
        for v in (gen.get_noise(999999, 888888), gen.get_noise(-999999, -888888)):
            assert math.isfinite(v)
            assert -1.0 <= v <= 1.0


class TestParameterSensitivity:
    """Every documented parameter changes the output."""

    @pytest.mark.integration
    def test_noise_type_changes_output(self, make_gen):
        values = [
            make_gen(noise_type=t, frequency=0.05).get_noise(*POINT_2D)
            for t in (NoiseType.PERLIN, NoiseType.VALUE, NoiseType.OPENSIMPLEX2)
        ]
        assert len(set(values)) == 3

    @pytest.mark.integration
    def test_frequency_changes_output(self, make_gen):
        values = [make_gen(frequency=f).get_noise(*POINT_2D) for f in (0.01, 0.05, 0.2)]
        assert len(set(values)) == 3

    @pytest.mark.integration
    @pytest.mark.parametrize("fractal_type", [FractalType.FBM, FractalType.RIDGED, FractalType.PING_PONG])
    def test_octaves_change_output(self, make_gen, fractal_type):
        values = [
            make_gen(fractal_type=fractal_type, fractal_octaves=n, frequency=0.05).get_noise(*POINT_3D)
            for n in (1, 3, 6)
        ]
        assert len(set(values)) == 3

    @pytest.mark.integration
    @pytest.mark.parametrize("fractal_type", [FractalType.FBM, FractalType.RIDGED, FractalType.PING_PONG])
    def test_lacunarity_changes_output(self, make_gen, fractal_type):
        values = [
            make_gen(fractal_type=fractal_type, fractal_lacunarity=l, frequency=0.05).get_noise(*POINT_2D)
            for l in (1.5, 2.0, 3.0)
        ]
        assert len(set(values)) == 3

    @pytest.mark.integration
    @pytest.mark.parametrize("fractal_type", [FractalType.FBM, FractalType.RIDGED, FractalType.PING_PONG])
    def test_gain_changes_output(self, make_gen, fractal_type):
        values = [
            make_gen(fractal_type=fractal_type, fractal_gain=g, frequency=0.05).get_noise(*POINT_2D)
            for g in (0.2, 0.5, 0.8)
        ]
        assert len(set(values)) == 3

    @pytest.mark.integration
    def test_ping_pong_strength_changes_output(self, make_gen):
        values = [
            make_gen(fractal_type=FractalType.PING_PONG, fractal_ping_pong_strength=s, frequency=0.05).get_noise(*POINT_2D)
            for s in (1.0, 2.0, 3.0)
        ]
        assert len(set(values)) == 3

    @pytest.mark.integration
    def test_fractal_type_changes_output(self, make_gen):
        values = [make_gen(fractal_type=t, frequency=0.05).get_noise(*POINT_2D) for t in FractalType]
        assert len(set(values)) == len(FractalType)

    @pytest.mark.integration
    def test_rotation_changes_3d_only(self, make_gen):
        gen = make_gen(noise_type=NoiseType.PERLIN, frequency=0.05)
        before_2d = gen.get_noise(*POINT_2D)
        before_3d = gen.get_noise(*POINT_3D)
        gen.set_rotation_type_3d(RotationType3D.IMPROVE_XY_PLANES)
        after_xy = gen.get_noise(*POINT_3D)
        gen.set_rotation_type_3d(RotationType3D.IMPROVE_XZ_PLANES)
        after_xz = gen.get_noise(*POINT_3D)
        assert gen.get_noise(*POINT_2D) == before_2d
        assert len({before_3d, after_xy, after_xz}) == 3

    @pytest.mark.integration
    def test_cellular_options_change_output(self, make_gen):
        gen = make_gen(noise_type=NoiseType.CELLULAR, frequency=0.05)
        values = set()
        for return_type in CellularReturnType:
            gen.set_cellular_return_type(return_type)
            values.add(gen.get_noise(*POINT_2D))
        assert len(values) == len(CellularReturnType)

        gen.set_cellular_return_type(CellularReturnType.DISTANCE)
        by_function = set()
        for distance_function in CellularDistanceFunction:
            gen.set_cellular_distance_function(distance_function)
            by_function.add(gen.get_noise(*POINT_2D))
        assert len(by_function) == len(CellularDistanceFunction)


class TestRanges:
    """Output bounds over many points."""

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", list(NoiseType))
    def test_single_octave_in_unit_range(self, make_gen, sample_points_2d, sample_points_3d, noise_type):
        gen = make_gen(noise_type=noise_type)
        for x, y in sample_points_2d:
            assert -1.0 <= gen.get_noise(x, y) <= 1.0
        for x, y, z in sample_points_3d:
            assert -1.0 <= gen.get_noise(x, y, z) <= 1.0

    @pytest.mark.integration
    def test_cell_value_in_unit_range(self, make_gen, sample_points_3d):
        gen = make_gen(noise_type=NoiseType.CELLULAR, cellular_return_type=CellularReturnType.CELL_VALUE,
                       cellular_distance_function=CellularDistanceFunction.MANHATTAN)
        for x, y, z in sample_points_3d:
            assert -1.0 <= gen.get_noise(x, y, z) <= 1.0

    @pytest.mark.integration
    @pytest.mark.parametrize("fractal_type", [FractalType.FBM, FractalType.RIDGED, FractalType.PING_PONG])
    @pytest.mark.parametrize("noise_type", list(NoiseType))
    def test_multi_octave_bounded(self, make_gen, sample_points_2d, noise_type, fractal_type):
        gen = make_gen(noise_type=noise_type, fractal_type=fractal_type, fractal_octaves=6,
                       fractal_gain=0.6, fractal_weighted_strength=0.5)
        for x, y in sample_points_2d:
            v = gen.get_noise(x, y)
            assert math.isfinite(v)
            assert -2.0 <= v <= 2.0

    @pytest.mark.integration
    @pytest.mark.parametrize("jitter", [0.0, 0.5, 1.0, 1.5])
    @pytest.mark.parametrize("return_type", list(CellularReturnType))
    def test_cellular_jitter_finite(self, make_gen, return_type, jitter):
        gen = make_gen(noise_type=NoiseType.CELLULAR, cellular_return_type=return_type,
                       cellular_jitter=jitter, frequency=0.1)
        for point in [(0.0, 0.0), (10.0, 10.0), (5.0, -15.0, 25.0), (0.0, 0.0, 0.0)]:
            assert math.isfinite(gen.get_noise(*point))


class TestStatistics:
    """Smoothness and value distribution."""

    @staticmethod
    def _mean_step(gen, points):
        return float(np.mean([abs(gen.get_noise(x + 1.0, y) - gen.get_noise(x, y)) for x, y in points]))

    @pytest.mark.integration
    def test_higher_frequency_varies_faster(self, make_gen, sample_points_2d):
        low = self._mean_step(make_gen(frequency=0.01), sample_points_2d)
        high = self._mean_step(make_gen(frequency=0.1), sample_points_2d)
        assert high > low

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", [NoiseType.OPENSIMPLEX2, NoiseType.OPENSIMPLEX2S,
                                            NoiseType.PERLIN, NoiseType.VALUE_CUBIC, NoiseType.VALUE])
    def test_neighbouring_samples_are_close(self, make_gen, sample_points_2d, noise_type):
        gen = make_gen(noise_type=noise_type)
        for x, y in sample_points_2d:
            assert abs(gen.get_noise(x + 0.01, y) - gen.get_noise(x, y)) < 0.05

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", [NoiseType.OPENSIMPLEX2, NoiseType.PERLIN, NoiseType.VALUE])
    def test_distribution_is_centred_and_spread(self, make_gen, noise_type):
        gen = make_gen(noise_type=noise_type, frequency=0.1)
        rng = np.random.default_rng(1)
        values = np.array([gen.get_noise(x, y) for x, y in rng.uniform(-1000, 1000, size=(2000, 2))])
        assert abs(values.mean()) < 0.1
        assert values.std() > 0.1


class TestEdgeCases:
    """Unusual coordinates."""

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", list(NoiseType))
    def test_tiny_and_huge_coordinates(self, make_gen, noise_type):
        gen = make_gen(noise_type=noise_type, fractal_type=FractalType.FBM)
        for point in [(1e-7, 1e-7), (1e6, -1e6), (1e-7, 1e-7, 1e-7), (1e6, 1e6, -1e6), (-0.0, 0.0)]:
            assert math.isfinite(gen.get_noise(*point))

    @pytest.mark.integration
    def test_integer_lattice_coordinates(self, make_gen):
        gen = make_gen(frequency=1.0, noise_type=NoiseType.VALUE_CUBIC)
        for i in range(-5, 6):
            assert math.isfinite(gen.get_noise(i, -i))
            assert math.isfinite(gen.get_noise(i, -i, i))

    @pytest.mark.integration
    @pytest.mark.parametrize("point", [
        (math.nan, 0.0), (0.0, math.inf), (-math.inf, 1.0, 2.0), (0.0, 0.0, math.nan),
    ])
    def test_non_finite_input_yields_nan(self, make_gen, point):
        gen = make_gen()
        reference = gen.get_noise(*POINT_2D)
        assert math.isnan(gen.get_noise(*point))
        assert gen.get_noise(*POINT_2D) == reference

    @pytest.mark.integration
    def test_zero_octaves_yield_zero(self, make_gen):
        gen = make_gen(fractal_type=FractalType.FBM, fractal_octaves=0)
        assert gen.get_noise(*POINT_2D) == 0.0

    @pytest.mark.integration
    @pytest.mark.slow
    def test_stress_many_points(self, make_gen):
        gen = make_gen(fractal_type=FractalType.FBM, fractal_octaves=5, frequency=0.02)
        rng = np.random.default_rng(2024)
        for x, y, z in rng.uniform(-1e5, 1e5, size=(10000, 3)):
            v = gen.get_noise(x, y, z)
            assert math.isfinite(v)
            assert -1.0 <= v <= 1.0


class TestDegenerateSettings:
    """Out-of-range setter values still give finite samples."""

    @pytest.mark.integration
    @pytest.mark.parametrize("settings", [
        {'frequency': 0.0},
        {'frequency': -0.05},
        {'frequency': 1e10},
        {'fractal_lacunarity': -2.0},
        {'fractal_lacunarity': 0.0},
        {'fractal_lacunarity': 1e200},
        {'fractal_gain': 1.5},
        {'fractal_gain': 4.0},
        {'fractal_gain': -0.5},
        {'fractal_weighted_strength': 1e6},
        {'fractal_weighted_strength': -3.0},
        {'fractal_ping_pong_strength': 1e9},
        {'fractal_ping_pong_strength': 1e300},
        {'fractal_ping_pong_strength': -2.0},
        {'fractal_octaves': 12},
        {'cellular_jitter': 2.0},
        {'cellular_jitter': 10.0},
        {'cellular_jitter': -1.0},
    ], ids=lambda s: ",".join(f"{k}={v}" for k, v in s.items()))
    @pytest.mark.parametrize("fractal_type", list(FractalType))
    @pytest.mark.parametrize("noise_type", [NoiseType.OPENSIMPLEX2, NoiseType.CELLULAR, NoiseType.PERLIN])
    def test_finite_output(self, make_gen, noise_type, fractal_type, settings):
        gen = make_gen(seed=5, noise_type=noise_type, fractal_type=fractal_type, **settings)
        for point in [(0.0, 0.0), (12.3, -45.6), (1e6, 1e6), (12.3, -45.6, 78.9), (-1e6, 0.5, 1e6)]:
            assert math.isfinite(gen.get_noise(*point))

    @pytest.mark.integration
    @pytest.mark.parametrize("strength", [1e6, 1e15, 1e300])
    def test_ping_pong_with_very_large_strength(self, make_gen, strength):
        gen = make_gen(fractal_type=FractalType.PING_PONG, fractal_ping_pong_strength=strength)
        for point in [POINT_2D, POINT_3D]:
            v = gen.get_noise(*point)
            assert math.isfinite(v)
            assert abs(v) <= 1.0 + 1e-9

    @pytest.mark.integration
    def test_zero_frequency_is_constant(self, make_gen):
        gen = make_gen(frequency=0.0, noise_type=NoiseType.VALUE)
        assert gen.get_noise(*POINT_2D) == gen.get_noise(-500.0, 9000.0)


class TestFarCoordinates:
    """Finite coordinates far beyond the int64 range."""

    @pytest.mark.integration
    @pytest.mark.parametrize("noise_type", list(NoiseType))
    @pytest.mark.parametrize("fractal_type", [FractalType.NONE, FractalType.FBM])
    def test_1e21_and_1e300(self, noise_type, fractal_type):
        gen = NoiseGen(seed=777)
        gen.set_noise_type(noise_type)
        gen.set_fractal_type(fractal_type)
        for point in [(1e21, 1e21), (1e21, -1e21), (1e300, 1e300), (-1e300, 1e300),
                      (1e21, 1e21, 1e21), (1e300, 1e300, 1e300), (-1e300, 2.5, 1e300)]:
            v = gen.get_noise(*point)
            assert math.isfinite(v)
            assert abs(v) <= 1.0 + 1e-9

    @pytest.mark.integration
    def test_coordinates_that_overflow_after_scaling(self, make_gen):
        gen = make_gen(frequency=10.0, fractal_type=FractalType.FBM)
        assert math.isfinite(gen.get_noise(1.7e308, 1.7e308))
        assert math.isfinite(gen.get_noise(1.7e308, -1.7e308, 1.7e308))

"""
Pytest configuration and fixtures for the entropy_noise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import logging
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_collection_modifyitems(config, items):
    """Add markers based on where a test lives."""
    for item in items:
        path = str(item.fspath)
        if "test_imports.py" in path:
            item.add_marker("importtest")
        elif os.sep + "unit" + os.sep in path:
            item.add_marker("unit")
        elif os.sep + "integration" + os.sep in path:
            item.add_marker("integration")


@pytest.fixture
def make_gen():
    """Factory for NoiseGen instances with a quiet, named logger."""
    from entropy_noise import NoiseGen

    logger = logging.getLogger("entropy_noise.tests")

    def _make(seed=None, **settings):
        return NoiseGen(seed=seed, config=settings, logger=logger)

    return _make


@pytest.fixture(scope="session")
def sample_points_2d():
    """A reproducible spread of 2D coordinates covering several lattice cells."""
    rng = np.random.default_rng(42)
    return [tuple(p) for p in rng.uniform(-500.0, 500.0, size=(200, 2))]


@pytest.fixture(scope="session")
def sample_points_3d():
    """A reproducible spread of 3D coordinates covering several lattice cells."""
    rng = np.random.default_rng(7)
    return [tuple(p) for p in rng.uniform(-500.0, 500.0, size=(200, 3))]


@pytest.fixture(scope="session")
def lattice_points_2d():
    """Unscaled coordinates for calling kernels directly, integers included."""
    rng = np.random.default_rng(3)
    points = [tuple(p) for p in rng.uniform(-20.0, 20.0, size=(300, 2))]
    points += [(float(i), float(j)) for i in range(-2, 3) for j in range(-2, 3)]
    return points


@pytest.fixture(scope="session")
def lattice_points_3d():
    """Unscaled 3D coordinates for calling kernels directly, integers included."""
    rng = np.random.default_rng(5)
    points = [tuple(p) for p in rng.uniform(-20.0, 20.0, size=(300, 3))]
    points += [(float(i), float(j), float(k)) for i in range(-1, 2) for j in range(-1, 2) for k in range(-1, 2)]
    return points

"""Pytest configuration for raytracer tests.

Shared fixtures for materials and small scenes used across test modules.
"""

import pytest

from whitted.core.vector import Vector3
from whitted.materials.material import Material
from whitted.scene.scene import Scene, SceneOptions


@pytest.fixture
def white_diffuse():
    """Fully diffuse white material with no ambient, specular or mirror terms."""
    return Material(diffuse_color=Vector3(1.0, 1.0, 1.0))


@pytest.fixture
def red_diffuse():
    return Material(diffuse_color=Vector3(1.0, 0.0, 0.0))


@pytest.fixture
def empty_scene():
    """Scene with default options: AA=1, ambient enabled, pinhole camera at the origin."""
    return Scene(SceneOptions())


def assert_vec_close(actual, expected, tol=1e-6):
    """Component-wise comparison of two Vector3 values."""
    assert abs(actual.x - expected.x) < tol, f"x: {actual} != {expected}"
    assert abs(actual.y - expected.y) < tol, f"y: {actual} != {expected}"
    assert abs(actual.z - expected.z) < tol, f"z: {actual} != {expected}"

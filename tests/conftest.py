"""Pytest configuration for teddycast tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture(autouse=True)
def clear_scene_data():
    """Clear the Taichi sphere storage before and after each test."""
    # Import here to ensure Taichi is initialized first
    from teddycast.scene.intersection import clear_scene

    clear_scene()
    yield
    clear_scene()


@pytest.fixture
def fur_sphere():
    """Single brown sphere at (0, 0, -5) with radius 1."""
    from teddycast.core.color import Color
    from teddycast.geometry.intersect import Material
    from teddycast.geometry.sphere import Sphere

    return Sphere(
        center=(0.0, 0.0, -5.0),
        radius=1.0,
        material=Material(diffuse=Color(139, 69, 19)),
    )


@pytest.fixture
def default_camera():
    """Camera at the origin looking at (0, 0, -5)."""
    from teddycast.camera.orbit import OrbitCamera

    return OrbitCamera(eye=(0.0, 0.0, 0.0), center=(0.0, 0.0, -5.0), up=(0.0, 1.0, 0.0))

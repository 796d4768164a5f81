"""Unit tests for the orbit camera.

Tests cover:
- Orthonormal basis construction
- basis_change mapping camera space to world space
- Distance-preserving orbits in yaw and pitch
- Pitch clamping near the poles
- Degenerate camera configurations
"""

import math

import numpy as np
import pytest


def _assert_orthonormal(camera):
    for v in (camera.forward, camera.right, camera.true_up):
        assert abs(np.linalg.norm(v) - 1.0) < 1e-9
    assert abs(np.dot(camera.forward, camera.right)) < 1e-9
    assert abs(np.dot(camera.forward, camera.true_up)) < 1e-9
    assert abs(np.dot(camera.right, camera.true_up)) < 1e-9


class TestCameraBasis:
    """Tests for basis construction."""

    def test_default_basis_directions(self, default_camera):
        """Test the basis of a camera looking down -z."""
        assert np.allclose(default_camera.forward, (0.0, 0.0, -1.0))
        assert np.allclose(default_camera.right, (1.0, 0.0, 0.0))
        assert np.allclose(default_camera.true_up, (0.0, 1.0, 0.0))

    def test_basis_is_orthonormal_for_tilted_up(self):
        """Test that a non-perpendicular up hint still gives a clean basis."""
        from teddycast.camera.orbit import OrbitCamera

        camera = OrbitCamera(eye=(1.0, 2.0, 3.0), center=(-2.0, 0.5, -4.0), up=(0.3, 1.0, 0.2))
        _assert_orthonormal(camera)

    def test_up_parallel_to_view_raises(self):
        """Test that looking straight along up is rejected."""
        from teddycast.camera.orbit import OrbitCamera

        with pytest.raises(ValueError):
            OrbitCamera(eye=(0.0, 0.0, 0.0), center=(0.0, 5.0, 0.0), up=(0.0, 1.0, 0.0))

    def test_eye_equal_center_raises(self):
        """Test that a camera needs a view direction."""
        from teddycast.camera.orbit import OrbitCamera

        with pytest.raises(ValueError):
            OrbitCamera(eye=(1.0, 1.0, 1.0), center=(1.0, 1.0, 1.0))

    def test_zero_up_raises(self):
        """Test that a zero up vector is rejected."""
        from teddycast.camera.orbit import OrbitCamera

        with pytest.raises(ValueError):
            OrbitCamera(eye=(0.0, 0.0, 0.0), center=(0.0, 0.0, -1.0), up=(0.0, 0.0, 0.0))


class TestBasisChange:
    """Tests for basis_change."""

    def test_view_axis_maps_to_forward(self, default_camera):
        """Test that camera-space (0, 0, -1) maps to forward."""
        world = default_camera.basis_change((0.0, 0.0, -1.0))
        assert np.allclose(world, default_camera.forward)
        assert abs(np.linalg.norm(world) - 1.0) < 1e-12

    def test_view_axis_maps_to_forward_after_orbit(self, default_camera):
        """Test the forward mapping for an arbitrary orientation."""
        default_camera.orbit(0.7, -0.4)
        world = default_camera.basis_change(np.array((0.0, 0.0, -1.0)))
        assert np.allclose(world, default_camera.forward)
        assert np.allclose(world, (default_camera.center - default_camera.eye) / default_camera.distance)

    def test_x_and_y_map_to_right_and_up(self, default_camera):
        """Test the remaining basis axes."""
        default_camera.orbit(1.1, 0.3)
        assert np.allclose(default_camera.basis_change((1.0, 0.0, 0.0)), default_camera.right)
        assert np.allclose(default_camera.basis_change((0.0, 1.0, 0.0)), default_camera.true_up)

    def test_preserves_length(self, default_camera):
        """Test that the transform is a rotation."""
        default_camera.orbit(-0.5, 0.2)
        v = np.array((0.3, -0.4, -0.866))
        assert abs(np.linalg.norm(default_camera.basis_change(v)) - np.linalg.norm(v)) < 1e-12


class TestOrbit:
    """Tests for orbit()."""

    def test_positive_yaw_swings_eye_left(self, default_camera):
        """Test yaw direction and that the camera keeps facing the center."""
        default_camera.orbit(0.3, 0.0)

        assert default_camera.eye[0] < 0.0
        assert abs(default_camera.eye[1]) < 1e-12
        assert np.allclose(
            default_camera.forward,
            (default_camera.center - default_camera.eye) / default_camera.distance,
        )

    def test_negative_pitch_raises_eye(self, default_camera):
        """Test that negative pitch moves the eye above the target."""
        default_camera.orbit(0.0, -0.3)
        assert default_camera.eye[1] > 0.0
        assert abs(default_camera.eye[1] - 5.0 * math.sin(0.3)) < 1e-9

    def test_positive_pitch_lowers_eye(self, default_camera):
        """Test that positive pitch moves the eye below the target."""
        default_camera.orbit(0.0, 0.3)
        assert default_camera.eye[1] < 0.0

    def test_orbit_preserves_distance(self, default_camera):
        """Test |eye - center| is constant over many orbits."""
        rng = np.random.default_rng(3)
        start = default_camera.distance

        for _ in range(200):
            yaw, pitch = rng.uniform(-0.6, 0.6, size=2)
            default_camera.orbit(yaw, pitch)
            assert abs(default_camera.distance - start) < 1e-9
            _assert_orthonormal(default_camera)

    def test_full_yaw_circle_returns_to_start(self, default_camera):
        """Test that 2*pi of yaw ends where it started."""
        start = default_camera.eye.copy()
        for _ in range(20):
            default_camera.orbit(2.0 * math.pi / 20, 0.0)
        assert np.allclose(default_camera.eye, start, atol=1e-9)

    def test_pitch_is_clamped_at_the_pole(self, default_camera):
        """Test that pitching past the pole stops short of it."""
        from teddycast.camera.orbit import MIN_POLAR_ANGLE

        default_camera.orbit(0.0, -10.0)

        assert abs(default_camera.eye[1] - 5.0 * math.cos(MIN_POLAR_ANGLE)) < 1e-9
        assert abs(default_camera.distance - 5.0) < 1e-9
        _assert_orthonormal(default_camera)

    def test_repeated_pitch_never_degenerates(self, default_camera):
        """Test that holding the pitch key keeps the basis valid."""
        for _ in range(50):
            default_camera.orbit(0.0, 0.4)
            _assert_orthonormal(default_camera)
            assert np.all(np.isfinite(default_camera.eye))
        assert default_camera.eye[1] < -4.9

    def test_yaw_at_clamped_pole(self, default_camera):
        """Test yaw still works while the eye sits near the pole."""
        default_camera.orbit(0.0, -10.0)
        default_camera.orbit(1.0, 0.0)
        _assert_orthonormal(default_camera)
        assert abs(default_camera.distance - 5.0) < 1e-9

    def test_repr(self, default_camera):
        """Test the debug representation."""
        assert "OrbitCamera(eye=[0.0, 0.0, 0.0]" in repr(default_camera)

"""Orbit camera with an orthonormal look-at basis.

The camera is placed at ``eye`` and looks at ``center``. From the view
parameters it builds the basis used to turn camera-space ray directions
into world space:

- forward: points from eye toward center
- right: forward x up, normalized
- true_up: right x forward

Camera space follows the usual convention: +x right, +y up, and the view
direction is -z, so ``basis_change((0, 0, -1))`` is ``forward``.

``orbit`` swings the eye around the center on a sphere of constant radius.
The polar angle between the eye offset and world up is clamped so the
eye can never pass over a pole, where forward and up would be parallel.

Example:
    >>> from teddycast.camera.orbit import OrbitCamera
    >>> camera = OrbitCamera(
    ...     eye=(0.0, 0.0, 0.0),
    ...     center=(0.0, 0.0, -5.0),
    ...     up=(0.0, 1.0, 0.0),
    ... )
    >>> camera.orbit(0.1, 0.0)
    >>> round(camera.distance, 6)
    5.0
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from teddycast.core.vector import (
    EPSILON,
    Vec3,
    as_vec3,
    cross,
    dot,
    length,
    normalize,
    rotate_about_axis,
)

# Closest the eye may come to the world up axis, in radians
MIN_POLAR_ANGLE = 0.01


class OrbitCamera:
    """A look-at camera that orbits its target.

    Attributes:
        eye: Camera position in world space.
        center: Point the camera looks at (the orbit target).
        up: Up hint; also the world axis the camera yaws around.
        forward: Unit vector from eye toward center.
        right: Unit vector pointing right in the image plane.
        true_up: Unit vector pointing up in the image plane.
    """

    def __init__(
        self,
        eye: Sequence[float],
        center: Sequence[float],
        up: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> None:
        """Create a camera and compute its basis.

        Args:
            eye: Camera position (x, y, z).
            center: Look-at target (x, y, z).
            up: Up direction hint (typically (0, 1, 0)).

        Raises:
            ValueError: If eye equals center, up is zero, or up is parallel
                to the view direction.
        """
        self.eye: Vec3 = as_vec3(eye)
        self.center: Vec3 = as_vec3(center)
        self.up: Vec3 = as_vec3(up)

        if length(self.up) < EPSILON:
            raise ValueError("Camera up vector must be non-zero")
        if length(self.center - self.eye) < EPSILON:
            raise ValueError("Camera eye and center must differ")

        self.forward: Vec3
        self.right: Vec3
        self.true_up: Vec3
        self.update_basis_vectors()

    def __repr__(self) -> str:
        return (
            f"OrbitCamera(eye={self.eye.tolist()}, center={self.center.tolist()}, "
            f"up={self.up.tolist()})"
        )

    @property
    def distance(self) -> float:
        """Distance from the eye to the orbit target."""
        return length(self.eye - self.center)

    def update_basis_vectors(self) -> None:
        """Recompute forward, right and true_up from eye, center and up.

        Raises:
            ValueError: If up is parallel to the view direction.
        """
        forward = normalize(self.center - self.eye)
        right = cross(forward, self.up)
        if length(right) < 1e-9:
            raise ValueError("Camera up vector is parallel to the view direction")

        self.forward = forward
        self.right = normalize(right)
        self.true_up = cross(self.right, self.forward)

    def basis_change(self, vector: Sequence[float] | Vec3) -> Vec3:
        """Transform a camera-space direction into world space.

        Args:
            vector: Direction in camera space (+x right, +y up, -z forward).

        Returns:
            The same direction expressed in world coordinates.
        """
        v = np.asarray(vector, dtype=np.float64)
        return v[0] * self.right + v[1] * self.true_up - v[2] * self.forward

    def orbit(self, yaw_delta: float, pitch_delta: float) -> None:
        """Rotate the eye around the center, keeping its distance.

        Args:
            yaw_delta: Rotation about world up in radians. Positive values
                swing the eye toward the camera's left.
            pitch_delta: Rotation about the camera's right axis in radians.
                Positive values lower the eye, negative values raise it.
        """
        world_up = normalize(self.up)
        offset = self.eye - self.center
        radius = length(offset)

        offset = rotate_about_axis(offset, world_up, -yaw_delta)

        direction = offset / radius
        polar = math.acos(max(-1.0, min(1.0, dot(direction, world_up))))
        target = max(MIN_POLAR_ANGLE, min(math.pi - MIN_POLAR_ANGLE, polar + pitch_delta))
        pitch = target - polar

        if pitch != 0.0:
            axis = cross(-direction, world_up)
            if length(axis) < EPSILON:
                # Eye sits on the pole; fall back to the current right axis
                axis = self.right
            offset = rotate_about_axis(offset, normalize(axis), pitch)

        # Rescale to cancel rounding drift over many orbits
        self.eye = self.center + offset * (radius / length(offset))
        self.update_basis_vectors()

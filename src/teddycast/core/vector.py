"""Vector utilities for Python-side ray casting.

Vectors are NumPy float64 arrays of shape (3,). These helpers are used by
the reference renderer, the sphere primitive and the orbit camera; Taichi
kernels use ``taichi.math`` directly.

Example:
    >>> from teddycast.core.vector import vec3, normalize
    >>> direction = normalize(vec3(0.0, 0.0, -2.0))
    >>> direction.tolist()
    [0.0, 0.0, -1.0]
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

Vec3 = npt.NDArray[np.float64]

# Vectors shorter than this are treated as zero
EPSILON = 1e-12


def vec3(x: float, y: float, z: float) -> Vec3:
    """Create a 3D vector."""
    return np.array((x, y, z), dtype=np.float64)


def as_vec3(value: Sequence[float] | Vec3) -> Vec3:
    """Convert a tuple, list or array to a float64 vector.

    Raises:
        ValueError: If the value does not have exactly three components.
    """
    result = np.asarray(value, dtype=np.float64)
    if result.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {result.shape}")
    return result


def zero() -> Vec3:
    """Return the zero vector."""
    return np.zeros(3, dtype=np.float64)


def length(v: Vec3) -> float:
    """Compute the Euclidean length of a vector."""
    return float(np.linalg.norm(v))


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product a . b."""
    return float(np.dot(a, b))


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product a x b."""
    return np.cross(a, b)


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.
        If v is zero-length, returns a zero vector.
    """
    norm = np.linalg.norm(v)
    if norm < EPSILON:
        return zero()
    return v / norm


def rotate_about_axis(v: Vec3, axis: Vec3, angle: float) -> Vec3:
    """Rotate a vector about a unit axis (Rodrigues' rotation formula).

    Positive angles rotate counter-clockwise when looking down the axis
    toward the origin (right-hand rule).

    Args:
        v: The vector to rotate.
        axis: The rotation axis (must be unit length).
        angle: Rotation angle in radians.

    Returns:
        The rotated vector. Its length equals the length of v.
    """
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    return v * cos_a + np.cross(axis, v) * sin_a + axis * np.dot(axis, v) * (1.0 - cos_a)

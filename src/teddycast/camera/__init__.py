"""Camera module for view basis and orbit controls.

Components:
    orbit: Look-at camera that orbits its target

Camera responsibilities:
    - Build an orthonormal basis (forward, right, true_up) from eye/center/up
    - Map camera-space ray directions into world space (basis_change)
    - Orbit the eye around the target at constant distance
"""

from .orbit import MIN_POLAR_ANGLE, OrbitCamera

__all__ = [
    "OrbitCamera",
    "MIN_POLAR_ANGLE",
]

"""Bear face ("Osito Teddy") scene.

The scene is nine spheres seen from the origin looking down -z:

- Head: brown sphere at (0, 0, -5)
- Ears: brown spheres at (+/-0.75, 0.75, -5) with white inner ears slightly
  in front of them
- Eyes: small black spheres in front of the head
- Nose: black sphere below the eyes
- Muzzle: white sphere partly sunk into the head, behind the nose

The scene is an immutable tuple built once; the order matters only for exact
distance ties, where the earlier sphere wins.

Example:
    >>> from teddycast.scene.bear import create_bear_scene
    >>> objects, camera = create_bear_scene()
    >>> len(objects)
    9
"""

from __future__ import annotations

from teddycast.camera.orbit import OrbitCamera
from teddycast.core.color import Color
from teddycast.geometry.intersect import Material
from teddycast.geometry.sphere import Sphere

# =============================================================================
# Bear Materials
# =============================================================================

FUR_COLOR = Color(139, 69, 19)
EYE_COLOR = Color(0, 0, 0)
NOSE_COLOR = Color(0, 0, 0)
INNER_EAR_COLOR = Color(255, 255, 255)
MUZZLE_COLOR = Color(255, 255, 255)

FUR = Material(diffuse=FUR_COLOR)
EYE = Material(diffuse=EYE_COLOR)
NOSE = Material(diffuse=NOSE_COLOR)
INNER_EAR = Material(diffuse=INNER_EAR_COLOR)
MUZZLE = Material(diffuse=MUZZLE_COLOR)

# =============================================================================
# Camera Defaults
# =============================================================================

CAMERA_EYE = (0.0, 0.0, 0.0)
CAMERA_CENTER = (0.0, 0.0, -5.0)
CAMERA_UP = (0.0, 1.0, 0.0)


def create_bear_objects() -> tuple[Sphere, ...]:
    """Build the spheres that make up the bear face.

    Returns:
        The scene primitives in draw-test order.
    """
    return (
        # Head
        Sphere(center=(0.0, 0.0, -5.0), radius=1.0, material=FUR),
        # Left ear
        Sphere(center=(-0.75, 0.75, -5.0), radius=0.5, material=FUR),
        Sphere(center=(-0.75, 0.75, -4.75), radius=0.3, material=INNER_EAR),
        # Right ear
        Sphere(center=(0.75, 0.75, -5.0), radius=0.5, material=FUR),
        Sphere(center=(0.75, 0.75, -4.75), radius=0.3, material=INNER_EAR),
        # Eyes
        Sphere(center=(-0.45, 0.1, -4.2), radius=0.15, material=EYE),
        Sphere(center=(0.45, 0.1, -4.2), radius=0.15, material=EYE),
        # Nose
        Sphere(center=(0.0, -0.3, -4.2), radius=0.25, material=NOSE),
        # Muzzle
        Sphere(center=(0.0, -0.4, -4.5), radius=0.5, material=MUZZLE),
    )


def create_bear_camera() -> OrbitCamera:
    """Create the default camera: at the origin, facing the bear."""
    return OrbitCamera(eye=CAMERA_EYE, center=CAMERA_CENTER, up=CAMERA_UP)


def create_bear_scene() -> tuple[tuple[Sphere, ...], OrbitCamera]:
    """Create the bear face scene and its default camera.

    Returns:
        A tuple of (objects, camera).
    """
    return create_bear_objects(), create_bear_camera()

"""Scene module for scene authoring and Taichi-side storage.

Components:
    bear: The bear face scene (spheres, materials and default camera)
    intersection: Taichi fields holding spheres and the nearest-hit query

Scene data for kernels is organized for GPU-friendly access:
    - Structure-of-Arrays layout for sphere centers and radii
    - Packed 24-bit material colors

Note: importing this package allocates Taichi fields; call ti.init() first.
"""

from .bear import (
    CAMERA_CENTER,
    CAMERA_EYE,
    CAMERA_UP,
    FUR,
    FUR_COLOR,
    create_bear_camera,
    create_bear_objects,
    create_bear_scene,
)
from .intersection import (
    MAX_SPHERES,
    SceneHitRecord,
    add_sphere,
    clear_scene,
    get_sphere_count,
    intersect_scene,
    load_spheres,
)

__all__ = [
    # Bear scene
    "create_bear_scene",
    "create_bear_objects",
    "create_bear_camera",
    "CAMERA_EYE",
    "CAMERA_CENTER",
    "CAMERA_UP",
    "FUR",
    "FUR_COLOR",
    # Intersection module
    "SceneHitRecord",
    "add_sphere",
    "clear_scene",
    "load_spheres",
    "get_sphere_count",
    "intersect_scene",
    "MAX_SPHERES",
]

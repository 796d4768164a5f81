"""Geometry module for primitives and ray intersection.

Components:
    intersect: Material, Intersect hit record and the RayIntersect protocol
    sphere: Sphere primitive with analytic intersection (Python and Taichi)

Every primitive implements:
    hit = primitive.ray_intersect(origin, unit_direction)
"""

from .intersect import Intersect, Material, RayIntersect
from .sphere import HitRecord, Sphere, hit_sphere, make_sphere

__all__ = [
    "Intersect",
    "Material",
    "RayIntersect",
    "Sphere",
    "HitRecord",
    "hit_sphere",
    "make_sphere",
]

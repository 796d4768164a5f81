"""Sphere primitive with analytic ray-sphere intersection.

The intersection projects the center offset onto the ray to find the
closest approach ``tca``, rejects rays whose perpendicular distance exceeds
the radius, and then steps back and forth by the half chord ``thc``:

    L   = center - origin
    tca = L . direction
    d2  = |L|^2 - tca^2          (miss if d2 > radius^2)
    thc = sqrt(radius^2 - d2)
    t0  = tca - thc, t1 = tca + thc

The near root ``t0`` is used unless it lies at or behind the origin, in which
case the far root ``t1`` is used (origin inside the sphere). If both are
behind the origin there is no hit.

Two versions are provided: ``Sphere.ray_intersect`` for the Python reference
renderer and ``hit_sphere`` for Taichi kernels.

Example:
    >>> from teddycast.core.vector import vec3
    >>> from teddycast.geometry.sphere import Sphere
    >>> sphere = Sphere(center=(0.0, 0.0, -5.0), radius=1.0)
    >>> hit = sphere.ray_intersect(vec3(0, 0, 0), vec3(0, 0, -1))
    >>> hit.distance
    4.0
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import taichi as ti
import taichi.math as tm

from teddycast.core.vector import Vec3, as_vec3, normalize
from teddycast.geometry.intersect import Intersect, Material

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point, radius and material.

    Attributes:
        center: The center point of the sphere (x, y, z).
        radius: The radius of the sphere (positive float).
        material: The sphere's flat material.
    """

    center: tuple[float, float, float]
    radius: float
    material: Material = field(default_factory=Material)
    _center: Vec3 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        center = as_vec3(self.center)
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")
        object.__setattr__(self, "center", tuple(float(c) for c in center))
        object.__setattr__(self, "_center", center)

    def ray_intersect(self, origin: Vec3, direction: Vec3) -> Intersect:
        """Intersect a ray with the sphere.

        Args:
            origin: Ray origin in world space.
            direction: Unit-length ray direction.

        Returns:
            The nearest hit with positive distance, or Intersect.empty().
        """
        oc = self._center - origin
        tca = float(oc @ direction)
        d2 = float(oc @ oc) - tca * tca
        radius2 = self.radius * self.radius
        if d2 > radius2:
            return Intersect.empty()

        thc = math.sqrt(radius2 - d2)
        t = tca - thc
        if t <= 0.0:
            t = tca + thc
        if t <= 0.0:
            return Intersect.empty()

        point = origin + direction * t
        return Intersect(
            is_intersecting=True,
            distance=t,
            point=point,
            normal=normalize(point - self._center),
            material=self.material,
        )


def make_sphere(
    center: Sequence[float], radius: float, material: Material | None = None
) -> Sphere:
    """Create a sphere, defaulting to a black material."""
    return Sphere(
        center=tuple(center),
        radius=radius,
        material=material if material is not None else Material(),
    )


@ti.dataclass
class HitRecord:
    """Record of a ray-sphere intersection inside a Taichi kernel.

    Mirrors ``Intersect``. The flat-shaded scene query only reads ``hit``
    and ``t``; point and normal are there for kernels that shade.

    Attributes:
        hit: 1 if the ray intersected the sphere, 0 otherwise.
        t: Distance along the ray. Only valid if hit == 1.
        point: The hit point. Only valid if hit == 1.
        normal: Unit outward normal at the hit point. Only valid if hit == 1.
    """

    hit: ti.i32
    t: ti.f32
    point: vec3
    normal: vec3


@ti.func
def hit_sphere(ray_origin: vec3, ray_direction: vec3, center: vec3, radius: ti.f32) -> HitRecord:
    """Taichi version of Sphere.ray_intersect.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The unit direction of the ray.
        center: The sphere center.
        radius: The sphere radius.

    Returns:
        A HitRecord; check the hit field to see whether it is valid.
    """
    # Initialize result fields (Taichi requires outer-scope declaration)
    did_hit = 0
    hit_t = 0.0
    hit_point = vec3(0.0, 0.0, 0.0)
    hit_normal = vec3(0.0, 0.0, 0.0)

    oc = center - ray_origin
    tca = tm.dot(oc, ray_direction)
    d2 = tm.dot(oc, oc) - tca * tca
    radius2 = radius * radius

    if d2 <= radius2:
        thc = ti.sqrt(radius2 - d2)
        t = tca - thc
        if t <= 0.0:
            t = tca + thc
        if t > 0.0:
            did_hit = 1
            hit_t = t
            hit_point = ray_origin + t * ray_direction
            hit_normal = tm.normalize(hit_point - center)

    return HitRecord(hit=did_hit, t=hit_t, point=hit_point, normal=hit_normal)

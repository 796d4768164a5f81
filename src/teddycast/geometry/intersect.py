"""Hit records and the ray-intersection protocol shared by all primitives.

Every primitive the renderer can draw implements ``RayIntersect``: given a
ray origin and a unit direction it returns an ``Intersect`` describing the
nearest hit in front of the origin. The renderer only depends on this
protocol, so new primitive types need no renderer changes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from teddycast.core.color import BLACK, Color
from teddycast.core.vector import Vec3, zero


@dataclass(frozen=True)
class Material:
    """Surface appearance of a primitive.

    Only a flat diffuse color is supported; there is no lighting model.

    Attributes:
        diffuse: The color returned for any ray that hits the surface.
    """

    diffuse: Color = BLACK


@dataclass
class Intersect:
    """Record of a ray-primitive intersection.

    Attributes:
        is_intersecting: Whether the ray hit the primitive.
        distance: Distance along the ray to the hit. Only meaningful when
            is_intersecting is True; +inf otherwise.
        point: The hit point in world space.
        normal: Unit surface normal at the hit point, pointing outward.
        material: Material of the primitive that was hit.
    """

    is_intersecting: bool
    distance: float
    point: Vec3 = field(default_factory=zero)
    normal: Vec3 = field(default_factory=zero)
    material: Material = field(default_factory=Material)

    @classmethod
    def empty(cls) -> Intersect:
        """Create the no-hit sentinel."""
        return cls(is_intersecting=False, distance=math.inf)


@runtime_checkable
class RayIntersect(Protocol):
    """Anything a ray can be tested against."""

    def ray_intersect(self, origin: Vec3, direction: Vec3) -> Intersect:
        """Return the nearest intersection with positive distance.

        Args:
            origin: Ray origin in world space.
            direction: Unit-length ray direction.

        Returns:
            An Intersect; Intersect.empty() when there is no hit in front of
            the origin.
        """
        ...

"""Taichi-side sphere storage and nearest-hit queries.

The kernel renderer cannot call Python objects, so scene spheres are copied
into Taichi fields once at start-up. Materials are stored as packed 24-bit
colors because flat shading needs nothing else.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from teddycast.scene.bear import create_bear_objects
    >>> from teddycast.scene.intersection import load_spheres, get_sphere_count
    >>> load_spheres(create_bear_objects())
    >>> get_sphere_count()
    9
"""

from collections.abc import Iterable

import taichi as ti
import taichi.math as tm

from teddycast.geometry.sphere import Sphere, hit_sphere

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.dataclass
class SceneHitRecord:
    """Record of a ray-scene intersection with the hit material color.

    Attributes:
        hit: 1 if any sphere was hit, 0 otherwise.
        t: Distance to the nearest hit. Only valid if hit == 1.
        color: Packed diffuse color (0xRRGGBB) of the hit sphere.
    """

    hit: ti.i32
    t: ti.f32
    color: ti.u32


# Maximum number of spheres supported in the scene
MAX_SPHERES = 1024

# Sphere storage: Structure of Arrays layout
sphere_centers = ti.Vector.field(3, dtype=ti.f32, shape=MAX_SPHERES)
sphere_radii = ti.field(dtype=ti.f32, shape=MAX_SPHERES)
sphere_colors = ti.field(dtype=ti.u32, shape=MAX_SPHERES)
num_spheres = ti.field(dtype=ti.i32, shape=())


def clear_scene() -> None:
    """Remove all spheres.

    Only the count is reset; stale field data is overwritten by later adds.
    """
    num_spheres[None] = 0


def add_sphere(sphere: Sphere) -> int:
    """Append a sphere to the Taichi scene.

    Args:
        sphere: The sphere to copy.

    Returns:
        The index of the added sphere.

    Raises:
        RuntimeError: If the maximum number of spheres is exceeded.
    """
    idx = num_spheres[None]
    if idx >= MAX_SPHERES:
        raise RuntimeError(f"Maximum number of spheres ({MAX_SPHERES}) exceeded")
    sphere_centers[idx] = list(sphere.center)
    sphere_radii[idx] = sphere.radius
    sphere_colors[idx] = sphere.material.diffuse.to_hex()
    num_spheres[None] = idx + 1
    return idx


def load_spheres(spheres: Iterable[Sphere]) -> None:
    """Replace the Taichi scene with the given spheres, keeping their order."""
    clear_scene()
    for sphere in spheres:
        add_sphere(sphere)


def get_sphere_count() -> int:
    """Get the number of spheres in the scene."""
    return int(num_spheres[None])


@ti.func
def _make_miss_record() -> SceneHitRecord:
    return SceneHitRecord(
        hit=0,
        t=0.0,
        color=ti.u32(0),
    )


@ti.func
def intersect_scene(ray_origin: vec3, ray_direction: vec3) -> SceneHitRecord:
    """Test a ray against every sphere and keep the nearest hit.

    Spheres are tested in insertion order and a hit only replaces the
    current one when strictly closer, so the first sphere wins ties.

    Args:
        ray_origin: The starting point of the ray.
        ray_direction: The unit direction of the ray.

    Returns:
        The nearest SceneHitRecord, or a miss record.
    """
    closest_t = tm.inf
    result = _make_miss_record()

    for i in range(num_spheres[None]):
        rec = hit_sphere(ray_origin, ray_direction, sphere_centers[i], sphere_radii[i])
        if rec.hit == 1 and rec.t < closest_t:
            closest_t = rec.t
            result = SceneHitRecord(
                hit=1,
                t=rec.t,
                color=sphere_colors[i],
            )

    return result

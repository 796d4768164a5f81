"""Reference ray-casting renderer.

This module implements the per-pixel pipeline in plain Python:

1. Map pixel (x, y) to normalized device coordinates in [-1, 1], with y
   flipped so row 0 is the top of the screen.
2. Correct for aspect ratio and scale by tan(fov / 2).
3. Build the camera-space direction (sx, sy, -1), normalize it and move it
   into world space with the camera basis.
4. Intersect the ray with every object and keep the nearest hit.
5. Write the hit material's diffuse color (or the background) into the
   framebuffer.

Shading is flat: no light, angle or distance attenuation is applied, so a
pixel's color is exactly its material's diffuse color.

The renderer only needs objects implementing ``RayIntersect``, a camera
exposing ``eye`` and ``basis_change``, and a sink exposing
``set_current_color`` and ``point``.

Example:
    >>> from teddycast.camera.orbit import OrbitCamera
    >>> from teddycast.core.framebuffer import Framebuffer
    >>> from teddycast.core.renderer import render
    >>> from teddycast.scene.bear import create_bear_scene
    >>> objects, camera = create_bear_scene()
    >>> fb = Framebuffer(80, 60)
    >>> render(fb, objects, camera)
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from teddycast.core.color import Color
from teddycast.core.vector import Vec3, normalize, vec3
from teddycast.geometry.intersect import Intersect, RayIntersect

if TYPE_CHECKING:
    from teddycast.camera.orbit import OrbitCamera

# Color returned for rays that hit nothing
BACKGROUND_COLOR = Color(120, 180, 130)

# Vertical field of view
FOV = math.pi / 3.0


class PixelSink(Protocol):
    """Anything the renderer can draw into."""

    width: int
    height: int

    def set_current_color(self, packed: int) -> None: ...

    def point(self, x: int, y: int) -> None: ...


def perspective_scale(fov: float = FOV) -> float:
    """Half-height of the image plane at unit distance."""
    return math.tan(fov * 0.5)


def screen_direction(x: int, y: int, width: int, height: int, fov: float = FOV) -> Vec3:
    """Compute the camera-space unit direction through pixel (x, y).

    Args:
        x: Pixel column (0 = left).
        y: Pixel row (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Vertical field of view in radians.

    Returns:
        A unit vector in camera space; the image center maps to (0, 0, -1).
    """
    scale = perspective_scale(fov)
    aspect_ratio = width / height

    screen_x = (2.0 * x) / width - 1.0
    screen_y = -(2.0 * y) / height + 1.0

    screen_x = screen_x * aspect_ratio * scale
    screen_y = screen_y * scale

    return normalize(vec3(screen_x, screen_y, -1.0))


def nearest_intersect(
    origin: Vec3, direction: Vec3, objects: Sequence[RayIntersect]
) -> Intersect:
    """Find the closest hit along a ray.

    Objects are tested in order; a hit replaces the current one only when
    it is strictly closer, so the first object wins ties.

    Args:
        origin: Ray origin.
        direction: Unit ray direction.
        objects: Scene primitives.

    Returns:
        The nearest Intersect, or Intersect.empty() if nothing was hit.
    """
    intersect = Intersect.empty()
    zbuffer = math.inf

    for obj in objects:
        candidate = obj.ray_intersect(origin, direction)
        if candidate.is_intersecting and candidate.distance < zbuffer:
            zbuffer = candidate.distance
            intersect = candidate

    return intersect


def cast_ray(origin: Vec3, direction: Vec3, objects: Sequence[RayIntersect]) -> Color:
    """Cast a ray into the scene and resolve its color.

    Args:
        origin: Ray origin.
        direction: Unit ray direction.
        objects: Scene primitives.

    Returns:
        BACKGROUND_COLOR on a miss, otherwise the diffuse color of the
        nearest hit.
    """
    intersect = nearest_intersect(origin, direction, objects)
    if not intersect.is_intersecting:
        return BACKGROUND_COLOR
    return intersect.material.diffuse


def render(
    framebuffer: PixelSink,
    objects: Sequence[RayIntersect],
    camera: OrbitCamera,
    fov: float = FOV,
) -> None:
    """Redraw every pixel of the framebuffer.

    Pixels are processed row by row on the calling thread.

    Args:
        framebuffer: Destination exposing width, height, set_current_color
            and point.
        objects: Scene primitives.
        camera: Camera providing eye and basis_change.
        fov: Vertical field of view in radians (default 60 degrees).
    """
    width = framebuffer.width
    height = framebuffer.height

    for y in range(height):
        for x in range(width):
            direction = screen_direction(x, y, width, height, fov)
            world_direction = camera.basis_change(direction)

            pixel_color = cast_ray(camera.eye, world_direction, objects)

            framebuffer.set_current_color(pixel_color.to_hex())
            framebuffer.point(x, y)


class ReferenceRenderer:
    """Binds a scene to render() with the same interface as KernelRenderer."""

    def __init__(self, objects: Sequence[RayIntersect], fov: float = FOV) -> None:
        self.objects = tuple(objects)
        self.fov = fov

    def render(self, framebuffer: PixelSink, camera: OrbitCamera) -> None:
        render(framebuffer, self.objects, camera, self.fov)

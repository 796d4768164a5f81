"""Core rendering module.

This module contains the fundamental building blocks for ray casting:

Components:
    color: 8-bit RGB colors and 24-bit packing
    framebuffer: Fixed-size packed pixel buffer
    vector: NumPy vector helpers
    renderer: Reference cast_ray / render pipeline
    accelerated: Taichi kernel renderer
    errors: Error taxonomy

Shading is flat: a ray's color is the diffuse color of the nearest surface
it hits, or the background color when it hits nothing.
"""

from .color import BLACK, WHITE, Color
from .errors import DisplayInitError, IndexOutOfBounds, InvalidDimensions, TeddycastError
from .framebuffer import Framebuffer
from .renderer import (
    BACKGROUND_COLOR,
    FOV,
    ReferenceRenderer,
    cast_ray,
    nearest_intersect,
    perspective_scale,
    render,
    screen_direction,
)
from .vector import cross, dot, length, normalize, rotate_about_axis, vec3

# Note: accelerated is NOT imported here because it allocates Taichi fields.
# Import it directly after ti.init():
#   from teddycast.core.accelerated import KernelRenderer

__all__ = [
    "Color",
    "BLACK",
    "WHITE",
    "Framebuffer",
    "TeddycastError",
    "DisplayInitError",
    "InvalidDimensions",
    "IndexOutOfBounds",
    "BACKGROUND_COLOR",
    "FOV",
    "ReferenceRenderer",
    "cast_ray",
    "nearest_intersect",
    "perspective_scale",
    "render",
    "screen_direction",
    "vec3",
    "length",
    "dot",
    "cross",
    "normalize",
    "rotate_about_axis",
]

"""Taichi kernel renderer.

Renders the same image as ``teddycast.core.renderer.render`` but runs the
pixel loop as a compiled Taichi kernel. Spheres are copied into Taichi
fields when the renderer is created (the scene never changes afterwards);
the camera basis is copied into scalar fields before every frame. The
kernel writes packed colors straight into the framebuffer's NumPy buffer.

The pixel loop is serialized, so a frame is still a single sequential pass
over every pixel. Results match the reference renderer except for float32
rounding on sphere silhouettes.

Scenes containing primitives other than ``Sphere`` cannot be uploaded;
they are drawn with the reference renderer instead.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from teddycast.core.accelerated import KernelRenderer
    >>> from teddycast.core.framebuffer import Framebuffer
    >>> from teddycast.scene.bear import create_bear_scene
    >>> objects, camera = create_bear_scene()
    >>> renderer = KernelRenderer(objects)
    >>> fb = Framebuffer(800, 600)
    >>> renderer.render(fb, camera)
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import taichi as ti
import taichi.math as tm

from teddycast.core import renderer as reference
from teddycast.geometry.intersect import RayIntersect
from teddycast.geometry.sphere import Sphere
from teddycast.scene.intersection import intersect_scene, load_spheres

if TYPE_CHECKING:
    from teddycast.camera.orbit import OrbitCamera
    from teddycast.core.framebuffer import Framebuffer

logger = logging.getLogger(__name__)

vec3 = tm.vec3

# =============================================================================
# Taichi Fields for Camera State
# =============================================================================

_camera_eye = ti.Vector.field(3, dtype=ti.f32, shape=())
_camera_right = ti.Vector.field(3, dtype=ti.f32, shape=())
_camera_up = ti.Vector.field(3, dtype=ti.f32, shape=())
_camera_forward = ti.Vector.field(3, dtype=ti.f32, shape=())


def upload_camera(camera: "OrbitCamera") -> None:
    """Copy the camera eye and basis into Taichi fields."""
    _camera_eye[None] = camera.eye.tolist()
    _camera_right[None] = camera.right.tolist()
    _camera_up[None] = camera.true_up.tolist()
    _camera_forward[None] = camera.forward.tolist()


@ti.kernel
def _render_kernel(
    pixels: ti.types.ndarray(dtype=ti.u32, ndim=1),
    width: ti.i32,
    height: ti.i32,
    perspective_scale: ti.f32,
    background: ti.u32,
):
    eye = _camera_eye[None]
    right = _camera_right[None]
    up = _camera_up[None]
    forward = _camera_forward[None]
    aspect_ratio = ti.cast(width, ti.f32) / ti.cast(height, ti.f32)

    ti.loop_config(serialize=True)
    for y, x in ti.ndrange(height, width):
        screen_x = (2.0 * ti.cast(x, ti.f32)) / ti.cast(width, ti.f32) - 1.0
        screen_y = -(2.0 * ti.cast(y, ti.f32)) / ti.cast(height, ti.f32) + 1.0

        screen_x = screen_x * aspect_ratio * perspective_scale
        screen_y = screen_y * perspective_scale

        d = tm.normalize(vec3(screen_x, screen_y, -1.0))
        direction = d.x * right + d.y * up - d.z * forward

        rec = intersect_scene(eye, direction)
        color = background
        if rec.hit == 1:
            color = rec.color
        pixels[y * width + x] = color


class KernelRenderer:
    """Renders a fixed scene with a Taichi kernel.

    Sphere data lives in module-level Taichi fields, so only the most
    recently created renderer holds a valid scene.

    Attributes:
        objects: The scene primitives, in order.
        fov: Vertical field of view in radians.
        uses_kernel: False when the scene could not be uploaded and frames
            are drawn by the reference renderer.
    """

    def __init__(self, objects: Sequence[RayIntersect], fov: float = reference.FOV) -> None:
        """Upload the scene.

        Args:
            objects: Scene primitives. Only Sphere instances can be drawn by
                the kernel.
            fov: Vertical field of view in radians (default 60 degrees).
        """
        self.objects = tuple(objects)
        self.fov = fov
        self.uses_kernel = all(type(obj) is Sphere for obj in self.objects)

        if self.uses_kernel:
            load_spheres(self.objects)
            logger.debug("Uploaded %d spheres to Taichi fields", len(self.objects))
        else:
            unsupported = sorted(
                {type(obj).__name__ for obj in self.objects if type(obj) is not Sphere}
            )
            logger.warning(
                "Kernel renderer only supports spheres; using reference renderer for %s",
                ", ".join(unsupported),
            )

    def render(self, framebuffer: "Framebuffer", camera: "OrbitCamera") -> None:
        """Redraw every pixel of the framebuffer.

        Args:
            framebuffer: Destination buffer; its pixel array is overwritten.
            camera: Camera providing eye and basis.
        """
        if not self.uses_kernel:
            reference.render(framebuffer, self.objects, camera, self.fov)
            return

        upload_camera(camera)
        _render_kernel(
            framebuffer.buffer,
            framebuffer.width,
            framebuffer.height,
            reference.perspective_scale(self.fov),
            reference.BACKGROUND_COLOR.to_hex(),
        )

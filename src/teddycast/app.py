"""Application loop for the live bear viewer.

Each tick polls the held keys, orbits the camera, redraws the whole
framebuffer, presents it and sleeps for a fixed interval:

- Escape: quit
- Left / Right: orbit around the bear horizontally
- Up / Down: orbit over / under the bear

Orbit speed is expressed in radians per second and scaled by the measured
time between ticks, so it does not depend on how long a frame takes to
render. The sleep after each frame is fixed; render time is not subtracted.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from teddycast.app import AppConfig, Application
    >>> app = Application(AppConfig(width=800, height=600))
    >>> app.run()
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from teddycast.core.framebuffer import Framebuffer
from teddycast.core.renderer import FOV, ReferenceRenderer
from teddycast.preview.interactive import InteractivePreview, Key
from teddycast.scene.bear import create_bear_camera, create_bear_objects

if TYPE_CHECKING:
    from teddycast.camera.orbit import OrbitCamera
    from teddycast.geometry.intersect import RayIntersect

logger = logging.getLogger(__name__)

KeyState = Callable[[Key], bool]


@dataclass
class AppConfig:
    """Settings for the live viewer.

    Attributes:
        width: Framebuffer and window width in pixels.
        height: Framebuffer and window height in pixels.
        title: Window title.
        frame_delay: Seconds to sleep after presenting each frame.
        rotation_speed: Orbit speed in radians per second while a key is held.
        max_frame_time: Upper bound on the time step used for orbiting, so a
            stalled frame doesn't make the camera jump.
        fov: Vertical field of view in radians.
        use_kernel: Render with the Taichi kernel instead of the reference
            Python renderer.
    """

    width: int = 800
    height: int = 600
    title: str = "Osito Teddy"
    frame_delay: float = 0.016
    rotation_speed: float = math.pi
    max_frame_time: float = 0.1
    fov: float = FOV
    use_kernel: bool = True


class Renderer(Protocol):
    """Draws the scene it was built with into a framebuffer."""

    def render(self, framebuffer: Framebuffer, camera: OrbitCamera) -> None: ...


class Display(Protocol):
    """Display surface and key source driven by the application loop."""

    def is_running(self) -> bool: ...

    def is_pressed(self, key: Key) -> bool: ...

    def present(self, framebuffer: Framebuffer) -> None: ...

    def close(self) -> None: ...


class Application:
    """Owns the framebuffer, scene, camera and renderer of the viewer.

    Attributes:
        config: Viewer settings.
        framebuffer: The single frame buffer, redrawn every tick.
        objects: The immutable scene.
        camera: The orbit camera, mutated by tick().
        renderer: Kernel or reference renderer for the scene.
        frame_count: Number of frames rendered by run().
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        display: Display | None = None,
        objects: Sequence[RayIntersect] | None = None,
        camera: OrbitCamera | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Build the viewer.

        Args:
            config: Viewer settings (default: AppConfig()).
            display: Display surface; an InteractivePreview window is opened
                by run() when omitted.
            objects: Scene primitives (default: the bear face).
            camera: Initial camera (default: facing the bear).
            clock: Monotonic clock in seconds.
            sleep: Function used for frame pacing.
        """
        self.config = config if config is not None else AppConfig()
        self.framebuffer = Framebuffer(self.config.width, self.config.height)
        self.objects = tuple(objects) if objects is not None else create_bear_objects()
        self.camera = camera if camera is not None else create_bear_camera()
        self.display = display
        self.renderer = self._create_renderer()
        self.frame_count = 0
        self._clock = clock
        self._sleep = sleep

    def _create_renderer(self) -> Renderer:
        if self.config.use_kernel:
            from teddycast.core.accelerated import KernelRenderer

            return KernelRenderer(self.objects, fov=self.config.fov)
        return ReferenceRenderer(self.objects, fov=self.config.fov)

    def tick(self, is_pressed: KeyState, dt: float) -> bool:
        """Apply one frame of input.

        Args:
            is_pressed: Returns whether a logical key is held.
            dt: Seconds since the previous tick.

        Returns:
            False if the user asked to quit, True otherwise.
        """
        if is_pressed(Key.ESCAPE):
            return False

        step = self.config.rotation_speed * min(max(dt, 0.0), self.config.max_frame_time)
        if step == 0.0:
            return True

        if is_pressed(Key.LEFT):
            self.camera.orbit(step, 0.0)
        if is_pressed(Key.RIGHT):
            self.camera.orbit(-step, 0.0)
        if is_pressed(Key.UP):
            self.camera.orbit(0.0, -step)
        if is_pressed(Key.DOWN):
            self.camera.orbit(0.0, step)
        return True

    def render_frame(self) -> None:
        """Redraw the framebuffer from the current camera."""
        self.renderer.render(self.framebuffer, self.camera)

    def open_display(self) -> Display:
        """Open the preview window if no display was supplied.

        Raises:
            DisplayInitError: If the window cannot be created.
        """
        if self.display is None:
            preview = InteractivePreview(
                self.config.width, self.config.height, title=self.config.title
            )
            # Touch the window now so creation errors surface before the loop
            preview.is_running()
            self.display = preview
        return self.display

    def run(self, max_frames: int | None = None) -> int:
        """Run the loop until Escape, window close or max_frames.

        The display is closed when the loop ends, including on errors.

        Args:
            max_frames: Optional limit on the number of frames.

        Returns:
            The number of frames rendered.

        Raises:
            DisplayInitError: If the window cannot be created.
        """
        display = self.open_display()
        last = self._clock()

        try:
            while display.is_running():
                if max_frames is not None and self.frame_count >= max_frames:
                    break

                now = self._clock()
                dt = now - last
                last = now

                if not self.tick(display.is_pressed, dt):
                    logger.info("Escape pressed, leaving render loop")
                    break

                self.render_frame()
                try:
                    display.present(self.framebuffer)
                except RuntimeError as err:
                    logger.warning("Skipping frame %d: %s", self.frame_count, err)

                self.frame_count += 1
                self._sleep(self.config.frame_delay)
        finally:
            display.close()

        return self.frame_count

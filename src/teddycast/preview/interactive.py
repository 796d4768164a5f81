"""Interactive preview window using Taichi GGUI.

This module wraps ``ti.ui.Window`` as the display surface of the
application loop: it presents a framebuffer once per frame and reports
which logical keys are held.

Features:
    - Packed framebuffer upload through a Taichi kernel
    - Logical key polling (Escape and the arrow keys)
    - Headless detection before a window is opened

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from teddycast.core.framebuffer import Framebuffer
    >>> from teddycast.preview.interactive import InteractivePreview, Key
    >>>
    >>> preview = InteractivePreview(800, 600)
    >>> framebuffer = Framebuffer(800, 600)
    >>> while preview.is_running() and not preview.is_pressed(Key.ESCAPE):
    ...     preview.present(framebuffer)
"""

import logging
import os
import platform
from enum import Enum
from typing import TYPE_CHECKING

import taichi as ti

from teddycast.core.errors import DisplayInitError

if TYPE_CHECKING:
    from teddycast.core.framebuffer import Framebuffer

logger = logging.getLogger(__name__)


class Key(Enum):
    """Logical keys the application reacts to."""

    ESCAPE = "escape"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


# GGUI key names for each logical key
_GGUI_KEYS = {
    Key.ESCAPE: ti.ui.ESCAPE,
    Key.LEFT: ti.ui.LEFT,
    Key.RIGHT: ti.ui.RIGHT,
    Key.UP: ti.ui.UP,
    Key.DOWN: ti.ui.DOWN,
}


@ti.kernel
def _unpack_kernel(
    pixels: ti.types.ndarray(dtype=ti.u32, ndim=1),
    width: ti.i32,
    height: ti.i32,
    dst: ti.template(),
):
    for x, y in dst:
        # Taichi images have their origin at the bottom-left
        packed = pixels[(height - 1 - y) * width + x]
        dst[x, y] = ti.Vector(
            [
                ti.cast((packed >> 16) & 0xFF, ti.f32) / 255.0,
                ti.cast((packed >> 8) & 0xFF, ti.f32) / 255.0,
                ti.cast(packed & 0xFF, ti.f32) / 255.0,
            ]
        )


class InteractivePreview:
    """Interactive preview window using Taichi GGUI.

    The window itself is created lazily on first use so that the object can
    be constructed (and its display field filled) in headless tests.

    Attributes:
        width: Window width in pixels.
        height: Window height in pixels.
        display_image: Taichi field storing the display image (RGB float),
            indexed (x, y) with y = 0 at the bottom.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        title: str = "Osito Teddy",
        vsync: bool = False,
    ) -> None:
        """Set up the preview.

        Args:
            width: Window width in pixels.
            height: Window height in pixels.
            title: Window title (default: "Osito Teddy").
            vsync: Whether to sync presentation to the monitor refresh.
        """
        self.width = width
        self.height = height
        self._title = title
        self._vsync = vsync

        self._window: "ti.ui.Window | None" = None
        self._canvas: "ti.ui.Canvas | None" = None

        self.display_image: ti.MatrixField = ti.Vector.field(
            3, dtype=ti.f32, shape=(width, height)
        )

    def _initialize_window(self) -> None:
        """Create the GGUI window and canvas.

        Raises:
            DisplayInitError: If no display is available or the window
                could not be created.
        """
        if self._window is not None:
            return

        if not self.is_display_available():
            raise DisplayInitError("No display available for the preview window")

        try:
            window = ti.ui.Window(
                name=self._title,
                res=(self.width, self.height),
                vsync=self._vsync,
            )
            canvas = window.get_canvas()
        except Exception as err:
            raise DisplayInitError(f"Failed to create preview window: {err}") from err

        self._window = window
        self._canvas = canvas
        logger.info("Opened %dx%d preview window", self.width, self.height)

    @property
    def window(self) -> "ti.ui.Window":
        """Get the Taichi GGUI window, initializing if needed."""
        if self._window is None:
            self._initialize_window()
        assert self._window is not None
        return self._window

    @property
    def canvas(self) -> "ti.ui.Canvas":
        """Get the canvas for rendering."""
        if self._canvas is None:
            self._initialize_window()
        assert self._canvas is not None
        return self._canvas

    def update_image(self, framebuffer: "Framebuffer") -> None:
        """Copy a framebuffer into the display field.

        Args:
            framebuffer: Source framebuffer; must match the window size.

        Raises:
            ValueError: If the framebuffer size doesn't match the window.
        """
        if (framebuffer.width, framebuffer.height) != (self.width, self.height):
            raise ValueError(
                f"Framebuffer {framebuffer.width}x{framebuffer.height} doesn't match "
                f"window {self.width}x{self.height}"
            )
        _unpack_kernel(framebuffer.buffer, self.width, self.height, self.display_image)

    def present(self, framebuffer: "Framebuffer") -> None:
        """Show a framebuffer as the next frame."""
        self.update_image(framebuffer)
        self.canvas.set_image(self.display_image)
        self.window.show()

    def is_running(self) -> bool:
        """Check if the window is still open.

        Returns:
            True if the window is running, False if it should close.
        """
        return self.window.running

    def is_pressed(self, key: Key) -> bool:
        """Check whether a logical key is currently held."""
        return bool(self.window.is_pressed(_GGUI_KEYS[key]))

    def close(self) -> None:
        """Close the preview window.

        After calling this, the window cannot be reopened.
        """
        if self._window is not None:
            self._window.running = False

    @staticmethod
    def is_display_available() -> bool:
        """Check if a display is available for GUI rendering.

        Returns:
            True if a display is available, False for headless environments.
        """
        display = os.environ.get("DISPLAY")
        wayland = os.environ.get("WAYLAND_DISPLAY")
        system = platform.system()

        if system == "Darwin":
            # SSH sessions without X forwarding have no display
            if os.environ.get("SSH_CONNECTION") and not display:
                return False
            return True

        if system == "Windows":
            return True

        return bool(display or wayland)

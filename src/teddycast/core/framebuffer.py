"""Fixed-size pixel buffer with a current draw color.

The buffer is a flat, row-major NumPy array of packed 24-bit RGB values
(``0xRRGGBB``), ``width * height`` entries long. It is allocated once and
mutated in place by the renderers; it is never resized.

Example:
    >>> from teddycast.core.framebuffer import Framebuffer
    >>> fb = Framebuffer(4, 3)
    >>> fb.set_current_color(0xFF0000)
    >>> fb.point(1, 2)
    >>> hex(fb.get_point(1, 2))
    '0xff0000'
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from teddycast.core.errors import IndexOutOfBounds, InvalidDimensions

DEFAULT_BACKGROUND = 0x000000
DEFAULT_CURRENT_COLOR = 0xFFFFFF


class Framebuffer:
    """A width x height grid of packed RGB pixels.

    Attributes:
        width: Buffer width in pixels.
        height: Buffer height in pixels.
        buffer: Flat uint32 array of length width * height, row-major.
        current_color: Packed color written by point().
        background_color: Packed color written by clear().
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a framebuffer filled with the background color.

        Args:
            width: Width in pixels (positive).
            height: Height in pixels (positive).

        Raises:
            InvalidDimensions: If width or height is not a positive integer.
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidDimensions(f"Framebuffer {name} must be an int, got {value!r}")
            if value <= 0:
                raise InvalidDimensions(f"Framebuffer {name} must be positive, got {value}")

        self.width = int(width)
        self.height = int(height)
        self.background_color = DEFAULT_BACKGROUND
        self.current_color = DEFAULT_CURRENT_COLOR
        self.buffer: npt.NDArray[np.uint32] = np.full(
            self.width * self.height, self.background_color, dtype=np.uint32
        )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfBounds(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} framebuffer"
            )
        return y * self.width + x

    def set_current_color(self, packed: int) -> None:
        """Set the color used by subsequent point() calls."""
        self.current_color = int(packed) & 0xFFFFFF

    def set_background_color(self, packed: int) -> None:
        """Set the color used by clear()."""
        self.background_color = int(packed) & 0xFFFFFF

    def point(self, x: int, y: int) -> None:
        """Write the current color at (x, y).

        Raises:
            IndexOutOfBounds: If (x, y) lies outside the buffer.
        """
        self.buffer[self._index(x, y)] = self.current_color

    def get_point(self, x: int, y: int) -> int:
        """Return the packed color stored at (x, y).

        Raises:
            IndexOutOfBounds: If (x, y) lies outside the buffer.
        """
        return int(self.buffer[self._index(x, y)])

    def clear(self) -> None:
        """Fill the whole buffer with the background color."""
        self.buffer.fill(self.background_color)

    def to_rgb_array(self) -> npt.NDArray[np.uint8]:
        """Unpack the buffer into an (height, width, 3) uint8 image.

        Row 0 of the result is the top of the screen.
        """
        packed = self.buffer.reshape(self.height, self.width)
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (packed >> 16) & 0xFF
        rgb[..., 1] = (packed >> 8) & 0xFF
        rgb[..., 2] = packed & 0xFF
        return rgb

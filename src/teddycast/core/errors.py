"""Error types raised by the renderer and its window glue."""


class TeddycastError(Exception):
    """Base class for all teddycast errors."""


class DisplayInitError(TeddycastError, RuntimeError):
    """Creating the preview window or its drawing surface failed."""


class InvalidDimensions(TeddycastError, ValueError):
    """A framebuffer was requested with a non-positive width or height."""


class IndexOutOfBounds(TeddycastError, IndexError):
    """A pixel coordinate lies outside the framebuffer.

    The render loop derives its coordinates from the framebuffer size, so
    this always indicates a programming error in the caller.
    """

"""Matplotlib-based preview of framebuffer contents.

Example:
    >>> from teddycast.preview.display import show_framebuffer
    >>> show_framebuffer(framebuffer, title="Bear")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from teddycast.core.framebuffer import Framebuffer


def framebuffer_to_float(framebuffer: Framebuffer) -> npt.NDArray[np.float32]:
    """Convert a framebuffer into a float32 (H, W, 3) image in [0, 1].

    Row 0 of the result is the top of the screen, matching Matplotlib's
    default image origin.
    """
    return framebuffer.to_rgb_array().astype(np.float32) / 255.0


def show_framebuffer(
    framebuffer: Framebuffer,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display the framebuffer as a Matplotlib figure.

    Args:
        framebuffer: The framebuffer to show.
        title: Custom title (default shows the resolution).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    image = framebuffer.to_rgb_array()

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(image)
    ax.axis("off")

    if title is None:
        title = f"Render Preview - {framebuffer.width}x{framebuffer.height}"
    ax.set_title(title)

    plt.tight_layout()
    plt.show(block=block)

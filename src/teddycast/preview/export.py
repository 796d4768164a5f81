"""Image export utilities for rendered frames.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from teddycast.preview.export import save_png
    >>> save_png(framebuffer, "bear.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from teddycast.core.framebuffer import Framebuffer


def save_png(framebuffer: Framebuffer, filepath: str | Path) -> Path:
    """Save the framebuffer contents as a PNG file.

    Colors are written unchanged; the framebuffer already holds display
    values.

    Args:
        framebuffer: The framebuffer to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path that was written.
    """
    path = Path(filepath)
    PILImage.fromarray(framebuffer.to_rgb_array()).save(path)
    return path


def load_png(filepath: str | Path) -> npt.NDArray[np.uint8]:
    """Load a PNG file as an (H, W, 3) uint8 array."""
    with PILImage.open(filepath) as img:
        return np.asarray(img.convert("RGB"), dtype=np.uint8)


def compute_rmse(
    image_a: npt.NDArray[np.number],
    image_b: npt.NDArray[np.number],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(
            f"Image shapes must match: {image_a.shape} vs {image_b.shape}"
        )

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))

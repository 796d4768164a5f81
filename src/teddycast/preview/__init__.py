"""Preview module for output and visualization.

Components:
    display: Matplotlib-based static preview
    export: PNG export and image comparison
    interactive: Taichi GGUI window used by the application loop

Example:
    >>> from teddycast.preview import save_png, show_framebuffer
    >>> save_png(framebuffer, "bear.png")
    >>> show_framebuffer(framebuffer)

For the live window:
    >>> from teddycast.preview import InteractivePreview, Key
    >>> preview = InteractivePreview(800, 600)
    >>> preview.present(framebuffer)
"""

from teddycast.preview.display import framebuffer_to_float, show_framebuffer
from teddycast.preview.export import compute_rmse, load_png, save_png
from teddycast.preview.interactive import InteractivePreview, Key

__all__ = [
    # Interactive preview
    "InteractivePreview",
    "Key",
    # Display functions
    "show_framebuffer",
    "framebuffer_to_float",
    # Export functions
    "save_png",
    "load_png",
    "compute_rmse",
]

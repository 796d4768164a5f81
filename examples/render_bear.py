#!/usr/bin/env python3
"""Render the bear face scene to a PNG file.

This script renders a single frame without opening a window, optionally
orbiting the camera first.

Usage:
    python -m examples.render_bear [options]

Options:
    --width WIDTH       Image width in pixels (default: 800)
    --height HEIGHT     Image height in pixels (default: 600)
    --output OUTPUT     Output file path (default: bear.png)
    --yaw YAW           Orbit yaw in degrees before rendering (default: 0)
    --pitch PITCH       Orbit pitch in degrees before rendering (default: 0)
    --reference         Use the pure-Python renderer instead of the kernel
    --show              Show the result in a Matplotlib window

Example:
    python -m examples.render_bear --width 320 --height 240 --yaw 30
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path

# Ensure the src directory is in the Python path for direct execution
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

import taichi as ti  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the bear face scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=800, help="Image width in pixels (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Image height in pixels (default: 600)")
    parser.add_argument("--output", type=str, default="bear.png", help="Output file path (default: bear.png)")
    parser.add_argument("--yaw", type=float, default=0.0, help="Orbit yaw in degrees (default: 0)")
    parser.add_argument("--pitch", type=float, default=0.0, help="Orbit pitch in degrees (default: 0)")
    parser.add_argument(
        "--reference",
        action="store_true",
        help="Use the pure-Python renderer (slow)",
    )
    parser.add_argument("--show", action="store_true", help="Show the result with Matplotlib")
    return parser.parse_args()


def render_bear(
    width: int = 800,
    height: int = 600,
    output_path: str = "bear.png",
    yaw: float = 0.0,
    pitch: float = 0.0,
    reference: bool = False,
    show: bool = False,
) -> Path:
    """Render the bear face and save it as a PNG.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        output_path: Output file path (PNG).
        yaw: Orbit yaw in degrees applied before rendering.
        pitch: Orbit pitch in degrees applied before rendering.
        reference: If True, use the pure-Python renderer.
        show: If True, display the image with Matplotlib after saving.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from teddycast.core.framebuffer import Framebuffer
    from teddycast.core.renderer import ReferenceRenderer
    from teddycast.preview.display import show_framebuffer
    from teddycast.preview.export import save_png
    from teddycast.scene.bear import create_bear_scene

    objects, camera = create_bear_scene()
    if yaw or pitch:
        camera.orbit(math.radians(yaw), math.radians(pitch))

    if reference:
        renderer = ReferenceRenderer(objects)
    else:
        from teddycast.core.accelerated import KernelRenderer

        renderer = KernelRenderer(objects)

    framebuffer = Framebuffer(width, height)

    print(f"Rendering {width}x{height} ({'reference' if reference else 'kernel'})...")
    start = time.perf_counter()
    renderer.render(framebuffer, camera)
    elapsed = time.perf_counter() - start
    print(f"Rendered in {elapsed:.3f}s")

    path = save_png(framebuffer, output_path)
    print(f"Saved: {path}")

    if show:
        show_framebuffer(framebuffer)

    return path


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args()

    if args.width <= 0 or args.height <= 0:
        print("Error: width and height must be positive")
        return 1

    ti.init(arch=ti.cpu)

    render_bear(
        width=args.width,
        height=args.height,
        output_path=args.output,
        yaw=args.yaw,
        pitch=args.pitch,
        reference=args.reference,
        show=args.show,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

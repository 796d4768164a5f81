#!/usr/bin/env python3
"""Interactive bear face viewer.

This script opens a preview window showing the ray-cast bear face and lets
you orbit the camera around it.

Usage:
    python -m examples.interactive_bear

Controls:
    - Left / Right arrows: orbit horizontally
    - Up / Down arrows: orbit vertically
    - Escape: quit
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the src directory is in the Python path for direct execution
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

import taichi as ti  # noqa: E402


def main() -> int:
    """Main entry point for the interactive viewer.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # The render kernel runs its pixel loop serially, which suits the CPU backend
    ti.init(arch=ti.cpu)

    # Import after Taichi initialization
    from teddycast.app import AppConfig, Application
    from teddycast.core.errors import DisplayInitError

    config = AppConfig()
    app = Application(config)

    print(f"Opening {config.width}x{config.height} window...")
    print("  - Arrow keys orbit the camera")
    print("  - Escape or closing the window exits")
    print()

    try:
        frames = app.run()
    except DisplayInitError as err:
        print(f"Error: {err}")
        print("This script requires a graphical display environment.")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 0

    print(f"Rendered {frames} frames.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

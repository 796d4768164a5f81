"""Ray-casting renderer for a sphere-built bear face.

This package renders a fixed scene of spheres by casting one ray per pixel,
with flat (unlit) shading and an orbit camera driven from the keyboard:
- Camera ray generation and analytic ray-sphere intersection
- Nearest-hit selection with a scalar z-buffer
- Packed 24-bit RGB framebuffer
- Taichi kernel renderer and GGUI preview window

Subpackages:
    core: Colors, framebuffer, vector helpers, renderers and errors
    geometry: Primitives and the ray-intersection protocol
    scene: Bear face scene and Taichi-side sphere storage
    camera: Orbit camera with orthonormal basis
    preview: Window, Matplotlib preview and PNG export
"""

__version__ = "0.1.0"

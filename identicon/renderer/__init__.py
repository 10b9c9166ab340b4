"""Rendering subpackage.

Turns a finished :class:`identicon.image.Image` into an encoded bitmap and
writes it to disk. Everything that touches a raster library or the
filesystem goes through a :class:`RenderBackend`, so the deterministic
pipeline never depends on a particular encoder or storage medium.

See :mod:`identicon.renderer.backend` for the seam and the Pillow default,
and :mod:`identicon.renderer.render` for the operations built on it.
"""

from .backend import BACKEND_REGISTRY, PILLOW_BACKEND, RenderBackend, get_backend
from .render import canvas_to_array, render_canvas, render_image, save_image

__all__ = [
    "RenderBackend",
    "PILLOW_BACKEND",
    "BACKEND_REGISTRY",
    "get_backend",
    "render_canvas",
    "render_image",
    "canvas_to_array",
    "save_image",
]

"""Pipeline stages.

Every stage is a pure function ``Image -> Image`` that fills in the single
field it owns. The underlying primitives (hashing, color extraction, grid
construction, point computation) are exported too so they can be used and
tested on plain values.
"""

from .digest import hash_bytes, hash_input
from .color import build_color, extract_color
from .grid import build_grid, chunk, grid_indices, is_even, mirror
from .pixel_map import (
    CANVAS_SIZE,
    CELL_SIZE,
    GRID_WIDTH,
    build_pixel_map,
    drawing_points,
)

__all__ = [
    "hash_bytes",
    "hash_input",
    "extract_color",
    "build_color",
    "is_even",
    "chunk",
    "mirror",
    "grid_indices",
    "build_grid",
    "GRID_WIDTH",
    "CELL_SIZE",
    "CANVAS_SIZE",
    "drawing_points",
    "build_pixel_map",
]

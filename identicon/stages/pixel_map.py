"""Pixel-map stage: filled cell indices to canvas squares."""

from dataclasses import replace
from pyrsistent import pvector

from identicon.image import Image, Rectangle
from identicon.types import CellIndex

GRID_WIDTH = 5
CELL_SIZE = 50
CANVAS_SIZE = GRID_WIDTH * CELL_SIZE


def drawing_points(index: CellIndex) -> Rectangle:
    """Return the 50x50 square occupied by cell ``index``.

    Cells are laid out row-major, so ``index % 5`` is the column and
    ``index // 5`` the row.

    Raises:
        ValueError: If ``index`` is outside the 5x5 grid.
    """
    if not 0 <= index < GRID_WIDTH * GRID_WIDTH:
        raise ValueError(f"Cell index {index} is outside the grid")
    x = (index % GRID_WIDTH) * CELL_SIZE
    y = (index // GRID_WIDTH) * CELL_SIZE
    return Rectangle(top_left=(x, y), bottom_right=(x + CELL_SIZE, y + CELL_SIZE))


def build_pixel_map(image: Image) -> Image:
    """Populate ``image.pixel_map`` from ``image.grid``, preserving order."""
    return replace(image, pixel_map=pvector(drawing_points(i) for i in image.grid))

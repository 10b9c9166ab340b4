"""Raster backend seam.

A :class:`RenderBackend` bundles the four collaborator callables the
renderer needs. Swapping the backend swaps the raster library or the
storage target without touching the pipeline.
"""

import io
from dataclasses import dataclass
from typing import Dict
from PIL import Image, ImageDraw

from identicon.types import (
    Color,
    CreateCanvasFn,
    EncodeFn,
    FillRectangleFn,
    Point,
    WriteFileFn,
)


@dataclass(frozen=True)
class RenderBackend:
    """Collaborator callables used to draw and persist an identicon.

    Attributes:
        create_canvas: ``(width, height, background) -> canvas``.
        fill_rectangle: ``(canvas, top_left, bottom_right, color) -> canvas``.
            ``bottom_right`` is exclusive.
        encode: ``(canvas, image_format) -> bytes``.
        write_file: ``(path, data) -> None``; raises ``OSError`` on failure.
    """

    create_canvas: CreateCanvasFn
    fill_rectangle: FillRectangleFn
    encode: EncodeFn
    write_file: WriteFileFn


def pillow_create_canvas(width: int, height: int, background: Color) -> Image.Image:
    return Image.new("RGB", (width, height), background)


def pillow_fill_rectangle(
    canvas: Image.Image, top_left: Point, bottom_right: Point, color: Color
) -> Image.Image:
    # ImageDraw treats both corners as inclusive
    x0, y0 = top_left
    x1, y1 = bottom_right
    ImageDraw.Draw(canvas).rectangle([x0, y0, x1 - 1, y1 - 1], fill=color)
    return canvas


def pillow_encode(canvas: Image.Image, image_format: str) -> bytes:
    buffer = io.BytesIO()
    canvas.save(buffer, format=image_format)
    return buffer.getvalue()


def write_file(path: str, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


PILLOW_BACKEND = RenderBackend(
    create_canvas=pillow_create_canvas,
    fill_rectangle=pillow_fill_rectangle,
    encode=pillow_encode,
    write_file=write_file,
)

BACKEND_REGISTRY: Dict[str, RenderBackend] = {
    "pillow": PILLOW_BACKEND,
}
"""Registry of built-in backend names to backends."""


def get_backend(name: str) -> RenderBackend:
    """Look up a backend by name.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    if name not in BACKEND_REGISTRY:
        raise ValueError(f"Unknown render backend: {name}")
    return BACKEND_REGISTRY[name]

"""Render and save operations over a :class:`RenderBackend`."""

import logging
import os
from typing import Optional, Union
import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from identicon.config import IdenticonConfig
from identicon.image import Image
from identicon.renderer.backend import PILLOW_BACKEND, RenderBackend
from identicon.stages.pixel_map import CANVAS_SIZE
from identicon.types import Canvas

logger = logging.getLogger(__name__)

UInt8Array = npt.NDArray[np.uint8]


def render_canvas(
    image: Image,
    backend: RenderBackend = PILLOW_BACKEND,
    config: Optional[IdenticonConfig] = None,
) -> Canvas:
    """Draw every square of ``image.pixel_map`` in ``image.color``.

    The canvas is always 250x250; cells not in the pixel map keep the
    configured background.

    Raises:
        ValueError: If the image has no color yet.
    """
    if image.color is None:
        raise ValueError("Image has no color; run the color stage first")
    config = config or IdenticonConfig()

    canvas = backend.create_canvas(CANVAS_SIZE, CANVAS_SIZE, config.background)
    for rect in image.pixel_map:
        canvas = backend.fill_rectangle(
            canvas, rect.top_left, rect.bottom_right, image.color
        )
    return canvas


def render_image(
    image: Image,
    backend: RenderBackend = PILLOW_BACKEND,
    config: Optional[IdenticonConfig] = None,
) -> bytes:
    """Render ``image`` and encode it in ``config.image_format``."""
    config = config or IdenticonConfig()
    canvas = render_canvas(image, backend, config)
    data = backend.encode(canvas, config.image_format)
    logger.debug(
        "Rendered %d squares for %r as %s (%d bytes)",
        len(image.pixel_map),
        image.input,
        config.image_format,
        len(data),
    )
    return data


def canvas_to_array(canvas: PILImage.Image) -> UInt8Array:
    """Return a Pillow canvas as an ``(H, W, 3)`` ``uint8`` array."""
    return np.array(canvas.convert("RGB"), dtype=np.uint8)


def save_image(
    data: bytes,
    filename: Union[str, bytes],
    config: Optional[IdenticonConfig] = None,
    backend: RenderBackend = PILLOW_BACKEND,
) -> str:
    """Write encoded ``data`` to ``<output_dir>/<filename>.<ext>``.

    The output directory is created if missing. ``filename`` is used as is;
    escaping unsafe characters is up to the caller. Write failures propagate
    unchanged.

    Returns:
        str: Path of the written file.
    """
    config = config or IdenticonConfig()
    if isinstance(filename, bytes):
        filename = os.fsdecode(filename)
    os.makedirs(config.output_dir, exist_ok=True)
    path = os.path.join(config.output_dir, f"{filename}.{config.extension}")
    backend.write_file(path, data)
    logger.debug("Saved identicon to %s", path)
    return path

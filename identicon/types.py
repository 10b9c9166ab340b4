"""Common type aliases.

``StageFn`` is the signature every pipeline stage shares; the canvas
callables describe the rendering seam consumed by
:mod:`identicon.renderer`.
"""

from typing import Any, Callable, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from identicon.image import Image

Byte = int
CellIndex = int
Color = Tuple[int, int, int]
Point = Tuple[int, int]

StageFn = Callable[["Image"], "Image"]

Canvas = Any
CreateCanvasFn = Callable[[int, int, Color], Canvas]
FillRectangleFn = Callable[[Canvas, Point, Point, Color], Canvas]
EncodeFn = Callable[[Canvas, str], bytes]
WriteFileFn = Callable[[str, bytes], None]

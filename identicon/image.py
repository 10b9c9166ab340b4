"""Immutable ``Image`` record threaded through the pipeline.

Each stage receives an :class:`Image` and returns a *new* one with exactly
one more field populated; nothing is mutated in place. Sequence fields are
persistent vectors (``pyrsistent.PVector``) so a stage cannot accidentally
share mutable state with the record it was given.

Field ownership:

* ``input`` is set once at creation.
* ``hex`` is owned by :mod:`identicon.stages.digest`.
* ``color`` is owned by :mod:`identicon.stages.color`.
* ``grid`` is owned by :mod:`identicon.stages.grid`.
* ``pixel_map`` is owned by :mod:`identicon.stages.pixel_map`.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union
from pyrsistent import PMap, pmap, pvector
from pyrsistent.typing import PVector

from identicon.types import Byte, CellIndex, Color, Point


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned square in canvas coordinates.

    Attributes:
        top_left: Inclusive ``(x, y)`` corner.
        bottom_right: Exclusive ``(x, y)`` corner.
    """

    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right[0] - self.top_left[0]

    @property
    def height(self) -> int:
        return self.bottom_right[1] - self.top_left[1]


@dataclass(frozen=True)
class Image:
    """Accumulating identicon record.

    Attributes:
        input (str | bytes): Source string the identicon is derived from.
        hex (PVector[int]): MD5 digest as 16 unsigned bytes.
        color (tuple[int, int, int] | None): Fill color, ``None`` until built.
        grid (PVector[int]): Ascending indices of filled cells in the 5x5 grid.
        pixel_map (PVector[Rectangle]): One square per ``grid`` entry, same order.
    """

    input: Union[str, bytes] = ""
    hex: PVector[Byte] = pvector()
    color: Optional[Color] = None
    grid: PVector[CellIndex] = pvector()
    pixel_map: PVector[Rectangle] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the populated fields.

        Empty vectors and ``None`` are skipped so partially built records
        print compactly.

        Returns:
            PMap[str, Any]: Field name to value for every populated field.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description

"""Grid stage: digest bytes to the set of filled cells.

The digest is cut into rows of three bytes (the 16th byte is dropped), each
row is mirrored around its last element to five cells, and a cell is filled
when its byte is even. Mirroring makes every row left-right symmetric:

    [a, b, c] -> [a, b, c, b, a]

Cells are numbered row-major over the flattened 5x5 grid, so the returned
indices are naturally ascending.
"""

from dataclasses import replace
from itertools import chain
from typing import List, Sequence
from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.image import Image
from identicon.types import Byte, CellIndex

ROW_SEED_SIZE = 3


def is_even(number: int) -> bool:
    """Return True if ``number`` is even."""
    return number % 2 == 0


def chunk(values: Sequence[Byte], size: int = ROW_SEED_SIZE) -> List[List[Byte]]:
    """Split ``values`` into consecutive chunks of ``size``.

    A trailing chunk shorter than ``size`` is discarded.
    """
    if size < 1:
        raise ValueError("Chunk size must be positive")
    full = len(values) - len(values) % size
    return [list(values[i : i + size]) for i in range(0, full, size)]


def mirror(row: Sequence[Byte]) -> List[Byte]:
    """Append every element but the last, reversed, to ``row``.

    Examples:
        ``[1, 2, 3]`` -> ``[1, 2, 3, 2, 1]``
        ``[0, 7, 4, 1]`` -> ``[0, 7, 4, 1, 4, 7, 0]``
        ``[5]`` -> ``[5]``
    """
    if len(row) == 0:
        raise ValueError("Cannot mirror an empty row")
    return list(row) + list(reversed(row[:-1]))


def grid_indices(digest: Sequence[Byte]) -> PVector[CellIndex]:
    """Return the ascending indices of filled cells for a digest.

    Digests shorter than three bytes produce no rows and therefore an empty
    (fully blank) grid.
    """
    cells = chain.from_iterable(mirror(row) for row in chunk(digest))
    return pvector(index for index, value in enumerate(cells) if is_even(value))


def build_grid(image: Image) -> Image:
    """Populate ``image.grid`` from ``image.hex``."""
    return replace(image, grid=grid_indices(image.hex))

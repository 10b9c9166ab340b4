"""Color stage: the first three digest bytes become the RGB fill."""

from dataclasses import replace
from typing import Sequence

from identicon.errors import InsufficientDigest
from identicon.image import Image
from identicon.types import Byte, Color


def extract_color(digest: Sequence[Byte]) -> Color:
    """Return ``(r, g, b)`` taken from ``digest[0:3]``.

    Raises:
        InsufficientDigest: If fewer than three bytes are available.
    """
    if len(digest) < 3:
        raise InsufficientDigest(len(digest))
    r, g, b = digest[0], digest[1], digest[2]
    return (r, g, b)


def build_color(image: Image) -> Image:
    """Populate ``image.color`` from ``image.hex``."""
    return replace(image, color=extract_color(image.hex))

"""Deterministic identicon generation.

An identicon is a small, mirror-symmetric pixel-art avatar derived from an
arbitrary string. The pipeline is a chain of pure stages over the frozen
:class:`identicon.image.Image` record:

1. :mod:`identicon.stages.digest` hashes the input (MD5, 16 bytes).
2. :mod:`identicon.stages.color` picks the fill color from the first bytes.
3. :mod:`identicon.stages.grid` expands the digest into a mirrored 5x5 grid.
4. :mod:`identicon.stages.pixel_map` maps filled cells to 50x50 squares.

Rendering and persistence live behind the backend seam in
:mod:`identicon.renderer`.
"""

from identicon.errors import IdenticonError, InsufficientDigest
from identicon.image import Image, Rectangle
from identicon.pipeline import create_identicon, generate_identicon

__all__ = [
    "Image",
    "Rectangle",
    "IdenticonError",
    "InsufficientDigest",
    "generate_identicon",
    "create_identicon",
]

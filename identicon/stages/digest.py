"""Digest stage: input string to 16 MD5 bytes.

MD5 is used for reproducibility, not security; the same input must always
produce the same identicon.
"""

import hashlib
from dataclasses import replace
from typing import Union
from pyrsistent import pvector
from pyrsistent.typing import PVector

from identicon.image import Image
from identicon.types import Byte

DIGEST_SIZE = 16


def hash_bytes(data: Union[str, bytes]) -> PVector[Byte]:
    """Return the MD5 digest of ``data`` as a vector of unsigned bytes.

    Strings are encoded as UTF-8; bytes are hashed as given, so callers
    using another encoding can pass pre-encoded input.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return pvector(hashlib.md5(raw).digest())


def hash_input(image: Image) -> Image:
    """Populate ``image.hex`` from ``image.input``."""
    return replace(image, hex=hash_bytes(image.input))

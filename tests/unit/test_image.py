from dataclasses import FrozenInstanceError

import pytest

from identicon.image import Image
from identicon.pipeline import generate_identicon
from identicon.stages import hash_input


def test_image_is_frozen() -> None:
    image = Image(input="banana")
    with pytest.raises(FrozenInstanceError):
        image.color = (1, 2, 3)  # type: ignore[misc]


def test_stages_return_new_records() -> None:
    original = Image(input="banana")
    hashed = hash_input(original)
    assert hashed is not original
    assert len(original.hex) == 0


def test_description_skips_unset_fields() -> None:
    assert set(hash_input(Image(input="banana")).description.keys()) == {"input", "hex"}
    assert set(generate_identicon("banana").description.keys()) == {
        "input",
        "hex",
        "color",
        "grid",
        "pixel_map",
    }

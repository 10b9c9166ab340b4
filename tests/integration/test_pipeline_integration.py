import os
from pathlib import Path
from concurrent.futures import ThreadPoolExecutor

from identicon import create_identicon, generate_identicon
from identicon.config import IdenticonConfig
from identicon.image import Image
from identicon.pipeline import PIPELINE, run_pipeline
from identicon.stages import build_color, hash_input

BANANA_TOP_LEFTS = [
    (0, 0),
    (100, 0),
    (200, 0),
    (100, 50),
    (0, 100),
    (50, 100),
    (150, 100),
    (200, 100),
    (100, 200),
]


def test_generate_identicon_known_vector() -> None:
    image = generate_identicon("banana")
    assert image.input == "banana"
    assert list(image.hex) == [
        114, 179, 2, 191, 41, 122, 34, 138, 117, 115, 1, 35, 239, 239, 124, 65
    ]
    assert image.color == (114, 179, 2)
    assert list(image.grid) == [0, 2, 4, 7, 10, 11, 13, 14, 22]
    assert [r.top_left for r in image.pixel_map] == BANANA_TOP_LEFTS
    assert all(r.width == 50 and r.height == 50 for r in image.pixel_map)


def test_generate_identicon_is_deterministic() -> None:
    assert generate_identicon("banana") == generate_identicon("banana")
    assert generate_identicon("banana") != generate_identicon("apple")


def test_empty_input_completes() -> None:
    image = generate_identicon("")
    assert len(image.hex) == 16
    assert image.color is not None
    assert len(image.pixel_map) == len(image.grid)


def test_run_pipeline_partial_stages() -> None:
    image = run_pipeline(Image(input="banana"), [hash_input, build_color])
    assert image.color == (114, 179, 2)
    assert len(image.grid) == 0
    assert run_pipeline(Image(input="banana"), PIPELINE) == generate_identicon("banana")


def test_parallel_generation_matches_sequential() -> None:
    inputs = [f"user-{i}" for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(generate_identicon, inputs))
    assert parallel == [generate_identicon(s) for s in inputs]


def test_create_identicon_writes_png(tmp_path: Path) -> None:
    config = IdenticonConfig(output_dir=str(tmp_path / "images"))
    path = create_identicon("banana", config)
    assert path.endswith(os.path.join("images", "banana.png"))
    with open(path, "rb") as f:
        assert f.read(4) == b"\x89PNG"

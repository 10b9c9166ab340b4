"""Pipeline orchestration.

Wires the stages together in their only valid order. Each stage reads
fields populated by earlier stages and never by later ones:

1. ``hash_input`` sets ``hex``.
2. ``build_color`` sets ``color`` from ``hex``.
3. ``build_grid`` sets ``grid`` from ``hex``.
4. ``build_pixel_map`` sets ``pixel_map`` from ``grid``.

All functions here are pure apart from :func:`create_identicon`, which
also renders and writes the result.
"""

from functools import reduce
from typing import Optional, Sequence, Union

from identicon.config import IdenticonConfig
from identicon.image import Image
from identicon.renderer import RenderBackend, get_backend, render_image, save_image
from identicon.stages import build_color, build_grid, build_pixel_map, hash_input
from identicon.types import StageFn

PIPELINE: Sequence[StageFn] = (
    hash_input,
    build_color,
    build_grid,
    build_pixel_map,
)


def run_pipeline(image: Image, stages: Sequence[StageFn] = PIPELINE) -> Image:
    """Fold ``image`` through ``stages`` in order."""
    return reduce(lambda acc, stage: stage(acc), stages, image)


def generate_identicon(input: Union[str, bytes]) -> Image:
    """Build the complete identicon record for ``input``.

    Args:
        input: Source string. Any string, including ``""``, is accepted.

    Returns:
        Image: Record with ``hex``, ``color``, ``grid`` and ``pixel_map`` set.
    """
    return run_pipeline(Image(input=input))


def create_identicon(
    input: Union[str, bytes],
    config: Optional[IdenticonConfig] = None,
    backend: Optional[RenderBackend] = None,
) -> str:
    """Generate, render and save the identicon for ``input``.

    Args:
        input: Source string; also used as the output file name.
        config: Output settings. Read from the environment when ``None``.
        backend: Raster backend. Defaults to the one named in ``config``.

    Returns:
        str: Path of the written image file.
    """
    config = config or IdenticonConfig()
    backend = backend or get_backend(config.backend)
    image = generate_identicon(input)
    data = render_image(image, backend, config)
    return save_image(data, input, config, backend)

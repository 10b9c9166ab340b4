"""Runtime configuration for rendering and saving identicons.

The digest, grid and pixel-map stages are fixed by construction; only the
output side is configurable. Every setting can be overridden through an
``IDENTICON_*`` environment variable or a ``.env`` file, e.g.::

    export IDENTICON_OUTPUT_DIR=/var/avatars
    export IDENTICON_BACKGROUND=240,240,240
    export IDENTICON_LOG_LEVEL=DEBUG

Values are validated when the config is built, whether they come from the
environment or from constructor arguments.
"""

import logging
from typing import Annotated, Any, Dict, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

FORMAT_EXTENSIONS: Dict[str, str] = {
    "PNG": "png",
    "BMP": "bmp",
    "GIF": "gif",
    "PPM": "ppm",
}

ColorByte = Annotated[int, Field(ge=0, le=255)]


class IdenticonConfig(BaseSettings):
    """Output settings with ``IDENTICON_*`` environment overrides.

    Attributes:
        output_dir: Directory images are written to.
        image_format: Pillow format name; case-insensitive, stored upper-case.
        background: RGB color of unfilled cells, ``"r,g,b"`` in the environment.
        backend: Name of a registered render backend.
        log_level: Standard ``logging`` level name.
    """

    model_config = SettingsConfigDict(
        env_prefix="IDENTICON_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    output_dir: str = "images"
    image_format: str = "PNG"
    background: Annotated[Tuple[ColorByte, ColorByte, ColorByte], NoDecode] = (
        255,
        255,
        255,
    )
    backend: str = "pillow"
    log_level: str = "WARNING"

    @field_validator("image_format")
    @classmethod
    def _check_image_format(cls, value: str) -> str:
        value = value.upper()
        if value not in FORMAT_EXTENSIONS:
            raise ValueError(f"Unsupported image format: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("background", mode="before")
    @classmethod
    def _split_background(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",")]
        return value

    @property
    def extension(self) -> str:
        return FORMAT_EXTENSIONS[self.image_format]


def configure_logging(config: Optional[IdenticonConfig] = None) -> None:
    """Install a basic stderr handler at ``config.log_level``."""
    config = config or IdenticonConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

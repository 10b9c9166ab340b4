import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from identicon.config import IdenticonConfig
from identicon.pipeline import create_identicon


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in list(os.environ):
        if name.startswith("IDENTICON_"):
            monkeypatch.delenv(name)
    # keep a stray .env in the working directory out of the settings
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    config = IdenticonConfig()
    assert config.output_dir == "images"
    assert config.image_format == "PNG"
    assert config.background == (255, 255, 255)
    assert config.backend == "pillow"
    assert config.extension == "png"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDENTICON_OUTPUT_DIR", "/tmp/avatars")
    monkeypatch.setenv("IDENTICON_IMAGE_FORMAT", "gif")
    monkeypatch.setenv("IDENTICON_BACKGROUND", "240, 240, 240")
    monkeypatch.setenv("IDENTICON_LOG_LEVEL", "debug")
    config = IdenticonConfig()
    assert config.output_dir == "/tmp/avatars"
    assert config.image_format == "GIF"
    assert config.background == (240, 240, 240)
    assert config.log_level == "DEBUG"
    assert config.extension == "gif"


def test_env_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("IDENTICON_BACKGROUND=0,128,255\n")
    assert IdenticonConfig().background == (0, 128, 255)


@pytest.mark.parametrize(
    "name, value",
    [
        ("IDENTICON_IMAGE_FORMAT", "svg"),
        ("IDENTICON_LOG_LEVEL", "loud"),
        ("IDENTICON_BACKGROUND", "1,2"),
        ("IDENTICON_BACKGROUND", "1,2,300"),
        ("IDENTICON_BACKGROUND", "a,b,c"),
    ],
)
def test_invalid_environment_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        IdenticonConfig()


def test_image_format_is_normalized_on_construction() -> None:
    config = IdenticonConfig(image_format="png")
    assert config.image_format == "PNG"
    assert config.extension == "png"


@pytest.mark.parametrize("image_format", ["JPEG", "svg", ""])
def test_unsupported_image_format_fails_on_construction(image_format: str) -> None:
    with pytest.raises(ValidationError, match="Unsupported image format"):
        IdenticonConfig(image_format=image_format)


@pytest.mark.parametrize("background", [(0, 0, 256), (-1, 0, 0), (1, 2)])
def test_background_is_validated_on_construction(background: tuple) -> None:
    with pytest.raises(ValidationError):
        IdenticonConfig(background=background)


def test_config_is_frozen() -> None:
    config = IdenticonConfig()
    with pytest.raises(ValidationError):
        config.output_dir = "elsewhere"  # type: ignore[misc]


def test_lowercase_format_saves_with_extension(tmp_path: Path) -> None:
    config = IdenticonConfig(output_dir=str(tmp_path / "images"), image_format="png")
    path = create_identicon("banana", config)
    assert path == os.path.join(str(tmp_path / "images"), "banana.png")
    with open(path, "rb") as f:
        assert f.read(4) == b"\x89PNG"

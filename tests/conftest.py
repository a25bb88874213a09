"""Shared fixtures for worldflags tests."""

import os
from pathlib import Path

import pytest
from PIL import Image

from worldflags.config import reset_settings
from worldflags.display import reset_console

FRANCE = [(0, 35, 149), (255, 255, 255), (237, 41, 57)]
ITALY = [(0, 146, 70), (255, 255, 255), (206, 43, 55)]


def make_tricolor(colors, size=(300, 200), mode="RGB") -> Image.Image:
    """Build a flag of vertical stripes, one per color."""
    width, height = size
    image = Image.new("RGB", size)
    stripe = width // len(colors)
    for i, color in enumerate(colors):
        image.paste(color, (i * stripe, 0, (i + 1) * stripe if i < len(colors) - 1 else width, height))
    return image.convert(mode) if mode != "RGB" else image


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep WORLDFLAGS_* variables and cached singletons from leaking between tests."""
    for name in [n for n in os.environ if n.startswith("WORLDFLAGS_")]:
        monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    reset_settings()
    reset_console()
    yield
    # load_dotenv writes straight into os.environ
    for name in [n for n in os.environ if n.startswith("WORLDFLAGS_")]:
        del os.environ[name]
    reset_settings()
    reset_console()


@pytest.fixture
def flags_dir(tmp_path) -> Path:
    """An assets directory with two flags and some unrelated files."""
    assets = tmp_path / "flags"
    assets.mkdir()
    make_tricolor(FRANCE).save(assets / "France@3x.png")
    make_tricolor(ITALY).save(assets / "Italy@3x.png")
    make_tricolor(ITALY, size=(100, 66)).save(assets / "Italy@2x.png")
    (assets / "readme.txt").write_text("not a flag")
    return assets

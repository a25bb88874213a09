"""Asset keys and the collaborators that resolve them.

A country identifier addresses two resources: its flag image
(``<name>@3x.png`` in the assets directory) and its display name in the
localized string table.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from PIL import Image, UnidentifiedImageError

from worldflags.config.loader import DEFAULTS_DIR
from worldflags.errors import AssetNotFound

logger = logging.getLogger(__name__)

# Only the highest-resolution variant names a country; @1x/@2x siblings are ignored.
FLAG_SUFFIX = "@3x.png"
KEY_DELIMITER = "@"


@dataclass(frozen=True)
class AssetKey:
    """Identifier of a country, shared by its image and its display name."""

    name: str

    @property
    def image_filename(self) -> str:
        return f"{self.name}{FLAG_SUFFIX}"

    def __str__(self) -> str:
        return self.name


class AssetBundle:
    """Loads flag bitmaps from an assets directory."""

    def __init__(self, assets_dir: Path):
        self.assets_dir = Path(assets_dir)

    def image_path(self, key: AssetKey) -> Path:
        return self.assets_dir / key.image_filename

    def resolve_image(self, key: AssetKey) -> Image.Image:
        """
        Load the full-size flag image for ``key``.

        The returned image is fully decoded and detached from the file.

        Raises:
            AssetNotFound: If no image file exists for the key, or it cannot
                be decoded.
        """
        path = self.image_path(key)
        if not path.is_file():
            raise AssetNotFound(key.name, path)

        try:
            with Image.open(path) as img:
                img.load()
                return img.copy()
        except (OSError, UnidentifiedImageError) as e:
            raise AssetNotFound(key.name, path, reason=str(e)) from e


class StringTable:
    """Localized string lookup that falls back to the lookup key."""

    def __init__(self, entries: Optional[dict[str, str]] = None, locale: str = ""):
        self.entries = dict(entries or {})
        self.locale = locale

    def lookup(self, text: str) -> str:
        return self.entries.get(text, text)

    def resolve_display_name(self, key: AssetKey) -> str:
        return self.lookup(key.name)

    def __len__(self) -> int:
        return len(self.entries)


def _locale_candidates(locale: str) -> list[str]:
    locale = locale.strip()
    candidates = [locale] if locale else []
    for sep in ("_", "-"):
        if sep in locale:
            candidates.append(locale.split(sep, 1)[0])
    return candidates


@lru_cache(maxsize=32)
def _read_strings(path: Path) -> dict[str, str]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable string table {path}: {e}")
        return {}
    if not isinstance(data, dict):
        return {}
    # Keys such as NO or ON load as booleans unless quoted in the YAML file
    return {str(k): str(v) for k, v in data.items() if v is not None}


def load_string_table(locale: str, strings_dir: Optional[Path] = None) -> StringTable:
    """
    Load the string table for ``locale``.

    Looks for ``<strings_dir>/<locale>.yaml`` (then the bare language, e.g.
    ``fr`` for ``fr_CA``), then the packaged defaults. Returns an empty
    table when nothing matches, so every lookup falls back to its key.
    """
    search_dirs = [d for d in (strings_dir, DEFAULTS_DIR / "strings") if d]
    for directory in search_dirs:
        for candidate in _locale_candidates(locale):
            path = Path(directory) / f"{candidate}.yaml"
            if path.is_file():
                logger.debug(f"Using string table {path}")
                return StringTable(_read_strings(path), locale=candidate)

    logger.info(f"No string table for locale '{locale}', using identifiers as names")
    return StringTable(locale=locale)

"""Settings management for worldflags."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .loader import get_config_paths, ConfigPaths

logger = logging.getLogger(__name__)

CATALOG_ORDERS = ("name", "listing")

DEFAULT_LOCALE = "en"
DEFAULT_CATALOG_ORDER = "name"
DEFAULT_THUMBNAIL_SCALE = 0.5
DEFAULT_EXPORT_QUALITY = 0.8


@dataclass
class Settings:
    """Application settings loaded from environment and config files."""

    # Paths
    assets_dir: Path = field(default_factory=Path.cwd)
    config_paths: Optional[ConfigPaths] = None
    strings_dir: Optional[Path] = None

    # Catalog
    locale: str = DEFAULT_LOCALE
    catalog_order: str = DEFAULT_CATALOG_ORDER

    # Imaging
    thumbnail_scale: float = DEFAULT_THUMBNAIL_SCALE
    export_quality: float = DEFAULT_EXPORT_QUALITY

    # Runtime
    verbose: bool = False


def load_config_file(config_file: Optional[Path]) -> dict[str, Any]:
    """Load config.yaml, returning an empty mapping when absent or malformed."""
    if not config_file or not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config file {config_file}: {e}")
        return {}

    return data if isinstance(data, dict) else {}


def _unit_interval(raw: Any, default: float) -> float:
    """Parse a value in 0...1, falling back to ``default`` when invalid."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    if 0.0 <= value <= 1.0:
        return value
    return default


def _catalog_order(raw: Any) -> str:
    order = str(raw or "").strip().lower()
    return order if order in CATALOG_ORDERS else DEFAULT_CATALOG_ORDER


def load_settings() -> Settings:
    """
    Load settings from all configuration sources.

    Priority (highest to lowest):
    1. Environment variables (including from .env files)
    2. Local .worldflags/ directory
    3. User ~/.config/worldflags/ directory
    4. Package defaults
    """
    paths = get_config_paths()

    if paths.env_file:
        load_dotenv(paths.env_file, override=True)

    file_config = load_config_file(paths.config_file)

    assets_raw = os.getenv("WORLDFLAGS_ASSETS_DIR") or file_config.get("assets_dir")
    assets_dir = Path(assets_raw).expanduser() if assets_raw else Path.cwd()
    if not assets_dir.is_absolute():
        assets_dir = Path.cwd() / assets_dir

    locale = (
        os.getenv("WORLDFLAGS_LOCALE", "").strip()
        or str(file_config.get("locale") or "").strip()
        or DEFAULT_LOCALE
    )

    return Settings(
        assets_dir=assets_dir,
        config_paths=paths,
        strings_dir=paths.strings_dir,
        locale=locale,
        catalog_order=_catalog_order(
            os.getenv("WORLDFLAGS_CATALOG_ORDER") or file_config.get("catalog_order")
        ),
        thumbnail_scale=_unit_interval(
            os.getenv("WORLDFLAGS_THUMBNAIL_SCALE") or file_config.get("thumbnail_scale"),
            DEFAULT_THUMBNAIL_SCALE,
        ),
        export_quality=_unit_interval(
            os.getenv("WORLDFLAGS_EXPORT_QUALITY") or file_config.get("export_quality"),
            DEFAULT_EXPORT_QUALITY,
        ),
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing or directory change)."""
    global _settings
    _settings = None

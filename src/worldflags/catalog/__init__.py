"""Flag catalog derivation."""

from .catalog import FlagCatalog
from .scanner import FLAG_SUFFIX, AssetScanner, build_catalog, sort_catalog

__all__ = ["FlagCatalog", "AssetScanner", "FLAG_SUFFIX", "build_catalog", "sort_catalog"]

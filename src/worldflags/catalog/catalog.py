"""Flag catalog: the ordered list of countries shown on the list screen."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Optional

from worldflags.assets import AssetKey

from .scanner import ORDER_NAME, AssetScanner, build_catalog, sort_catalog

logger = logging.getLogger(__name__)


class FlagCatalog:
    """
    Ordered index of the countries available in an assets directory.

    Built once per list activation; rows are addressed by their index, the
    same index a row selection hands to the detail screen.
    """

    def __init__(self, assets_dir: Path, order: str = ORDER_NAME):
        self.assets_dir = Path(assets_dir)
        self.order = order
        self._keys: list[AssetKey] = []

    def build(self) -> "FlagCatalog":
        """Scan the assets directory and rebuild the catalog."""
        names = AssetScanner(self.assets_dir).list_names()
        identifiers = sort_catalog(build_catalog(names), self.order)
        self._keys = [AssetKey(identifier) for identifier in identifiers]

        logger.info(f"Catalog built from {self.assets_dir}: {len(self._keys)} countries")
        logger.debug(f"Catalog identifiers: {identifiers}")
        return self

    @property
    def keys(self) -> list[AssetKey]:
        return list(self._keys)

    def index_of(self, name: str) -> Optional[int]:
        """Return the row index of ``name``, or None if it is not cataloged."""
        for index, key in enumerate(self._keys):
            if key.name == name:
                return index
        return None

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[AssetKey]:
        return iter(self._keys)

    def __getitem__(self, index: int) -> AssetKey:
        return self._keys[index]

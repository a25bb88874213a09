"""Flag asset scanner and catalog derivation."""

import logging
from collections.abc import Iterable
from pathlib import Path

from worldflags.assets import FLAG_SUFFIX, KEY_DELIMITER
from worldflags.errors import DirectoryUnavailable

logger = logging.getLogger(__name__)

ORDER_NAME = "name"
ORDER_LISTING = "listing"


def build_catalog(listing: Iterable[str]) -> list[str]:
    """
    Derive country identifiers from a directory listing.

    Keeps entries ending in ``@3x.png`` and takes everything before the
    first ``@`` as the identifier, so ``"Flag@2x@3x.png"`` becomes
    ``"Flag"``. Input order is preserved; nothing is sorted or deduplicated.

    Args:
        listing: File names as they appear in the assets directory.

    Returns:
        List of identifiers, possibly empty.
    """
    return [name.split(KEY_DELIMITER, 1)[0] for name in listing if name.endswith(FLAG_SUFFIX)]


def sort_catalog(keys: Iterable[str], order: str = ORDER_NAME) -> list[str]:
    """Apply an explicit ordering policy to catalog identifiers."""
    if order == ORDER_LISTING:
        return list(keys)
    if order == ORDER_NAME:
        return sorted(keys, key=str.casefold)
    raise ValueError(f"Unknown catalog order: {order!r}")


class AssetScanner:
    """Lists the file names of a flat assets directory."""

    def __init__(self, assets_dir: Path):
        self.assets_dir = Path(assets_dir)

    def list_names(self) -> list[str]:
        """
        Return the names of regular files in the assets directory.

        Raises:
            DirectoryUnavailable: If the directory is missing or unreadable.
        """
        if not self.assets_dir.is_dir():
            raise DirectoryUnavailable(self.assets_dir, "not a directory")

        try:
            entries = list(self.assets_dir.iterdir())
        except OSError as e:
            raise DirectoryUnavailable(self.assets_dir, e.strerror or str(e)) from e

        names = [entry.name for entry in entries if entry.is_file()]
        logger.debug(f"Listed {len(names)} files in {self.assets_dir}")
        return names

"""View models for the country list and flag detail screens.

These are plain data consumed by whatever front end renders them; the CLI
in ``worldflags.cli`` is one such consumer.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from worldflags.assets import AssetBundle, AssetKey, StringTable
from worldflags.catalog import FlagCatalog
from worldflags.errors import AssetNotFound, NoImageAvailable
from worldflags.imaging import export_jpeg, scale_down

logger = logging.getLogger(__name__)

LIST_TITLE = "Countries"
DEFAULT_THUMBNAIL_SCALE = 0.5
DEFAULT_EXPORT_QUALITY = 0.8
DETAIL_BORDER_WIDTH = 4
DETAIL_BORDER_COLOR = "lightgray"


@dataclass
class RowViewModel:
    """One row of the country list."""

    key: AssetKey
    title: str
    thumbnail: Optional[Image.Image]


@dataclass
class ListViewModel:
    """The country list screen."""

    title: str
    rows: list[RowViewModel] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)


@dataclass
class DetailViewModel:
    """The flag detail screen, showing the full-size image."""

    key: AssetKey
    title: str
    image: Optional[Image.Image]
    border_width: int = DETAIL_BORDER_WIDTH
    border_color: str = DETAIL_BORDER_COLOR


@dataclass
class SharePayload:
    """Encoded image handed to a share target."""

    filename: str
    mime_type: str
    data: bytes


def _load_image(bundle: AssetBundle, key: AssetKey) -> Optional[Image.Image]:
    """Load the flag for ``key``, or None when it is missing or unreadable."""
    try:
        return bundle.resolve_image(key)
    except AssetNotFound as e:
        logger.warning(str(e))
        return None


def render_list(
    catalog: FlagCatalog,
    bundle: AssetBundle,
    strings: StringTable,
    thumbnail_scale: float = DEFAULT_THUMBNAIL_SCALE,
) -> ListViewModel:
    """
    Build the list screen: one row per cataloged country, in catalog order.

    A country whose image is missing or unreadable still gets a row, with
    no thumbnail.
    """
    rows = []
    for key in catalog:
        image = _load_image(bundle, key)
        thumbnail = scale_down(image, thumbnail_scale) if image is not None else None
        rows.append(
            RowViewModel(
                key=key,
                title=strings.resolve_display_name(key),
                thumbnail=thumbnail,
            )
        )
    return ListViewModel(title=strings.lookup(LIST_TITLE), rows=rows)


def select_row(catalog: FlagCatalog, index: int) -> AssetKey:
    """Map a selected row index to the key the detail screen loads."""
    if not 0 <= index < len(catalog):
        raise IndexError(f"Row {index} out of range for {len(catalog)} countries")
    return catalog[index]


def render_detail(key: AssetKey, bundle: AssetBundle, strings: StringTable) -> DetailViewModel:
    """Build the detail screen for ``key`` with the unscaled image, if any."""
    return DetailViewModel(
        key=key,
        title=strings.resolve_display_name(key),
        image=_load_image(bundle, key),
    )


def share_detail(detail: DetailViewModel, quality: float = DEFAULT_EXPORT_QUALITY) -> SharePayload:
    """
    Export the image on the detail screen for sharing.

    Raises:
        NoImageAvailable: If the detail screen has no image.
    """
    if detail.image is None:
        logger.warning(f"No image found for '{detail.key}'")
        raise NoImageAvailable(f"No image found for '{detail.key}'")

    return SharePayload(
        filename=f"{detail.key.name}.jpg",
        mime_type="image/jpeg",
        data=export_jpeg(detail.image, quality),
    )

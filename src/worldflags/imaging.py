"""Flag image scaling and export.

Thumbnails are produced by scaling the full-size flag down by a coefficient
in 0...1. Sizes are rounded half up, so a 75x50 image scaled by 0.5 becomes
38x25. A coefficient of 0, or one that rounds an axis down to zero, yields
an empty (zero-area) image of the same mode rather than an error.
"""

import io
import logging
import math
from numbers import Real
from typing import Optional

from PIL import Image

from worldflags.errors import InvalidCoefficient, NoImageAvailable

logger = logging.getLogger(__name__)

RESAMPLE = Image.Resampling.BILINEAR
JPEG_BACKGROUND = (255, 255, 255)


def _check_unit_interval(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidCoefficient(value, name)
    value = float(value)
    # NaN fails both comparisons
    if not 0.0 <= value <= 1.0:
        raise InvalidCoefficient(value, name)
    return value


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def scaled_size(size: tuple[int, int], coefficient: float) -> tuple[int, int]:
    """Return the ``(width, height)`` that ``scale_down`` would produce."""
    coefficient = _check_unit_interval(coefficient, "coefficient")
    width, height = size
    return _round_half_up(width * coefficient), _round_half_up(height * coefficient)


def scale_down(image: Image.Image, coefficient: float) -> Image.Image:
    """
    Scale ``image`` down by ``coefficient``.

    Args:
        image: Source bitmap. It is not modified.
        coefficient: Multiplier applied to both dimensions, in 0...1.

    Returns:
        A new image of the scaled size, resampled bilinearly.

    Raises:
        InvalidCoefficient: If ``coefficient`` is not a number in 0...1.
            Checked before anything is allocated.
    """
    new_size = scaled_size(image.size, coefficient)

    if new_size[0] == 0 or new_size[1] == 0:
        return Image.new(image.mode, new_size)

    if new_size == image.size:
        return image.copy()

    return image.resize(new_size, resample=RESAMPLE)


def _flatten_for_jpeg(image: Image.Image) -> Image.Image:
    """Convert to RGB, compositing any transparency onto a white background."""
    if image.mode == "P" and "transparency" in image.info:
        image = image.convert("RGBA")

    if image.mode in ("RGBA", "LA"):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, JPEG_BACKGROUND)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background

    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def export_jpeg(image: Optional[Image.Image], quality: float = 0.8) -> bytes:
    """
    Encode ``image`` as JPEG for sharing.

    Args:
        image: Image to export.
        quality: Compression quality in 0...1 (mapped to JPEG quality 0-100).

    Returns:
        The encoded JPEG bytes.

    Raises:
        NoImageAvailable: If there is no image, or it has zero area.
        InvalidCoefficient: If ``quality`` is outside 0...1.
    """
    quality = _check_unit_interval(quality, "quality")

    if image is None or image.width == 0 or image.height == 0:
        raise NoImageAvailable("No image found to export")

    buffer = io.BytesIO()
    _flatten_for_jpeg(image).save(buffer, format="JPEG", quality=_round_half_up(quality * 100))
    data = buffer.getvalue()

    logger.debug(f"Exported {image.width}x{image.height} image as JPEG ({len(data)} bytes)")
    return data

"""Color palettes for worldflags terminal output."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ColorPalette:
    """Color palette for a UI theme."""

    primary: str = "cyan"
    success: str = "green"
    error: str = "red"
    warning: str = "yellow"
    muted: str = "dim"
    file_path: str = "cyan"


THEMES: dict[str, ColorPalette] = {
    "default": ColorPalette(),
    "minimal": ColorPalette(
        primary="white",
        success="white",
        error="white",
        warning="white",
        file_path="white",
    ),
}

_current_palette: Optional[ColorPalette] = None


def set_theme(name: str) -> None:
    """Set the current theme by name, falling back to the default theme."""
    global _current_palette
    _current_palette = THEMES.get(name, THEMES["default"])


def get_current_palette() -> ColorPalette:
    if _current_palette is None:
        set_theme("default")
    return _current_palette

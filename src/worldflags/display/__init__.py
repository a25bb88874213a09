"""Display module for worldflags.

This module provides themed console output and view rendering.
"""

from worldflags.display.console import get_console, reset_console
from worldflags.display.theme import THEMES, ColorPalette, get_current_palette, set_theme
from worldflags.display.views import display_config, display_detail, display_list

__all__ = [
    "get_console",
    "reset_console",
    "ColorPalette",
    "THEMES",
    "get_current_palette",
    "set_theme",
    "display_config",
    "display_detail",
    "display_list",
]

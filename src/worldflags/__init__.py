"""
worldflags - Country flag catalog with thumbnails and share export.

Usage:
    worldflags                      # List countries found in the assets directory
    worldflags --show France        # Show the detail view for one country
    worldflags --export 3 -o f.jpg  # Export a flag the way the share action does
    worldflags --init               # Initialize local config
"""

__version__ = "0.1.0"
__author__ = "Nozhan Amiri"

#!/usr/bin/env python3
"""
worldflags CLI entry point.

Usage:
    worldflags                        # List countries with thumbnail sizes
    worldflags --show France          # Detail view for a country (name or row index)
    worldflags --export 2 -o flag.jpg # Export the detail image as JPEG
    worldflags --thumbnails out/      # Write scaled thumbnails as PNG
    worldflags --init                 # Initialize local config
    worldflags --config               # Show configuration and settings
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from worldflags.assets import AssetBundle, AssetKey, load_string_table
from worldflags.catalog import FlagCatalog
from worldflags.catalog.scanner import ORDER_LISTING, ORDER_NAME
from worldflags.config import Settings, init_local_config, load_settings
from worldflags.display import display_config, display_detail, display_list, get_console
from worldflags.errors import WorldFlagsError
from worldflags.presentation import ListViewModel, render_detail, render_list, select_row, share_detail

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="worldflags",
        description="worldflags - Country flag catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize local configuration in the current directory",
    )

    # Screens
    parser.add_argument(
        "--show",
        type=str,
        metavar="COUNTRY",
        help="Show the detail view for a country (identifier or row index)",
    )

    parser.add_argument(
        "--export",
        type=str,
        metavar="COUNTRY",
        help="Export a country's flag as JPEG, as the share action does",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output file for --export (default: <country>.jpg)",
    )

    parser.add_argument(
        "--thumbnails",
        type=str,
        metavar="DIR",
        help="Write the list thumbnails as PNG files into DIR",
    )

    # Options
    parser.add_argument(
        "-p",
        "--path",
        type=str,
        help="Directory holding <Country>@3x.png flag images",
    )

    parser.add_argument(
        "--locale",
        type=str,
        help="Locale for display names (e.g. en, fr)",
    )

    parser.add_argument(
        "--order",
        choices=[ORDER_NAME, ORDER_LISTING],
        help="Catalog ordering (default: name)",
    )

    parser.add_argument(
        "--scale",
        type=float,
        help="Thumbnail scale coefficient in 0...1 (default: 0.5)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    # Info commands
    parser.add_argument(
        "--config",
        action="store_true",
        help="Show configuration locations and exit",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    return parser.parse_args(argv)


def apply_args_to_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command line arguments to settings."""
    if getattr(args, "verbose", False):
        settings.verbose = True

    if getattr(args, "path", None):
        settings.assets_dir = Path(args.path).expanduser().resolve()

    if getattr(args, "locale", None):
        settings.locale = args.locale

    if getattr(args, "order", None):
        settings.catalog_order = args.order

    # Out-of-range values are passed through so scale_down reports them
    if getattr(args, "scale", None) is not None:
        settings.thumbnail_scale = args.scale

    return settings


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )
    logging.getLogger("PIL").setLevel(logging.WARNING)


def show_version() -> None:
    """Show version information."""
    from worldflags import __version__

    print(f"worldflags version {__version__}")


def resolve_target(catalog: FlagCatalog, target: str) -> AssetKey:
    """Resolve a row index or identifier given on the command line."""
    if target.isdigit():
        return select_row(catalog, int(target))

    index = catalog.index_of(target)
    if index is None:
        raise WorldFlagsError(f"Country '{target}' is not in the catalog")
    return catalog[index]


def write_thumbnails(view: ListViewModel, output_dir: Path) -> int:
    """Save each row's thumbnail as PNG."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    for row in view.rows:
        if row.thumbnail is None:
            logger.warning(f"Skipping '{row.key}': no image")
            continue
        if row.thumbnail.width == 0 or row.thumbnail.height == 0:
            logger.warning(f"Skipping empty thumbnail for '{row.key}'")
            continue
        row.thumbnail.save(output_dir / f"{row.key.name}.png", format="PNG")
        written += 1

    get_console().print(f"[success]Wrote {written} thumbnail(s) to[/success] [path]{output_dir}[/path]")
    return 0


def run(args: argparse.Namespace, settings: Settings) -> int:
    """Build the catalog and run the requested screen."""
    console = get_console()

    catalog = FlagCatalog(settings.assets_dir, order=settings.catalog_order).build()
    bundle = AssetBundle(settings.assets_dir)
    strings = load_string_table(settings.locale, settings.strings_dir)

    if args.thumbnails:
        view = render_list(catalog, bundle, strings, settings.thumbnail_scale)
        return write_thumbnails(view, Path(args.thumbnails))

    if args.export:
        detail = render_detail(resolve_target(catalog, args.export), bundle, strings)
        payload = share_detail(detail, settings.export_quality)
        output = Path(args.output) if args.output else Path(payload.filename)
        output.write_bytes(payload.data)
        console.print(
            f"[success]Exported {detail.title}[/success] "
            f"({len(payload.data)} bytes, {payload.mime_type}) to [path]{output}[/path]"
        )
        return 0

    if args.show:
        key = resolve_target(catalog, args.show)
        detail = render_detail(key, bundle, strings)
        display_detail(detail, console, path=str(bundle.image_path(key)))
        return 0

    display_list(render_list(catalog, bundle, strings, settings.thumbnail_scale), console)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.version:
        show_version()
        return 0

    if args.init:
        success = init_local_config()
        return 0 if success else 1

    settings = load_settings()
    settings = apply_args_to_settings(args, settings)
    configure_logging(settings.verbose)

    if args.config:
        display_config(settings, get_console())
        return 0

    try:
        return run(args, settings)
    except (WorldFlagsError, IndexError) as e:
        get_console().print(f"[error]Error:[/error] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

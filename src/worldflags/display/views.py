"""Terminal rendering of the list and detail view models."""

from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.table import Table

from worldflags.presentation import DetailViewModel, ListViewModel

if TYPE_CHECKING:
    from worldflags.config import Settings


def display_list(view: ListViewModel, console: Console) -> None:
    """Print the country list as a table of rows with thumbnail sizes."""
    table = Table(title=view.title, title_style="primary")
    table.add_column("#", justify="right", style="muted")
    table.add_column("Country", style="primary")
    table.add_column("Key")
    table.add_column("Thumbnail", justify="right")

    for index, row in enumerate(view.rows):
        if row.thumbnail is None:
            size = "[warning]missing[/warning]"
        else:
            size = f"{row.thumbnail.width}x{row.thumbnail.height}"
        table.add_row(str(index), row.title, row.key.name, size)

    console.print(table)
    if not view.rows:
        console.print("[warning]No flag images found.[/warning]")


def display_detail(view: DetailViewModel, console: Console, path: Optional[str] = None) -> None:
    """Print the detail screen summary for one country."""
    console.print(f"\n[primary]{view.title}[/primary]")
    console.print("-" * 40)
    console.print(f"  Key:     {view.key.name}")
    if view.image is not None:
        console.print(f"  Size:    {view.image.width}x{view.image.height}")
        console.print(f"  Mode:    {view.image.mode}")
    else:
        console.print("  Size:    [warning](no image)[/warning]")
    console.print(f"  Border:  {view.border_width}px {view.border_color}")
    if path:
        console.print(f"  File:    [path]{path}[/path]")


def display_config(settings: "Settings", console: Console) -> None:
    """Display configuration paths and active settings."""
    paths = settings.config_paths

    console.print("\n[bold]Configuration Paths:[/bold]")
    console.print("-" * 60)
    if paths is not None:
        console.print(f"  Local:   {paths.local_dir or '(none)'}")
        console.print(f"  User:    {paths.user_dir or '(none)'}")
        console.print(f"  .env:    {paths.env_file or '(none)'}")
        console.print(f"  config:  {paths.config_file or '(none)'}")
    console.print(f"  strings: {settings.strings_dir or '(none)'}")

    console.print("\n[bold]Active Settings:[/bold]")
    console.print("-" * 60)
    console.print(f"  Assets Directory: {settings.assets_dir}")
    console.print(f"  Locale:           {settings.locale}")
    console.print(f"  Catalog Order:    {settings.catalog_order}")
    console.print(f"  Thumbnail Scale:  {settings.thumbnail_scale}")
    console.print(f"  Export Quality:   {settings.export_quality}")

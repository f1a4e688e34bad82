"""Inspect the sign image asset set."""

import typer

from gesturio.core.errors import AssetBundleNotFoundError

from ..utils.config import get_bundle, get_resolver
from ..utils.display import console, print_asset_table, print_coverage, print_symbol


def assets(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every asset file"),
) -> None:
    """Show which letters and digits have sign images.

    Example:
        gesturio assets
        gesturio assets --verbose
    """
    try:
        bundle = get_bundle().require()
    except AssetBundleNotFoundError as e:
        console.print(f"[red]Error:[/] {e.message}")
        console.print("[dim]Set GESTURIO_ASSETS_DIR to the directory holding the images.[/]")
        raise typer.Exit(1)

    resolver = get_resolver()
    names = bundle.list_names()
    console.print(f"[dim]Assets directory:[/] {bundle.base_path}")
    print_coverage(resolver.available_characters(), resolver.missing_characters(), len(names))

    if verbose:
        print_asset_table([bundle.describe(bundle.base_path / name) for name in names])

    if resolver.icon() is None:
        console.print("[yellow]No application icon (GesturioIcon.png)[/]")


def show(
    character: str = typer.Argument(..., help="Character to resolve"),
) -> None:
    """Show how a single character resolves.

    Example:
        gesturio show a
        gesturio show "#"
    """
    if len(character) != 1:
        console.print(f"[red]Error:[/] expected a single character, got {character!r}")
        raise typer.Exit(1)

    symbol = get_resolver().resolve(character)
    info = get_bundle().describe(symbol.path) if symbol.path is not None else None
    print_symbol(symbol, info)

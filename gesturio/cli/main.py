"""Gesturio CLI - ASL fingerspelling in the terminal.

Usage:
    gesturio <command> [options]

Commands:
    translate    Show fingerspelling cards for text
    spell        Print the fingerspelling sequence as plain text
    interactive  Home screen and live translator
    assets       Show sign image coverage
    show         Show how one character resolves
"""

import typer

from gesturio import __version__
from gesturio.core import configure_logging, get_config
from gesturio.core.errors import ConfigurationError

from .commands import assets, interactive, show, spell, translate
from .utils.display import console

# Create the main app
app = typer.Typer(
    name="gesturio",
    help="Gesturio CLI - ASL fingerspelling for typed text",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"Gesturio CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
) -> None:
    """Gesturio CLI - ASL fingerspelling for typed text."""
    try:
        config = get_config()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/] {e.message}")
        raise typer.Exit(2)
    configure_logging(config.log_level)


# Register commands
app.command("translate")(translate)
app.command("spell")(spell)
app.command("interactive")(interactive)
app.command("assets")(assets)
app.command("show")(show)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()

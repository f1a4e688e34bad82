"""Rich display utilities for CLI output."""

from typing import Optional, Sequence

from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from gesturio.core.types import ImageInfo, Screen
from gesturio.fingerspelling import SessionSnapshot, SignSymbol, TranslationResult

console = Console()

PLACEHOLDER_GLYPH = "?"
IMAGE_GLYPH = "✋"

HOME_TITLE = "Gesturio"
HOME_TAGLINE = "Real-time ASL translation at your fingertips."
HEADER_SUBTITLE = "Real-time ASL Fingerspelling"
EMPTY_TITLE = "Bridge the Gap"
EMPTY_MESSAGE = "Enter text to convert it into\nvisual ASL signs instantly."


def symbol_color(symbol: SignSymbol) -> str:
    """Get border color for a card."""
    return "blue" if symbol.found else "bright_black"


def card(symbol: SignSymbol, width: int = 9) -> Panel:
    """Render one fingerspelling card.

    Found cards show the image file name; placeholders show a question
    mark over the character.
    """
    if symbol.found:
        body = Text.assemble((IMAGE_GLYPH, "bold blue"), "\n", (symbol.asset or "", "dim"))
    else:
        body = Text.assemble((PLACEHOLDER_GLYPH, "blue"), "\n", (symbol.label, "bold blue"))
    return Panel(
        Align.center(body),
        subtitle=Text(symbol.label, style="bold blue"),
        border_style=symbol_color(symbol),
        width=width,
    )


def print_hero(symbol: SignSymbol) -> None:
    """Print the "Current Sign" preview."""
    console.print(
        Panel(
            Align.center(card(symbol, width=15)),
            title="[bold blue]Current Sign[/]",
            expand=False,
        )
    )


def print_cards(result: TranslationResult, cards: Sequence[Sequence[SignSymbol]]) -> None:
    """Print word groups of cards with their headings and dividers."""
    for word, symbols in zip(result.words, cards):
        console.print(f"[bold blue]{word.label}[/]")
        if symbols:
            console.print(Columns([card(symbol) for symbol in symbols]))
        else:
            console.print("[dim]...[/]")
        if word.has_divider:
            console.print(Rule(style="blue"))


def print_empty_state() -> None:
    """Print the translator's empty state."""
    console.print(
        Panel(
            Align.center(Text.assemble((EMPTY_TITLE, "bold blue"), "\n\n", (EMPTY_MESSAGE, "blue"))),
            border_style="blue",
        )
    )


def print_header() -> None:
    """Print the translator screen header."""
    console.print(Align.center(Text(HOME_TITLE, style="bold blue")))
    console.print(Align.center(Text(HEADER_SUBTITLE, style="blue")))
    console.print(
        "[dim]Type text and press Enter. :clear empties the field, :back returns home, :quit exits.[/]"
    )


def print_home(has_icon: bool) -> None:
    """Print the home screen."""
    icon = Text("[Gesturio icon]" if has_icon else IMAGE_GLYPH, style="bold blue")
    console.print(
        Panel(
            Align.center(
                Group(
                    Align.center(icon),
                    Align.center(Text(HOME_TITLE, style="bold blue")),
                    Align.center(Text(HOME_TAGLINE, style="dim")),
                )
            ),
            border_style="blue",
        )
    )


def render_snapshot(snapshot: SessionSnapshot, has_icon: bool = False) -> None:
    """Render a full frame for the interactive session."""
    if snapshot.screen is Screen.HOME:
        print_home(has_icon)
        return

    print_header()
    if snapshot.is_empty:
        print_empty_state()
        return
    if snapshot.show_hero and snapshot.hero is not None:
        print_hero(snapshot.hero)
    print_cards(snapshot.result, snapshot.cards)


def print_coverage(available: list[str], missing: list[str], total_assets: int) -> None:
    """Print which alphabet characters have images."""
    table = Table(title="Sign Image Coverage")
    table.add_column("Metric", style="bold")
    table.add_column("Value")

    table.add_row("Asset files", str(total_assets))
    table.add_row("With image", f"[green]{' '.join(c.upper() for c in available) or '-'}[/]")
    table.add_row("Placeholder", f"[yellow]{' '.join(c.upper() for c in missing) or '-'}[/]")

    console.print(table)


def print_asset_table(infos: list[ImageInfo]) -> None:
    """Print a table of asset files."""
    if not infos:
        console.print("[dim]No asset files found[/]")
        return

    table = Table(title="Asset Files")
    table.add_column("File", style="bold")
    table.add_column("Format")
    table.add_column("Resolution", justify="right")

    for info in infos:
        table.add_row(info.file, info.format or "[red]unreadable[/]", info.resolution or "-")

    console.print(table)


def print_symbol(symbol: SignSymbol, info: Optional[ImageInfo] = None) -> None:
    """Print details for one resolved character."""
    status = "[green]found[/]" if symbol.found else "[yellow]placeholder[/]"
    lines = [
        f"[dim]Character:[/] {symbol.character}",
        f"[dim]Lookup key:[/] {symbol.key}",
        f"[dim]Status:[/] {status}",
    ]
    if symbol.asset:
        lines.append(f"[dim]Asset:[/] {symbol.asset}")
    if info is not None and info.resolution:
        lines.append(f"[dim]Image:[/] {info.format} {info.resolution}")

    console.print(Panel("\n".join(lines), title=f"[bold]{symbol.label}[/bold]", expand=False))

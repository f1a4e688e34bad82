"""Translate text to ASL fingerspelling cards."""

import json

import typer

from gesturio.core.errors import InputTooLongError
from gesturio.fingerspelling import active_letter, translate as translate_text

from ..utils.config import get_max_input_length, get_resolver
from ..utils.display import console, print_cards, print_empty_state, print_hero


def _check_length(text: str) -> None:
    limit = get_max_input_length()
    if len(text) > limit:
        error = InputTooLongError(len(text), limit)
        console.print(f"[red]Error:[/] {error.message}")
        raise typer.Exit(1)


def translate(
    text: str = typer.Argument(..., help="Text to fingerspell"),
    hero: bool = typer.Option(
        True, "--hero/--no-hero", help="Show the current sign preview"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the card layout as JSON"
    ),
) -> None:
    """Translate text to ASL fingerspelling cards.

    Letters and digits become cards grouped by word; anything else is
    dropped. Characters without an image show a placeholder card.

    Example:
        gesturio translate "Hi there"
        gesturio translate "Room 42" --json
    """
    _check_length(text)
    resolver = get_resolver()

    result = translate_text(text)
    cards = resolver.resolve_result(result)
    latest = active_letter(text)
    hero_symbol = resolver.resolve(latest) if latest is not None else None

    if as_json:
        data = result.to_dict()
        for word, symbols in zip(data["words"], cards):
            word["cards"] = [symbol.to_dict() for symbol in symbols]
        data["hero"] = hero_symbol.to_dict() if hero_symbol else None
        console.print_json(json.dumps(data, ensure_ascii=False))
        return

    if not text:
        print_empty_state()
        return

    if hero and hero_symbol is not None:
        print_hero(hero_symbol)
    print_cards(result, cards)

    missing = sorted({s.label for group in cards for s in group if s.is_placeholder})
    if missing:
        console.print(f"[yellow]No image for:[/] {', '.join(missing)}", highlight=False)


def spell(
    text: str = typer.Argument(..., help="Text to fingerspell"),
    letter_separator: str = typer.Option("-", "--letter-sep", help="Separator between letters"),
    word_separator: str = typer.Option(" ", "--word-sep", help="Separator between words"),
) -> None:
    """Print the fingerspelling sequence as plain text (no cards).

    Example:
        gesturio spell "Hi there"
        # Output: H-I T-H-E-R-E
    """
    _check_length(text)
    result = translate_text(text)
    console.print(
        result.to_string(letter_separator=letter_separator, word_separator=word_separator),
        highlight=False,
        markup=False,
    )

"""CLI utilities."""

from .config import get_bundle, get_max_input_length, get_resolver
from .display import (
    console,
    print_asset_table,
    print_cards,
    print_coverage,
    print_empty_state,
    print_hero,
    print_symbol,
    render_snapshot,
)

__all__ = [
    "get_bundle",
    "get_resolver",
    "get_max_input_length",
    "console",
    "print_cards",
    "print_hero",
    "print_empty_state",
    "print_coverage",
    "print_asset_table",
    "print_symbol",
    "render_snapshot",
]

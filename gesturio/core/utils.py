"""Common utility functions for Gesturio.

Provides helper functions used across multiple packages.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Iterator, Union

from .config import LogLevel

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ============ Character Utilities ============


def is_sign_character(char: str) -> bool:
    """Check whether a character has a fingerspelling sign.

    Letters and digits in any script qualify; punctuation, symbols,
    whitespace and emoji do not.

    Examples:
        >>> is_sign_character("a")
        True
        >>> is_sign_character("5")
        True
        >>> is_sign_character("!")
        False
    """
    return char.isalpha() or char.isnumeric()


def iter_sign_characters(text: str) -> Iterator[str]:
    """Yield the sign characters of text in order.

    Text is NFC-normalized first so that a letter typed as base character
    plus combining accent counts as one letter.
    """
    for char in unicodedata.normalize("NFC", text):
        if is_sign_character(char):
            yield char


def to_lookup_key(char: str) -> str:
    """Normalize a character to its asset lookup key (lowercase)."""
    return char.lower()


def display_label(char: str) -> str:
    """Get the card label for a character (uppercase).

    Examples:
        >>> display_label("h")
        'H'
    """
    return char.upper()


def clamp_text(text: str, limit: int) -> str:
    """Truncate text to at most limit characters."""
    if len(text) <= limit:
        return text
    return text[:limit]


# ============ Logging ============


def configure_logging(level: Union[LogLevel, str] = LogLevel.INFO) -> None:
    """Configure root logging for the CLI and API entry points.

    Args:
        level: LogLevel member or level name
    """
    name = level.value if isinstance(level, LogLevel) else str(level).upper()
    logging.basicConfig(level=name, format=LOG_FORMAT)
    logging.getLogger("gesturio").setLevel(name)

"""Active-letter selector for the "Current Sign" preview."""

from typing import Optional

from gesturio.core.utils import iter_sign_characters


def active_letter(text: str) -> Optional[str]:
    """Return the last letter or digit in text, or None if there is none.

    Examples:
        >>> active_letter("Hello 5!")
        '5'
        >>> active_letter("?!") is None
        True
    """
    latest = None
    for char in iter_sign_characters(text):
        latest = char
    return latest

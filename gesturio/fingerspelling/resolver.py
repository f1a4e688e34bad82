"""Resolve characters to sign images, falling back to placeholders.

A lookup never fails: a character without an image resolves to a
placeholder symbol that carries the character itself, which the
presentation layer shows in place of the hand-shape image.
"""

import logging
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from gesturio.core.protocols import AssetLookup
from gesturio.core.types import SymbolStatus
from gesturio.core.utils import display_label, to_lookup_key

from .assets import APP_ICON_NAME
from .normalizer import TranslationResult, Word

logger = logging.getLogger(__name__)

# Asset names tried in order for a lookup key
DEFAULT_NAMING = ("{key}", "{key}.jpeg")

# Characters with a standard ASL fingerspelling hand shape
ASL_ALPHABET = string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class SignSymbol:
    """Displayable result of resolving one character.

    Symbols compare by key, status and asset, so "A" and "a" resolve to
    equal symbols even though each carries its own original character.
    """

    key: str
    status: SymbolStatus
    asset: Optional[str] = None
    character: str = field(default="", compare=False)
    path: Optional[Path] = field(default=None, compare=False, repr=False)

    @property
    def found(self) -> bool:
        return self.status is SymbolStatus.FOUND

    @property
    def is_placeholder(self) -> bool:
        return self.status is SymbolStatus.PLACEHOLDER

    @property
    def label(self) -> str:
        """Uppercased character, shown under the card and on placeholders."""
        return display_label(self.character or self.key)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "character": self.character,
            "key": self.key,
            "label": self.label,
            "status": self.status.value,
            "asset": self.asset,
        }


class SymbolResolver:
    """Resolves characters against an asset set using ordered naming rules."""

    def __init__(
        self,
        assets: AssetLookup,
        naming: Sequence[str] = DEFAULT_NAMING,
    ):
        """Initialize the resolver.

        Args:
            assets: Asset set to query
            naming: Name templates tried in order; "{key}" is the lookup key
        """
        self.assets = assets
        self.naming = tuple(naming)

    def candidate_names(self, character: str) -> list[str]:
        """Asset names tried for a character, in order."""
        key = to_lookup_key(character)
        return [template.format(key=key) for template in self.naming]

    def resolve(self, character: str) -> SignSymbol:
        """Resolve a character to its sign image or a placeholder.

        Args:
            character: Single character, in any case

        Returns:
            FOUND symbol naming the asset, or PLACEHOLDER symbol
        """
        key = to_lookup_key(character)
        for name in self.candidate_names(character):
            path = self.assets.resolve(name)
            if path is not None:
                return SignSymbol(
                    key=key,
                    status=SymbolStatus.FOUND,
                    asset=path.name,
                    character=character,
                    path=path,
                )

        logger.debug("No sign image for %r, using placeholder", character)
        return SignSymbol(key=key, status=SymbolStatus.PLACEHOLDER, character=character)

    def resolve_word(self, word: Word) -> list[SignSymbol]:
        """Resolve every letter of a word."""
        return [self.resolve(letter.character) for letter in word]

    def resolve_result(self, result: TranslationResult) -> list[list[SignSymbol]]:
        """Resolve every letter of a translation, grouped by word."""
        return [self.resolve_word(word) for word in result.words]

    def available_characters(self, alphabet: str = ASL_ALPHABET) -> list[str]:
        """Characters of alphabet that resolve to an image."""
        return [char for char in alphabet if self.resolve(char).found]

    def missing_characters(self, alphabet: str = ASL_ALPHABET) -> list[str]:
        """Characters of alphabet that fall back to a placeholder."""
        return [char for char in alphabet if self.resolve(char).is_placeholder]

    def icon(self) -> Optional[Path]:
        """Get the application icon from the asset set."""
        return self.assets.resolve(APP_ICON_NAME)

"""Sign service - asset coverage and per-character lookup."""

from pathlib import Path
from typing import Optional

from gesturio.core.errors import SymbolNotFoundError
from gesturio.fingerspelling import AssetBundle, SymbolResolver

from .translation_service import card_dict


def _require_single(character: str) -> None:
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")


class SignService:
    """Answers questions about the sign image asset set."""

    def __init__(self, bundle: AssetBundle, resolver: SymbolResolver):
        self.bundle = bundle
        self.resolver = resolver

    def list_signs(self) -> dict:
        """List which alphabet characters have images."""
        return {
            "available": self.resolver.available_characters(),
            "missing": self.resolver.missing_characters(),
            "total_assets": len(self.bundle.list_names()),
        }

    def get_sign(self, character: str) -> dict:
        """
        Resolve one character, including image metadata when found.

        Raises:
            ValueError: If character is not exactly one character
        """
        _require_single(character)

        symbol = self.resolver.resolve(character)
        sign = card_dict(symbol)
        sign["image"] = None
        if symbol.path is not None:
            info = self.bundle.describe(symbol.path)
            sign["image"] = {
                "file": info.file,
                "format": info.format,
                "width": info.width,
                "height": info.height,
            }
        return sign

    def get_image_path(self, character: str) -> Path:
        """
        Get the image file for a character.

        Raises:
            ValueError: If character is not exactly one character
            SymbolNotFoundError: If the character resolves to a placeholder
        """
        _require_single(character)
        symbol = self.resolver.resolve(character)
        if symbol.path is None:
            raise SymbolNotFoundError(character)
        return symbol.path

    def get_icon_path(self) -> Optional[Path]:
        """Get the application icon file, if present."""
        return self.resolver.icon()

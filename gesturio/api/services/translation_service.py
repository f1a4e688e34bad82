"""Translation service - text to grouped fingerspelling cards."""

from urllib.parse import quote

from gesturio.core.errors import InputTooLongError
from gesturio.fingerspelling import (
    SignSymbol,
    SymbolResolver,
    TranslationResult,
    active_letter,
    translate,
)


def card_dict(symbol: SignSymbol) -> dict:
    """Serialize a symbol as an API card, adding its image URL."""
    card = symbol.to_dict()
    card.pop("asset")
    card["image_url"] = f"/api/signs/{quote(symbol.key, safe='')}/image" if symbol.found else None
    return card


class TranslationService:
    """Builds the card layout for a piece of text."""

    def __init__(self, resolver: SymbolResolver, max_input_length: int = 2000):
        self.resolver = resolver
        self.max_input_length = max_input_length

    def translate_text(self, text: str) -> dict:
        """
        Translate text to word groups of cards plus the hero card.

        Args:
            text: Raw input text

        Returns:
            Dictionary matching TranslateResponse

        Raises:
            InputTooLongError: If text exceeds max_input_length
        """
        if len(text) > self.max_input_length:
            raise InputTooLongError(len(text), self.max_input_length)

        result: TranslationResult = translate(text)
        groups = self.resolver.resolve_result(result)

        words = []
        missing: list[str] = []
        for word, symbols in zip(result.words, groups):
            for symbol in symbols:
                if symbol.is_placeholder and symbol.label not in missing:
                    missing.append(symbol.label)
            words.append({
                "position": word.position,
                "label": word.label,
                "is_last": word.is_last,
                "has_divider": word.has_divider,
                "cards": [card_dict(symbol) for symbol in symbols],
            })

        latest = active_letter(text)
        hero = card_dict(self.resolver.resolve(latest)) if latest is not None else None

        return {
            "text": text,
            "words": words,
            "hero": hero,
            "fingerspelling": result.to_string(),
            "letter_count": result.letter_count,
            "missing_signs": missing,
        }

# Fingerspelling package - text to ASL fingerspelling cards
"""
Convert typed text into word groups of ASL fingerspelling cards.

Example usage:
    from gesturio.fingerspelling import translate, active_letter, SymbolResolver, AssetBundle

    result = translate("Hi there")
    print(result.to_string())  # "H-I T-H-E-R-E"

    resolver = SymbolResolver(AssetBundle("data/signs"))
    for word in result.words:
        print(word.label, [s.asset or s.label for s in resolver.resolve_word(word)])

    print(active_letter("Hello 5!"))  # "5"
"""

from .assets import (
    APP_ICON_NAME,
    AssetBundle,
    media_type_for,
)
from .normalizer import (
    Letter,
    TranslationResult,
    Word,
    normalize,
    translate,
)
from .resolver import (
    ASL_ALPHABET,
    DEFAULT_NAMING,
    SignSymbol,
    SymbolResolver,
)
from .selector import active_letter
from .session import (
    SessionSnapshot,
    TranslatorSession,
)

__all__ = [
    # Normalizer
    "normalize",
    "translate",
    "Letter",
    "Word",
    "TranslationResult",
    # Selector
    "active_letter",
    # Resolver
    "SymbolResolver",
    "SignSymbol",
    "DEFAULT_NAMING",
    "ASL_ALPHABET",
    # Assets
    "AssetBundle",
    "APP_ICON_NAME",
    "media_type_for",
    # Session
    "TranslatorSession",
    "SessionSnapshot",
]

"""Gesturio - typed text to ASL fingerspelling cards.

Example usage:
    from gesturio import translate, active_letter, SymbolResolver, AssetBundle

    result = translate("Hi there")
    print(result.to_lists())  # [["H", "i"], ["t", "h", "e", "r", "e"]]

    resolver = SymbolResolver(AssetBundle("data/signs"))
    print(resolver.resolve("h").status)
"""

__version__ = "1.0.0"

from .fingerspelling import (
    AssetBundle,
    Letter,
    SessionSnapshot,
    SignSymbol,
    SymbolResolver,
    TranslationResult,
    TranslatorSession,
    Word,
    active_letter,
    normalize,
    translate,
)

__all__ = [
    "__version__",
    "normalize",
    "translate",
    "active_letter",
    "Letter",
    "Word",
    "TranslationResult",
    "AssetBundle",
    "SignSymbol",
    "SymbolResolver",
    "TranslatorSession",
    "SessionSnapshot",
]

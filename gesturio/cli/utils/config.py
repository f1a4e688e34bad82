"""Configuration and asset utilities for CLI."""

from functools import lru_cache

from gesturio.core import get_config
from gesturio.fingerspelling import AssetBundle, SymbolResolver


@lru_cache
def get_bundle() -> AssetBundle:
    """Get the AssetBundle for the configured asset directory."""
    return AssetBundle(get_config().assets_dir)


@lru_cache
def get_resolver() -> SymbolResolver:
    """Get a SymbolResolver over the configured assets."""
    return SymbolResolver(get_bundle())


def get_max_input_length() -> int:
    """Get the configured bound on input text."""
    return get_config().max_input_length

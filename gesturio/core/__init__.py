"""Core package - shared utilities, types, and configuration.

This package provides common functionality used across all Gesturio packages:
- Configuration management
- Shared type definitions
- Protocol interfaces
- Custom exceptions
- Utility functions

Example usage:
    from gesturio.core import get_config, SymbolStatus, SymbolNotFoundError

    config = get_config()
    print(f"Assets directory: {config.assets_dir}")

    if symbol.status is SymbolStatus.PLACEHOLDER:
        raise SymbolNotFoundError(symbol.character)
"""

# Configuration
from .config import (
    Environment,
    GesturioConfig,
    LogLevel,
    clear_config_cache,
    get_config,
)

# Types
from .types import (
    ImageInfo,
    Screen,
    SymbolStatus,
)

# Protocols
from .protocols import (
    AssetLookup,
    Serializable,
)

# Errors
from .errors import (
    AssetBundleNotFoundError,
    AssetError,
    ConfigurationError,
    GesturioError,
    InputTooLongError,
    InvalidConfigError,
    SymbolNotFoundError,
    TranslationError,
)

# Utilities
from .utils import (
    clamp_text,
    configure_logging,
    display_label,
    is_sign_character,
    iter_sign_characters,
    to_lookup_key,
)

__all__ = [
    # Config
    "Environment",
    "LogLevel",
    "GesturioConfig",
    "get_config",
    "clear_config_cache",
    # Types
    "Screen",
    "SymbolStatus",
    "ImageInfo",
    # Protocols
    "AssetLookup",
    "Serializable",
    # Errors
    "GesturioError",
    "ConfigurationError",
    "InvalidConfigError",
    "TranslationError",
    "InputTooLongError",
    "AssetError",
    "AssetBundleNotFoundError",
    "SymbolNotFoundError",
    # Utils
    "is_sign_character",
    "iter_sign_characters",
    "to_lookup_key",
    "display_label",
    "clamp_text",
    "configure_logging",
]

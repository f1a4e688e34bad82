"""Custom exception classes for Gesturio.

The translation core itself never raises: every input is valid and a
missing image degrades to a placeholder card. These errors belong to the
edges of the application (configuration, API and CLI surfaces).

Exception Hierarchy:
    GesturioError (base)
    ├── ConfigurationError
    │   └── InvalidConfigError
    ├── TranslationError
    │   └── InputTooLongError
    └── AssetError
        ├── AssetBundleNotFoundError
        └── SymbolNotFoundError
"""

from typing import Any, Optional


class GesturioError(Exception):
    """Base exception for all Gesturio errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        result: dict[str, Any] = {
            "error": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# ============ Configuration Errors ============


class ConfigurationError(GesturioError):
    """Error in application configuration."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration value could not be parsed."""

    def __init__(self, env_var: str, value: str, reason: str):
        super().__init__(
            message=f"Invalid value for {env_var}: {value!r} ({reason})",
            code="invalid_config",
            details={"env_var": env_var, "value": value, "reason": reason},
        )
        self.env_var = env_var


# ============ Translation Errors ============


class TranslationError(GesturioError):
    """Base class for translation-related errors."""

    pass


class InputTooLongError(TranslationError):
    """Input text exceeds the configured length bound."""

    def __init__(self, length: int, limit: int):
        super().__init__(
            message=f"Input is {length} characters long; the limit is {limit}",
            code="input_too_long",
            details={"length": length, "limit": limit},
        )
        self.length = length
        self.limit = limit


# ============ Asset Errors ============


class AssetError(GesturioError):
    """Base class for sign image asset errors."""

    pass


class AssetBundleNotFoundError(AssetError):
    """The asset directory does not exist."""

    def __init__(self, path: str):
        super().__init__(
            message=f"Asset directory not found: {path}",
            code="asset_bundle_not_found",
            details={"path": path},
        )
        self.path = path


class SymbolNotFoundError(AssetError):
    """No image exists for a character."""

    def __init__(self, character: str):
        super().__init__(
            message=f"No sign image for '{character}'",
            code="symbol_not_found",
            details={"character": character},
        )
        self.character = character

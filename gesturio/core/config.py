"""Environment and path configuration for Gesturio.

Provides centralized configuration with sensible defaults.
All configuration is loaded from environment variables.

Usage:
    from gesturio.core import get_config

    config = get_config()
    print(f"Assets directory: {config.assets_dir}")
    print(f"Environment: {config.env}")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path

from .errors import InvalidConfigError

DEFAULT_MAX_INPUT_LENGTH = 2000


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class GesturioConfig:
    """Application configuration.

    Immutable configuration object created from environment variables.

    Attributes:
        data_dir: Base data directory
        assets_dir: Directory holding the fingerspelling images
        env: Current environment (development/production/testing)
        log_level: Logging level
        debug: Debug mode enabled
        max_input_length: Upper bound on the text buffer, in characters
        api_host: API server host
        api_port: API server port
        cors_origins: Allowed CORS origins
    """

    # Core paths
    data_dir: Path
    assets_dir: Path

    # Environment
    env: Environment
    log_level: LogLevel
    debug: bool

    # Input
    max_input_length: int

    # API settings
    api_host: str
    api_port: int
    cors_origins: tuple[str, ...]

    def __post_init__(self) -> None:
        """Ensure directories exist in non-testing environments."""
        if self.env != Environment.TESTING:
            for path in [self.data_dir, self.assets_dir]:
                path.mkdir(parents=True, exist_ok=True)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.env == Environment.TESTING


def _find_project_root() -> Path:
    """Find project root by looking for the gesturio/ package directory.

    Walks up from the current file's location to find the project root.
    Falls back to current working directory if not found.

    Returns:
        Path to project root
    """
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "gesturio").is_dir() and (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


def _get_env_path(var: str, default: Path) -> Path:
    """Get path from environment variable or use default.

    Args:
        var: Environment variable name
        default: Default path if not set

    Returns:
        Absolute path from env var or default
    """
    value = os.environ.get(var)
    if value:
        path = Path(value)
        # Relative paths are anchored at the project root
        if not path.is_absolute():
            path = _find_project_root() / path
        return path
    return default


def _get_env_int(var: str, default: int, minimum: int = 1) -> int:
    """Get a positive integer from an environment variable.

    Raises:
        InvalidConfigError: If the value is not an integer or is below minimum
    """
    value = os.environ.get(var)
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError:
        raise InvalidConfigError(var, value, "expected an integer") from None
    if number < minimum:
        raise InvalidConfigError(var, value, f"must be at least {minimum}")
    return number


@lru_cache(maxsize=1)
def get_config() -> GesturioConfig:
    """Get the application configuration (singleton).

    Configuration is loaded from environment variables:
    - GESTURIO_DATA_DIR: Base data directory
    - GESTURIO_ASSETS_DIR: Fingerspelling image directory
    - GESTURIO_ENV: Environment (development/production/testing)
    - GESTURIO_LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)
    - GESTURIO_DEBUG: Enable debug mode (1/true/yes)
    - GESTURIO_MAX_INPUT_LENGTH: Text buffer bound (default: 2000)
    - API_HOST: API server host (default: 0.0.0.0)
    - API_PORT: API server port (default: 8000)
    - API_CORS_ORIGINS: Comma-separated CORS origins (default: *)

    Returns:
        Immutable GesturioConfig instance

    Raises:
        InvalidConfigError: If a numeric setting cannot be parsed
    """
    project_root = _find_project_root()

    env_str = os.environ.get("GESTURIO_ENV", "development").lower()
    try:
        env = Environment(env_str)
    except ValueError:
        env = Environment.DEVELOPMENT

    log_str = os.environ.get("GESTURIO_LOG_LEVEL", "INFO").upper()
    try:
        log_level = LogLevel(log_str)
    except ValueError:
        log_level = LogLevel.INFO

    debug_str = os.environ.get("GESTURIO_DEBUG", "").lower()
    debug = debug_str in ("1", "true", "yes") or env == Environment.DEVELOPMENT

    # Paths
    data_dir = _get_env_path("GESTURIO_DATA_DIR", project_root / "data")
    assets_dir = _get_env_path("GESTURIO_ASSETS_DIR", data_dir / "signs")

    max_input_length = _get_env_int("GESTURIO_MAX_INPUT_LENGTH", DEFAULT_MAX_INPUT_LENGTH)

    # API settings
    api_host = os.environ.get("API_HOST", "0.0.0.0")
    api_port = _get_env_int("API_PORT", 8000)
    cors_str = os.environ.get("API_CORS_ORIGINS", "*")
    cors_origins = tuple(s.strip() for s in cors_str.split(",") if s.strip())

    return GesturioConfig(
        data_dir=data_dir,
        assets_dir=assets_dir,
        env=env,
        log_level=log_level,
        debug=debug,
        max_input_length=max_input_length,
        api_host=api_host,
        api_port=api_port,
        cors_origins=cors_origins,
    )


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing when environment variables change
    between test cases.
    """
    get_config.cache_clear()

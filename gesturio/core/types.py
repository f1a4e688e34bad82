"""Shared type definitions for Gesturio.

Core Types (shared across packages):
- Screen: Navigation state of the app
- SymbolStatus: Outcome of resolving a character to an image
- ImageInfo: Metadata about a sign image file

Domain-Specific Types (remain in packages):
- fingerspelling.Letter / Word / TranslationResult: Normalizer output
- fingerspelling.SignSymbol: Resolver output
- fingerspelling.SessionSnapshot: Translator session state
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Screen(Enum):
    """Which of the two screens is showing."""

    HOME = "home"
    TRANSLATOR = "translator"


class SymbolStatus(Enum):
    """Tag on a resolved symbol.

    FOUND carries an image asset; PLACEHOLDER falls back to the
    character itself.
    """

    FOUND = "found"
    PLACEHOLDER = "placeholder"


@dataclass
class ImageInfo:
    """Metadata about an image file, read without decoding pixel data."""

    file: str
    format: str = ""
    resolution: str = ""

    @property
    def resolution_tuple(self) -> tuple[int, int]:
        """Get resolution as (width, height) tuple."""
        if not self.resolution or "x" not in self.resolution:
            return (0, 0)
        parts = self.resolution.split("x")
        return (int(parts[0]), int(parts[1]))

    @property
    def width(self) -> int:
        return self.resolution_tuple[0]

    @property
    def height(self) -> int:
        return self.resolution_tuple[1]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "file": self.file,
            "format": self.format,
            "resolution": self.resolution,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ImageInfo":
        """Create from dictionary."""
        resolution = data.get("resolution", "")
        # Handle both string and tuple/list formats
        if isinstance(resolution, (list, tuple)) and len(resolution) == 2:
            resolution = f"{resolution[0]}x{resolution[1]}"

        return cls(
            file=data.get("file", ""),
            format=data.get("format", ""),
            resolution=resolution,
        )

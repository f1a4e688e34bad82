"""Protocol definitions for Gesturio interfaces.

Protocols define interfaces for duck typing, allowing the translator core
to depend on behaviors rather than concrete implementations.

Usage:
    from gesturio.core import AssetLookup

    def first_image(names: list[str], assets: AssetLookup):
        for name in names:
            path = assets.resolve(name)
            if path is not None:
                return path
        return None
"""

from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class AssetLookup(Protocol):
    """Protocol for the read-only static image asset set.

    The symbol resolver only needs to ask "resolve(name) -> image | absent".
    Any object with these methods works; the directory-backed
    ``AssetBundle`` is the production implementation.

    Example:
        class InMemoryAssets:
            def __init__(self, names):
                self.names = set(names)

            def resolve(self, name):
                return Path(name) if name in self.names else None

            def list_names(self):
                return sorted(self.names)
    """

    def resolve(self, name: str) -> Optional[Path]:
        """Resolve an asset name to an image path.

        Args:
            name: Asset name, either bare ("a") or with an extension ("a.jpeg")

        Returns:
            Path to the image, or None if no such asset exists
        """
        ...

    def list_names(self) -> list[str]:
        """List the file names of all assets in the set."""
        ...


@runtime_checkable
class Serializable(Protocol):
    """Protocol for objects that can be serialized to a dict."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        ...

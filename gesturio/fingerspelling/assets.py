"""Directory-backed static image asset set."""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from gesturio.core.errors import AssetBundleNotFoundError
from gesturio.core.types import ImageInfo

logger = logging.getLogger(__name__)

# Extensions tried for a bare asset name such as "a"
PRIMARY_EXTENSIONS = (".png",)

APP_ICON_NAME = "GesturioIcon"

MEDIA_TYPES = {
    ".png": "image/png",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


class AssetBundle:
    """Read-only set of sign images stored in one directory.

    The directory is indexed once when the bundle is created, so every
    lookup afterwards is a dictionary access with no file system I/O.
    A missing directory yields an empty bundle; callers that need the
    directory to exist use ``require()``.
    """

    def __init__(
        self,
        base_path: str | Path,
        primary_extensions: tuple[str, ...] = PRIMARY_EXTENSIONS,
    ):
        """Initialize bundle and index the directory.

        Args:
            base_path: Directory holding the images
            primary_extensions: Extensions tried when a name has none
        """
        self.base_path = Path(base_path)
        self.primary_extensions = tuple(ext.lower() for ext in primary_extensions)
        self._index: dict[str, Path] = {}
        self.reload()

    @property
    def exists(self) -> bool:
        return self.base_path.is_dir()

    def reload(self) -> int:
        """Re-index the asset directory.

        Returns:
            Number of assets found
        """
        index: dict[str, Path] = {}
        if self.exists:
            for path in sorted(self.base_path.iterdir()):
                if path.is_file() and not path.name.startswith("."):
                    index[path.name] = path
            logger.info("Indexed %d sign assets in %s", len(index), self.base_path)
        else:
            logger.warning("Asset directory %s does not exist; all cards will be placeholders", self.base_path)
        self._index = index
        return len(index)

    def require(self) -> "AssetBundle":
        """Return self, or raise if the asset directory is missing.

        Raises:
            AssetBundleNotFoundError: If base_path is not a directory
        """
        if not self.exists:
            raise AssetBundleNotFoundError(str(self.base_path))
        return self

    def resolve(self, name: str) -> Optional[Path]:
        """Resolve an asset name to an image path.

        A name with an extension ("a.jpeg") must match a file exactly.
        A bare name ("a") matches the first file with one of the primary
        extensions ("a.png").

        Args:
            name: Asset name

        Returns:
            Path to the image, or None if absent
        """
        if Path(name).suffix:
            return self._index.get(name)

        for ext in self.primary_extensions:
            path = self._index.get(name + ext)
            if path is not None:
                return path
        return None

    def list_names(self) -> list[str]:
        """List the file names of all indexed assets."""
        return sorted(self._index)

    def icon(self) -> Optional[Path]:
        """Get the application icon, if the bundle has one."""
        return self.resolve(APP_ICON_NAME)

    def describe(self, path: Path) -> ImageInfo:
        """Read format and resolution of an image without decoding it.

        Unreadable files are reported with an empty format and resolution.

        Args:
            path: Image path, normally one returned by resolve()

        Returns:
            ImageInfo for the file
        """
        try:
            with Image.open(path) as image:
                width, height = image.size
                return ImageInfo(
                    file=path.name,
                    format=image.format or "",
                    resolution=f"{width}x{height}",
                )
        except (UnidentifiedImageError, OSError) as e:
            logger.warning("Cannot read image %s: %s", path, e)
            return ImageInfo(file=path.name)


def media_type_for(path: Path) -> str:
    """Get the HTTP media type for an image path."""
    return MEDIA_TYPES.get(path.suffix.lower(), "application/octet-stream")

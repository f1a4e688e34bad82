"""Shared fixtures for fingerspelling tests."""

from pathlib import Path
from typing import Optional

import pytest
from PIL import Image

from ..assets import AssetBundle
from ..resolver import SymbolResolver


class MockAssets:
    """In-memory asset set for testing resolution."""

    def __init__(self, names: set[str]):
        self.names = set(names)
        self.calls: list[str] = []

    def resolve(self, name: str) -> Optional[Path]:
        self.calls.append(name)
        if name in self.names:
            return Path("/assets") / name
        return None

    def list_names(self) -> list[str]:
        return sorted(self.names)


def write_image(path: Path, size: tuple[int, int] = (40, 50), format: str = "PNG") -> Path:
    """Write a small solid-color image."""
    Image.new("RGB", size, color=(30, 90, 200)).save(path, format=format)
    return path


@pytest.fixture
def mock_assets():
    """Asset set with a PNG for "h" and "i" and only a JPEG for "e"."""
    return MockAssets({"h", "i", "e.jpeg"})


@pytest.fixture
def resolver(mock_assets):
    return SymbolResolver(mock_assets)


@pytest.fixture
def assets_dir(tmp_path):
    """Directory with real images: a.png, b.png, c.jpeg and the app icon."""
    signs = tmp_path / "signs"
    signs.mkdir()
    write_image(signs / "a.png")
    write_image(signs / "b.png", size=(60, 75))
    write_image(signs / "c.jpeg", format="JPEG")
    write_image(signs / "GesturioIcon.png", size=(128, 128))
    (signs / ".DS_Store").write_bytes(b"\x00")
    return signs


@pytest.fixture
def bundle(assets_dir):
    return AssetBundle(assets_dir)

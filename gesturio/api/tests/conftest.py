"""
Shared fixtures for API package tests.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from gesturio.fingerspelling import AssetBundle, SymbolResolver


@pytest.fixture
def mock_translation_service():
    """Create mock TranslationService."""
    service = MagicMock()

    service.translate_text.return_value = {
        "text": "Hi",
        "words": [
            {
                "position": 0,
                "label": "Word 1",
                "is_last": True,
                "has_divider": False,
                "cards": [
                    {
                        "character": "H",
                        "key": "h",
                        "label": "H",
                        "status": "found",
                        "image_url": "/api/signs/h/image",
                    },
                    {
                        "character": "i",
                        "key": "i",
                        "label": "I",
                        "status": "placeholder",
                        "image_url": None,
                    },
                ],
            }
        ],
        "hero": {
            "character": "i",
            "key": "i",
            "label": "I",
            "status": "placeholder",
            "image_url": None,
        },
        "fingerspelling": "H-I",
        "letter_count": 2,
        "missing_signs": ["I"],
    }

    return service


@pytest.fixture
def mock_sign_service():
    """Create mock SignService."""
    service = MagicMock()

    service.list_signs.return_value = {
        "available": ["a", "b"],
        "missing": ["c"],
        "total_assets": 2,
    }
    service.get_sign.return_value = {
        "character": "A",
        "key": "a",
        "label": "A",
        "status": "found",
        "image_url": "/api/signs/a/image",
        "image": {"file": "a.png", "format": "PNG", "width": 40, "height": 50},
    }
    service.get_icon_path.return_value = None

    return service


@pytest.fixture
def signs_dir(tmp_path) -> Path:
    """Asset directory with a.png, b.jpeg and the application icon."""
    path = tmp_path / "signs"
    path.mkdir()
    Image.new("RGB", (40, 50), color="white").save(path / "a.png")
    Image.new("RGB", (30, 30), color="white").save(path / "b.jpeg", format="JPEG")
    Image.new("RGB", (64, 64), color="blue").save(path / "GesturioIcon.png")
    return path


@pytest.fixture
def bundle(signs_dir) -> AssetBundle:
    return AssetBundle(signs_dir)


@pytest.fixture
def resolver(bundle) -> SymbolResolver:
    return SymbolResolver(bundle)

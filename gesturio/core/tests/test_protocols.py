"""Tests for protocol conformance."""

from pathlib import Path
from typing import Optional

from gesturio.core import AssetLookup, ImageInfo, Serializable, SymbolStatus
from gesturio.fingerspelling import SignSymbol, translate


class InMemoryAssets:
    def __init__(self, names):
        self.names = set(names)

    def resolve(self, name: str) -> Optional[Path]:
        return Path(name) if name in self.names else None

    def list_names(self) -> list[str]:
        return sorted(self.names)


class TestProtocols:
    def test_in_memory_assets_is_asset_lookup(self):
        assert isinstance(InMemoryAssets(["a"]), AssetLookup)

    def test_object_without_list_names_is_not_asset_lookup(self):
        class ResolveOnly:
            def resolve(self, name):
                return None

        assert not isinstance(ResolveOnly(), AssetLookup)

    def test_models_are_serializable(self):
        symbol = SignSymbol(key="a", status=SymbolStatus.FOUND, asset="a.png")

        assert isinstance(symbol, Serializable)
        assert isinstance(translate("hi"), Serializable)
        assert isinstance(ImageInfo(file="a.png"), Serializable)
        assert not isinstance("text", Serializable)

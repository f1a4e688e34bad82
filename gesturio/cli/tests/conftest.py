"""Shared fixtures for CLI tests."""

from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image
from typer.testing import CliRunner

from gesturio.fingerspelling import AssetBundle, SymbolResolver


@pytest.fixture
def cli_runner():
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


@pytest.fixture
def signs_dir(tmp_path) -> Path:
    """Asset directory with images for h, i (JPEG) and 5."""
    path = tmp_path / "signs"
    path.mkdir()
    Image.new("RGB", (40, 50), color="white").save(path / "h.png")
    Image.new("RGB", (40, 50), color="white").save(path / "i.jpeg", format="JPEG")
    Image.new("RGB", (20, 20), color="white").save(path / "5.png")
    return path


@pytest.fixture
def bundle(signs_dir) -> AssetBundle:
    return AssetBundle(signs_dir)


@pytest.fixture
def resolver(bundle) -> SymbolResolver:
    return SymbolResolver(bundle)


@pytest.fixture
def patched_assets(bundle, resolver):
    """Point every command module at the temporary asset set."""
    targets = [
        "gesturio.cli.commands.translate",
        "gesturio.cli.commands.interactive",
        "gesturio.cli.commands.assets",
    ]
    patchers = []
    for module in targets:
        patchers.append(patch(f"{module}.get_resolver", return_value=resolver))
    patchers.append(patch("gesturio.cli.commands.assets.get_bundle", return_value=bundle))
    for module in ("gesturio.cli.commands.translate", "gesturio.cli.commands.interactive"):
        patchers.append(patch(f"{module}.get_max_input_length", return_value=30))

    for patcher in patchers:
        patcher.start()
    yield resolver
    for patcher in patchers:
        patcher.stop()

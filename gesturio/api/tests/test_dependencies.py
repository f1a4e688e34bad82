"""Tests for dependency providers."""

import os

import pytest

from gesturio.api import dependencies
from gesturio.api.services import SignService, TranslationService
from gesturio.core import clear_config_cache


@pytest.fixture
def configured(tmp_path):
    """Point configuration at a temporary asset directory."""
    original = {k: os.environ.get(k) for k in ("GESTURIO_ASSETS_DIR", "GESTURIO_MAX_INPUT_LENGTH")}
    os.environ["GESTURIO_ASSETS_DIR"] = str(tmp_path)
    os.environ["GESTURIO_MAX_INPUT_LENGTH"] = "42"
    clear_config_cache()
    dependencies.clear_dependency_cache()

    yield tmp_path

    for var, value in original.items():
        if value is None:
            os.environ.pop(var, None)
        else:
            os.environ[var] = value
    clear_config_cache()
    dependencies.clear_dependency_cache()


class TestDependencies:
    """Tests for the service singletons."""

    def test_asset_bundle_uses_config(self, configured):
        assert dependencies.get_asset_bundle().base_path == configured

    def test_singletons(self, configured):
        assert dependencies.get_asset_bundle() is dependencies.get_asset_bundle()
        assert dependencies.get_resolver() is dependencies.get_resolver()

    def test_resolver_shares_bundle(self, configured):
        assert dependencies.get_resolver().assets is dependencies.get_asset_bundle()

    def test_translation_service(self, configured):
        service = dependencies.get_translation_service()

        assert isinstance(service, TranslationService)
        assert service.max_input_length == 42

    def test_sign_service(self, configured):
        service = dependencies.get_sign_service()

        assert isinstance(service, SignService)
        assert service.bundle is dependencies.get_asset_bundle()

    def test_clear_dependency_cache(self, configured):
        first = dependencies.get_asset_bundle()
        dependencies.clear_dependency_cache()

        assert dependencies.get_asset_bundle() is not first

"""FastAPI dependency injection for services."""

from functools import lru_cache

from gesturio.core import GesturioConfig, get_config
from gesturio.fingerspelling import AssetBundle, SymbolResolver

from .services import SignService, TranslationService


def get_settings() -> GesturioConfig:
    """Get the application configuration."""
    return get_config()


@lru_cache()
def get_asset_bundle() -> AssetBundle:
    """Get or create the asset bundle singleton."""
    config = get_settings()
    return AssetBundle(config.assets_dir)


@lru_cache()
def get_resolver() -> SymbolResolver:
    """Get or create the symbol resolver singleton."""
    return SymbolResolver(get_asset_bundle())


@lru_cache()
def get_translation_service() -> TranslationService:
    """Get or create the translation service singleton."""
    config = get_settings()
    return TranslationService(
        resolver=get_resolver(),
        max_input_length=config.max_input_length,
    )


@lru_cache()
def get_sign_service() -> SignService:
    """Get or create the sign service singleton."""
    return SignService(
        bundle=get_asset_bundle(),
        resolver=get_resolver(),
    )


def clear_dependency_cache() -> None:
    """Drop all service singletons (used after config changes)."""
    for factory in (get_asset_bundle, get_resolver, get_translation_service, get_sign_service):
        factory.cache_clear()

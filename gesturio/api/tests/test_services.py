"""Tests for API services."""

from pathlib import Path

import pytest

from gesturio.api.services import SignService, TranslationService, card_dict
from gesturio.core.errors import InputTooLongError, SymbolNotFoundError
from gesturio.core.types import SymbolStatus
from gesturio.fingerspelling import AssetBundle, SignSymbol, SymbolResolver


class TestCardDict:
    """Tests for card_dict."""

    def test_found_card_has_image_url(self):
        symbol = SignSymbol(key="a", status=SymbolStatus.FOUND, asset="a.png", character="A")

        assert card_dict(symbol) == {
            "character": "A",
            "key": "a",
            "label": "A",
            "status": "found",
            "image_url": "/api/signs/a/image",
        }

    def test_placeholder_has_no_image_url(self):
        symbol = SignSymbol(key="#", status=SymbolStatus.PLACEHOLDER, character="#")

        assert card_dict(symbol)["image_url"] is None

    def test_key_is_url_quoted(self):
        symbol = SignSymbol(key="é", status=SymbolStatus.FOUND, asset="é.png", character="é")

        assert card_dict(symbol)["image_url"] == "/api/signs/%C3%A9/image"


class TestTranslationService:
    """Tests for TranslationService."""

    @pytest.fixture
    def service(self, resolver):
        return TranslationService(resolver=resolver, max_input_length=50)

    def test_word_groups(self, service):
        result = service.translate_text("Hi there")

        assert [w["label"] for w in result["words"]] == ["Word 1", "Word 2"]
        assert [c["character"] for c in result["words"][1]["cards"]] == ["t", "h", "e", "r", "e"]
        assert result["words"][0]["has_divider"] is True
        assert result["words"][1]["has_divider"] is False

    def test_trailing_space_empty_word(self, service):
        result = service.translate_text("Hi ")

        assert result["words"][-1]["cards"] == []
        assert result["words"][-1]["is_last"] is True

    def test_hero(self, service):
        assert service.translate_text("Hello 5!")["hero"]["character"] == "5"

    def test_no_hero(self, service):
        assert service.translate_text("!!")["hero"] is None

    def test_empty(self, service):
        result = service.translate_text("")

        assert result["words"] == []
        assert result["hero"] is None
        assert result["letter_count"] == 0

    def test_missing_signs_unique_in_order(self, service):
        result = service.translate_text("zebra Zoo")

        assert result["missing_signs"] == ["Z", "E", "R", "O"]

    def test_fingerspelling_string(self, service):
        assert service.translate_text("ab c")["fingerspelling"] == "A-B C"

    def test_limit(self, service):
        with pytest.raises(InputTooLongError) as exc_info:
            service.translate_text("x" * 51)

        assert exc_info.value.limit == 50

    def test_limit_is_inclusive(self, service):
        assert service.translate_text("x" * 50)["letter_count"] == 50


class TestSignService:
    """Tests for SignService."""

    @pytest.fixture
    def service(self, bundle, resolver):
        return SignService(bundle=bundle, resolver=resolver)

    def test_list_signs(self, service):
        data = service.list_signs()

        assert data["available"] == ["a", "b"]
        assert len(data["missing"]) == 34
        assert data["total_assets"] == 3

    def test_get_sign_with_image(self, service):
        sign = service.get_sign("a")

        assert sign["status"] == "found"
        assert sign["image"]["format"] == "PNG"

    def test_get_sign_placeholder(self, service):
        sign = service.get_sign("#")

        assert sign["status"] == "placeholder"
        assert sign["image"] is None

    @pytest.mark.parametrize("character", ["", "ab"])
    def test_get_sign_requires_single_character(self, service, character):
        with pytest.raises(ValueError):
            service.get_sign(character)

    def test_get_image_path(self, service, signs_dir):
        assert service.get_image_path("B") == signs_dir / "b.jpeg"

    @pytest.mark.parametrize("character", ["", "ab", "a.png"])
    def test_get_image_path_requires_single_character(self, service, character):
        with pytest.raises(ValueError):
            service.get_image_path(character)

    def test_get_image_path_missing(self, service):
        with pytest.raises(SymbolNotFoundError):
            service.get_image_path("x")

    def test_get_icon_path(self, service, signs_dir):
        assert service.get_icon_path() == signs_dir / "GesturioIcon.png"

    def test_no_icon(self, tmp_path):
        bundle = AssetBundle(tmp_path)
        service = SignService(bundle=bundle, resolver=SymbolResolver(bundle))

        assert service.get_icon_path() is None

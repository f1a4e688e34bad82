"""Business logic services for the API."""

from .translation_service import TranslationService, card_dict
from .sign_service import SignService

__all__ = ["TranslationService", "SignService", "card_dict"]

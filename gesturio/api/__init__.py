"""Gesturio API package - REST endpoints for fingerspelling cards."""

from .main import app
from .schemas import (
    TranslateRequest,
    TranslateResponse,
    CardResponse,
    WordResponse,
    SignResponse,
    SignListResponse,
    ErrorResponse,
    HealthResponse,
)
from .services import TranslationService, SignService

__all__ = [
    "app",
    "TranslateRequest",
    "TranslateResponse",
    "CardResponse",
    "WordResponse",
    "SignResponse",
    "SignListResponse",
    "ErrorResponse",
    "HealthResponse",
    "TranslationService",
    "SignService",
]

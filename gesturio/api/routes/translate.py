"""Translation endpoint routes."""

from fastapi import APIRouter, Depends, HTTPException

from gesturio.core.errors import InputTooLongError

from ..schemas import (
    TranslateRequest,
    TranslateResponse,
    ErrorResponse,
)
from ..dependencies import get_translation_service
from ..services import TranslationService


router = APIRouter(prefix="/api", tags=["translation"])


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Input too long"},
    },
)
async def translate_text(
    request: TranslateRequest,
    translation_service: TranslationService = Depends(get_translation_service),
):
    """
    Translate text to ASL fingerspelling cards.

    - **text**: The text to fingerspell (required, may be empty)

    Returns the cards grouped by word, the "current sign" hero card for the
    most recently typed letter, and the characters that have no image.
    """
    try:
        result = translation_service.translate_text(request.text)
    except InputTooLongError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())

    return TranslateResponse(**result)

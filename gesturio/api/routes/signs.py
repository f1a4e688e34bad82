"""Sign image endpoint routes."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from gesturio.core.errors import SymbolNotFoundError
from gesturio.fingerspelling import media_type_for

from ..schemas import ErrorResponse, SignListResponse, SignResponse
from ..dependencies import get_sign_service
from ..services import SignService


router = APIRouter(prefix="/api/signs", tags=["signs"])


@router.get(
    "",
    response_model=SignListResponse,
    summary="List alphabet coverage",
)
async def list_signs(
    sign_service: SignService = Depends(get_sign_service),
):
    """List which letters and digits have a sign image and which do not."""
    return SignListResponse(**sign_service.list_signs())


@router.get(
    "/{character}",
    response_model=SignResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Not a single character"},
    },
    summary="Resolve one character",
)
async def get_sign(
    character: str,
    sign_service: SignService = Depends(get_sign_service),
):
    """
    Resolve a character to its sign.

    Characters without an image resolve to a placeholder card rather
    than an error.
    """
    try:
        return SignResponse(**sign_service.get_sign(character))
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "invalid_character",
                "message": str(e),
                "details": {"character": character},
            },
        )


@router.get(
    "/{character}/image",
    responses={
        400: {"model": ErrorResponse, "description": "Not a single character"},
        404: {"model": ErrorResponse, "description": "No image for character"},
    },
    summary="Get sign image",
)
async def get_sign_image(
    character: str,
    sign_service: SignService = Depends(get_sign_service),
):
    """Serve the image file for a character."""
    try:
        path = sign_service.get_image_path(character)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "error": "invalid_character",
                "message": str(e),
                "details": {"character": character},
            },
        )
    except SymbolNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.to_dict())

    return FileResponse(
        path=path,
        media_type=media_type_for(path),
        filename=path.name,
    )

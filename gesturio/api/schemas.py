"""Pydantic schemas for API request/response models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class SymbolStatus(str, Enum):
    """Whether a card has an image or shows a placeholder."""
    FOUND = "found"
    PLACEHOLDER = "placeholder"


# ============ Translation Schemas ============

class TranslateRequest(BaseModel):
    """Request body for translation endpoint."""
    text: str = Field(..., description="Text to fingerspell; may be empty")


class CardResponse(BaseModel):
    """One fingerspelling card."""
    character: str = Field(..., description="Character as typed")
    key: str = Field(..., description="Lowercase asset lookup key")
    label: str = Field(..., description="Uppercase label shown on the card")
    status: SymbolStatus
    image_url: Optional[str] = Field(None, description="URL of the sign image, if one exists")


class WordResponse(BaseModel):
    """A group of cards for one word."""
    position: int = Field(..., ge=0, description="Token index in the input, counting dropped tokens")
    label: str = Field(..., description="Heading such as 'Word 1'")
    is_last: bool
    has_divider: bool
    cards: list[CardResponse] = Field(default_factory=list)


class TranslateResponse(BaseModel):
    """Response from translation endpoint."""
    text: str
    words: list[WordResponse] = Field(default_factory=list)
    hero: Optional[CardResponse] = Field(None, description="Card for the most recently typed letter")
    fingerspelling: str = Field("", description="Gloss form, e.g. 'H-I T-H-E-R-E'")
    letter_count: int = Field(0, ge=0)
    missing_signs: list[str] = Field(default_factory=list, description="Characters shown as placeholders")


# ============ Sign Schemas ============

class ImageResponse(BaseModel):
    """Image file metadata."""
    file: str
    format: str = ""
    width: int = 0
    height: int = 0


class SignResponse(CardResponse):
    """A single character's sign, with image metadata when found."""
    image: Optional[ImageResponse] = None


class SignListResponse(BaseModel):
    """Coverage of the fingerspelling alphabet by the asset set."""
    available: list[str]
    missing: list[str]
    total_assets: int


# ============ Error Schemas ============

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = None


# ============ Health Schemas ============

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = "1.0.0"
    services: dict[str, str] = Field(default_factory=dict)

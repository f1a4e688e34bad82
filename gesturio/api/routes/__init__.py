"""API route modules."""

from .translate import router as translate_router
from .signs import router as signs_router

__all__ = ["translate_router", "signs_router"]

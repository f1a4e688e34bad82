"""Gesturio API - FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from gesturio import __version__
from gesturio.core import configure_logging
from gesturio.fingerspelling import APP_ICON_NAME, AssetBundle, media_type_for

from .routes import translate_router, signs_router
from .dependencies import get_asset_bundle, get_settings, get_sign_service
from .schemas import ErrorResponse, HealthResponse
from .services import SignService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    config = get_settings()
    configure_logging(config.log_level)

    bundle = get_asset_bundle()
    logger.info("Gesturio API starting (env=%s)", config.env.value)
    logger.info("Sign assets: %s (%d files)", bundle.base_path, len(bundle.list_names()))

    yield

    logger.info("Gesturio API shutting down")


app = FastAPI(
    title="Gesturio API",
    description="REST API turning typed text into ASL fingerspelling cards",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
config = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(config.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(translate_router)
app.include_router(signs_router)


@app.get("/api/health", response_model=HealthResponse, tags=["health"])
async def health_check(bundle: AssetBundle = Depends(get_asset_bundle)):
    """Check if the API is healthy and the sign assets are reachable."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        services={
            "api": "running",
            "translation": "available",
            "assets": "available" if bundle.exists else "missing",
        },
    )


@app.get(
    "/api/icon",
    tags=["signs"],
    responses={404: {"model": ErrorResponse, "description": "No application icon"}},
)
async def get_icon(sign_service: SignService = Depends(get_sign_service)):
    """Serve the application icon."""
    path = sign_service.get_icon_path()
    if path is None:
        raise HTTPException(
            status_code=404,
            detail={
                "error": "icon_not_found",
                "message": f"No '{APP_ICON_NAME}' image in the asset set",
            },
        )
    return FileResponse(path=path, media_type=media_type_for(path), filename=path.name)


@app.get("/", include_in_schema=False)
async def root():
    """Point the caller at the API documentation."""
    return {
        "message": f"Gesturio API v{__version__}",
        "docs": "/docs",
        "health": "/api/health",
    }

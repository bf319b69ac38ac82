"""
Health Routes
"""
from fastapi import APIRouter, Depends

from .. import __version__
from ..config import Settings, get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Root endpoint"""
    return {"message": "AI PM API", "version": __version__}


@router.get("/health")
async def health_check(settings: Settings = Depends(get_app_settings)):
    """Health check endpoint with upstream configuration status"""
    configured = settings.api_key_configured

    return {
        "status": "healthy" if configured else "degraded",
        "upstream": "configured" if configured else "not configured",
        "version": __version__
    }

"""Health check endpoint."""
from __future__ import annotations
from fastapi import APIRouter, Request

from ...languages.registry import supported_languages

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness plus the loaded catalogue size and configured default language."""
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": "number-words-api",
        "languages": len(supported_languages()),
        "default_lang": settings.default_lang,
    }

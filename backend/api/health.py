"""
api/health.py
=============
GET /api/health: liveness and configuration probe for the MovieMatch backend.
Never calls the external services.
"""

from fastapi import APIRouter, Request

from backend.schemas.response import HealthResponse
from rag_pipeline.config import PipelineSettings

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Return service status and which required settings are missing."""
    settings = getattr(request.app.state, "settings", None) or PipelineSettings.from_env()
    missing = settings.missing()

    return HealthResponse(
        configured      = not missing,
        missing         = missing,
        embedding_model = settings.embedding_model,
        chat_model      = settings.chat_model,
    )

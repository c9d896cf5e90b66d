"""
api/match.py
============
POST /api/match
---------------
Accepts a JSON body ``{"input": "<question>"}`` and returns
``{"recommendation": "<answer>"}`` produced by the RAG pipeline
(embed → Supabase similarity search → chat completion).

Outcomes:
  405  any non-POST method                  (pipeline not invoked)
  400  missing / empty / non-string input   (pipeline not invoked)
  500  empty pipeline result, or any pipeline error (fixed message)
  200  recommendation text
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.schemas.response import ErrorResponse, MatchResponse
from rag_pipeline.pipeline import QueryPipeline

logger = logging.getLogger(__name__)

router = APIRouter()

MATCH_PATH         = "/api/match"
METHOD_NOT_ALLOWED = "Only POST requests are allowed."
INVALID_INPUT      = "Input is required and must be a string."
PROCESSING_FAILED  = "Failed to process input."
INTERNAL_ERROR     = "Internal server error."


def get_pipeline(request: Request) -> QueryPipeline:
    """Return the QueryPipeline built during application startup."""
    return request.app.state.pipeline


def _error(status_code: int, message: str, **kwargs: Any) -> JSONResponse:
    return JSONResponse(
        status_code = status_code,
        content     = ErrorResponse(error=message).model_dump(),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Error handlers (registered in backend.main.create_app)
# ---------------------------------------------------------------------------

async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Answer every non-POST verb on /api/match (HEAD and OPTIONS included) with the fixed 405 body."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path == MATCH_PATH:
        return _error(status.HTTP_405_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED, headers={"Allow": "POST"})
    return await http_exception_handler(request, exc)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post(
    MATCH_PATH,
    response_model=MatchResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def match(request: Request, pipeline: QueryPipeline = Depends(get_pipeline)):
    """Answer a movie question from the retrieved movie descriptions."""

    # ── 1. Validate body ──────────────────────────────────────────────────
    try:
        body = await request.json()
    except ValueError:
        body = None

    query = body.get("input") if isinstance(body, dict) else None
    if not query or not isinstance(query, str):
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_INPUT)

    # ── 2. Run pipeline ───────────────────────────────────────────────────
    try:
        result = await pipeline.answer(query)
    except Exception as exc:
        logger.error("Error in POST handler: %s", exc, exc_info=True)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)

    if not result:
        logger.warning("Pipeline returned an empty recommendation.")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, PROCESSING_FAILED)

    return MatchResponse(recommendation=result).model_dump()

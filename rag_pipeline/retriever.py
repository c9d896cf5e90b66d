"""
retriever.py
============
Semantic retrieval through the Supabase ``match_movies`` Postgres function.

The similarity search itself runs inside the database (pgvector); this module
only posts the query embedding to the PostgREST RPC endpoint and flattens the
returned rows into one context string for the LLM.

The service decides ranking and applies the threshold / count limits. No
re-ranking or extra filtering happens here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import httpx

from rag_pipeline.config import (
    DEFAULT_MATCH_COUNT,
    DEFAULT_MATCH_FUNCTION,
    DEFAULT_MATCH_THRESHOLD,
)
from rag_pipeline.errors import RetrievalServiceError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def find_matches(
    http: httpx.AsyncClient,
    embedding: List[float],
    match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    match_count: int = DEFAULT_MATCH_COUNT,
    function: str = DEFAULT_MATCH_FUNCTION,
) -> List[Dict[str, Any]]:
    """
    Call the similarity-search RPC and return its rows in service order.

    Raises RetrievalServiceError when the request fails or the service
    answers with a non-2xx status.
    """
    payload = {
        "query_embedding": embedding,
        "match_threshold": match_threshold,
        "match_count":     match_count,
    }

    try:
        response = await http.post(f"/rpc/{function}", json=payload)
    except httpx.HTTPError as exc:
        logger.error("Similarity search transport error: %s", exc)
        raise RetrievalServiceError(f"Supabase query failed: {exc}") from exc

    if response.is_error:
        message = _error_message(response)
        logger.error("Similarity search failed (%d): %s", response.status_code, message)
        raise RetrievalServiceError(f"Supabase query failed: {message}")

    try:
        rows = response.json() or []
    except ValueError as exc:
        logger.error("Similarity search returned invalid JSON: %s", exc)
        raise RetrievalServiceError(f"Supabase query failed: {exc}") from exc
    if not isinstance(rows, list):
        raise RetrievalServiceError("Supabase query failed: unexpected response shape.")

    logger.debug("Similarity search returned %d rows.", len(rows))
    return rows


async def retrieve(
    http: httpx.AsyncClient,
    embedding: List[float],
    match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    match_count: int = DEFAULT_MATCH_COUNT,
    function: str = DEFAULT_MATCH_FUNCTION,
) -> str:
    """Return matched document texts joined by newlines ("" when nothing matched)."""
    rows = await find_matches(http, embedding, match_threshold, match_count, function)
    if not rows:
        logger.info("No documents above threshold %.2f.", match_threshold)
    return join_matches(rows)


def join_matches(rows: List[Dict[str, Any]]) -> str:
    """Join row contents with newlines; NULL or missing content becomes an empty line."""
    return "\n".join(_content(row) for row in rows)


def _content(row: Dict[str, Any]) -> str:
    value = row.get("content")
    return "" if value is None else str(value)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _error_message(response: httpx.Response) -> str:
    """Extract PostgREST's ``message`` field, falling back to the raw body."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or response.reason_phrase

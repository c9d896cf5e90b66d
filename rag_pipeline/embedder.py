"""
embedder.py
===========
Convert a query string into a dense embedding vector.

Backend: OpenAI embeddings API (text-embedding-ada-002 by default).
One remote call per query; no batching, caching or retries.
"""

from __future__ import annotations

import logging
from typing import Any, List

from rag_pipeline.config import DEFAULT_EMBEDDING_MODEL
from rag_pipeline.errors import EmbeddingServiceError, EmbeddingUnavailable

logger = logging.getLogger(__name__)


def _first_vector(response: Any) -> List[float]:
    data = getattr(response, "data", None) or []
    if not data:
        return []
    return list(getattr(data[0], "embedding", None) or [])


async def embed(client: Any, text: str, model: str = DEFAULT_EMBEDDING_MODEL) -> List[float]:
    """
    Return the embedding vector for *text*.

    Raises
    ------
    ValueError             : *text* is empty
    EmbeddingUnavailable   : the service returned no embedding data
    EmbeddingServiceError  : the call itself failed
    """
    if not text:
        raise ValueError("Cannot embed an empty string.")

    try:
        response = await client.embeddings.create(model=model, input=text)
    except Exception as exc:
        logger.error("Embedding request failed (%s): %s", model, exc)
        raise EmbeddingServiceError(str(exc)) from exc

    vector = _first_vector(response)
    if not vector:
        logger.error("Embedding response from %s contained no vector.", model)
        raise EmbeddingUnavailable("Failed to generate embedding.")

    logger.debug("Embedded query into %d dimensions.", len(vector))
    return vector

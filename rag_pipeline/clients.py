"""
clients.py
==========
External client handles used by the pipeline.

  • AsyncOpenAI: embeddings and chat completions
  • httpx.AsyncClient: Supabase PostgREST (similarity-search RPC)

Both are constructed once at process start (see backend.main lifespan) and
injected into QueryPipeline; they are stateless and safe to share across
concurrent requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from openai import AsyncOpenAI

from rag_pipeline.config import PipelineSettings

logger = logging.getLogger(__name__)


@dataclass
class PipelineClients:
    openai:   Any
    supabase: httpx.AsyncClient

    async def aclose(self) -> None:
        """Release both underlying HTTP connection pools."""
        try:
            await self.supabase.aclose()
        finally:
            close = getattr(self.openai, "close", None)
            if close is not None:
                await close()


def _supabase_headers(service_key: str) -> dict:
    return {
        "apikey":        service_key,
        "Authorization": f"Bearer {service_key}",
        "Content-Type":  "application/json",
    }


def build_clients(settings: PipelineSettings) -> PipelineClients:
    """Create the OpenAI and Supabase client handles for *settings*."""
    missing = settings.missing()
    if missing:
        logger.warning("Missing configuration: %s; external calls will fail.", ", ".join(missing))

    openai_client = AsyncOpenAI(
        api_key = settings.openai_api_key,
        timeout = settings.request_timeout,
    )
    supabase_client = httpx.AsyncClient(
        base_url = settings.rest_url,
        headers  = _supabase_headers(settings.supabase_key),
        timeout  = settings.request_timeout,
    )
    logger.info(
        "External clients ready (embedding=%s, chat=%s, rpc=%s).",
        settings.embedding_model,
        settings.chat_model,
        settings.match_function,
    )
    return PipelineClients(openai=openai_client, supabase=supabase_client)

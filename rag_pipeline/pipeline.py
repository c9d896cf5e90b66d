"""
pipeline.py
===========
QueryPipeline: embed → retrieve → generate, strictly in sequence.

Each answer() call builds its own Transcript; nothing is shared between
requests except the injected client handles.
"""

from __future__ import annotations

import logging
from typing import Optional

from rag_pipeline.clients import PipelineClients
from rag_pipeline.config import PipelineSettings
from rag_pipeline.embedder import embed
from rag_pipeline.errors import PipelineError, PipelineFailed
from rag_pipeline.llm_engine import respond
from rag_pipeline.retriever import retrieve
from rag_pipeline.transcript import Transcript

logger = logging.getLogger(__name__)

PIPELINE_FAILED_MESSAGE = "Sorry, something went wrong. Please try again."


class QueryPipeline:
    def __init__(self, clients: PipelineClients, settings: Optional[PipelineSettings] = None):
        self.clients = clients
        self.settings = settings or PipelineSettings()

    async def answer(self, query: str, transcript: Optional[Transcript] = None) -> Optional[str]:
        """
        Return the model's recommendation for *query*.

        Any stage failure is logged and re-raised as PipelineFailed with a
        fixed user-facing message; the stage error is kept as ``__cause__``.
        """
        settings = self.settings
        transcript = transcript if transcript is not None else Transcript()

        logger.info("Thinking...")
        try:
            embedding = await embed(self.clients.openai, query, settings.embedding_model)
            context = await retrieve(
                self.clients.supabase,
                embedding,
                match_threshold = settings.match_threshold,
                match_count     = settings.match_count,
                function        = settings.match_function,
            )
            response = await respond(
                self.clients.openai,
                transcript,
                context,
                query,
                model             = settings.chat_model,
                temperature       = settings.temperature,
                frequency_penalty = settings.frequency_penalty,
            )
        except Exception as exc:
            logger.error("Pipeline failed: %s", exc)
            retryable = exc.retryable if isinstance(exc, PipelineError) else False
            raise PipelineFailed(PIPELINE_FAILED_MESSAGE, retryable=retryable) from exc

        logger.info("Response: %s", response)
        return response

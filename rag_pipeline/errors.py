"""
errors.py
=========
Stage-tagged error types raised by the RAG pipeline.

Every error carries the pipeline ``stage`` it came from and a ``retryable``
flag so callers can tell transient service failures from permanent ones.
Nothing in the pipeline retries on its own.
"""

from __future__ import annotations


class PipelineError(RuntimeError):
    """Base class for all pipeline failures."""

    stage: str = "pipeline"
    retryable: bool = False


class EmbeddingUnavailable(PipelineError):
    """The embedding service answered but returned no vector."""

    stage = "embed"
    retryable = False


class EmbeddingServiceError(PipelineError):
    """Transport or service error while creating an embedding."""

    stage = "embed"
    retryable = True


class RetrievalServiceError(PipelineError):
    """The similarity-search call failed."""

    stage = "retrieve"
    retryable = True


class GenerationFailed(PipelineError):
    """The completion call failed; detail is logged, never propagated."""

    stage = "generate"
    retryable = True


class PipelineFailed(PipelineError):
    """Uniform user-facing failure raised by ``QueryPipeline.answer``."""

    stage = "pipeline"

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable

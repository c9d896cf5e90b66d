# -*- coding: utf-8 -*-
import pytest

from rag_pipeline.embedder import embed
from rag_pipeline.errors import EmbeddingServiceError, EmbeddingUnavailable

from fakes import FakeOpenAI


@pytest.mark.asyncio
async def test_embed_returns_first_vector_and_uses_model():
    client = FakeOpenAI(vector=[0.5, -0.25])

    vec = await embed(client, "a heist movie", model="text-embedding-ada-002")

    assert vec == [0.5, -0.25]
    assert client.embeddings.calls == [{"model": "text-embedding-ada-002", "input": "a heist movie"}]


@pytest.mark.asyncio
async def test_embed_without_data_raises_unavailable():
    client = FakeOpenAI(vector=None)

    with pytest.raises(EmbeddingUnavailable) as exc_info:
        await embed(client, "anything")

    assert exc_info.value.retryable is False
    assert exc_info.value.stage == "embed"


@pytest.mark.asyncio
async def test_embed_service_error_carries_underlying_message():
    client = FakeOpenAI(embed_exc=RuntimeError("rate limited"))

    with pytest.raises(EmbeddingServiceError, match="rate limited") as exc_info:
        await embed(client, "anything")

    assert exc_info.value.retryable is True
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_embed_rejects_empty_text_without_calling_service():
    client = FakeOpenAI(vector=[1.0])

    with pytest.raises(ValueError):
        await embed(client, "")

    assert client.embeddings.calls == []

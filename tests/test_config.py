# -*- coding: utf-8 -*-
import pytest

from rag_pipeline.clients import PipelineClients, build_clients
from rag_pipeline.config import PipelineSettings


def test_defaults_match_original_policy(monkeypatch):
    for name in ("MATCH_THRESHOLD", "MATCH_COUNT", "CHAT_MODEL", "EMBEDDING_MODEL",
                 "CHAT_TEMPERATURE", "CHAT_FREQUENCY_PENALTY", "MATCH_FUNCTION"):
        monkeypatch.delenv(name, raising=False)

    settings = PipelineSettings.from_env()

    assert settings.embedding_model == "text-embedding-ada-002"
    assert settings.chat_model == "gpt-4"
    assert settings.match_function == "match_movies"
    assert settings.match_threshold == 0.5
    assert settings.match_count == 3
    assert settings.temperature == 0.65
    assert settings.frequency_penalty == 0.5


def test_env_values_are_cleaned(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", ' "https://abc.supabase.co/" ')
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "'service-key'")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("MATCH_COUNT", "5")

    settings = PipelineSettings.from_env()

    assert settings.supabase_url == "https://abc.supabase.co"
    assert settings.rest_url == "https://abc.supabase.co/rest/v1"
    assert settings.supabase_key == "service-key"
    assert settings.match_count == 5
    assert settings.missing() == []


def test_bad_numbers_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("MATCH_THRESHOLD", "high")
    monkeypatch.setenv("MATCH_COUNT", "3.5")

    settings = PipelineSettings.from_env()

    assert settings.match_threshold == 0.5
    assert settings.match_count == 3


@pytest.mark.asyncio
async def test_build_clients_targets_supabase_rest_api():
    settings = PipelineSettings(
        openai_api_key="sk-test",
        supabase_url="https://abc.supabase.co",
        supabase_key="service-key",
    )

    clients = build_clients(settings)
    try:
        assert str(clients.supabase.base_url) == "https://abc.supabase.co/rest/v1/"
        assert clients.supabase.headers["apikey"] == "service-key"
        assert clients.supabase.headers["authorization"] == "Bearer service-key"
    finally:
        await clients.aclose()


@pytest.mark.asyncio
async def test_aclose_still_closes_openai_when_supabase_close_fails():
    closed = []

    class FailingSupabase:
        async def aclose(self):
            raise RuntimeError("pool already torn down")

    class ClosingOpenAI:
        async def close(self):
            closed.append("openai")

    clients = PipelineClients(openai=ClosingOpenAI(), supabase=FailingSupabase())

    with pytest.raises(RuntimeError, match="pool already torn down"):
        await clients.aclose()

    assert closed == ["openai"]

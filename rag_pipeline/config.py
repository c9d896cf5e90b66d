"""
config.py
=========
Environment-sourced settings for the MovieMatch RAG pipeline.

The application entry point loads `.env` with python-dotenv before
`PipelineSettings.from_env()` is called, so values may come from either the
process environment or the project `.env` file.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"
DEFAULT_CHAT_MODEL = "gpt-4"
DEFAULT_MATCH_FUNCTION = "match_movies"
DEFAULT_MATCH_THRESHOLD = 0.5
DEFAULT_MATCH_COUNT = 3
DEFAULT_TEMPERATURE = 0.65
DEFAULT_FREQUENCY_PENALTY = 0.5


def _clean_env(name: str, default: str = "") -> str:
    value = os.getenv(name, default)
    return value.strip().strip('"').strip("'")


def _float_env(name: str, default: float) -> float:
    raw = _clean_env(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s.", name, raw, default)
        return default


def _int_env(name: str, default: int) -> int:
    raw = _clean_env(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %s.", name, raw, default)
        return default


@dataclass(frozen=True)
class PipelineSettings:
    openai_api_key:    str = ""
    supabase_url:      str = ""
    supabase_key:      str = ""
    embedding_model:   str = DEFAULT_EMBEDDING_MODEL
    chat_model:        str = DEFAULT_CHAT_MODEL
    match_function:    str = DEFAULT_MATCH_FUNCTION
    match_threshold:   float = DEFAULT_MATCH_THRESHOLD
    match_count:       int = DEFAULT_MATCH_COUNT
    temperature:       float = DEFAULT_TEMPERATURE
    frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY
    request_timeout:   float = 60.0

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        """Build settings from the current environment."""
        return cls(
            openai_api_key    = _clean_env("OPENAI_API_KEY"),
            supabase_url      = _clean_env("SUPABASE_URL").rstrip("/"),
            supabase_key      = _clean_env("SUPABASE_SERVICE_ROLE_KEY"),
            embedding_model   = _clean_env("EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL),
            chat_model        = _clean_env("CHAT_MODEL", DEFAULT_CHAT_MODEL),
            match_function    = _clean_env("MATCH_FUNCTION", DEFAULT_MATCH_FUNCTION),
            match_threshold   = _float_env("MATCH_THRESHOLD", DEFAULT_MATCH_THRESHOLD),
            match_count       = _int_env("MATCH_COUNT", DEFAULT_MATCH_COUNT),
            temperature       = _float_env("CHAT_TEMPERATURE", DEFAULT_TEMPERATURE),
            frequency_penalty = _float_env("CHAT_FREQUENCY_PENALTY", DEFAULT_FREQUENCY_PENALTY),
            request_timeout   = _float_env("REQUEST_TIMEOUT_SECONDS", 60.0),
        )

    def missing(self) -> List[str]:
        """Names of required environment variables that are empty."""
        required = {
            "SUPABASE_URL":              self.supabase_url,
            "SUPABASE_SERVICE_ROLE_KEY": self.supabase_key,
            "OPENAI_API_KEY":            self.openai_api_key,
        }
        return [name for name, value in required.items() if not value]

    @property
    def rest_url(self) -> str:
        """PostgREST base URL of the Supabase project."""
        return f"{self.supabase_url}/rest/v1"

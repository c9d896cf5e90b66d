"""
schemas/response.py
===================
Pydantic v2 models for the MovieMatch HTTP responses.

Error bodies carry only a fixed user-facing message; internal exception
detail never reaches the client.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class MatchResponse(BaseModel):
    recommendation: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    configured: bool
    missing: List[str] = Field(default_factory=list)
    embedding_model: str
    chat_model: str
    api_version: str = "1.0.0"

# backend/schemas/__init__.py
from backend.schemas.response import (
    ErrorResponse,
    HealthResponse,
    MatchResponse,
)

__all__ = ["ErrorResponse", "HealthResponse", "MatchResponse"]

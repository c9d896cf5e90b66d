"""
main.py
=======
FastAPI application entry point for MovieMatch.

Run locally:
  uvicorn backend.main:app --reload --port 8000

The lifespan handler builds the external client handles (OpenAI, Supabase)
and the QueryPipeline once at startup so they are never re-created per
request, and closes them on shutdown.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv  # type: ignore
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.api.health import router as health_router
from backend.api.match import method_not_allowed_handler, router as match_router
from rag_pipeline.clients import build_clients
from rag_pipeline.config import PipelineSettings
from rag_pipeline.pipeline import QueryPipeline

# Load .env from project root (one level above this file's package)
load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Lifespan: startup / shutdown
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build client handles and the pipeline before the first request."""
    logger.info("MovieMatch backend starting up…")

    settings = PipelineSettings.from_env()
    clients = build_clients(settings)
    app.state.settings = settings
    app.state.pipeline = QueryPipeline(clients, settings)

    logger.info("All components initialised. Ready.")
    try:
        yield
    finally:
        await clients.aclose()
        logger.info("MovieMatch backend shutting down.")


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> FastAPI:
    app = FastAPI(
        title       = "MovieMatch API",
        description = (
            "Movie recommendations answered by an LLM over movie descriptions "
            "retrieved from Supabase by embedding similarity."
        ),
        version     = "1.0.0",
        docs_url    = "/docs",
        redoc_url   = "/redoc",
        lifespan    = lifespan,
    )

    # ── CORS ──────────────────────────────────────────────────────────────
    origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        origins.append(frontend_url)
    app.add_middleware(
        CORSMiddleware,
        allow_origins     = origins,
        allow_credentials = True,
        allow_methods     = ["*"],
        allow_headers     = ["*"],
    )

    # ── Routers ───────────────────────────────────────────────────────────
    app.include_router(health_router)
    app.include_router(match_router)

    # ── Errors ────────────────────────────────────────────────────────────
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    return app


app = create_app()

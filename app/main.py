"""FastAPI application factory."""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.v1.api import api_router
from app.config import Settings, get_settings
from app.context import AppContext
from app.core.logging import configure_logging
from app.utils.exceptions import register_exception_handlers


tags_metadata: List[dict[str, str]] = [
    {"name": "words", "description": "Manage the vocabulary shown in the games."},
    {"name": "players", "description": "Manage child profiles."},
    {"name": "sessions", "description": "Track mini-game play sessions."},
    {"name": "progress", "description": "Per-word progress and adaptive scheduling."},
    {"name": "analytics", "description": "Raw gameplay events."},
    {"name": "media", "description": "Placeholder image and audio generation."},
    {"name": "sample-words", "description": "Edit the bundled sample word list."},
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application instance."""

    settings = settings or get_settings()
    configure_logging(settings)
    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting application",
            environment=settings.ENVIRONMENT,
            auth_enabled=bool(settings.PARENT_AUTH_SECRET),
        )
        try:
            yield
        finally:
            context.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Backend for the children's vocabulary game.",
        version="0.1.0",
        openapi_tags=tags_metadata,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "{method} {path} {status} {elapsed:.1f}ms",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            elapsed=elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app

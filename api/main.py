#!/usr/bin/env python3
"""
paxsheets API - HTTP layer for PAX name resolution.

Serves the attendance front end and the posting bot. It:
- Resolves the PAX named in workout comments against a region roster
- Cleans raw roster columns (archived / under-age members)
- Publishes the alias override table
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from attendance.logging_config import configure_logging, get_logger, parse_level
from attendance.pax_resolution import AliasConfigError

from .dependencies import get_resolver_cache
from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api", level=parse_level(get_settings().log_level))
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the resolver cache before serving and empty it on shutdown."""
    # Load overrides at startup so a bad ALIAS_OVERRIDES_FILE fails fast
    cache = get_resolver_cache()
    logger.info(f"paxsheets API started with {len(cache.overrides)} alias overrides")

    yield

    cache.clear()


def create_app() -> FastAPI:
    """Assemble the API: error handlers, CORS, the pax router and /health."""
    app = FastAPI(title="paxsheets API", description="PAX name resolution API", lifespan=lifespan)

    @app.exception_handler(AliasConfigError)
    async def alias_config_handler(request: Request, exc: AliasConfigError) -> JSONResponse:
        logger.error(f"Alias configuration error: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import pax

    app.include_router(pax.router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint (also used to warm cold starts)."""
        return {"status": "healthy", "service": "paxsheets-api"}

    return app


# uvicorn api.main:app
app = create_app()

"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sinjapan_manager.config import get_settings
from sinjapan_manager.infrastructure.database import Base, engine
from sinjapan_manager.infrastructure.logging.log_config import setup_logging
from sinjapan_manager.presentation.api.router import router as api_router
from sinjapan_manager.presentation.api.v1.errors import register_exception_handlers

logger = logging.getLogger(__name__)


async def _ensure_database_exists() -> None:
    """Create the PostgreSQL database if it does not yet exist.

    Only applies to ``postgresql://`` URLs; SQLite files are created on
    first connect.
    """
    from urllib.parse import urlparse

    settings = get_settings()
    if not settings.database_url.startswith(("postgresql://", "postgres://")):
        return

    import asyncpg

    parsed = urlparse(settings.database_url)
    db_name = parsed.path.lstrip("/")
    if not db_name:
        return

    # Build a connection URL pointing at the default 'postgres' database
    maintenance_url = settings.database_url.rsplit("/", 1)[0] + "/postgres"

    try:
        conn = await asyncpg.connect(maintenance_url)
        try:
            exists = await conn.fetchval(
                "SELECT 1 FROM pg_database WHERE datname = $1", db_name
            )
            if not exists:
                # CREATE DATABASE cannot run inside a transaction block
                await conn.execute(f'CREATE DATABASE "{db_name}"')
                logger.info("Created database '%s'", db_name)
            else:
                logger.debug("Database '%s' already exists", db_name)
        finally:
            await conn.close()
    except Exception as exc:
        logger.warning("Could not auto-create database '%s': %s", db_name, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables, open the upstream connection pools."""
    settings = get_settings()
    setup_logging()

    # 1. AI request log storage
    await _ensure_database_exists()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Shared HTTP pools for the backend and the AI provider
    app.state.backend_http_client = httpx.AsyncClient(timeout=settings.backend_timeout)
    app.state.ai_http_client = httpx.AsyncClient(timeout=120.0)
    logger.info(
        "Forwarding to backend %s (AI provider: %s)",
        settings.backend_base_url,
        settings.ai_provider,
    )

    yield

    # Shutdown
    await app.state.backend_http_client.aclose()
    await app.state.ai_http_client.aclose()
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware; credentials are needed to carry the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sinjapan_manager.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )

"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clientportal.config import get_settings
from clientportal.infrastructure.logging.log_config import setup_logging
from clientportal.presentation.api.errors import register_exception_handlers
from clientportal.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    prefix = next(
        (p for p in ("sqlite:///", "sqlite+aiosqlite:///") if database_url.startswith(p)),
        None,
    )
    if prefix is None:
        return
    path = database_url[len(prefix):]
    if path and path != ":memory:":
        Path(path).parent.mkdir(parents=True, exist_ok=True)


async def _create_record_tables() -> None:
    """Create the key-value table if it does not yet exist."""
    from clientportal.infrastructure.database import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and prepare the record store."""
    settings = get_settings()
    setup_logging()

    if settings.record_store_backend == "memory":
        logger.warning("Using the in-memory record store; data is lost on restart")
    else:
        _ensure_sqlite_directory(settings.database_url)
        await _create_record_tables()
        logger.info("Record store ready")

    yield

    if settings.record_store_backend != "memory":
        from clientportal.infrastructure.database import engine

        await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
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
        "clientportal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )

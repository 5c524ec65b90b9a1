"""Application factory: settings, database lifecycle, middleware and routes."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from sysapi import __version__
from sysapi.api import build_router
from sysapi.core.config import Settings, get_settings
from sysapi.core.database import Database
from sysapi.core.exception_handler import register_exception_handlers
from sysapi.core.json_codec import CodecJSONResponse
from sysapi.core.logging_config import CallLoggingMiddleware, setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Build the application.

    The Database is opened here (or injected, e.g. by tests) and disposed when
    the application shuts down.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    if database is None:
        database = Database(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            echo=settings.DEBUG,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.DB_CREATE_TABLES:
            database.create_all()
        logger.info("sysapi started (env=%s)", settings.APP_ENV)
        yield
        database.dispose()

    app = FastAPI(
        title="sysapi",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        default_response_class=CodecJSONResponse,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(CallLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(build_router(settings.SYS_PREFIX))

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery and the post-login landing page."""
        return {"message": "sysapi"}

    return app


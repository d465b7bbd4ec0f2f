"""Welcome Service - FastAPI Application.

A minimal HTTP service:
- JSON request body parsing
- Per-request logging (method, path, timestamp)
- A static welcome route and a health probe
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from app.api.routes import root_router
from app.core.config import Settings, get_settings
from app.core.exceptions import setup_exception_handlers
from app.core.logging import get_logger, setup_logging
from app.middleware import JSONBodyMiddleware, LoggingMiddleware

logger = get_logger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    logger.info(f"Server is running on {settings.base_url}")
    yield
    logger.info("Server shutting down")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Logging is configured separately by the caller."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Minimal HTTP service answering GET / with a welcome message.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # =========================================================================
    # Middleware Registration (order is LIFO - last added runs FIRST)
    # =========================================================================
    # Execution order: Logging → JSONBody → endpoint
    # Logging wraps body parsing so rejected bodies (400/413/415) are logged too.
    # =========================================================================

    app.add_middleware(
        JSONBodyMiddleware,
        limit=settings.json_body_limit,
        strict=settings.json_strict,
    )
    app.add_middleware(LoggingMiddleware)

    setup_exception_handlers(app)

    app.include_router(root_router)

    return app


settings = get_settings()

# Configure logging based on settings
setup_logging(settings)

app = create_app(settings)

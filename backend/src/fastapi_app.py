"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and DI.

Run with uvicorn in factory mode:
    uvicorn src.fastapi_app:create_fastapi_app --factory --port 5000
"""

from contextlib import asynccontextmanager
from logging import getLogger
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from src.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from src.config.settings import get_config
from src.presentation.api import threads_router
from src.presentation.errors import register_exception_handlers
from src.setup.ioc.container import create_container

logger = getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; defaults to the Prisma-backed one

    Returns:
        FastAPI application instance
    """
    config = get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH)

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: container is already wired, nothing to do
        - Shutdown: close DI container (disconnects Prisma)
        """
        logger.info("Forum API started. DI container initialized.")
        yield
        await container.close()
        logger.info("Forum API shutdown. DI container closed.")

    app = FastAPI(
        title="Forum API",
        description="Threads and comments with owner-only soft deletion",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(threads_router)

    return app

"""FastAPI application factory."""

from fastapi import FastAPI

from applog import AppLogger
from .api import api_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(logger: AppLogger, config) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        logger: Application logger shared by middleware and routes
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="applog",
        description="Application logger with request-logging middleware",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.logger = logger
    app.state.config = config

    # Last added runs first: forwarded headers are on request.state before logging
    app.add_middleware(LoggingMiddleware, logger=logger, trust_proxy=config.trust_proxy)
    app.add_middleware(ForwardedHeadersMiddleware)

    app.include_router(api_router, tags=["API"])

    return app

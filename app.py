#!/usr/bin/env python3
"""
Main entry point for the applog service.

Every request passing through the app is recorded twice in logs/app.log:
once on arrival and once when the response is sent.

Usage:
    python app.py

Environment variables:
    APP_ENV - 'development' enables debug-level records
    LOG_DIR - Log directory (default <install-root>/logs)
    LOG_FILE_NAME - Log file name (default app.log)
    LOG_LEVEL - Level of the operational logger
    TRUST_PROXY - Record the first X-Forwarded-For hop as client address
    HOST - Host to bind to
    PORT - Port to listen on
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from applog import AppLogger
from applog.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    config = app.state.config

    logger.success("Server started", {
        "host": config.host,
        "port": config.port,
        "env": config.app_env,
        "logFile": str(logger.log_file),
    })
    logger.debug("Development mode enabled")

    yield

    logger.info("Server stopped")


def main():
    """Main entry point."""
    config = load_config()

    ops_logger = setup_logging(level=config.log_level)
    ops_logger.info(f"Configuration: {config.model_dump()}")

    logger = AppLogger.from_config(config)

    app = create_app(logger=logger, config=config)
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    # Setup signal handlers for graceful shutdown
    def handle_signal(signum, frame):
        logger.warn(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        ops_logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        ops_logger.error(f"Server error: {e}")
        logger.error("Server error", {"error": str(e)})
        sys.exit(1)


if __name__ == "__main__":
    main()

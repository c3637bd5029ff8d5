"""API routes implementation."""

import os
from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is up and its log directory is writable.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    logger = request.app.state.logger

    log_writable = logger.log_dir.is_dir() and os.access(logger.log_dir, os.W_OK)
    if not log_writable:
        logger.warn("Log directory is not writable", {"log_dir": str(logger.log_dir)})

    return HealthResponse(
        status="healthy" if log_writable else "degraded",
        log_file=str(logger.log_file),
        log_writable=log_writable,
        dev_mode=logger.dev_mode,
        timestamp=datetime.now(timezone.utc),
    )

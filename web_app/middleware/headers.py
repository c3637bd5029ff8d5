"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to store the X-Forwarded-For header on request state."""

    async def dispatch(self, request: Request, call_next: Callable):
        """Process request and extract the forwarded client chain."""
        request.state.forwarded_for = request.headers.get("x-forwarded-for")

        response = await call_next(request)
        return response

"""Request logging middleware."""

import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional

from applog import AppLogger
from applog.common.headers import resolve_client_ip


def request_target(request: Request) -> str:
    """Path plus query string, as sent by the client (percent-encoding kept)."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        path = request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware recording each request on arrival and its response on send."""

    def __init__(self, app, logger: Optional[AppLogger] = None, trust_proxy: Optional[bool] = None):
        """Initialize logging middleware.

        Args:
            app: Downstream ASGI app
            logger: AppLogger to record to (app.state.logger if None)
            trust_proxy: Honor X-Forwarded-For (app.state.config.trust_proxy if None);
                the header is read from request.state.forwarded_for, set by
                ForwardedHeadersMiddleware
        """
        super().__init__(app)
        self.logger = logger
        self.trust_proxy = trust_proxy

    def _resolve_logger(self, request: Request) -> AppLogger:
        return self.logger or request.app.state.logger

    def _resolve_trust_proxy(self, request: Request) -> bool:
        if self.trust_proxy is not None:
            return self.trust_proxy
        config = getattr(request.app.state, "config", None)
        return bool(getattr(config, "trust_proxy", False))

    async def dispatch(self, request: Request, call_next: Callable):
        """Log request and response."""
        start_time = time.perf_counter()
        logger = self._resolve_logger(request)

        method = request.method
        url = request_target(request)
        client_ip = resolve_client_ip(
            forwarded_for=getattr(request.state, "forwarded_for", None),
            peer_host=request.client.host if request.client else None,
            trust_proxy=self._resolve_trust_proxy(request),
        )

        logger.info(f"{method} {url}", {
            "ip": client_ip,
            "userAgent": request.headers.get("user-agent"),
        })

        response = await call_next(request)

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        logger.info(f"{method} {url} - {response.status_code}", {
            "duration": f"{duration_ms}ms",
            "ip": client_ip,
        })

        return response

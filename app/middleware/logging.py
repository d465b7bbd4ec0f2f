"""Request Logging Middleware - one line per request in, one line per response out.

Example:
    INFO  app.request: → GET /?page=2 (2026-10-19T14:30:00.123456+00:00)
    INFO  app.request: ← GET / 200 (1.42ms)

For logging configuration (formatters, setup), see app.core.logging.
"""

import logging
import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.core.logging import get_logger

logger = get_logger("app.request")


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs method, path and arrival timestamp of each request,
    then the response status and duration.

    Usage:
        app.add_middleware(LoggingMiddleware)
    """

    # Paths to skip logging (probes and API docs)
    SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        method = request.method
        path = request.url.path
        query = request.url.query
        timestamp = datetime.now(timezone.utc).isoformat()

        logger.info(
            f"→ {method} {path}" + (f"?{query}" if query else "") + f" ({timestamp})",
            extra={"method": method, "path": path, "timestamp": timestamp},
        )

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"✗ {method} {path} {type(e).__name__}: {e} ({duration_ms:.2f}ms)",
                extra={"method": method, "path": path, "duration_ms": duration_ms},
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        log_level = logging.WARNING if status >= 400 else logging.INFO
        logger.log(
            log_level,
            f"← {method} {path} {status} ({duration_ms:.2f}ms)",
            extra={
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response

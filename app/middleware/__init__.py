"""Middleware package for cross-cutting concerns.

This package contains middleware for:
- Request logging (method, path, timestamp, status, duration)
- JSON request body parsing
"""

from app.middleware.json_body import JSONBodyMiddleware, get_json_body
from app.middleware.logging import LoggingMiddleware

__all__ = [
    "JSONBodyMiddleware",
    "LoggingMiddleware",
    "get_json_body",
]

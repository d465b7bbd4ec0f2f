"""Models package - Pydantic schemas for API contracts.

Import directly from this package:
    from app.models import ErrorResponse, HealthResponse
"""

from app.models.base import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]

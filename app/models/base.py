"""Response bodies for the health probe and for every error the service returns."""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(default="healthy", description="Service health status")
    version: str = Field(description="Application version from settings")
    environment: str = Field(description="development, production or testing")


class ErrorResponse(BaseModel):
    """JSON error body.

    Produced by the JSON body middleware when a request is rejected before
    routing (400 malformed JSON, 413 too large, 415 unsupported charset) and
    by the global handlers for AppException and unexpected 500s.
    """

    error: str = Field(
        description="Machine-readable code, e.g. MALFORMED_JSON or PAYLOAD_TOO_LARGE"
    )
    message: str = Field(description="Short human-readable summary")
    detail: Optional[str] = Field(
        default=None, description="Parser message or limit that was exceeded"
    )

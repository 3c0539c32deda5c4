"""Pydantic schemas for API responses that are not stored records."""

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned by every failing request."""

    error: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    storage: str
    employees: int | None = None

"""
Servicios API — Envelope Schemas
=================================

What:  The `{success, message}` shapes shared by every endpoint.
Who:   Used as response models for deletions and documented as the error
       body on every route.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Success envelope without data (deletions)."""
    success: bool = Field(default=True)
    message: str = Field(description="Human-readable result")


class ErrorResponse(BaseModel):
    """
    Error envelope returned by every failure.

    Example:
        {"success": false, "message": "El nombre es requerido."}
    """
    success: bool = Field(default=False)
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

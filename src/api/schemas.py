"""
Pydantic schemas for serialization of records and API responses.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# -----------------------------------------------------------------------------
# Record Schemas
# -----------------------------------------------------------------------------


class UserRead(BaseModel):
    """Scalar columns of a User, in the order they are serialized."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None = None


# -----------------------------------------------------------------------------
# Health Schemas
# -----------------------------------------------------------------------------


class HealthStatus(str, Enum):
    """Overall or per-component health state."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class ComponentHealth(BaseModel):
    """Health of a single dependency."""

    name: str = Field(..., description="Component name.")
    status: HealthStatus = Field(..., description="Component health status.")
    latency_ms: float | None = Field(default=None, ge=0, description="Check latency in ms.")
    message: str | None = Field(default=None, description="Additional status information.")


class HealthResponse(BaseModel):
    """Service health check response."""

    status: HealthStatus = Field(..., description="Overall service health.")
    version: str = Field(..., description="Application version.")
    environment: str = Field(..., description="Deployment environment.")
    components: list[ComponentHealth] = Field(default_factory=list)


# -----------------------------------------------------------------------------
# Error Schemas
# -----------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Error type identifier.")
    message: str = Field(..., description="Human-readable error message.")
    request_id: str | None = Field(default=None, description="Request ID for tracing.")


__all__ = [
    "ComponentHealth",
    "ErrorResponse",
    "HealthResponse",
    "HealthStatus",
    "UserRead",
]

"""Health check API schemas."""

from pydantic import BaseModel, Field


class LivenessResponse(BaseModel):
    """Response for GET /health/live."""

    status: str = Field(default="ok", description="Process status")


class DependencyChecks(BaseModel):
    database: bool = Field(..., description="SELECT 1 against the platform database succeeded")
    redis: bool = Field(..., description="Redis answered PING (true when Redis is disabled)")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready and /health/startup (200 or 503)."""

    status: str = Field(default="ok", description="ok or not_ready")
    checks: DependencyChecks

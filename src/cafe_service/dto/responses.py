"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ServiceInfoResponse(BaseModel):
    """Response DTO for the root endpoint."""

    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    endpoints: dict[str, str] = Field(default_factory=dict, description="Endpoint name to path")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cities: int = Field(..., description="Number of registered cities", ge=0)

"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error envelope shared by every failing response."""

    error: str = Field(..., description="Human-readable error message")


class SaveProductsResponse(BaseModel):
    """Response DTO for a successful product collection write."""

    ok: bool = Field(..., description="Whether the write succeeded")
    count: int = Field(..., description="Number of products saved", ge=0)
    message: str = Field(..., description="Human-readable status message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    store_configured: bool = Field(..., description="Whether a store binding is configured")
    store_healthy: bool = Field(..., description="Whether the store backend is reachable")

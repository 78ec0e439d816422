"""Data Transfer Objects for API contracts.

These Pydantic models define the JSON envelopes the API returns.
The product collection itself is opaque and passed through as-is.
"""

from .responses import ErrorResponse, HealthCheckResponse, SaveProductsResponse

__all__ = [
    "ErrorResponse",
    "SaveProductsResponse",
    "HealthCheckResponse",
]

"""Data Transfer Objects for the JSON endpoints.

The cafe endpoint itself answers in plain text; these Pydantic models
cover the service info and health endpoints.
"""

from .responses import HealthCheckResponse, ServiceInfoResponse

__all__ = [
    "HealthCheckResponse",
    "ServiceInfoResponse",
]

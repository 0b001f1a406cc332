"""API schemas package."""

from .requests import GenerateRequest
from .responses import ErrorResponse, HealthResponse, PlatformInfo, PlatformListResponse

__all__ = [
    # Requests
    "GenerateRequest",
    # Responses
    "ErrorResponse",
    "HealthResponse",
    "PlatformInfo",
    "PlatformListResponse",
]

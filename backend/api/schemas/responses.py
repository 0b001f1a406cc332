"""
Response schemas for the API.

The generate endpoint returns a platform-dependent flat record built by
GenerationResponse.to_payload(); the schemas here describe the fixed-shape
endpoints and error bodies.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx response."""
    error: str = Field(..., description="Human-readable error summary")
    details: Optional[str] = Field(default=None, description="Underlying error message")


class PlatformInfo(BaseModel):
    """A supported platform and the sections its response contains."""
    platform: str = Field(..., description="Platform identifier used as request type")
    name: str = Field(..., description="Display name")
    sections: list[str] = Field(..., description="Section markers in reply order")
    response_fields: list[str] = Field(..., description="Response fields populated for this platform")
    uses_duration: bool = False
    uses_keywords: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlatformListResponse(BaseModel):
    """All supported platforms."""
    platforms: list[PlatformInfo]
    count: int


class HealthResponse(BaseModel):
    """Service health and configured providers."""
    status: str = "healthy"
    version: str
    providers: list[str] = Field(default_factory=list, description="Configured providers in fallback order")

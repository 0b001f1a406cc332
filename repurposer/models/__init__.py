"""Pydantic data models for the generation pipeline."""

from .enums import Platform
from .fields import (
    ExtractedFields,
    GenerationResponse,
    InstagramFields,
    KeywordFields,
    LinkedInFields,
    TikTokFields,
    TwitterFields,
    YouTubeFields,
)
from .generation import (
    MAX_KEYWORDS,
    GenerationError,
    GenerationRequest,
    GenerationResult,
    ModelAttempt,
    validation_message,
)

__all__ = [
    # Enums
    "Platform",
    # Requests and attempts
    "MAX_KEYWORDS",
    "GenerationRequest",
    "ModelAttempt",
    "GenerationError",
    "GenerationResult",
    "validation_message",
    # Extracted fields
    "ExtractedFields",
    "YouTubeFields",
    "LinkedInFields",
    "TwitterFields",
    "InstagramFields",
    "TikTokFields",
    "KeywordFields",
    "GenerationResponse",
]

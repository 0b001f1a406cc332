"""
Request schemas for the API.

These define the expected input structure for API endpoints.
Field-level rules (non-blank transcript, MM:SS duration, keyword limits)
are enforced by GenerationRequest so the API and CLI report the same
messages.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Request to generate content for one platform from a transcript."""
    transcript: Optional[str] = Field(default=None, description="Transcript text to repurpose")
    type: Optional[str] = Field(
        default=None,
        description="Target platform: youtube, linkedin, twitter, instagram, tiktok or keywords (default youtube)",
    )
    video_duration: Optional[str] = Field(
        default=None,
        alias="videoDuration",
        description="Video duration as MM:SS, enables YouTube timestamps",
    )
    keywords: Optional[list[str]] = Field(default=None, description="Up to 3 focus keywords")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "transcript": "Today we look at what is new in JavaScript this year...",
                    "type": "youtube",
                    "videoDuration": "7:16",
                    "keywords": ["javascript", "es2025"],
                }
            ]
        },
    )

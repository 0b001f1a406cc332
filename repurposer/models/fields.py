"""Models for structured fields extracted from backend replies."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import Platform


class ExtractedFields(BaseModel):
    """Base for the platform-dependent partial record.

    Every field defaults to an empty value so a reply with missing or
    malformed sections still produces a complete record.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class YouTubeFields(ExtractedFields):
    """Corrected transcript, title, description and optional chapter timestamps."""

    transcript: str = ""
    title: str = ""
    description: str = ""
    timestamps: str = ""


class LinkedInFields(ExtractedFields):
    linkedin_post: str = ""


class TwitterFields(ExtractedFields):
    twitter_post: str = ""


class InstagramFields(ExtractedFields):
    instagram_post: str = ""


class TikTokFields(ExtractedFields):
    tiktok_post: str = ""


class KeywordFields(ExtractedFields):
    keywords: list[str] = Field(default_factory=list)


class GenerationResponse(BaseModel):
    """Final pipeline output: extracted fields plus generation metadata."""

    model_config = ConfigDict(protected_namespaces=())

    platform: Platform
    content: ExtractedFields
    model_used: str
    transcript_cleaned: bool = False

    def to_payload(self) -> dict:
        """Flatten into the camelCase JSON shape returned to API clients."""
        return {
            **self.content.model_dump(by_alias=True),
            "transcriptCleaned": self.transcript_cleaned,
            "modelUsed": self.model_used,
        }

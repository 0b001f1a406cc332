"""Models for generation requests, provider attempts and results."""

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .enums import Platform

MAX_KEYWORDS = 3

# M:SS or MM:SS, seconds 00-59
DURATION_PATTERN = re.compile(r"^([0-9]{1,2}):([0-5][0-9])$")

INVALID_TRANSCRIPT = "Please provide a valid transcript."
INVALID_DURATION = "Please provide the video duration in MM:SS format (e.g. 7:16)."
TOO_MANY_KEYWORDS = f"At most {MAX_KEYWORDS} keywords are allowed."


class GenerationRequest(BaseModel):
    """A single, validated request to generate content for one platform."""

    model_config = ConfigDict(frozen=True)

    transcript: str = Field(..., description="Raw transcript text (non-blank)")
    platform: Platform = Field(default=Platform.YOUTUBE, description="Target platform")
    duration_hint: str | None = Field(None, description="Video duration as MM:SS")
    keywords: tuple[str, ...] = Field(
        default=(), description="Up to three lower-cased focus keywords"
    )

    @field_validator("transcript", mode="before")
    @classmethod
    def _transcript_not_blank(cls, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(INVALID_TRANSCRIPT)
        return value

    @field_validator("platform", mode="before")
    @classmethod
    def _known_platform(cls, value):
        if value is None or value == "":
            return Platform.YOUTUBE
        try:
            return Platform(value)
        except ValueError:
            raise ValueError(
                "Invalid type. Allowed values: " + ", ".join(Platform.values())
            ) from None

    @field_validator("duration_hint", mode="before")
    @classmethod
    def _valid_duration(cls, value):
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(INVALID_DURATION)
        value = value.strip()
        if not value:
            return None
        if not DURATION_PATTERN.match(value):
            raise ValueError(INVALID_DURATION)
        return value

    @field_validator("keywords", mode="before")
    @classmethod
    def _normalize_keywords(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]

        normalized: list[str] = []
        for keyword in value:
            keyword = str(keyword).strip().lower()
            if keyword and keyword not in normalized:
                normalized.append(keyword)

        if len(normalized) > MAX_KEYWORDS:
            raise ValueError(TOO_MANY_KEYWORDS)
        return tuple(normalized)


class ModelAttempt(BaseModel):
    """A (provider, model) pair in fallback order."""

    model_config = ConfigDict(frozen=True)

    provider: str
    model: str


class GenerationError(BaseModel):
    """Record of one failed model or provider attempt."""

    provider: str = Field(..., description="Provider display name")
    model: str | None = Field(None, description="Model identifier, None for provider-level errors")
    message: str = Field(..., description="Human-readable failure message")
    status_code: int | None = Field(None, description="Backend status code if available")


class GenerationResult(BaseModel):
    """Raw backend text and the model that produced it."""

    model_config = ConfigDict(protected_namespaces=())

    text: str
    model_used: str
    provider: str


def validation_message(exc: ValidationError) -> str:
    """Get the first human-readable message out of a request validation error.

    Pydantic prefixes messages raised from validators with "Value error, ";
    the original message is preserved in the error context.
    """
    errors = exc.errors()
    if not errors:
        return str(exc)

    first = errors[0]
    ctx_error = (first.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)

    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else first.get("msg", str(exc))

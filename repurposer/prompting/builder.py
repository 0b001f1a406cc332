"""Prompt construction for a platform and transcript."""

from collections.abc import Sequence

import structlog

from repurposer.models import GenerationRequest, Platform
from repurposer.prompting.registry import get_profile

logger = structlog.get_logger(__name__)


def build_prompt(
    platform: Platform | str,
    transcript: str,
    *,
    duration_hint: str | None = None,
    keywords: Sequence[str] | None = None,
) -> str:
    """Build the backend prompt for one platform.

    The transcript is inserted verbatim; any cleaning must happen before
    this is called. Options the platform does not use are ignored.

    Args:
        platform: Target platform.
        transcript: Transcript text to embed.
        duration_hint: Video duration (MM:SS), used for YouTube timestamps.
        keywords: Focus keywords for platforms that support them.

    Returns:
        The complete prompt text.

    Raises:
        UnsupportedPlatformError: If the platform has no registered template.
    """
    profile = get_profile(platform)

    prompt = profile.render(
        transcript,
        duration_hint if profile.uses_duration else None,
        tuple(keywords or ()) if profile.uses_keywords else (),
    )

    logger.debug(
        "prompt_built",
        platform=profile.platform.value,
        transcript_length=len(transcript),
        prompt_length=len(prompt),
    )

    return prompt


def build_prompt_for_request(request: GenerationRequest, transcript: str | None = None) -> str:
    """Build the prompt for a validated request, optionally with a cleaned transcript."""
    return build_prompt(
        request.platform,
        request.transcript if transcript is None else transcript,
        duration_hint=request.duration_hint,
        keywords=request.keywords,
    )

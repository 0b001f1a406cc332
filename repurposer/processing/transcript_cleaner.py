"""Transcript cleanup applied before prompting."""

import re

import structlog

logger = structlog.get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")


def clean_transcript(transcript: str) -> tuple[str, bool]:
    """Drop a stray single-character word left at the end by speech-to-text.

    When a trailing single character is removed the remaining words are
    re-joined with single spaces. A transcript that consists of one word
    only is left as it is.

    Args:
        transcript: Raw transcript text.

    Returns:
        Tuple of (transcript, cleaned) where ``cleaned`` tells whether
        anything was removed.
    """
    words = _WHITESPACE.split(transcript.strip())

    if len(words) > 1 and len(words[-1]) == 1:
        removed = words.pop()
        logger.info("transcript_trailing_character_removed", character=removed)
        return " ".join(words), True

    return transcript, False

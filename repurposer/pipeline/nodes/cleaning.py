"""Transcript cleaning pipeline node."""

import structlog

from repurposer.pipeline.state import GenerationState
from repurposer.processing import clean_transcript

logger = structlog.get_logger(__name__)


def clean_transcript_node(state: GenerationState) -> GenerationState:
    """Remove stray trailing characters from the request transcript.

    Args:
        state: Current pipeline state with request.

    Returns:
        Updated state with transcript and transcript_cleaned.
    """
    transcript, cleaned = clean_transcript(state["request"].transcript)

    logger.debug("cleaning_node_complete", cleaned=cleaned, transcript_length=len(transcript))

    return {
        **state,
        "transcript": transcript,
        "transcript_cleaned": cleaned,
    }

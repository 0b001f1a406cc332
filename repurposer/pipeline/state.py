"""Pipeline state definition for LangGraph."""

from typing import TypedDict

from repurposer.models import (
    ExtractedFields,
    GenerationError,
    GenerationRequest,
    GenerationResponse,
    GenerationResult,
)


class GenerationState(TypedDict, total=False):
    """State that flows through the generation graph for one request."""

    # Input
    request: GenerationRequest

    # Stage 1: Cleaning
    transcript: str
    transcript_cleaned: bool

    # Stage 2: Prompt
    prompt: str

    # Stage 3: Generation
    result: GenerationResult
    provider_errors: list[GenerationError]

    # Stage 4: Extraction
    fields: ExtractedFields

    # Stage 5: Final response
    response: GenerationResponse


def create_initial_state(request: GenerationRequest) -> GenerationState:
    """Create initial pipeline state.

    Args:
        request: Validated generation request.

    Returns:
        Initial GenerationState dict.
    """
    return GenerationState(
        request=request,
        transcript=request.transcript,
        transcript_cleaned=False,
        provider_errors=[],
    )

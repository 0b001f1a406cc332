"""Response extraction and assembly pipeline nodes."""

import structlog

from repurposer.extraction import extract_fields
from repurposer.models import GenerationResponse
from repurposer.pipeline.state import GenerationState

logger = structlog.get_logger(__name__)


def extract_fields_node(state: GenerationState) -> GenerationState:
    """Parse the backend reply into the platform's fields."""
    fields = extract_fields(state["request"].platform, state["result"].text)
    return {**state, "fields": fields}


def assemble_response_node(state: GenerationState) -> GenerationState:
    """Merge extracted fields with generation metadata.

    Args:
        state: Current pipeline state with fields and result.

    Returns:
        Updated state with the final response.
    """
    response = GenerationResponse(
        platform=state["request"].platform,
        content=state["fields"],
        model_used=state["result"].model_used,
        transcript_cleaned=state.get("transcript_cleaned", False),
    )

    logger.debug("response_assembled", platform=response.platform.value, model=response.model_used)

    return {**state, "response": response}

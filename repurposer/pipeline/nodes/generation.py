"""Backend generation pipeline node."""

import structlog

from repurposer.errors import AllProvidersFailedError
from repurposer.llm import ProviderOrchestrator
from repurposer.pipeline.state import GenerationState

logger = structlog.get_logger(__name__)


def generate_node(state: GenerationState, orchestrator: ProviderOrchestrator) -> GenerationState:
    """Send the prompt through the provider orchestrator.

    Uses a per-request error accumulator so a shared orchestrator never
    mixes errors of concurrent requests.

    Args:
        state: Current pipeline state with prompt.
        orchestrator: Configured provider orchestrator.

    Returns:
        Updated state with result and provider_errors.

    Raises:
        AllProvidersFailedError: If every provider and model failed.
    """
    platform = state["request"].platform.value
    logger.info("generation_node_start", platform=platform, prompt_length=len(state["prompt"]))

    outcome = orchestrator.attempt(state["prompt"])

    if not outcome.succeeded:
        error = AllProvidersFailedError(outcome.errors)
        logger.error("generation_node_failed", platform=platform, error=str(error))
        raise error

    logger.info(
        "generation_node_complete",
        platform=platform,
        provider=outcome.result.provider,
        model=outcome.result.model_used,
        failed_attempts=len(outcome.errors),
    )

    return {
        **state,
        "result": outcome.result,
        "provider_errors": outcome.errors,
    }

"""LangGraph workflow definition for the generation pipeline."""

from functools import partial

import structlog
from langgraph.graph import END, START, StateGraph

from repurposer.config.settings import Settings
from repurposer.llm import ProviderOrchestrator, create_configured_providers
from repurposer.models import GenerationRequest, GenerationResponse
from repurposer.pipeline.nodes import (
    assemble_response_node,
    build_prompt_node,
    clean_transcript_node,
    extract_fields_node,
    generate_node,
)
from repurposer.pipeline.state import GenerationState, create_initial_state

logger = structlog.get_logger(__name__)


def build_pipeline(orchestrator: ProviderOrchestrator) -> StateGraph:
    """Build the LangGraph workflow for one generation request.

    Args:
        orchestrator: Provider orchestrator used by the generation node.

    Returns:
        Uncompiled StateGraph.
    """
    workflow = StateGraph(GenerationState)

    workflow.add_node("cleaning", clean_transcript_node)
    workflow.add_node("prompting", build_prompt_node)
    workflow.add_node("generation", partial(generate_node, orchestrator=orchestrator))
    workflow.add_node("extraction", extract_fields_node)
    workflow.add_node("assembly", assemble_response_node)

    workflow.add_edge(START, "cleaning")
    workflow.add_edge("cleaning", "prompting")
    workflow.add_edge("prompting", "generation")
    workflow.add_edge("generation", "extraction")
    workflow.add_edge("extraction", "assembly")
    workflow.add_edge("assembly", END)

    return workflow


class GenerationPipeline:
    """Compiled generation graph bound to one orchestrator.

    The compiled graph holds no per-request state and can be shared.
    """

    def __init__(self, orchestrator: ProviderOrchestrator):
        self.orchestrator = orchestrator
        self._app = build_pipeline(orchestrator).compile()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "GenerationPipeline":
        """Build a pipeline over every provider configured in settings.

        Raises:
            NoProvidersConfiguredError: If no provider is configured.
        """
        return cls(ProviderOrchestrator(create_configured_providers(settings)))

    def run(self, request: GenerationRequest) -> GenerationResponse:
        """Run the full pipeline for one request.

        Args:
            request: Validated generation request.

        Returns:
            Final GenerationResponse.

        Raises:
            AllProvidersFailedError: If no provider could generate content.
        """
        logger.info(
            "pipeline_starting",
            platform=request.platform.value,
            transcript_length=len(request.transcript),
            keywords=list(request.keywords),
        )

        result = self._app.invoke(create_initial_state(request))

        logger.info("pipeline_complete", model=result["response"].model_used)

        return result["response"]


def run_generation(request: GenerationRequest, orchestrator: ProviderOrchestrator) -> GenerationResponse:
    """Execute the generation pipeline for one request.

    Args:
        request: Validated generation request.
        orchestrator: Provider orchestrator to use.

    Returns:
        Final GenerationResponse.
    """
    return GenerationPipeline(orchestrator).run(request)

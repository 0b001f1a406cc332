"""Prompt construction pipeline node."""

from repurposer.pipeline.state import GenerationState
from repurposer.prompting import build_prompt_for_request


def build_prompt_node(state: GenerationState) -> GenerationState:
    """Build the platform prompt from the cleaned transcript."""
    prompt = build_prompt_for_request(state["request"], transcript=state["transcript"])
    return {**state, "prompt": prompt}

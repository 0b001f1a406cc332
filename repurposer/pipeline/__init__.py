"""Request pipeline: clean, prompt, generate, extract, assemble."""

from .graph import GenerationPipeline, build_pipeline, run_generation
from .state import GenerationState, create_initial_state

__all__ = [
    "GenerationPipeline",
    "GenerationState",
    "build_pipeline",
    "create_initial_state",
    "run_generation",
]

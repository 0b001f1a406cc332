"""
FastAPI dependencies for the generation pipeline.
"""

from typing import Optional

from fastapi import Request

from repurposer.pipeline import GenerationPipeline


def get_pipeline(request: Request) -> Optional[GenerationPipeline]:
    """Pipeline built at startup, or None when no provider is configured."""
    return getattr(request.app.state, "pipeline", None)

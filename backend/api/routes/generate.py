"""
Generate Route

Runs the generation pipeline for one transcript and platform.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from backend.api.deps import get_pipeline
from backend.api.schemas import ErrorResponse, GenerateRequest
from repurposer.errors import AllProvidersFailedError
from repurposer.models import GenerationRequest, validation_message
from repurposer.pipeline import GenerationPipeline

logger = structlog.get_logger(__name__)

router = APIRouter()

AI_UNAVAILABLE = "AI services unavailable. Please check the API configuration."
GENERATION_FAILED = "Content generation failed"
UNEXPECTED_ERROR = "Unexpected error while generating content"


def error_response(message: str, status_code: int, details: Optional[str] = None) -> JSONResponse:
    """Build the JSON error body used by every failing request."""
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/generate",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def generate_content(
    body: GenerateRequest,
    pipeline: Optional[GenerationPipeline] = Depends(get_pipeline),
) -> JSONResponse:
    """
    Generate platform content from a transcript.

    The response holds the platform's fields (empty where the model's
    reply had no matching section) plus modelUsed and transcriptCleaned.

    Args:
        body: Transcript, platform type and optional duration/keywords

    Returns:
        Flat JSON record for the requested platform
    """
    if pipeline is None:
        return error_response(AI_UNAVAILABLE, 503)

    try:
        request = GenerationRequest(
            transcript=body.transcript,
            platform=body.type,
            duration_hint=body.video_duration,
            keywords=body.keywords,
        )
    except ValidationError as e:
        return error_response(validation_message(e), 400)

    try:
        response = await run_in_threadpool(pipeline.run, request)
    except AllProvidersFailedError as e:
        return error_response(GENERATION_FAILED, 503, str(e))
    except Exception as e:
        logger.exception("generate_unexpected_error", platform=request.platform.value)
        return error_response(UNEXPECTED_ERROR, 500, str(e))

    return JSONResponse(content=response.to_payload())

"""
FastAPI Backend for the Transcript Repurposer

This is the main entry point for the API server. It provides endpoints for:
- Generating platform content from a transcript
- Listing supported platforms
- Health and provider configuration

Architecture Decision:
- Stateless: nothing is persisted, each request is independent
- Providers are configured once at startup; when none are configured the
  server still starts and answers generation requests with 503
"""

# Load .env BEFORE any application imports that read os.environ
from dotenv import load_dotenv
load_dotenv()

import os
from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routes import generate, platforms
from backend.api.routes.generate import error_response
from backend.api.schemas import HealthResponse
from repurposer import __version__
from repurposer.config import Settings, configure_logging, get_settings
from repurposer.errors import NoProvidersConfiguredError
from repurposer.pipeline import GenerationPipeline

logger = structlog.get_logger(__name__)


def create_app(
    pipeline: Optional[GenerationPipeline] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create the API application.

    Args:
        pipeline: Pre-built pipeline (tests); built from settings at startup if omitted.
        settings: Settings override; defaults to the cached environment settings.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging and providers on startup."""
        configure_logging(settings.log_level, json=settings.log_json)

        if app.state.pipeline is None:
            try:
                app.state.pipeline = GenerationPipeline.from_settings(settings)
            except NoProvidersConfiguredError as e:
                logger.error("providers_unavailable", error=str(e))

        yield

    app = FastAPI(
        title="Transcript Repurposer API",
        description="API for turning video transcripts into platform-specific content with LLM fallback",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.pipeline = pipeline

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:4321", "http://localhost:3000", "*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrongly typed fields -> 400 with the usual error body."""
        return error_response("Invalid JSON request", 400, str(exc.errors()))

    # =========================================================================
    # API routes
    # =========================================================================

    app.include_router(generate.router, prefix="/api", tags=["Generation"])
    app.include_router(platforms.router, prefix="/api", tags=["Platforms"])

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check(request: Request) -> HealthResponse:
        """Health check endpoint."""
        pipeline = request.app.state.pipeline
        providers = [provider.name for provider in pipeline.orchestrator.providers] if pipeline else []
        return HealthResponse(
            status="healthy" if providers else "degraded",
            version=__version__,
            providers=providers,
        )

    @app.get("/")
    async def root():
        """Root endpoint with a short endpoint overview."""
        return {
            "name": "Transcript Repurposer API",
            "docs": "/docs",
            "endpoints": {
                "generate": "POST /api/generate",
                "platforms": "GET /api/platforms",
                "health": "GET /api/health",
            },
        }

    return app


app = create_app()


# =============================================================================
# Run with: python -m backend.main
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 8100))
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=port,
        reload=False,
    )

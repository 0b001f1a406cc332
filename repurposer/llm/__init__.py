"""LLM backends, provider adapters and orchestration."""

from .client import create_anthropic_llm, create_gemini_llm, create_ollama_llm
from .orchestrator import GenerationOutcome, ProviderOrchestrator
from .providers import (
    AnthropicProvider,
    GeminiProvider,
    OllamaProvider,
    ProviderAdapter,
    create_configured_providers,
)

__all__ = [
    "create_gemini_llm",
    "create_anthropic_llm",
    "create_ollama_llm",
    "ProviderAdapter",
    "GeminiProvider",
    "AnthropicProvider",
    "OllamaProvider",
    "create_configured_providers",
    "ProviderOrchestrator",
    "GenerationOutcome",
]

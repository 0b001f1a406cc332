"""LangChain backend client factories.

Client-side retry loops are disabled: fallback to the next model or provider
is the only retry mechanism, so one failed call to a model is final.
"""

from langchain_anthropic import ChatAnthropic
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_ollama import OllamaLLM

from repurposer.config.settings import Settings, get_settings


def create_gemini_llm(
    model: str,
    api_key: str,
    settings: Settings | None = None,
) -> ChatGoogleGenerativeAI:
    """Create a Google Gemini chat model.

    Args:
        model: Gemini model identifier.
        api_key: Google AI Studio API key.
        settings: Optional custom settings. Uses defaults if not provided.

    Returns:
        Configured ChatGoogleGenerativeAI instance.
    """
    settings = settings or get_settings()

    return ChatGoogleGenerativeAI(
        model=model,
        google_api_key=api_key,
        temperature=settings.llm_temperature,
        timeout=settings.llm_request_timeout,
        # a single attempt per model
        max_retries=1,
    )


def create_anthropic_llm(
    model: str,
    api_key: str,
    settings: Settings | None = None,
) -> ChatAnthropic:
    """Create an Anthropic Claude chat model.

    Args:
        model: Claude model identifier.
        api_key: Anthropic API key.
        settings: Optional custom settings. Uses defaults if not provided.

    Returns:
        Configured ChatAnthropic instance.
    """
    settings = settings or get_settings()

    return ChatAnthropic(
        model=model,
        api_key=api_key,
        max_tokens=settings.anthropic_max_tokens,
        temperature=settings.llm_temperature,
        timeout=settings.llm_request_timeout,
        max_retries=0,
    )


def create_ollama_llm(model: str, settings: Settings | None = None) -> OllamaLLM:
    """Create a local Ollama completion model.

    Args:
        model: Ollama model tag.
        settings: Optional custom settings. Uses defaults if not provided.

    Returns:
        Configured OllamaLLM instance.
    """
    settings = settings or get_settings()

    return OllamaLLM(
        model=model,
        base_url=settings.ollama_base_url,
        temperature=settings.llm_temperature,
        timeout=settings.llm_request_timeout,
        num_ctx=settings.ollama_num_ctx,
        streaming=False,
    )

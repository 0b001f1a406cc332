"""Provider adapters: one backend plus its ordered model fallback list."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import structlog
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable

from repurposer.config.settings import Settings, get_settings
from repurposer.errors import ProviderExhaustedError
from repurposer.llm.client import create_anthropic_llm, create_gemini_llm, create_ollama_llm
from repurposer.models import GenerationError, GenerationResult, ModelAttempt

logger = structlog.get_logger(__name__)

UNKNOWN_ERROR = "Unknown error"


def _status_of(exc: BaseException) -> int | None:
    """Best-effort numeric status from SDK exceptions (anthropic, google, httpx)."""
    for attr in ("status_code", "status", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    response = getattr(exc, "response", None)
    value = getattr(response, "status_code", None)
    if isinstance(value, int):
        return value
    return None


class ProviderAdapter(ABC):
    """Wrap one text-generation backend and try its models in order.

    Subclasses only decide how to build the LangChain runnable for a model.
    """

    name: str = "provider"

    def __init__(self, models: Sequence[str]):
        cleaned = tuple(model.strip() for model in models if model and model.strip())
        if not cleaned:
            raise ValueError(f"{self.name} needs at least one model")
        self.models = cleaned

    def __repr__(self) -> str:
        return f"{type(self).__name__}(models={list(self.models)!r})"

    @property
    def attempts(self) -> list[ModelAttempt]:
        """The (provider, model) pairs this adapter tries, in order."""
        return [ModelAttempt(provider=self.name, model=model) for model in self.models]

    @abstractmethod
    def create_llm(self, model: str) -> Runnable:
        """Build the backend runnable for one model."""

    def invoke_model(self, model: str, prompt: str) -> str:
        """Call the backend once with the given model."""
        chain = self.create_llm(model) | StrOutputParser()
        return chain.invoke(prompt)

    def generate(self, prompt: str) -> GenerationResult:
        """Generate text, falling back through the model list.

        Args:
            prompt: Opaque prompt text.

        Returns:
            GenerationResult from the first model that answered.

        Raises:
            ProviderExhaustedError: If every model failed.
        """
        errors: list[GenerationError] = []

        for model in self.models:
            logger.debug("model_attempt_start", provider=self.name, model=model)

            try:
                text = self.invoke_model(model, prompt)
            except Exception as e:
                error = GenerationError(
                    provider=self.name,
                    model=model,
                    message=str(e) or UNKNOWN_ERROR,
                    status_code=_status_of(e),
                )
                errors.append(error)
                logger.warning(
                    "model_attempt_failed",
                    provider=self.name,
                    model=model,
                    error=error.message,
                    status_code=error.status_code,
                    exception_type=type(e).__name__,
                )
                continue

            # Any text counts as an answer; empty replies extract to default fields
            logger.info("model_attempt_success", provider=self.name, model=model, length=len(text or ""))
            return GenerationResult(text=text or "", model_used=model, provider=self.name)

        raise ProviderExhaustedError(self.name, errors)


class GeminiProvider(ProviderAdapter):
    """Google Gemini via langchain-google-genai."""

    name = "Google Gemini"

    def __init__(self, api_key: str, models: Sequence[str], settings: Settings | None = None):
        super().__init__(models)
        self._api_key = api_key
        self._settings = settings

    def create_llm(self, model: str) -> Runnable:
        return create_gemini_llm(model, self._api_key, self._settings)


class AnthropicProvider(ProviderAdapter):
    """Anthropic Claude via langchain-anthropic."""

    name = "Anthropic Claude"

    def __init__(self, api_key: str, models: Sequence[str], settings: Settings | None = None):
        super().__init__(models)
        self._api_key = api_key
        self._settings = settings

    def create_llm(self, model: str) -> Runnable:
        return create_anthropic_llm(model, self._api_key, self._settings)


class OllamaProvider(ProviderAdapter):
    """Local models served by Ollama."""

    name = "Ollama"

    def __init__(self, models: Sequence[str], settings: Settings | None = None):
        super().__init__(models)
        self._settings = settings

    def create_llm(self, model: str) -> Runnable:
        return create_ollama_llm(model, self._settings)


def create_configured_providers(settings: Settings | None = None) -> list[ProviderAdapter]:
    """Build adapters for every backend with credentials and models configured.

    Order is fixed: Gemini, Anthropic, then Ollama (when enabled).

    Args:
        settings: Optional custom settings. Uses defaults if not provided.

    Returns:
        Possibly empty list of adapters.
    """
    settings = settings or get_settings()
    providers: list[ProviderAdapter] = []

    if settings.google_gemini_api_key and settings.gemini_model_list:
        providers.append(
            GeminiProvider(settings.google_gemini_api_key, settings.gemini_model_list, settings)
        )

    if settings.anthropic_api_key and settings.anthropic_model_list:
        providers.append(
            AnthropicProvider(settings.anthropic_api_key, settings.anthropic_model_list, settings)
        )

    if settings.ollama_enabled and settings.ollama_model_list:
        providers.append(OllamaProvider(settings.ollama_model_list, settings))

    logger.info(
        "providers_configured",
        providers=[provider.name for provider in providers],
        models={provider.name: list(provider.models) for provider in providers},
    )

    return providers

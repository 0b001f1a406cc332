"""Provider orchestration: first success wins across all configured adapters.

Attempts are strictly sequential, each fully awaited before the next. The
worst case tries every model of every provider; the call still terminates
because the lists are finite and no model is retried.
"""

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from repurposer.errors import AllProvidersFailedError, NoProvidersConfiguredError
from repurposer.llm.providers import UNKNOWN_ERROR, ProviderAdapter
from repurposer.models import GenerationError, GenerationResult

logger = structlog.get_logger(__name__)


@dataclass
class GenerationOutcome:
    """Result of one orchestration attempt together with its own errors."""

    result: GenerationResult | None
    errors: list[GenerationError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.result is not None


class ProviderOrchestrator:
    """Try configured provider adapters in order until one answers."""

    def __init__(self, providers: Sequence[ProviderAdapter]):
        """Create the orchestrator.

        Args:
            providers: Adapters in fallback order.

        Raises:
            NoProvidersConfiguredError: If no adapters are given.
        """
        self._providers = tuple(providers)
        if not self._providers:
            raise NoProvidersConfiguredError("No API keys provided for AI providers")

        self._last_errors: list[GenerationError] = []
        self._lock = threading.Lock()

    @property
    def providers(self) -> tuple[ProviderAdapter, ...]:
        return self._providers

    def attempt(self, prompt: str) -> GenerationOutcome:
        """Run one orchestration attempt with a fresh error accumulator.

        Errors from providers tried before the successful one are kept in
        the outcome for diagnostics.

        Args:
            prompt: Opaque prompt text.

        Returns:
            GenerationOutcome; ``result`` is None if every provider failed.
        """
        errors: list[GenerationError] = []

        for provider in self._providers:
            try:
                result = provider.generate(prompt)
            except Exception as e:
                errors.append(
                    GenerationError(provider=provider.name, model=None, message=str(e) or UNKNOWN_ERROR)
                )
                logger.error("provider_failed", provider=provider.name, error=str(e))
                continue

            if errors:
                logger.info(
                    "provider_fallback_success",
                    provider=provider.name,
                    model=result.model_used,
                    failed_providers=[error.provider for error in errors],
                )
            return GenerationOutcome(result=result, errors=errors)

        return GenerationOutcome(result=None, errors=errors)

    def generate_content(self, prompt: str) -> GenerationResult:
        """Generate text with full provider and model fallback.

        Args:
            prompt: Opaque prompt text.

        Returns:
            GenerationResult from the first provider/model that answered.

        Raises:
            AllProvidersFailedError: If every provider exhausted its models.
        """
        with self._lock:
            self._last_errors = []

        outcome = self.attempt(prompt)

        with self._lock:
            self._last_errors = list(outcome.errors)

        if not outcome.succeeded:
            error = AllProvidersFailedError(outcome.errors)
            logger.error("all_providers_failed", error=str(error))
            raise error

        return outcome.result

    def get_last_errors(self) -> list[GenerationError]:
        """Copy of the errors recorded by the most recent ``generate_content`` call."""
        with self._lock:
            return list(self._last_errors)

"""Exception hierarchy for the generation core."""

from collections.abc import Sequence

from repurposer.models import GenerationError


class RepurposerError(Exception):
    """Base class for all generation errors."""


class NoProvidersConfiguredError(RepurposerError):
    """No backend has credentials/models configured. Fatal at startup."""


class UnsupportedPlatformError(RepurposerError, ValueError):
    """A platform value without a registered profile was passed in."""

    def __init__(self, platform: object):
        self.platform = platform
        super().__init__(f"Unsupported platform type: {platform}")


class ProviderExhaustedError(RepurposerError):
    """Every model of a single provider failed."""

    def __init__(self, provider: str, errors: Sequence[GenerationError]):
        self.provider = provider
        self.errors = list(errors)
        details = ", ".join(error.message for error in self.errors) or "no models attempted"
        super().__init__(f"{provider} failed: {details}")


class AllProvidersFailedError(RepurposerError):
    """Every model of every configured provider failed."""

    def __init__(self, errors: Sequence[GenerationError]):
        self.errors = list(errors)
        details = ", ".join(f"{error.provider}: {error.message}" for error in self.errors)
        super().__init__(f"All AI providers failed: {details}")

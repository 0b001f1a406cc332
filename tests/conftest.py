"""Pytest configuration and fixtures."""

import pytest
from langchain_core.runnables import RunnableLambda

from repurposer.llm import ProviderAdapter, ProviderOrchestrator
from repurposer.pipeline import GenerationPipeline


class FakeAPIError(Exception):
    """Backend error carrying an HTTP-like status code."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ScriptedProvider(ProviderAdapter):
    """Adapter whose models answer from a script instead of a real backend.

    Each model maps to a reply string or an exception to raise.
    """

    def __init__(self, name: str, replies: dict):
        self.name = name
        self.replies = dict(replies)
        self.calls: list[str] = []
        self.prompts: list[str] = []
        super().__init__(list(replies))

    def create_llm(self, model: str):
        def respond(prompt: str) -> str:
            self.calls.append(model)
            self.prompts.append(prompt)
            reply = self.replies[model]
            if isinstance(reply, Exception):
                raise reply
            return reply

        return RunnableLambda(respond)


SETTINGS_ENV_VARS = (
    "GOOGLE_GEMINI_API_KEY",
    "GOOGLE_GEMINI_MODELS",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODELS",
    "ANTHROPIC_MAX_TOKENS",
    "OLLAMA_ENABLED",
    "OLLAMA_BASE_URL",
    "OLLAMA_MODELS",
    "LLM_TEMPERATURE",
    "LLM_REQUEST_TIMEOUT",
    "LOG_LEVEL",
    "LOG_JSON",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep developer credentials out of the tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_provider():
    """Factory for scripted provider adapters."""
    return ScriptedProvider


@pytest.fixture
def fake_api_error():
    """Factory for backend errors with a status code."""
    return FakeAPIError


@pytest.fixture
def sample_transcript() -> str:
    """Sample video transcript, including the stray trailing character speech-to-text leaves."""
    return (
        "hi everyone today we are looking at what changed in javascript this year "
        "we start with the new array methods then we talk about performance and "
        "finally we look at the tooling that makes all of this easier to adopt a"
    )


@pytest.fixture
def youtube_reply() -> str:
    """Well-formed YouTube reply with every section."""
    return """
TRANSCRIPT:
Hi everyone, today we are looking at what changed in JavaScript this year.

TITLE:
JavaScript 2025: What Actually Changed

DESCRIPTION:
JavaScript keeps moving fast. In this video we go through the new array methods,
performance improvements and tooling.

Which new feature are you already using? Let us know in the comments!

TIMESTAMPS:
0:00 Introduction
1:30 New array methods
4:10 Performance
6:20 Tooling
"""


@pytest.fixture
def keywords_reply() -> str:
    """Keyword reply with blank lines and more entries than allowed."""
    return """KEYWORDS:
JavaScript

Array Methods
  Performance
Tooling
ES2025
"""


@pytest.fixture
def youtube_pipeline(make_provider, youtube_reply):
    """Pipeline whose only provider answers with the YouTube reply on its second model."""
    provider = make_provider(
        "Scripted",
        {"broken-model": RuntimeError("model overloaded"), "good-model": youtube_reply},
    )
    return GenerationPipeline(ProviderOrchestrator([provider]))

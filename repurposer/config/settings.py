"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GEMINI_MODELS = "gemini-2.5-pro,gemini-2.5-flash"
DEFAULT_ANTHROPIC_MODELS = "claude-3-haiku-20240307,claude-3-sonnet-20240229"
DEFAULT_OLLAMA_MODELS = "gpt-oss:20b"


def sanitize_api_key(key: str | None) -> str:
    """Strip quotes and surrounding whitespace that often sneak into .env values."""
    if not key:
        return ""
    return key.replace('"', "").replace("'", "").strip()


def parse_model_list(value: str) -> list[str]:
    """Split a comma-separated model list, dropping blanks."""
    return [model.strip() for model in value.split(",") if model.strip()]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google Gemini
    google_gemini_api_key: str = ""
    google_gemini_models: str = DEFAULT_GEMINI_MODELS

    # Anthropic Claude
    anthropic_api_key: str = ""
    anthropic_models: str = DEFAULT_ANTHROPIC_MODELS
    anthropic_max_tokens: int = 4000

    # Local Ollama (off unless explicitly enabled)
    ollama_enabled: bool = False
    ollama_base_url: str = "http://localhost:11434"
    ollama_models: str = DEFAULT_OLLAMA_MODELS
    ollama_num_ctx: int = 8192

    # Shared generation parameters
    llm_temperature: float = 0.7
    llm_request_timeout: int = 120

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @field_validator("google_gemini_api_key", "anthropic_api_key", mode="before")
    @classmethod
    def _sanitize_key(cls, value):
        return sanitize_api_key(value)

    @field_validator("google_gemini_models", "anthropic_models", "ollama_models", mode="before")
    @classmethod
    def _default_when_blank(cls, value, info: ValidationInfo):
        if value is None or not str(value).strip():
            return cls.model_fields[info.field_name].default
        return value

    @property
    def gemini_model_list(self) -> list[str]:
        return parse_model_list(self.google_gemini_models)

    @property
    def anthropic_model_list(self) -> list[str]:
        return parse_model_list(self.anthropic_models)

    @property
    def ollama_model_list(self) -> list[str]:
        return parse_model_list(self.ollama_models)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

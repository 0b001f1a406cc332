"""Configuration: settings, prompt templates and logging."""

from .logging_setup import configure_logging
from .settings import Settings, get_settings, parse_model_list, sanitize_api_key

__all__ = ["Settings", "configure_logging", "get_settings", "parse_model_list", "sanitize_api_key"]

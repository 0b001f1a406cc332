"""Platform registry and prompt construction."""

from .builder import build_prompt, build_prompt_for_request
from .registry import PLATFORM_PROFILES, PlatformProfile, Section, get_profile

__all__ = [
    "PLATFORM_PROFILES",
    "PlatformProfile",
    "Section",
    "build_prompt",
    "build_prompt_for_request",
    "get_profile",
]

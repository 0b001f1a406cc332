"""API routes package."""

from . import generate
from . import platforms

__all__ = ["generate", "platforms"]

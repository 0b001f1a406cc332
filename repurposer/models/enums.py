"""Enumeration types for the generation models."""

from enum import Enum


class Platform(str, Enum):
    """Target content format for a generation request."""

    YOUTUBE = "youtube"
    LINKEDIN = "linkedin"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    KEYWORDS = "keywords"

    @classmethod
    def values(cls) -> list[str]:
        """All accepted platform identifiers, in declaration order."""
        return [member.value for member in cls]

"""Platform registry shared by the prompt builder and the response extractor.

Each platform maps to exactly one profile: its prompt renderer, its ordered
section markers and the fields model the extractor fills. Adding a platform
means adding one entry here.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from repurposer.config import prompts
from repurposer.errors import UnsupportedPlatformError
from repurposer.models import (
    MAX_KEYWORDS,
    ExtractedFields,
    InstagramFields,
    KeywordFields,
    LinkedInFields,
    Platform,
    TikTokFields,
    TwitterFields,
    YouTubeFields,
)

PromptRenderer = Callable[[str, str | None, Sequence[str]], str]


@dataclass(frozen=True)
class Section:
    """One marker-delimited section of a backend reply."""

    marker: str
    field: str
    # When set, the section is split into lines and capped at this many entries
    max_items: int | None = None

    @property
    def label(self) -> str:
        return f"{self.marker}:"


@dataclass(frozen=True)
class PlatformProfile:
    """Everything platform-specific about prompting and extraction."""

    platform: Platform
    display_name: str
    sections: tuple[Section, ...]
    fields_model: type[ExtractedFields]
    render: PromptRenderer
    uses_duration: bool = False
    uses_keywords: bool = False

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(section.label for section in self.sections)


def _keyword_block(keywords: Sequence[str]) -> str:
    if not keywords:
        return ""
    return prompts.KEYWORD_FOCUS_TEMPLATE.format(keywords=", ".join(keywords))


def _render_youtube(transcript: str, duration_hint: str | None, keywords: Sequence[str]) -> str:
    if duration_hint:
        timestamps_instruction = prompts.YOUTUBE_TIMESTAMPS_INSTRUCTION.format(duration=duration_hint)
        timestamps_section = "\n" + prompts.YOUTUBE_TIMESTAMPS_SECTION
    else:
        timestamps_instruction = ""
        timestamps_section = ""

    return prompts.YOUTUBE_PROMPT.format(
        transcript=transcript,
        keyword_block=_keyword_block(keywords),
        timestamps_instruction=timestamps_instruction,
        timestamps_section=timestamps_section,
    )


def _render_with_keywords(template: str) -> PromptRenderer:
    def render(transcript: str, duration_hint: str | None, keywords: Sequence[str]) -> str:
        return template.format(transcript=transcript, keyword_block=_keyword_block(keywords))

    return render


def _render_plain(template: str) -> PromptRenderer:
    def render(transcript: str, duration_hint: str | None, keywords: Sequence[str]) -> str:
        return template.format(transcript=transcript)

    return render


PLATFORM_PROFILES: MappingProxyType[Platform, PlatformProfile] = MappingProxyType({
    Platform.YOUTUBE: PlatformProfile(
        platform=Platform.YOUTUBE,
        display_name="YouTube",
        sections=(
            Section("TRANSCRIPT", "transcript"),
            Section("TITLE", "title"),
            Section("DESCRIPTION", "description"),
            Section("TIMESTAMPS", "timestamps"),
        ),
        fields_model=YouTubeFields,
        render=_render_youtube,
        uses_duration=True,
        uses_keywords=True,
    ),
    Platform.LINKEDIN: PlatformProfile(
        platform=Platform.LINKEDIN,
        display_name="LinkedIn",
        sections=(Section("LINKEDIN POST", "linkedin_post"),),
        fields_model=LinkedInFields,
        render=_render_with_keywords(prompts.LINKEDIN_PROMPT),
        uses_keywords=True,
    ),
    Platform.TWITTER: PlatformProfile(
        platform=Platform.TWITTER,
        display_name="Twitter",
        sections=(Section("TWITTER POST", "twitter_post"),),
        fields_model=TwitterFields,
        render=_render_plain(prompts.TWITTER_PROMPT),
    ),
    Platform.INSTAGRAM: PlatformProfile(
        platform=Platform.INSTAGRAM,
        display_name="Instagram",
        sections=(Section("INSTAGRAM POST", "instagram_post"),),
        fields_model=InstagramFields,
        render=_render_plain(prompts.INSTAGRAM_PROMPT),
    ),
    Platform.TIKTOK: PlatformProfile(
        platform=Platform.TIKTOK,
        display_name="TikTok",
        sections=(Section("TIKTOK POST", "tiktok_post"),),
        fields_model=TikTokFields,
        render=_render_with_keywords(prompts.TIKTOK_PROMPT),
        uses_keywords=True,
    ),
    Platform.KEYWORDS: PlatformProfile(
        platform=Platform.KEYWORDS,
        display_name="Keywords",
        sections=(Section("KEYWORDS", "keywords", max_items=MAX_KEYWORDS),),
        fields_model=KeywordFields,
        render=_render_plain(prompts.KEYWORDS_PROMPT),
    ),
})


def get_profile(platform: Platform | str) -> PlatformProfile:
    """Look up the profile for a platform.

    Args:
        platform: Platform enum member or its string value.

    Returns:
        The registered PlatformProfile.

    Raises:
        UnsupportedPlatformError: If no profile is registered for the value.
    """
    try:
        key = Platform(platform)
    except ValueError:
        raise UnsupportedPlatformError(platform) from None

    profile = PLATFORM_PROFILES.get(key)
    if profile is None:
        raise UnsupportedPlatformError(platform)
    return profile

"""Section-marker extraction of structured fields from backend replies.

Backends answer in free text with uppercase section markers, e.g.::

    TITLE:
    My video
    DESCRIPTION:
    What it is about

A section runs from the end of its marker up to the next marker that
follows it in the platform's order, or to the end of the text. Extraction
is tolerant: missing or garbled sections leave fields at their defaults.
"""

from collections.abc import Sequence

import structlog

from repurposer.models import ExtractedFields, Platform
from repurposer.prompting.registry import Section, get_profile

logger = structlog.get_logger(__name__)


def split_sections(text: str, labels: Sequence[str]) -> dict[str, str]:
    """Split text into trimmed section bodies keyed by marker label.

    Markers are matched case-sensitively on their literal label. Only the
    first occurrence of each label counts; labels not present are omitted.

    Args:
        text: Raw backend reply.
        labels: Marker labels (e.g. "TITLE:") in the platform's fixed order.

    Returns:
        Mapping of found label to its trimmed content.
    """
    sections: dict[str, str] = {}

    for index, label in enumerate(labels):
        position = text.find(label)
        if position == -1:
            continue

        start = position + len(label)
        end = len(text)
        for later_label in labels[index + 1:]:
            later_position = text.find(later_label, start)
            if later_position != -1 and later_position < end:
                end = later_position

        sections[label] = text[start:end].strip()

    return sections


def _split_lines(body: str, max_items: int) -> list[str]:
    lines = [line.strip() for line in body.splitlines()]
    return [line for line in lines if line][:max_items]


def _section_value(section: Section, body: str) -> str | list[str]:
    if section.max_items is not None:
        return _split_lines(body, section.max_items)
    return body


def extract_fields(platform: Platform | str, text: str | None) -> ExtractedFields:
    """Extract the platform's structured fields from a backend reply.

    Never raises on malformed text; absent sections keep their defaults.

    Args:
        platform: Platform whose marker table applies.
        text: Raw backend reply.

    Returns:
        The platform's ExtractedFields subclass instance.

    Raises:
        UnsupportedPlatformError: If the platform has no registered profile.
    """
    profile = get_profile(platform)
    text = text or ""

    bodies = split_sections(text, profile.labels)
    values = {
        section.field: _section_value(section, bodies[section.label])
        for section in profile.sections
        if section.label in bodies
    }

    missing = [section.marker for section in profile.sections if section.label not in bodies]
    if missing:
        logger.debug(
            "sections_missing",
            platform=profile.platform.value,
            missing=missing,
            text_length=len(text),
        )

    return profile.fields_model(**values)

"""Unit tests for section-marker extraction."""

import pytest

from repurposer.errors import UnsupportedPlatformError
from repurposer.extraction import extract_fields, split_sections
from repurposer.models import (
    InstagramFields,
    KeywordFields,
    LinkedInFields,
    Platform,
    TikTokFields,
    TwitterFields,
    YouTubeFields,
)


class TestSplitSections:
    """Tests for split_sections."""

    def test_sections_in_order(self):
        sections = split_sections("A:\none\nB:\ntwo", ["A:", "B:"])
        assert sections == {"A:": "one", "B:": "two"}

    def test_missing_labels_omitted(self):
        assert split_sections("A:\none", ["A:", "B:"]) == {"A:": "one"}

    def test_section_stops_at_later_marker_when_middle_missing(self):
        sections = split_sections("A: one C: three", ["A:", "B:", "C:"])
        assert sections == {"A:": "one", "C:": "three"}

    def test_first_occurrence_wins(self):
        sections = split_sections("A: one A: again", ["A:"])
        assert sections == {"A:": "one A: again"}


class TestExtractYouTube:
    """Tests for YouTube extraction."""

    def test_title_and_description(self):
        fields = extract_fields(Platform.YOUTUBE, "TITLE:\nHello\nDESCRIPTION:\nWorld")
        assert fields == YouTubeFields(title="Hello", description="World")

    def test_full_reply(self, youtube_reply):
        fields = extract_fields(Platform.YOUTUBE, youtube_reply)

        assert fields.transcript.startswith("Hi everyone")
        assert fields.title == "JavaScript 2025: What Actually Changed"
        assert fields.description.endswith("Let us know in the comments!")
        assert "TIMESTAMPS" not in fields.description
        assert fields.timestamps.splitlines()[0] == "0:00 Introduction"

    def test_missing_timestamps_defaults_to_empty(self):
        fields = extract_fields(Platform.YOUTUBE, "TRANSCRIPT:\nt\nTITLE:\nx\nDESCRIPTION:\ny")
        assert fields.timestamps == ""

    def test_transcript_stops_at_description_when_title_missing(self):
        fields = extract_fields(Platform.YOUTUBE, "TRANSCRIPT:\nfoo\nDESCRIPTION:\nbar")
        assert fields.transcript == "foo"
        assert fields.title == ""
        assert fields.description == "bar"

    def test_markers_are_case_sensitive(self):
        fields = extract_fields(Platform.YOUTUBE, "title:\nHello\ndescription:\nWorld")
        assert fields == YouTubeFields()


class TestExtractSinglePost:
    """Tests for single-section platforms."""

    @pytest.mark.parametrize(
        ("platform", "marker", "attribute"),
        [
            (Platform.LINKEDIN, "LINKEDIN POST:", "linkedin_post"),
            (Platform.TWITTER, "TWITTER POST:", "twitter_post"),
            (Platform.INSTAGRAM, "INSTAGRAM POST:", "instagram_post"),
            (Platform.TIKTOK, "TIKTOK POST:", "tiktok_post"),
        ],
    )
    def test_post_extracted(self, platform, marker, attribute):
        fields = extract_fields(platform, f"Sure! Here it is.\n{marker}\n  Line one\n\nLine two  \n")
        assert getattr(fields, attribute) == "Line one\n\nLine two"


class TestExtractKeywords:
    """Tests for keyword extraction."""

    def test_first_three_non_blank_lines(self, keywords_reply):
        fields = extract_fields(Platform.KEYWORDS, keywords_reply)
        assert fields.keywords == ["JavaScript", "Array Methods", "Performance"]

    def test_fewer_than_three(self):
        fields = extract_fields(Platform.KEYWORDS, "KEYWORDS:\nonly one")
        assert fields.keywords == ["only one"]

    def test_empty_section(self):
        assert extract_fields(Platform.KEYWORDS, "KEYWORDS:\n   \n").keywords == []


class TestExtractTolerance:
    """Extraction never raises on malformed replies."""

    @pytest.mark.parametrize(
        ("platform", "expected"),
        [
            (Platform.YOUTUBE, YouTubeFields()),
            (Platform.LINKEDIN, LinkedInFields()),
            (Platform.TWITTER, TwitterFields()),
            (Platform.INSTAGRAM, InstagramFields()),
            (Platform.TIKTOK, TikTokFields()),
            (Platform.KEYWORDS, KeywordFields()),
        ],
    )
    def test_no_markers_gives_defaults(self, platform, expected):
        assert extract_fields(platform, "I'm sorry, I can't help with that.") == expected

    @pytest.mark.parametrize("text", [None, "", "\n\n", ":::", "TITLE"])
    def test_degenerate_input(self, text):
        assert extract_fields(Platform.YOUTUBE, text) == YouTubeFields()

    @pytest.mark.parametrize("platform", list(Platform))
    def test_idempotent(self, platform, youtube_reply):
        assert extract_fields(platform, youtube_reply) == extract_fields(platform, youtube_reply)

    def test_unsupported_platform(self):
        with pytest.raises(UnsupportedPlatformError):
            extract_fields("myspace", "TITLE:\nx")

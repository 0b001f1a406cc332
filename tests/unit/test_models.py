"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from repurposer.models import (
    GenerationRequest,
    GenerationResponse,
    KeywordFields,
    LinkedInFields,
    Platform,
    YouTubeFields,
    validation_message,
)
from repurposer.models.generation import INVALID_DURATION, INVALID_TRANSCRIPT, TOO_MANY_KEYWORDS


class TestPlatform:
    """Tests for Platform enum."""

    def test_platform_values(self):
        assert Platform.values() == ["youtube", "linkedin", "twitter", "instagram", "tiktok", "keywords"]

    def test_platform_from_string(self):
        assert Platform("tiktok") is Platform.TIKTOK


class TestGenerationRequest:
    """Tests for GenerationRequest validation and normalization."""

    def test_defaults(self):
        request = GenerationRequest(transcript="Valid")
        assert request.platform == Platform.YOUTUBE
        assert request.duration_hint is None
        assert request.keywords == ()

    def test_missing_platform_defaults_to_youtube(self):
        request = GenerationRequest(transcript="Valid", platform=None)
        assert request.platform == Platform.YOUTUBE

    def test_transcript_kept_verbatim(self):
        request = GenerationRequest(transcript="   Valid content   ")
        assert request.transcript == "   Valid content   "

    @pytest.mark.parametrize("transcript", ["", "   \n\t   ", None, 123])
    def test_invalid_transcript(self, transcript):
        with pytest.raises(ValidationError) as exc_info:
            GenerationRequest(transcript=transcript)
        assert validation_message(exc_info.value) == INVALID_TRANSCRIPT

    def test_long_transcript_accepted(self):
        request = GenerationRequest(transcript="A" * 50000)
        assert len(request.transcript) == 50000

    def test_invalid_platform(self):
        with pytest.raises(ValidationError) as exc_info:
            GenerationRequest(transcript="Valid", platform="myspace")
        message = validation_message(exc_info.value)
        assert message.startswith("Invalid type.")
        assert "youtube" in message and "keywords" in message

    @pytest.mark.parametrize("duration", ["7:16", "12:45", "0:30", "99:59", " 7:16 "])
    def test_valid_duration(self, duration):
        request = GenerationRequest(transcript="Valid", duration_hint=duration)
        assert request.duration_hint == duration.strip()

    @pytest.mark.parametrize("duration", ["7:60", "123:00", "7-16", "abc", "1:2:3", "7:6"])
    def test_invalid_duration(self, duration):
        with pytest.raises(ValidationError) as exc_info:
            GenerationRequest(transcript="Valid", duration_hint=duration)
        assert validation_message(exc_info.value) == INVALID_DURATION

    def test_blank_duration_is_none(self):
        request = GenerationRequest(transcript="Valid", duration_hint="  ")
        assert request.duration_hint is None

    def test_keywords_normalized(self):
        request = GenerationRequest(
            transcript="Valid",
            keywords=["  JavaScript ", "javascript", "", "React"],
        )
        assert request.keywords == ("javascript", "react")

    def test_too_many_keywords(self):
        with pytest.raises(ValidationError) as exc_info:
            GenerationRequest(transcript="Valid", keywords=["a", "b", "c", "d"])
        assert validation_message(exc_info.value) == TOO_MANY_KEYWORDS

    def test_duplicates_do_not_count_towards_limit(self):
        request = GenerationRequest(transcript="Valid", keywords=["a", "A", "b", "c"])
        assert request.keywords == ("a", "b", "c")

    def test_request_is_immutable(self):
        request = GenerationRequest(transcript="Valid")
        with pytest.raises(ValidationError):
            request.transcript = "Changed"


class TestExtractedFields:
    """Tests for platform field models."""

    def test_youtube_defaults(self):
        fields = YouTubeFields()
        assert fields.transcript == ""
        assert fields.title == ""
        assert fields.description == ""
        assert fields.timestamps == ""

    def test_keyword_defaults_not_shared(self):
        first = KeywordFields()
        first.keywords.append("x")
        assert KeywordFields().keywords == []

    def test_camel_case_dump(self):
        fields = LinkedInFields(linkedin_post="Hello")
        assert fields.model_dump(by_alias=True) == {"linkedinPost": "Hello"}


class TestGenerationResponse:
    """Tests for the final response record."""

    def test_payload_merges_fields_and_metadata(self):
        response = GenerationResponse(
            platform=Platform.YOUTUBE,
            content=YouTubeFields(title="Hello", description="World"),
            model_used="gemini-2.5-flash",
            transcript_cleaned=True,
        )
        payload = response.to_payload()

        assert payload["title"] == "Hello"
        assert payload["description"] == "World"
        assert payload["timestamps"] == ""
        assert payload["modelUsed"] == "gemini-2.5-flash"
        assert payload["transcriptCleaned"] is True

    def test_payload_keeps_subclass_fields(self):
        response = GenerationResponse(
            platform=Platform.KEYWORDS,
            content=KeywordFields(keywords=["a", "b"]),
            model_used="m",
        )
        assert response.to_payload()["keywords"] == ["a", "b"]

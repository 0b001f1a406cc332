"""Deterministic text processing helpers."""

from .transcript_cleaner import clean_transcript

__all__ = ["clean_transcript"]

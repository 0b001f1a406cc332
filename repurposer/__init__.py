"""Transcript Repurposer - turn video transcripts into platform-ready content."""

__version__ = "1.0.0"

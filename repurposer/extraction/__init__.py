"""Extraction of structured fields from backend replies."""

from .sections import extract_fields, split_sections

__all__ = ["extract_fields", "split_sections"]

"""Pipeline node implementations."""

from .cleaning import clean_transcript_node
from .extraction import assemble_response_node, extract_fields_node
from .generation import generate_node
from .prompting import build_prompt_node

__all__ = [
    "clean_transcript_node",
    "build_prompt_node",
    "generate_node",
    "extract_fields_node",
    "assemble_response_node",
]

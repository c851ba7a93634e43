"""Canonical Glyph source formatting."""

from glyphpy.format.runner import (
    format_document,
    format_element,
    format_language,
    format_number,
    format_value,
    run_format,
)

__all__ = [
    "format_document",
    "format_element",
    "format_language",
    "format_number",
    "format_value",
    "run_format",
]

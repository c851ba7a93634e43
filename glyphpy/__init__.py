"""Parser for the Glyph declarative UI-description language (`.gl` files)."""

from glyphpy.ast import Document, Element, Language, Property, Value
from glyphpy.diagnostics import Diagnostic, GlyphParseError
from glyphpy.parser import (
    ParseMode,
    ParserOptions,
    parse_document_text,
    parse_glyph,
    parse_glyph_element,
    parse_glyph_value,
    parse_result,
)

__all__ = [
    "Diagnostic",
    "Document",
    "Element",
    "GlyphParseError",
    "Language",
    "ParseMode",
    "ParserOptions",
    "Property",
    "Value",
    "parse_document_text",
    "parse_glyph",
    "parse_glyph_element",
    "parse_glyph_value",
    "parse_result",
]

"""Parser infrastructure (token source + recursive-descent grammar + entrypoints)."""

from glyphpy.parser.glyph import (
    ParsedGlyph,
    parse_document_text,
    parse_glyph,
    parse_glyph_element,
    parse_glyph_value,
    parse_result,
)
from glyphpy.parser.grammar import (
    expect_end_of_input,
    parse_directive,
    parse_document,
    parse_element,
    parse_property,
    parse_value,
)
from glyphpy.parser.options import DEFAULT_MAX_NESTING_DEPTH, ParseMode, ParserOptions
from glyphpy.parser.parser import Parser, ParserProgress
from glyphpy.parser.token_source import TokenSource

__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "ParseMode",
    "ParsedGlyph",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "TokenSource",
    "expect_end_of_input",
    "parse_directive",
    "parse_document",
    "parse_document_text",
    "parse_element",
    "parse_glyph",
    "parse_glyph_element",
    "parse_glyph_value",
    "parse_property",
    "parse_result",
    "parse_value",
]

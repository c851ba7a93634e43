"""Diagnostics."""

from glyphpy.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_DELIMITER,
    PARSER_EXPECTED_DIRECTIVE,
    PARSER_EXPECTED_ELEMENT,
    PARSER_EXPECTED_IDENTIFIER,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_IGNORED_TRAILING_CONTENT,
    PARSER_INVALID_NUMBER,
    PARSER_MISMATCHED_DELIMITER,
    PARSER_NESTING_TOO_DEEP,
    PARSER_TRAILING_CONTENT,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNTERMINATED_BODY,
    DiagnosticSpec,
    ErrorKind,
    Severity,
)
from glyphpy.diagnostics.diagnostic import Diagnostic
from glyphpy.diagnostics.report import GlyphParseError, has_errors

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_DELIMITER",
    "PARSER_EXPECTED_DIRECTIVE",
    "PARSER_EXPECTED_ELEMENT",
    "PARSER_EXPECTED_IDENTIFIER",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_VALUE",
    "PARSER_IGNORED_TRAILING_CONTENT",
    "PARSER_INVALID_NUMBER",
    "PARSER_MISMATCHED_DELIMITER",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_TRAILING_CONTENT",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNTERMINATED_BODY",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "GlyphParseError",
    "Severity",
    "has_errors",
]

"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal

Severity = Literal["error", "warning"]


class ErrorKind(StrEnum):
    """Failure taxonomy shared by every parse-time diagnostic."""

    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    COMPOSITION = "composition"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: ErrorKind = ErrorKind.STRUCTURAL


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote.",
    category=ErrorKind.LEXICAL,
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    category=ErrorKind.LEXICAL,
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value (string, d-string, number, percentage or identifier)",
    category=ErrorKind.LEXICAL,
)

PARSER_EXPECTED_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_IDENTIFIER",
    message="Expected an identifier",
    category=ErrorKind.LEXICAL,
)

PARSER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_NUMBER",
    message="Number literal cannot have leading zeros",
    hint="Write `7` instead of `007`, or quote the value.",
    category=ErrorKind.LEXICAL,
)

PARSER_EXPECTED_DIRECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_DIRECTIVE",
    message="Expected a leading directive like `@language ratatui`",
)

PARSER_EXPECTED_ELEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ELEMENT",
    message="Expected an element like `@Kind name { ... }`",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
)

PARSER_EXPECTED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_DELIMITER",
    message="Expected `{` or `(` to open the element body",
)

PARSER_MISMATCHED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISMATCHED_DELIMITER",
    message="Mismatched closing delimiter",
    hint="Close `{` with `}` and `(` with `)`.",
)

PARSER_UNTERMINATED_BODY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_BODY",
    message="Unexpected end of input inside element body",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
)

PARSER_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_CONTENT",
    message="Unexpected content after the root element",
    hint="A document holds exactly one root element.",
)

PARSER_IGNORED_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_IGNORED_TRAILING_CONTENT",
    message="Ignoring content after the root element in permissive mode",
    severity="warning",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Element nesting exceeds the configured maximum depth",
    hint="Raise `ParserOptions.max_nesting_depth` or flatten the layout.",
)

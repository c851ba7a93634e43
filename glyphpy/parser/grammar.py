"""Glyph grammar routines that build AST nodes directly.

Every routine returns its node, or `None` after recording exactly one
diagnostic. Callers propagate `None` upward untouched, so the first error
aborts the whole parse and no partial tree is ever handed out.
"""

import math
from typing import Final

from glyphpy.ast import (
    BodyItem,
    Delimiter,
    Document,
    Element,
    Identifier,
    InterpolatedString,
    Language,
    Number,
    Percentage,
    PlainString,
    Property,
    Value,
    partition_items,
)
from glyphpy.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
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
)
from glyphpy.lexer import TokenFlags, TokenKind, quoted_body, unterminated_string
from glyphpy.parser.parser import Parser, ParserProgress
from glyphpy.text import TextRange, TextSize

OPEN_DELIMITERS: Final[dict[TokenKind, Delimiter]] = {
    TokenKind.LBRACE: Delimiter.BRACE,
    TokenKind.LPAREN: Delimiter.PAREN,
}

CLOSE_DELIMITERS: Final[dict[Delimiter, TokenKind]] = {
    Delimiter.BRACE: TokenKind.RBRACE,
    Delimiter.PAREN: TokenKind.RPAREN,
}


def parse_document(parser: Parser) -> Document | None:
    """One directive followed by exactly one root element."""
    start = parser.position
    language = parse_directive(parser)
    if language is None:
        return None

    root = parse_element(parser)
    if root is None:
        return None

    return Document(language=language, root=root, range=parser.range_from(start))


def parse_directive(parser: Parser) -> Language | None:
    """`@name value` or `@name value("url")`.

    The URL form wins whenever `(` follows the value: the root element after a
    directive always starts with `@`, so a `(` there can only belong to the URL.
    """
    start = parser.position
    if not parser.at(TokenKind.AT):
        parser.error(
            PARSER_EXPECTED_DIRECTIVE,
            message=f"Expected a directive like `@language ratatui`, found {parser.current.display}",
        )
        return None
    parser.bump()

    name = _expect_identifier(parser, "directive name")
    if name is None:
        return None

    value = _expect_identifier(parser, "directive value")
    if value is None:
        return None

    url: str | None = None
    if parser.eat(TokenKind.LPAREN):
        url = _parse_directive_url(parser)
        if url is None:
            return None

    return Language(name=name, value=value, url=url, range=parser.range_from(start))


def _parse_directive_url(parser: Parser) -> str | None:
    if not parser.at(TokenKind.STRING) or parser.has_preceding_trivia:
        parser.error(
            PARSER_EXPECTED_TOKEN,
            message=f'Expected a quoted URL directly after `(`, found {parser.current.display}',
        )
        return None

    url = _take_quoted_body(parser)
    if url is None:
        return None

    if not parser.at(TokenKind.RPAREN) or parser.has_preceding_trivia:
        parser.error(
            PARSER_EXPECTED_TOKEN,
            message=f"Expected `)` directly after the directive URL, found {parser.current.display}",
        )
        return None
    parser.bump()
    return url


def parse_element(parser: Parser) -> Element | None:
    """`@Kind name { ... }` or `@Kind name ( ... )`, recursing into nested elements."""
    start = parser.position
    if not parser.at(TokenKind.AT):
        parser.error(
            PARSER_EXPECTED_ELEMENT,
            message=f"Expected an element like `@Kind name {{ ... }}`, found {parser.current.display}",
        )
        return None
    parser.bump()

    kind = _expect_identifier(parser, "element kind")
    if kind is None:
        return None

    name = _expect_identifier(parser, "element name")
    if name is None:
        return None

    delimiter = OPEN_DELIMITERS.get(parser.current)
    if delimiter is None:
        parser.error(
            PARSER_EXPECTED_DELIMITER,
            message=f"Expected `{{` or `(` after `@{kind} {name}`, found {parser.current.display}",
        )
        return None

    if parser.depth >= parser.options.max_nesting_depth:
        parser.error(
            PARSER_NESTING_TOO_DEEP,
            message=f"Element `@{kind} {name}` exceeds the maximum nesting depth of {parser.options.max_nesting_depth}",
        )
        return None
    parser.bump()

    with parser.element_body(kind, name):
        items = _parse_body_items(parser, delimiter)
    if items is None:
        return None

    properties, children = partition_items(items)
    return Element(
        kind=kind,
        name=name,
        properties=properties,
        children=children,
        delimiter=delimiter,
        range=parser.range_from(start),
    )


def _parse_body_items(parser: Parser, delimiter: Delimiter) -> list[BodyItem] | None:
    close = CLOSE_DELIMITERS[delimiter]
    items: list[BodyItem] = []
    progress = ParserProgress()

    while True:
        progress.assert_progressing(parser)

        if parser.eat(close):
            return items

        item: BodyItem | None
        if parser.at(TokenKind.IDENTIFIER):
            item = parse_property(parser)
        elif parser.at(TokenKind.AT):
            item = parse_element(parser)
        else:
            _report_body_error(parser, delimiter)
            return None

        if item is None:
            return None
        items.append(item)


def _report_body_error(parser: Parser, delimiter: Delimiter) -> None:
    if parser.at(TokenKind.EOF):
        parser.error(
            PARSER_UNTERMINATED_BODY,
            message=f"Unexpected end of input, expected `{delimiter.close}` to close `{delimiter.open}`",
            context=parser.enclosing_context,
        )
        return

    if parser.at_set(frozenset(CLOSE_DELIMITERS.values())):
        parser.error(
            PARSER_MISMATCHED_DELIMITER,
            message=f"Expected `{delimiter.close}` to close `{delimiter.open}`, found {parser.current.display}",
            context=parser.enclosing_context,
        )
        return

    if parser.at(TokenKind.SKIPPED):
        _unexpected_character(parser)
        return

    parser.error(
        PARSER_UNEXPECTED_TOKEN,
        message=(
            f"Expected a property, a nested element or `{delimiter.close}`, "
            f"found {parser.current.display}"
        ),
    )


def parse_property(parser: Parser) -> Property | None:
    """`name = value`."""
    start = parser.position
    name = _expect_identifier(parser, "property name")
    if name is None:
        return None

    if not parser.eat(TokenKind.EQUAL):
        parser.error(
            PARSER_EXPECTED_TOKEN,
            message=f"Expected `=` after property `{name}`, found {parser.current.display}",
        )
        return None

    value = parse_value(parser)
    if value is None:
        return None

    return Property(name=name, value=value, range=parser.range_from(start))


def parse_value(parser: Parser) -> Value | None:
    """One value literal.

    Alternatives are tried as d-string, string, number, identifier. The lexer
    already splits `d"` from a bare `d`, so one token of lookahead decides.
    """
    match parser.current:
        case TokenKind.DSTRING:
            start = parser.position
            text = _take_quoted_body(parser)
            return None if text is None else InterpolatedString(text, range=parser.range_from(start))
        case TokenKind.STRING:
            start = parser.position
            text = _take_quoted_body(parser)
            return None if text is None else PlainString(text, range=parser.range_from(start))
        case TokenKind.NUMBER:
            return _parse_number(parser)
        case TokenKind.IDENTIFIER:
            return _parse_identifier_value(parser)
        case TokenKind.SKIPPED:
            _unexpected_character(parser)
            return None
        case _:
            parser.error(
                PARSER_EXPECTED_VALUE,
                message=f"Expected a value, found {parser.current.display}",
            )
            return None


def _parse_number(parser: Parser) -> Number | Percentage | None:
    start = parser.position
    token = parser.current_token
    if token.has_flag(TokenFlags.LEADING_ZERO):
        parser.error(PARSER_INVALID_NUMBER)
        return None

    value = float(parser.current_text())
    if not math.isfinite(value):
        parser.error(PARSER_INVALID_NUMBER, message="Number literal is too large to represent")
        return None
    parser.bump()

    # `50 %` is a number followed by a stray `%`, not a percentage.
    if parser.at(TokenKind.PERCENT) and not parser.has_preceding_trivia:
        parser.bump()
        return Percentage(value, range=parser.range_from(start))

    return Number(value, range=parser.range_from(start))


def _parse_identifier_value(parser: Parser) -> Identifier:
    start = parser.position
    parts = [parser.current_text()]
    parser.bump()

    while (
        parser.at(TokenKind.MINUS)
        and not parser.has_preceding_trivia
        and parser.nth(1) == TokenKind.IDENTIFIER
        and not parser.has_nth_preceding_trivia(1)
    ):
        parser.bump()
        parts.append(parser.current_text())
        parser.bump()

    return Identifier("-".join(parts), range=parser.range_from(start))


def expect_end_of_input(parser: Parser) -> bool:
    """Apply the trailing-content policy once the top-level rule has finished."""
    if parser.at(TokenKind.EOF):
        return True

    trailing = TextRange.new(parser.position, TextSize.of(parser.source.text))
    if parser.options.require_end_of_input:
        parser.error(
            PARSER_TRAILING_CONTENT,
            trailing,
            message=f"Unexpected {parser.current.display} after the end of the parsed input",
        )
        return False

    parser.error(PARSER_IGNORED_TRAILING_CONTENT, trailing)
    return True


def _take_quoted_body(parser: Parser) -> str | None:
    token = parser.current_token
    if token.has_flag(TokenFlags.UNTERMINATED):
        parser.report(unterminated_string(token.range, parser.context))
        return None
    parser.bump()
    return quoted_body(parser.source.text, token)


def _expect_identifier(parser: Parser, what: str) -> str | None:
    if not parser.at(TokenKind.IDENTIFIER):
        if parser.at(TokenKind.SKIPPED):
            _unexpected_character(parser)
        else:
            parser.error(
                PARSER_EXPECTED_IDENTIFIER,
                message=f"Expected {what}, found {parser.current.display}",
            )
        return None

    text = parser.current_text()
    parser.bump()
    return text


def _unexpected_character(parser: Parser) -> None:
    parser.error(
        LEXER_UNEXPECTED_CHARACTER,
        message=f"Unexpected character {parser.current_text()!r}",
    )

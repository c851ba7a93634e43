"""High-level parse entrypoints for Glyph source text."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from glyphpy.ast import Document, Element, Value
from glyphpy.diagnostics import Diagnostic, GlyphParseError, has_errors
from glyphpy.lexer import Lexer
from glyphpy.parser.grammar import expect_end_of_input, parse_document, parse_element, parse_value
from glyphpy.parser.options import ParseMode, ParserOptions
from glyphpy.parser.parser import Parser
from glyphpy.parser.token_source import TokenSource

if TYPE_CHECKING:
    from glyphpy.pipeline import GlyphParseResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedGlyph[T]:
    """Outcome of one parse: the node, or `None` alongside at least one error."""

    node: T | None
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def ok(self) -> bool:
        return self.node is not None and not self.has_errors

    def unwrap(self) -> T:
        if self.node is None or self.has_errors:
            raise GlyphParseError(self.diagnostics)
        return self.node


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def _run[T](text: str, rule: Callable[[Parser], T | None], options: ParserOptions) -> ParsedGlyph[T]:
    source = TokenSource(Lexer(text))
    parser = Parser(source, options=options)

    node = rule(parser)
    if node is not None and not expect_end_of_input(parser):
        node = None
    diagnostics = parser.finish()

    if node is None:
        logger.debug("%s failed: %s", rule.__name__, diagnostics[0] if diagnostics else "no diagnostics")
    else:
        logger.debug("%s parsed %d chars (%s mode)", rule.__name__, len(text), options.mode)
    return ParsedGlyph(node=node, diagnostics=diagnostics)


def parse_glyph(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGlyph[Document]:
    """Parse a full document: the directive followed by one root element."""
    return _run(text, parse_document, _resolve_options(options=options, mode=mode))


def parse_glyph_element(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGlyph[Element]:
    """Parse a standalone element with no directive."""
    return _run(text, parse_element, _resolve_options(options=options, mode=mode))


def parse_glyph_value(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGlyph[Value]:
    """Parse a single value literal."""
    return _run(text, parse_value, _resolve_options(options=options, mode=mode))


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> GlyphParseResult:
    from glyphpy.pipeline import GlyphParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    parsed = parse_glyph(text, options=resolved_options)
    return GlyphParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )


def parse_document_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    """Parse a document or raise `GlyphParseError`."""
    return parse_glyph(text, options=options, mode=mode).unwrap()

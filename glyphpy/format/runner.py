"""Canonical source printer over a shared Glyph parse result."""

from __future__ import annotations

from decimal import Decimal
import logging
import math

from glyphpy.ast import (
    Document,
    Element,
    Identifier,
    InterpolatedString,
    Language,
    Number,
    Percentage,
    PlainString,
    Value,
)
from glyphpy.parser import ParseMode, ParserOptions, parse_result
from glyphpy.pipeline.result import GlyphParseResult
from glyphpy.pipeline.results import FormatRunResult

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GlyphParseResult | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)
    diagnostics = list(resolved_parse.diagnostics)

    document = resolved_parse.document
    if document is None or resolved_parse.has_errors:
        logger.debug("Leaving source unformatted: %d diagnostic(s)", len(diagnostics))
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = format_document(document)

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=formatted_text != resolved_parse.source_text,
    )


def format_document(document: Document, *, indent: str = DEFAULT_INDENT) -> str:
    lines = [format_language(document.language), ""]
    _format_element_lines(document.root, indent, 0, lines)
    return "\n".join(lines) + "\n"


def format_language(language: Language) -> str:
    head = f"@{language.name} {language.value}"
    if language.url is None:
        return head
    return f'{head}("{language.url}")'


def format_element(element: Element, *, indent: str = DEFAULT_INDENT) -> str:
    lines: list[str] = []
    _format_element_lines(element, indent, 0, lines)
    return "\n".join(lines)


def format_value(value: Value) -> str:
    match value:
        case PlainString(text=text):
            return f'"{text}"'
        case InterpolatedString(text=text):
            return f'd"{text}"'
        case Number(value=number):
            return format_number(number)
        case Percentage(value=number):
            return f"{format_number(number)}%"
        case Identifier(text=text):
            return text
        case _:
            raise TypeError(f"Not a Glyph value: {value!r}")


def format_number(value: float) -> str:
    """Positional notation with no trailing `.0`, so the output lexes as one number."""
    if not math.isfinite(value):
        raise ValueError(f"Glyph has no literal for {value!r}")
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _format_element_lines(element: Element, indent: str, depth: int, lines: list[str]) -> None:
    prefix = indent * depth
    head = f"{prefix}@{element.kind} {element.name} "
    delimiter = element.delimiter

    if element.is_empty:
        lines.append(f"{head}{delimiter.open}{delimiter.close}")
        return

    lines.append(f"{head}{delimiter.open}")
    inner = indent * (depth + 1)
    for prop in element.properties:
        lines.append(f"{inner}{prop.name} = {format_value(prop.value)}")
    for child in element.children:
        _format_element_lines(child, indent, depth + 1, lines)
    lines.append(f"{prefix}{delimiter.close}")


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: GlyphParseResult | None,
) -> GlyphParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)

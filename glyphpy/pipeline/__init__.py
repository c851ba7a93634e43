"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from glyphpy.parser.options import ParseMode, ParserOptions
from glyphpy.pipeline.result import GlyphParseResult
from glyphpy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: GlyphParseResult | None = None,
) -> FormatRunResult:
    from glyphpy.format.runner import run_format as _run_format

    return _run_format(text, options=options, mode=mode, parse=parse)


__all__ = [
    "FormatRunResult",
    "GlyphParseResult",
    "run_format",
]

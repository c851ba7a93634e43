"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from glyphpy.diagnostics import Diagnostic
from glyphpy.pipeline.result import GlyphParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: GlyphParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool

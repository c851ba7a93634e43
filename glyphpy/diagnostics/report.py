"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from glyphpy.diagnostics.diagnostic import Diagnostic


class GlyphParseError(ValueError):
    """Raised by the unwrapping APIs when a source text does not parse."""

    def __init__(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.diagnostics = list(diagnostics)
        first = next((d for d in self.diagnostics if d.severity == "error"), None)
        super().__init__(str(first) if first is not None else "Parse failed")

    @property
    def offset(self) -> int | None:
        for diagnostic in self.diagnostics:
            if diagnostic.severity == "error":
                return diagnostic.offset
        return None


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)

"""Parse carrier shared by parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from glyphpy.diagnostics import GlyphParseError, has_errors
from glyphpy.parser.options import ParserOptions

if TYPE_CHECKING:
    from glyphpy.ast import Document, ElementView
    from glyphpy.diagnostics import Diagnostic
    from glyphpy.parser.glyph import ParsedGlyph
    from glyphpy.text import LineIndex


@dataclass(slots=True)
class GlyphParseResult:
    """Document parse result shared by parse-once/consume-many workflows."""

    source_text: str
    parsed: ParsedGlyph[Document]
    options: ParserOptions
    _root_view: ElementView | None = field(default=None, init=False, repr=False)
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    @property
    def document(self) -> Document | None:
        return self.parsed.node

    def unwrap(self) -> Document:
        return self.parsed.unwrap()

    def root_view(self) -> ElementView:
        if self._root_view is None:
            from glyphpy.ast import ElementView

            document = self.document
            if document is None:
                raise GlyphParseError(self.diagnostics)
            self._root_view = ElementView(document.root)
        return self._root_view

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            from glyphpy.text import LineIndex

            self._line_index = LineIndex(self.source_text)
        return self._line_index

    def diagnostic_positions(self) -> list[tuple[int, int]]:
        """1-based (line, column) of each diagnostic's start."""
        index = self.line_index()
        return [index.line_col(diagnostic.range.start) for diagnostic in self.diagnostics]

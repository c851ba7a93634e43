"""Recursive-descent parser core."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from glyphpy.diagnostics import Diagnostic, DiagnosticSpec
from glyphpy.lexer import Token, TokenKind, token_text
from glyphpy.parser.options import ParserOptions
from glyphpy.parser.token_source import TokenSource
from glyphpy.text import TextRange, TextSize


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Token cursor plus diagnostics and the stack of element bodies being parsed."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._diagnostics: list[Diagnostic] = []
        self._context: list[str] = []

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_token(self) -> Token:
        return self._source.current_token

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def previous_end(self) -> TextSize:
        return self._source.previous_end

    @property
    def has_preceding_trivia(self) -> bool:
        return self._source.has_preceding_trivia

    @property
    def depth(self) -> int:
        """Number of element bodies currently open."""
        return len(self._context)

    @property
    def context(self) -> tuple[str, ...]:
        return tuple(self._context)

    @property
    def enclosing_context(self) -> tuple[str, ...]:
        """Context without the innermost open element, for errors about that element itself."""
        return tuple(self._context[:-1])

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n)

    def has_nth_preceding_trivia(self, n: int) -> bool:
        return self._source.has_nth_preceding_trivia(n)

    def current_text(self) -> str:
        return token_text(self._source.text, self.current_token)

    def bump(self) -> None:
        self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def range_from(self, start: TextSize) -> TextRange:
        """Range from `start` to the end of the last consumed token."""
        return TextRange.new(start, max(start, self.previous_end))

    @contextmanager
    def element_body(self, kind: str, name: str) -> Iterator[None]:
        self._context.append(f"{kind} {name}")
        try:
            yield
        finally:
            self._context.pop()

    def error(
        self,
        spec: DiagnosticSpec,
        range: TextRange | None = None,
        *,
        message: str | None = None,
        context: tuple[str, ...] | None = None,
    ) -> None:
        diagnostic = Diagnostic.from_spec(
            spec,
            range if range is not None else self.current_range,
            message=message,
            context=context if context is not None else self.context,
        )
        self.report(diagnostic)

    def report(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start and previous.code == diagnostic.code:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics

"""Token source that hides trivia from the grammar."""

from glyphpy.lexer import Lexer, Token, TokenKind
from glyphpy.text import TextRange, TextSize


class TokenSource:
    """Cursor over the non-trivia tokens of one source text.

    The whole text is lexed up front. Every non-trivia token remembers whether
    whitespace sat right before it, which the grammar uses for adjacency rules.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._tokens: list[Token] = []
        self._preceded_by_trivia: list[bool] = []
        self._index = 0
        self._previous_end = TextSize.from_int(0)
        self._split(lexer.lex())

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def current(self) -> TokenKind:
        return self._tokens[self._index].kind

    @property
    def current_token(self) -> Token:
        return self._tokens[self._index]

    @property
    def current_range(self) -> TextRange:
        return self._tokens[self._index].range

    @property
    def position(self) -> TextSize:
        return self.current_range.start

    @property
    def previous_end(self) -> TextSize:
        """End offset of the last bumped token."""
        return self._previous_end

    @property
    def has_preceding_trivia(self) -> bool:
        return self._preceded_by_trivia[self._index]

    def nth_token(self, n: int) -> Token:
        index = min(self._index + n, len(self._tokens) - 1)
        return self._tokens[index]

    def nth(self, n: int) -> TokenKind:
        return self.nth_token(n).kind

    def has_nth_preceding_trivia(self, n: int) -> bool:
        index = min(self._index + n, len(self._tokens) - 1)
        return self._preceded_by_trivia[index]

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self._previous_end = self.current_range.end
        self._index += 1

    def _split(self, tokens: list[Token]) -> None:
        saw_trivia = False
        for token in tokens:
            if token.kind.is_trivia:
                saw_trivia = True
                continue

            self._tokens.append(token)
            self._preceded_by_trivia.append(saw_trivia)
            saw_trivia = False

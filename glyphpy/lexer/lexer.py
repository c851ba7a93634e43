"""Lexer."""

from glyphpy.diagnostics import Diagnostic
from glyphpy.diagnostics.codes import LEXER_UNTERMINATED_STRING
from glyphpy.lexer.tokens import Token, TokenFlags, TokenKind
from glyphpy.text import TextRange, TextSize, slice_text_range

_PUNCTUATION: dict[str, TokenKind] = {
    "@": TokenKind.AT,
    "=": TokenKind.EQUAL,
    "-": TokenKind.MINUS,
    "%": TokenKind.PERCENT,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# Single-character line terminators; `\r\n` is folded into one NEWLINE token.
_LINE_BREAKS = frozenset("\n\r\u2028\u2029")

# `str.isspace` also accepts the ASCII information separators, which are not whitespace here.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_ident_start(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_ident_continue(ch: str) -> bool:
    return is_ident_start(ch) or ("0" <= ch <= "9")


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    """Unicode whitespace, line breaks included."""
    return ch.isspace() and ch not in _NOT_WHITESPACE


def is_line_break(ch: str) -> bool:
    return ch in _LINE_BREAKS


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = TextSize.from_int(0)
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        kind = self._lex_token()
        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if is_whitespace(ch):
            return self._consume_newline_or_whitespaces()

        if ch == "d" and self._peek_char() == '"':
            self._advance(1)
            self._lex_quoted()
            return TokenKind.DSTRING

        if ch == '"':
            self._lex_quoted()
            return TokenKind.STRING

        if is_digit(ch):
            return self._lex_number()

        if is_ident_start(ch):
            return self._lex_identifier()

        punctuation = _PUNCTUATION.get(ch)
        if punctuation is not None:
            self._advance(1)
            return punctuation

        # Preserve the offending character so the parser can point at it.
        self._advance(1)
        return TokenKind.SKIPPED

    def _lex_quoted(self) -> None:
        # No escapes: the body runs to the next quote, newlines included.
        self._advance(1)

        while not self.is_eof:
            if self._current_char() == '"':
                self._advance(1)
                return
            self._advance(1)

        self._current_flags |= TokenFlags.UNTERMINATED
        self._diagnostics.append(unterminated_string(self.current_range))

    def _lex_number(self) -> TokenKind:
        if self._current_char() == "0" and is_digit(self._peek_char()):
            self._current_flags |= TokenFlags.LEADING_ZERO

        while is_digit(self._current_char()):
            self._advance(1)

        if self._current_char() == "." and is_digit(self._peek_char()):
            self._advance(1)
            while is_digit(self._current_char()):
                self._advance(1)

        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof and is_ident_continue(self._current_char()):
            self._advance(1)
        return TokenKind.IDENTIFIER

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if is_whitespace(ch) and not is_line_break(ch):
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        ch = self._current_char()
        if ch == "\r" and self._peek_char() == "\n":
            self._advance(2)
            return True
        if is_line_break(ch):
            self._advance(1)
            return True
        return False

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def unterminated_string(range: TextRange, context: tuple[str, ...] = ()) -> Diagnostic:
    return Diagnostic.from_spec(LEXER_UNTERMINATED_STRING, range, context=context)


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def quoted_body(source: str, token: Token) -> str:
    """Text between the quotes of a STRING or DSTRING token, verbatim."""
    text = token_text(source, token)
    if token.kind == TokenKind.DSTRING:
        text = text[1:]
    text = text[1:]
    if not token.has_flag(TokenFlags.UNTERMINATED):
        text = text[:-1]
    return text


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")

"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from glyphpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    SKIPPED = 13  # a character outside the language, kept so ranges stay lossless

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # "..."
    DSTRING = 22  # d"..."
    NUMBER = 23  # 12 or 12.5

    # -------------------------
    # Punctuation
    # -------------------------
    AT = 30  # @
    EQUAL = 31  # =
    MINUS = 32  # -
    PERCENT = 33  # %

    LBRACE = 40  # {
    RBRACE = 41  # }
    LPAREN = 42  # (
    RPAREN = 43  # )

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE)

    @property
    def display(self) -> str:
        return _DISPLAY.get(self, self.name)


_DISPLAY: Final[dict[TokenKind, str]] = {
    TokenKind.EOF: "end of input",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "string",
    TokenKind.DSTRING: "d-string",
    TokenKind.NUMBER: "number",
    TokenKind.SKIPPED: "character",
    TokenKind.AT: "`@`",
    TokenKind.EQUAL: "`=`",
    TokenKind.MINUS: "`-`",
    TokenKind.PERCENT: "`%`",
    TokenKind.LBRACE: "`{`",
    TokenKind.RBRACE: "`}`",
    TokenKind.LPAREN: "`(`",
    TokenKind.RPAREN: "`)`",
}


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    UNTERMINATED = 1 << 0  # string ran into end of input
    LEADING_ZERO = 1 << 1  # multi-digit integer part starting with 0


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_flag(self, flag: TokenFlags) -> bool:
        return bool(self.flags & flag)

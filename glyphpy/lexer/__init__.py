"""Lexer."""

from glyphpy.lexer.lexer import (
    Lexer,
    dump_tokens,
    is_ident_continue,
    is_ident_start,
    is_line_break,
    is_whitespace,
    quoted_body,
    token_text,
    unterminated_string,
)
from glyphpy.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "is_ident_continue",
    "is_ident_start",
    "is_line_break",
    "is_whitespace",
    "quoted_body",
    "token_text",
    "unterminated_string",
]

import pytest

from glyphpy.lexer import Lexer, Token, TokenFlags, TokenKind, quoted_body, token_text
from glyphpy.parser import TokenSource
from tests._debug import debug_dump_tokens
from tests._shared_cases import ALL_GLYPH_CASES, GlyphCase, case_id, case_source


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def non_trivia(text: str) -> list[Token]:
    return [token for token in lex(text) if not token.kind.is_trivia]


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in non_trivia(text)]


def test_directive_and_element_header_tokens() -> None:
    src = "@language ratatui @Form main_form {"
    tokens = non_trivia(src)
    debug_dump_tokens("directive_and_element_header_tokens", src, tokens)

    assert [token.kind for token in tokens] == [
        TokenKind.AT,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.AT,
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.LBRACE,
        TokenKind.EOF,
    ]
    assert [token_text(src, token) for token in tokens[:3]] == ["@", "language", "ratatui"]


def test_lexer_is_lossless() -> None:
    src = case_source("multiline_login_form")
    tokens = lex(src)
    assert "".join(token_text(src, token) for token in tokens) == src


def test_dstring_requires_adjacent_quote() -> None:
    assert kinds('d"hi"') == [TokenKind.DSTRING, TokenKind.EOF]
    assert kinds('d "hi"') == [TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.EOF]
    assert kinds('dd"hi"') == [TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.EOF]
    assert kinds("d") == [TokenKind.IDENTIFIER, TokenKind.EOF]


def test_string_bodies_are_verbatim_without_escapes() -> None:
    src = '"a\\nb" d"x {y}\n z"'
    tokens = non_trivia(src)
    assert tokens[0].kind == TokenKind.STRING
    assert quoted_body(src, tokens[0]) == "a\\nb"
    assert tokens[1].kind == TokenKind.DSTRING
    assert quoted_body(src, tokens[1]) == "x {y}\n z"


def test_backslash_does_not_escape_quote() -> None:
    src = '"a\\" b'
    tokens = non_trivia(src)
    assert tokens[0].kind == TokenKind.STRING
    assert token_text(src, tokens[0]) == '"a\\"'
    assert tokens[1].kind == TokenKind.IDENTIFIER


def test_unterminated_string_is_flagged_and_reported() -> None:
    src = 'title = "never closed'
    lexer = Lexer(src)
    tokens = [token for token in lexer.lex() if not token.kind.is_trivia]

    string = tokens[2]
    assert string.kind == TokenKind.STRING
    assert string.has_flag(TokenFlags.UNTERMINATED)
    assert quoted_body(src, string) == "never closed"
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    assert lexer.diagnostics[0].range.as_tuple() == (8, len(src))


def test_numbers_with_fraction_and_percent() -> None:
    src = "50% 1.25 3. 7"
    tokens = non_trivia(src)
    assert [token.kind for token in tokens] == [
        TokenKind.NUMBER,
        TokenKind.PERCENT,
        TokenKind.NUMBER,
        TokenKind.NUMBER,
        TokenKind.SKIPPED,
        TokenKind.NUMBER,
        TokenKind.EOF,
    ]
    assert [token_text(src, token) for token in tokens[:4]] == ["50", "%", "1.25", "3"]


def test_leading_zero_flag() -> None:
    zero, decimal, padded = non_trivia("0 0.5 007")[:3]
    assert not zero.has_flag(TokenFlags.LEADING_ZERO)
    assert not decimal.has_flag(TokenFlags.LEADING_ZERO)
    assert padded.has_flag(TokenFlags.LEADING_ZERO)


def test_hyphenated_identifier_is_split_into_tokens() -> None:
    assert kinds("top-to-bottom") == [
        TokenKind.IDENTIFIER,
        TokenKind.MINUS,
        TokenKind.IDENTIFIER,
        TokenKind.MINUS,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_identifiers_are_ascii_only() -> None:
    src = "naïve"
    tokens = non_trivia(src)
    assert token_text(src, tokens[0]) == "na"
    assert tokens[1].kind == TokenKind.SKIPPED


@pytest.mark.parametrize("ws", ["\f", "\v", "\xa0", "\u3000", "\u202f"])
def test_unicode_whitespace_is_trivia(ws: str) -> None:
    tokens = lex(f"a{ws}{ws}b")
    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.WHITESPACE,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]
    assert tokens[1].range.as_tuple() == (1, 3)


@pytest.mark.parametrize("newline", ["\n", "\r", "\r\n", "\u2028", "\u2029"])
def test_line_breaks_are_newline_trivia(newline: str) -> None:
    tokens = lex(f"a{newline}{newline}b")
    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.NEWLINE,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_information_separators_are_not_whitespace() -> None:
    assert kinds("a\x1cb") == [TokenKind.IDENTIFIER, TokenKind.SKIPPED, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_newline_trivia_variants() -> None:
    tokens = lex("a\r\nb")
    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]
    assert tokens[1].range.as_tuple() == (1, 3)


def test_punctuation_tokens() -> None:
    assert kinds("@ = - % { } ( )") == [
        TokenKind.AT,
        TokenKind.EQUAL,
        TokenKind.MINUS,
        TokenKind.PERCENT,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.EOF,
    ]


@pytest.mark.parametrize("case", ALL_GLYPH_CASES, ids=case_id)
def test_lexer_round_trips_all_central_cases(case: GlyphCase) -> None:
    tokens = lex(case.source)
    debug_dump_tokens(f"lexer_case::{case.name}", case.source, tokens)

    assert tokens[-1].kind == TokenKind.EOF
    assert "".join(token_text(case.source, token) for token in tokens) == case.source


def test_token_source_hides_trivia_and_tracks_adjacency() -> None:
    src = "a =50%\n  b"
    source = TokenSource(Lexer(src))

    seen: list[tuple[TokenKind, bool]] = []
    while source.current != TokenKind.EOF:
        seen.append((source.current, source.has_preceding_trivia))
        source.bump()

    assert seen == [
        (TokenKind.IDENTIFIER, False),
        (TokenKind.EQUAL, True),
        (TokenKind.NUMBER, False),
        (TokenKind.PERCENT, False),
        (TokenKind.IDENTIFIER, True),
    ]
    assert source.previous_end.value == len(src)

#!/usr/bin/env python
"""Print the token stream (and lexer diagnostics) of a Glyph file."""

from __future__ import annotations

import argparse
from pathlib import Path

from glyphpy.lexer import Lexer, dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump Glyph tokens for debugging")
    parser.add_argument("path", type=Path, help="Path to a .gl file")
    parser.add_argument(
        "--no-trivia",
        action="store_true",
        help="Hide whitespace and newline tokens",
    )
    args = parser.parse_args()

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")

    text = path.read_text(encoding="utf-8")
    lexer = Lexer(text)
    tokens = lexer.lex()
    if args.no_trivia:
        tokens = [token for token in tokens if not token.kind.is_trivia]

    dump_tokens(tokens, text, lexer.diagnostics)
    print(f"\n{len(tokens)} tokens from {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

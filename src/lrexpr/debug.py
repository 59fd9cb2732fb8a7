"""Token stream dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from lrexpr.lexer import tokenize
from lrexpr.tokens import Token, TokenType


def dump_tokens(text: str, *, file: TextIO = sys.stderr) -> None:
    """Print one line per token of *text* to *file*."""
    for tok in tokenize(text):
        file.write(f"{tok.offset:>4}  {tok.type.name:<3}  {_display(tok)}\n")


def _display(tok: Token) -> str:
    if tok.type is TokenType.EOF:
        return ""
    return repr(tok.value)

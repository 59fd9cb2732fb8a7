"""Expression tokenizer — classifies single characters into tokens."""

from __future__ import annotations

from lrexpr.errors import ErrorKind, LexError
from lrexpr.tokens import Token, TokenType, is_digit, is_operator, is_space


def scan_token(text: str, cursor: int, offset: int = 0) -> Token:
    """Classify the character at ``cursor + offset`` without consuming it.

    Positions past the last character yield an EOF token. Characters that are
    not digits, whitespace or one of ``+ - / *`` raise LexError.
    """
    pos = cursor + offset
    if pos > len(text) - 1:
        return Token(TokenType.EOF, "EOF", pos)

    ch = text[pos]

    if is_digit(ch):
        return Token(TokenType.INT, ch, pos)

    if is_space(ch):
        return Token(TokenType.SPC, ch, pos)

    if is_operator(ch):
        return Token(TokenType.OP, ch, pos)

    raise LexError(
        ErrorKind.UNRECOGNIZED_CHARACTER,
        f"unrecognized character {ch!r}",
        pos,
        text,
        found=ch,
    )


def tokenize(text: str) -> list[Token]:
    """Convenience function: scan every position and return the token list."""
    tokens = [scan_token(text, pos) for pos in range(len(text))]
    tokens.append(scan_token(text, len(text)))
    return tokens

"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    INT = auto()  # single decimal digit
    OP = auto()  # + - / *
    SPC = auto()  # single whitespace character
    EOF = auto()
    NOP = auto()  # nothing scanned yet


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token and the cursor offset it was scanned at."""

    type: TokenType
    value: str
    offset: int


NOP_TOKEN = Token(TokenType.NOP, "NOP", 0)

# Signed 32-bit range for literals and every intermediate result
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

OPERATORS = frozenset("+-/*")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in "0123456789" and len(ch) == 1


# str.isspace() also accepts the ASCII information separators, which are not
# Unicode White_Space
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_space(ch: str) -> bool:
    """Return True if ch has the Unicode White_Space property."""
    return ch.isspace() and ch not in _SEPARATORS


def is_operator(ch: str) -> bool:
    return ch in OPERATORS

"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum

from lrexpr.tokens import TokenType


class ErrorKind(Enum):
    UNRECOGNIZED_CHARACTER = "unrecognized character"
    UNEXPECTED_TOKEN = "unexpected token"
    EXPECTED_INTEGER = "expected integer"
    INTEGER_OVERFLOW = "integer overflow"
    DIVISION_BY_ZERO = "division by zero"


class ExpressionError(Exception):
    """Base for every error raised while scanning or evaluating an expression.

    ``position`` is the zero-based cursor offset into ``source``. ``expected``
    and ``found`` are filled in where the failure has a meaningful token type
    or character to report.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        position: int,
        source: str,
        expected: TokenType | None = None,
        found: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.position = position
        self.source = source
        self.expected = expected
        self.found = found
        super().__init__(self.format())

    def format(self, label: str = "<expr>") -> str:
        # Expressions are single-line, but embedded newlines count as whitespace
        # so locate the line holding the position for display.
        line_start = self.source.rfind("\n", 0, self.position) + 1
        line_end = self.source.find("\n", line_start)
        if line_end == -1:
            line_end = len(self.source)
        source_line = self.source[line_start:line_end].rstrip("\r")
        line_num = self.source.count("\n", 0, line_start) + 1
        col = self.position - line_start + 1

        pad = " " * (col - 1)
        carets = "^"

        line_label = str(line_num)
        gutter_width = len(line_label) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_label:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {label}:{line_num}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class LexError(ExpressionError):
    """Raised when the character under the cursor cannot be classified."""


class ParseError(ExpressionError):
    """Raised when the token stream does not match the grammar."""


class EvalError(ExpressionError):
    """Raised on arithmetic failures: overflow and division by zero."""

"""Left-to-right expression evaluator over a scan cursor."""

from __future__ import annotations

import logging

from lrexpr.errors import ErrorKind, EvalError, ParseError
from lrexpr.lexer import scan_token
from lrexpr.tokens import INT_MAX, INT_MIN, NOP_TOKEN, Token, TokenType

logger = logging.getLogger(__name__)

_INT_MAX_DIGITS = len(str(INT_MAX))


class Context:
    """Recursive descent evaluator for a single expression.

    Grammar, applied strictly left to right with no precedence::

        expr := term (ws? op term)* ws?
        term := ws? digit+
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = 0
        self._current_token: Token = NOP_TOKEN

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current_token(self) -> Token:
        return self._current_token

    def set_text(self, text: str) -> None:
        """Replace the expression text and reset the scan state."""
        self._text = text
        self._cursor = 0
        self._current_token = NOP_TOKEN

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _scan(self) -> None:
        self._current_token = scan_token(self._text, self._cursor)

    def _advance(self) -> None:
        # The only place the cursor moves; the lookahead token follows it.
        self._cursor += 1
        self._scan()

    def peek(self, by: int = 1) -> Token:
        """Return the token ``by`` positions past the cursor without moving it."""
        return scan_token(self._text, self._cursor, by)

    def eat(self, expected: TokenType) -> None:
        tok = self._current_token
        if tok.type is not expected:
            found = self._text[self._cursor] if self._cursor < len(self._text) else None
            raise ParseError(
                ErrorKind.UNEXPECTED_TOKEN,
                f"illegal token {tok.type.name} expected {expected.name} "
                f"at pos {self._cursor}: {found!r}",
                self._cursor,
                self._text,
                expected=expected,
                found=found,
            )
        self._advance()

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def eat_whitespace(self) -> None:
        while self._current_token.type is TokenType.SPC:
            self.eat(TokenType.SPC)

    def eat_int(self) -> int:
        start = self._cursor
        digits = []
        while self._current_token.type is TokenType.INT:
            digits.append(self._current_token.value)
            self.eat(TokenType.INT)

        if not digits:
            tok = self._current_token
            found = tok.value if tok.type is not TokenType.EOF else None
            raise ParseError(
                ErrorKind.EXPECTED_INTEGER,
                f"expected integer, found {tok.type.name}",
                start,
                self._text,
                expected=TokenType.INT,
                found=found,
            )

        # int() refuses very long digit strings, so bound the length first
        significant = "".join(digits).lstrip("0") or "0"
        if len(significant) > _INT_MAX_DIGITS or int(significant) > INT_MAX:
            raise EvalError(
                ErrorKind.INTEGER_OVERFLOW,
                f"integer literal of {len(digits)} digits is out of range",
                start,
                self._text,
            )
        return int(significant)

    def term(self) -> int:
        self.eat_whitespace()
        return self.eat_int()

    def expr(self) -> int:
        self._scan()

        result = self.term()
        self.eat_whitespace()

        while self._current_token.type is TokenType.OP:
            op = self._current_token.value
            self.eat(TokenType.OP)
            self.eat_whitespace()
            pos = self._cursor
            value = self.term()
            logger.debug("fold %d %s %d", result, op, value)
            result = apply_operator(op, result, value, pos, self._text)
            self.eat_whitespace()

        return result

    def evaluate(self) -> int:
        """Evaluate the expression from the current cursor and return the result."""
        logger.debug("evaluating %r from cursor %d", self._text, self._cursor)
        result = self.expr()
        logger.debug("%r = %d", self._text, result)
        return result


def apply_operator(op: str, left: int, right: int, position: int, source: str) -> int:
    """Apply one binary operator with signed 32-bit semantics.

    Division truncates toward zero. ``position`` locates the right-hand term
    for error reporting.
    """
    if op == "+":
        result = left + right
    elif op == "-":
        result = left - right
    elif op == "*":
        result = left * right
    elif op == "/":
        if right == 0:
            raise EvalError(
                ErrorKind.DIVISION_BY_ZERO,
                f"division by zero: {left} / {right}",
                position,
                source,
            )
        result = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            result = -result
    else:
        raise ValueError(f"illegal operator {op!r}")

    if not INT_MIN <= result <= INT_MAX:
        raise EvalError(
            ErrorKind.INTEGER_OVERFLOW,
            f"integer overflow: {left} {op} {right}",
            position,
            source,
        )
    return result

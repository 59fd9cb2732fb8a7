"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from lrexpr.context import Context
from lrexpr.lexer import tokenize
from lrexpr.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes text and returns tokens (excluding EOF)."""

    def _lex(text: str) -> list[Token]:
        tokens = tokenize(text)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def ctx():
    """Return a helper that builds a Context with its first token scanned."""

    def _ctx(text: str) -> Context:
        context = Context(text)
        context._scan()
        return context

    return _ctx


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"

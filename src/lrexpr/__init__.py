"""Left-to-right integer expression evaluator."""

from __future__ import annotations

__version__ = "0.1.0"


def evaluate(text: str) -> int:
    """Evaluate a single expression in a fresh context and return the result."""
    from lrexpr.context import Context

    return Context(text).evaluate()

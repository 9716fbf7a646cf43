# aad/core/errors.py
"""Error types raised by the expression engine."""

from __future__ import annotations


class ExprError(Exception):
    """Base class for expression-engine errors."""


class UnboundVariable(ExprError, KeyError):
    """
    An evaluation dereferenced a variable id the Environment does not bind.

    Subclasses KeyError so that Mapping helpers (`get`, `in`) treat a missing
    id the same way a plain dict would.
    """

    def __init__(self, var_id: int):
        super().__init__(var_id)
        self.var_id = var_id

    def __str__(self) -> str:
        return f"unbound variable x{self.var_id}"


class ShapeMismatch(ExprError):
    """A handler was asked to process a node shape or kind it does not cover."""

    def __init__(self, expected: str, node):
        super().__init__(expected, node)
        self.expected = expected
        self.node = node

    def __str__(self) -> str:
        kind = type(self.node).__name__
        return f"{self.expected} operator only, got {kind}"

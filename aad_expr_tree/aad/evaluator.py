# aad/evaluator.py
"""Numeric evaluation of an expression tree under an Environment."""

import numpy as np

from .core.config import AADConfig
from .core.env import Environment
from .core.errors import ShapeMismatch
from .core.fold import fold
from .core.node import Expr, Const, Zero, One, Var
from .ops import UNARY_RULES, BINARY_RULES

_ZERO = np.float64(0.0)
_ONE = np.float64(1.0)


def eval_nullary(env: Environment):
    """Leaf handler bound to `env`: constants read themselves, Var reads env."""
    def _leaf(node: Expr) -> np.float64:
        if isinstance(node, Const):
            return node.value
        if isinstance(node, Var):
            return env.lookup(node.id)
        if isinstance(node, Zero):
            return _ZERO
        if isinstance(node, One):
            return _ONE
        raise ShapeMismatch("nullary", node)
    return _leaf


def eval_unary(node: Expr, value):
    rule = UNARY_RULES.get(type(node))
    if rule is None:
        raise ShapeMismatch("unary", node)
    return rule.f(value)


def eval_binary(node: Expr, left, right):
    rule = BINARY_RULES.get(type(node))
    if rule is None:
        raise ShapeMismatch("binary", node)
    return rule.f(left, right)


def evaluate(env: Environment, expr: Expr) -> float:
    """
    Value of `expr` with variables bound by `env`.

    Raises UnboundVariable if `expr` references an id `env` does not bind.
    Division by zero and logs of non-positive numbers give inf/NaN.
    """
    with AADConfig.errstate():
        return fold(expr, eval_nullary(env), eval_unary, eval_binary, float)

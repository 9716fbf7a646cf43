# aad/symbolic.py
"""
Symbolic differentiation: build a new expression for ∂expr/∂x_i.

The result is an ordinary expression tree; evaluate it to get a number.
Each call differentiates with respect to one variable, so N variables need
N calls, each re-walking the whole tree.
"""

from .core.env import Environment
from .core.errors import ShapeMismatch
from .core.fold import fold
from .core.logger import get_aad_logger
from .core.node import (
    Expr, Const, Zero, One, Var,
    Sin, Cos, Ln, Exp, Sqrt, NormCdf,
    Add, Sub, Mul, Div,
    ZERO, ONE,
)
from .evaluator import evaluate
from .ops.special import SQRT_TWO_PI

logger = get_aad_logger(__name__)

_HALF = Const(0.5)
_TWO = Const(2.0)
_SQRT_TWO_PI = Const(SQRT_TWO_PI)


def diff_nullary(var_id: int):
    def _leaf(node: Expr) -> Expr:
        if isinstance(node, Var):
            return ONE if node.id == var_id else ZERO
        if isinstance(node, (Const, Zero, One)):
            return ZERO
        raise ShapeMismatch("nullary", node)
    return _leaf


# Chain rule: d f(a) = f'(a) * da
_UNARY_DERIVATIVES = {
    Sin:  lambda a, da: Mul(Cos(a), da),
    Cos:  lambda a, da: Sub(ZERO, Mul(Sin(a), da)),
    Exp:  lambda a, da: Mul(Exp(a), da),
    Ln:   lambda a, da: Mul(Div(ONE, a), da),
    Sqrt: lambda a, da: Mul(Div(_HALF, Sqrt(a)), da),
    # phi(a) = exp(-a*a/2) / sqrt(2 pi)
    NormCdf: lambda a, da: Mul(
        Div(Exp(Sub(ZERO, Div(Mul(a, a), _TWO))), _SQRT_TWO_PI), da
    ),
}


def diff_unary(node: Expr, da: Expr) -> Expr:
    rule = _UNARY_DERIVATIVES.get(type(node))
    if rule is None:
        raise ShapeMismatch("unary", node)
    return rule(node.arg, da)


def _quotient(a, b, da, db):
    # (u'v - uv') / v^2
    return Div(Sub(Mul(da, b), Mul(a, db)), Mul(b, b))


_BINARY_DERIVATIVES = {
    Add: lambda a, b, da, db: Add(da, db),
    Sub: lambda a, b, da, db: Sub(da, db),
    Mul: lambda a, b, da, db: Add(Mul(da, b), Mul(a, db)),
    Div: _quotient,
}


def diff_binary(node: Expr, da: Expr, db: Expr) -> Expr:
    rule = _BINARY_DERIVATIVES.get(type(node))
    if rule is None:
        raise ShapeMismatch("binary", node)
    return rule(node.left, node.right, da, db)


def differentiate(var_id: int, expr: Expr) -> Expr:
    """Expression for the partial derivative of `expr` with respect to x_{var_id}."""
    logger.debug("differentiate: d/dx%d", var_id)
    return fold(expr, diff_nullary(var_id), diff_unary, diff_binary)


def symbolic_diff(env: Environment, var_id: int, expr: Expr) -> float:
    """Differentiate symbolically, then evaluate the derivative under `env`."""
    return evaluate(env, differentiate(var_id, expr))

# aad/ops/arithmetic.py
from dataclasses import dataclass
from typing import Callable, Dict, Type

import numpy as np

from ..core.node import Expr, Const, Var, Add, Sub, Mul, Div, ZERO, ONE


@dataclass(frozen=True)
class BinaryRule:
    """
    Numeric semantics of a binary node kind:
      f(a, b)     : value of the node from its children's values
      dfdl(a, b)  : local partial ∂out/∂left
      dfdr(a, b)  : local partial ∂out/∂right
    """
    f: Callable
    dfdl: Callable
    dfdr: Callable


BINARY_RULES: Dict[Type[Expr], BinaryRule] = {
    Add: BinaryRule(lambda a, b: a + b, lambda a, b: 1.0, lambda a, b: 1.0),
    Sub: BinaryRule(lambda a, b: a - b, lambda a, b: 1.0, lambda a, b: -1.0),
    Mul: BinaryRule(lambda a, b: a * b, lambda a, b: b,   lambda a, b: a),
    Div: BinaryRule(lambda a, b: a / b, lambda a, b: 1.0 / b, lambda a, b: -a / np.square(b)),
}


def _as_expr(x) -> Expr:
    """Ensure x is an Expr; otherwise wrap it as a Const leaf."""
    return x if isinstance(x, Expr) else Const(x)


def constant(value) -> Const:
    return Const(value)


def variable(var_id: int) -> Var:
    return Var(var_id)


zero = ZERO
one = ONE


def add(x, y): return Add(_as_expr(x), _as_expr(y))
def sub(x, y): return Sub(_as_expr(x), _as_expr(y))
def mul(x, y): return Mul(_as_expr(x), _as_expr(y))
def div(x, y): return Div(_as_expr(x), _as_expr(y))


def negate(x):
    """-x, expressed as 0 - x."""
    return Sub(ZERO, _as_expr(x))


def power(n: int, x):
    """
    x ** n for a non-negative integer n, built by repeated multiplication:
      power(0, x) = One
      power(3, x) = (x * x) * x
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise TypeError(f"power expects an integer exponent, but got {type(n)}")
    if n < 0:
        raise ValueError(f"power expects a non-negative exponent, but got {n}")
    x = _as_expr(x)
    if n == 0:
        return ONE
    out = x
    for _ in range(n - 1):
        out = Mul(out, x)
    return out

# aad/ops/transcendental.py
from dataclasses import dataclass
from typing import Callable, Dict, Type

import numpy as np

from ..core.node import Expr, Sin, Cos, Ln, Exp, Sqrt
from .arithmetic import _as_expr


@dataclass(frozen=True)
class UnaryRule:
    """
    Numeric semantics of a unary node kind:
      f(v)  : value of the node from its child's value
      df(v) : local derivative f'(v), evaluated at the child's value
    """
    f: Callable
    df: Callable


UNARY_RULES: Dict[Type[Expr], UnaryRule] = {
    Sin:  UnaryRule(np.sin,  np.cos),
    Cos:  UnaryRule(np.cos,  lambda v: -np.sin(v)),
    Ln:   UnaryRule(np.log,  lambda v: 1.0 / v),
    Exp:  UnaryRule(np.exp,  np.exp),
    Sqrt: UnaryRule(np.sqrt, lambda v: 0.5 / np.sqrt(v)),
}


def sin(x):  return Sin(_as_expr(x))
def cos(x):  return Cos(_as_expr(x))
def ln(x):   return Ln(_as_expr(x))
def exp(x):  return Exp(_as_expr(x))
def sqrt(x): return Sqrt(_as_expr(x))


log = ln

# aad/forward.py
# Forward-mode AD: (value, derivative) pairs propagated in one pass

from typing import Dict, NamedTuple, Tuple

import numpy as np

from .core.config import AADConfig
from .core.env import Environment
from .core.errors import ShapeMismatch
from .core.fold import fold
from .core.graph_utils import variables
from .core.logger import get_aad_logger
from .core.node import Expr, Var
from .evaluator import eval_nullary
from .ops import UNARY_RULES, BINARY_RULES

logger = get_aad_logger(__name__)

_ZERO = np.float64(0.0)
_ONE = np.float64(1.0)


class Dual(NamedTuple):
    """
    First-order forward variable:
    value = primal value of the node
    deriv = ∂value/∂x_i for the single seeded variable x_i
    """
    value: np.float64
    deriv: np.float64


def dual_nullary(env: Environment, var_id: int):
    leaf_value = eval_nullary(env)

    def _leaf(node: Expr) -> Dual:
        seeded = isinstance(node, Var) and node.id == var_id
        return Dual(leaf_value(node), _ONE if seeded else _ZERO)
    return _leaf


def dual_unary(node: Expr, arg: Dual) -> Dual:
    rule = UNARY_RULES.get(type(node))
    if rule is None:
        raise ShapeMismatch("unary", node)
    # chain rule: d f(v) = f'(v) * dv
    return Dual(rule.f(arg.value), arg.deriv * rule.df(arg.value))


def dual_binary(node: Expr, left: Dual, right: Dual) -> Dual:
    rule = BINARY_RULES.get(type(node))
    if rule is None:
        raise ShapeMismatch("binary", node)
    lv, rv = left.value, right.value
    deriv = left.deriv * rule.dfdl(lv, rv) + right.deriv * rule.dfdr(lv, rv)
    return Dual(rule.f(lv, rv), deriv)


def forward_value_and_diff(env: Environment, var_id: int, expr: Expr) -> Tuple[float, float]:
    """Value of `expr` and its derivative w.r.t. x_{var_id}, from one traversal."""
    with AADConfig.errstate():
        return fold(
            expr,
            dual_nullary(env, var_id),
            dual_unary,
            dual_binary,
            lambda d: (float(d.value), float(d.deriv)),
        )


def forward_diff(env: Environment, var_id: int, expr: Expr) -> float:
    """∂expr/∂x_{var_id} at `env` via forward mode."""
    return forward_value_and_diff(env, var_id, expr)[1]


def forward_gradient(env: Environment, expr: Expr) -> Environment:
    """
    Gradient w.r.t. every variable of `expr`, one forward traversal per
    variable.
    """
    ids = variables(expr)
    logger.debug("forward_gradient: %d traversals", len(ids))
    acc: Dict[int, np.float64] = {}
    for var_id in ids:
        acc[var_id] = np.float64(forward_diff(env, var_id, expr))
    return Environment._from_store(acc)

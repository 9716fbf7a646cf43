# aad/seeds.py

# Dict/list front-ends over the Environment API: inputs are keyed by
# variable id, gradients come from a single reverse pass seeded with 1.0.
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping

from .core.env import Environment
from .core.node import Expr
from .evaluator import evaluate
from .reverse import backward_all_diff


def value(expr: Expr, inputs: Mapping[int, float]) -> float:
    """Evaluate `expr` with variables bound from a plain {id: value} dict."""
    return evaluate(Environment(inputs), expr)


# ----------------------------- single-input grad ----------------------------- #
def grad(expr: Expr, x0: float, var_id: int = 0) -> float:
    """
    Derivative of an expression of a single variable x_{var_id} at x0.
    Runs one reverse pass; a variable that does not occur has derivative 0.
    """
    g = backward_all_diff(Environment({var_id: x0}), expr)
    return float(g.get(var_id, 0.0))


# ----------------------------- multi-input grads ----------------------------- #
def grads(expr: Expr, inputs: Mapping[int, float]) -> Dict[int, float]:
    """
    Gradient of `expr` w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂x_i simultaneously.

    Parameters
    ----------
    expr    : the expression to differentiate
    inputs  : dict {var_id: numeric}

    Returns
    -------
    dict {var_id: float}  # same key order as `inputs`; 0.0 for unused inputs
    """
    g = backward_all_diff(Environment(inputs), expr)
    return {k: float(g.get(k, 0.0)) for k in inputs.keys()}


def grads_list(expr: Expr, x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are given as a list: position i binds x_i,
    and the result is the list of partials in the same order.

    Example
    -------
    e = x0*x0 + 3*x1
    grads_list(e, [2.0, 4.0]) -> [4.0, 3.0]
    """
    inputs = {i: v for i, v in enumerate(x0_list)}
    g = grads(expr, inputs)
    return [g[i] for i in range(len(inputs))]

# aad/reverse.py
"""
Reverse-mode AD (backprop) over an expression tree.

Two passes over the same expression:

1) Forward annotation: fold the tree into its tagged mirror, each node
   tagged with its value. This is the evaluator, keeping every
   intermediate instead of discarding it.
2) Backward accumulation: walk the tagged tree top-down from the root with
   adjoint `seed` (∂root/∂root = 1). Each node hands its children
   adjoint * local partial, where the local partials are computed from the
   children's forward values:

       Add(l, r) -> (d, d)             Sin(v) -> d * cos(v)
       Sub(l, r) -> (d, -d)            Cos(v) -> -d * sin(v)
       Mul(l, r) -> (d*r, d*l)         Exp(v) -> d * exp(v)
       Div(l, r) -> (d/r, -d*l/r^2)    Ln(v)  -> d / v

   Adjoints reaching a Var leaf are summed into the gradient under that
   variable's id (a variable used in several places gets the sum of all its
   paths); adjoints reaching constant leaves are dropped.

One backward pass yields the partials w.r.t. *every* variable at once.
"""

from typing import Dict, List, Tuple

import numpy as np

from .core.config import AADConfig
from .core.env import Environment
from .core.errors import ShapeMismatch
from .core.fold import fold
from .core.logger import get_aad_logger
from .core.node import Expr, Var
from .core.tagged import Tagged, get_tag, tag_nullary, tag_unary, tag_binary
from .evaluator import eval_nullary, eval_unary, eval_binary
from .ops import UNARY_RULES, BINARY_RULES

logger = get_aad_logger(__name__)


# ---------------- pass 1: forward annotation ---------------- #
def annotate_nullary(env: Environment):
    leaf_value = eval_nullary(env)

    def _leaf(node: Expr) -> Tagged:
        return tag_nullary(node, leaf_value(node))
    return _leaf


def annotate_unary(node: Expr, arg: Tagged) -> Tagged:
    return tag_unary(node, eval_unary(node, get_tag(arg)), arg)


def annotate_binary(node: Expr, left: Tagged, right: Tagged) -> Tagged:
    return tag_binary(node, eval_binary(node, get_tag(left), get_tag(right)), left, right)


def annotate(env: Environment, expr: Expr) -> Tagged:
    """Tagged mirror of `expr` where every node's tag is its forward value."""
    with AADConfig.errstate():
        return fold(expr, annotate_nullary(env), annotate_unary, annotate_binary)


# ---------------- pass 2: backward accumulation ---------------- #
def backprop(root: Tagged, seed=AADConfig.DEFAULT_SEED) -> Environment:
    """
    Propagate adjoints from `root` down to its leaves.

    Returns an Environment mapping each variable id found in the tree to its
    accumulated adjoint.
    """
    acc: Dict[int, np.float64] = {}
    pending: List[Tuple[Tagged, np.float64]] = [(root, np.float64(seed))]
    n_visited = 0

    with AADConfig.errstate():
        while pending:
            tagged, adj = pending.pop()
            n_visited += 1
            node = tagged.node
            arity = tagged.arity

            if arity == 0:
                if isinstance(node, Var):
                    # Accumulate: x.adj += adj
                    acc[node.id] = acc.get(node.id, 0.0) + adj
                continue

            if arity == 1:
                rule = UNARY_RULES.get(type(node))
                if rule is None:
                    raise ShapeMismatch("unary", node)
                (arg,) = tagged.children
                pending.append((arg, adj * rule.df(get_tag(arg))))
                continue

            if arity == 2:
                rule = BINARY_RULES.get(type(node))
                if rule is None:
                    raise ShapeMismatch("binary", node)
                left, right = tagged.children
                lv, rv = get_tag(left), get_tag(right)
                pending.append((right, adj * rule.dfdr(lv, rv)))
                pending.append((left, adj * rule.dfdl(lv, rv)))
                continue

            raise ShapeMismatch("nullary, unary or binary", node)

    logger.debug("backprop: %d nodes, %d variables", n_visited, len(acc))
    return Environment._from_store(acc)


def backward_all_diff(env: Environment, expr: Expr, seed=AADConfig.DEFAULT_SEED) -> Environment:
    """
    Gradient of `expr` at `env` w.r.t. all of its variables: one forward
    annotation pass plus one backward pass.
    """
    return backprop(annotate(env, expr), seed=seed)

"""
Expression-tree inspection helpers.

Rendering and statistics for expression trees. Every helper is a fold, so
they work on trees of any depth.
"""

from collections import Counter
from typing import Dict, FrozenSet, List

from .fold import fold
from .node import Expr, Const, Zero, One, Var, NULLARY_KINDS
from .errors import ShapeMismatch

_INFIX = {"add": "+", "sub": "-", "mul": "*", "div": "/"}


def _format_leaf(node: Expr) -> str:
    if isinstance(node, Const):
        return repr(float(node.value))
    if isinstance(node, Zero):
        return "0"
    if isinstance(node, One):
        return "1"
    if isinstance(node, Var):
        return f"x{node.id}"
    raise ShapeMismatch("nullary", node)


def format_expr(expr: Expr) -> str:
    """
    Infix rendering of an expression, fully parenthesised:

        format_expr(div(one, add(var(0), const(2.0))))  ->  "(1 / (x0 + 2.0))"
    """
    return fold(
        expr,
        _format_leaf,
        lambda node, arg: f"{node.op_tag}({arg})",
        lambda node, l, r: f"({l} {_INFIX[node.op_tag]} {r})",
    )


def depth(expr: Expr) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    return fold(
        expr,
        lambda node: 1,
        lambda node, d: d + 1,
        lambda node, l, r: max(l, r) + 1,
    )


def variables(expr: Expr) -> List[int]:
    """Sorted ids of the variables referenced by `expr`."""
    def leaf(node) -> FrozenSet[int]:
        return frozenset((node.id,)) if isinstance(node, Var) else frozenset()

    return fold(
        expr,
        leaf,
        lambda node, s: s,
        lambda node, l, r: l | r,
        sorted,
    )


def get_graph_stats(expr: Expr) -> Dict:
    """
    Collect statistics of an expression tree (no printing).

    Shared subexpressions are counted once per occurrence, i.e. the tree is
    measured as the traversals see it.

    Returns:
        dict with nodes, edges, leaves, depth, variables and a per-op count
    """
    ops = Counter()

    def count(node, *_):
        ops[node.op_tag] += 1
        return 0

    fold(expr, count, count, count)
    n_nodes = sum(ops.values())
    n_leaves = sum(ops[kind.op_tag] for kind in NULLARY_KINDS)

    return {
        'nodes': n_nodes,
        'edges': n_nodes - 1,
        'leaves': n_leaves,
        'depth': depth(expr),
        'variables': variables(expr),
        'operations': dict(ops),
    }


def print_graph_summary(expr: Expr) -> Dict:
    """
    Print a summary of the expression tree.

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(expr)
    ids = ", ".join(f"x{i}" for i in stats['variables']) or "none"
    ops = ", ".join(
        f"{name}={count}"
        for name, count in Counter(stats['operations']).most_common()
    )
    print(
        f"expr: {stats['nodes']} nodes, {stats['leaves']} leaves, "
        f"depth {stats['depth']}; variables: {ids}; ops: {ops}"
    )
    return stats

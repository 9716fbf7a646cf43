# aad/core/fold.py
"""
Generic bottom-up traversal (catamorphism) over expression-shaped trees.

A fold is parameterised by three handlers, picked by node *shape*:

    nullary(node)                 -> R
    unary(node, child_result)     -> R
    binary(node, left_r, right_r) -> R

and a final continuation applied to the root result. Everything kind-specific
(what `Sin` or `Div` means) lives in the handlers, so one traversal serves the
evaluator, the symbolic and forward differentiators and the forward annotation
used by backprop.

Python does not eliminate tail calls, so instead of continuation-passing
recursion the pending work is kept on two explicit stacks: a work stack of
nodes still to visit (each pushed twice, once to expand its children and once
to combine their results) and a result stack holding finished sub-folds. The
native call stack stays flat whatever the depth of the tree.

Any node type exposing `arity` (0, 1 or 2) and `children` can be folded; both
`Expr` and the tagged mirror tree qualify.
"""

from __future__ import annotations
from typing import Any, Callable, List, Tuple, TypeVar

from .errors import ShapeMismatch

R = TypeVar("R")

Nullary = Callable[[Any], R]
UnaryOp = Callable[[Any, R], R]
BinaryOp = Callable[[Any, R, R], R]

_EXPAND = False
_COMBINE = True


def identity(x):
    return x


def fold(expr, nullary: Nullary, unary: UnaryOp, binary: BinaryOp,
         cont: Callable[[R], Any] = identity):
    """
    Fold `expr` bottom-up and hand the root result to `cont`.

    Children are always folded before their parent and, for binary nodes,
    the left subtree before the right one.
    """
    results: List[Any] = []
    work: List[Tuple[Any, bool]] = [(expr, _EXPAND)]

    while work:
        node, phase = work.pop()
        arity = node.arity

        if arity == 0:
            results.append(nullary(node))
        elif phase is _COMBINE:
            if arity == 1:
                results.append(unary(node, results.pop()))
            else:
                right = results.pop()
                left = results.pop()
                results.append(binary(node, left, right))
        elif arity in (1, 2):
            work.append((node, _COMBINE))
            # reversed so the left child is popped (and finished) first
            for child in reversed(node.children):
                work.append((child, _EXPAND))
        else:
            raise ShapeMismatch("nullary, unary or binary", node)

    return cont(results.pop())


def reject(expected: str):
    """
    Build a handler that always raises ShapeMismatch; handy as the default
    branch of a kind-dispatch table.
    """
    def _handler(node, *_):
        raise ShapeMismatch(expected, node)
    return _handler

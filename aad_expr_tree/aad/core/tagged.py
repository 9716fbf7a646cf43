# aad/core/tagged.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Tuple, TypeVar

from .node import Expr

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class Tagged(Generic[T]):
    """
    Mirror of one Expr node that also carries a payload (`tag`).

    The mirror has exactly the shape of the expression it was built from:
    `children` are the tagged mirrors of `node.children`, in order. `node`
    keeps the original expression node, so kind-specific rules can dispatch
    on `type(tagged.node)` instead of duplicating the node classes.

    Attributes
    ----------
    node     : Expr
        Expression node this entry mirrors.
    tag      : T
        Payload, e.g. the forward value of the node during backprop.
    children : tuple of Tagged
        Mirrors of the node's children.
    """
    node: Expr
    tag: T
    children: Tuple["Tagged[T]", ...] = ()

    @property
    def arity(self) -> int:
        return len(self.children)

    @property
    def op_tag(self) -> str:
        return self.node.op_tag

    def __repr__(self):
        return f"Tagged({self.node.op_tag}, tag={self.tag!r}, arity={self.arity})"


def get_tag(tagged: Tagged[T]) -> T:
    return tagged.tag


def tag_nullary(node: Expr, tag: T) -> Tagged[T]:
    return Tagged(node, tag)


def tag_unary(node: Expr, tag: T, child: Tagged[T]) -> Tagged[T]:
    return Tagged(node, tag, (child,))


def tag_binary(node: Expr, tag: T, left: Tagged[T], right: Tagged[T]) -> Tagged[T]:
    return Tagged(node, tag, (left, right))

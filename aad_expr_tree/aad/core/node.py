# aad/core/node.py
from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np


@dataclass(frozen=True, eq=False, repr=False)
class Expr:
    """
    One node of an immutable expression tree.

    Attributes
    ----------
    op_tag : str
        Debug tag (e.g., "add", "sin").
    arity  : int
        Number of child expressions: 0 (leaf), 1 (unary) or 2 (binary).

    Nodes compare by identity. Structural equality on a deep tree would
    recurse once per level, and trees are routinely shared between formulas.
    """
    op_tag: ClassVar[str] = "expr"
    arity: ClassVar[int] = 0

    @property
    def children(self) -> Tuple["Expr", ...]:
        return ()

    def __repr__(self):
        from .graph_utils import format_expr
        return f"{type(self).__name__}<{format_expr(self)}>"

    # Operator overloading for tree construction
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import negate
        return negate(self)


# ----------------------------- leaves ----------------------------- #
@dataclass(frozen=True, eq=False, repr=False)
class Const(Expr):
    value: float
    op_tag: ClassVar[str] = "const"

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise TypeError(
                f"Const only accepts real numbers, but got {type(self.value)}"
            )
        object.__setattr__(self, "value", np.float64(self.value))


@dataclass(frozen=True, eq=False, repr=False)
class Zero(Expr):
    op_tag: ClassVar[str] = "zero"


@dataclass(frozen=True, eq=False, repr=False)
class One(Expr):
    op_tag: ClassVar[str] = "one"


@dataclass(frozen=True, eq=False, repr=False)
class Var(Expr):
    id: int
    op_tag: ClassVar[str] = "var"

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, numbers.Integral):
            raise TypeError(f"variable ids must be integers, but got {type(self.id)}")
        object.__setattr__(self, "id", int(self.id))


# ----------------------------- unary ------------------------------ #
@dataclass(frozen=True, eq=False, repr=False)
class Unary(Expr):
    arg: Expr
    arity: ClassVar[int] = 1

    def __post_init__(self):
        _check_child(self, self.arg)

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.arg,)


@dataclass(frozen=True, eq=False, repr=False)
class Sin(Unary):
    op_tag: ClassVar[str] = "sin"


@dataclass(frozen=True, eq=False, repr=False)
class Cos(Unary):
    op_tag: ClassVar[str] = "cos"


@dataclass(frozen=True, eq=False, repr=False)
class Ln(Unary):
    op_tag: ClassVar[str] = "ln"


@dataclass(frozen=True, eq=False, repr=False)
class Exp(Unary):
    op_tag: ClassVar[str] = "exp"


@dataclass(frozen=True, eq=False, repr=False)
class Sqrt(Unary):
    op_tag: ClassVar[str] = "sqrt"


@dataclass(frozen=True, eq=False, repr=False)
class NormCdf(Unary):
    """Standard normal cumulative distribution function N(x)."""
    op_tag: ClassVar[str] = "norm_cdf"


# ----------------------------- binary ----------------------------- #
@dataclass(frozen=True, eq=False, repr=False)
class Binary(Expr):
    left: Expr
    right: Expr
    arity: ClassVar[int] = 2

    def __post_init__(self):
        _check_child(self, self.left)
        _check_child(self, self.right)

    @property
    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)


@dataclass(frozen=True, eq=False, repr=False)
class Add(Binary):
    op_tag: ClassVar[str] = "add"


@dataclass(frozen=True, eq=False, repr=False)
class Sub(Binary):
    op_tag: ClassVar[str] = "sub"


@dataclass(frozen=True, eq=False, repr=False)
class Mul(Binary):
    op_tag: ClassVar[str] = "mul"


@dataclass(frozen=True, eq=False, repr=False)
class Div(Binary):
    op_tag: ClassVar[str] = "div"


def _check_child(parent: Expr, child) -> None:
    if not isinstance(child, Expr):
        raise TypeError(
            f"{type(parent).__name__} children must be expressions, but got {type(child)}"
        )


# Shared identity leaves
ZERO = Zero()
ONE = One()

NULLARY_KINDS = (Const, Zero, One, Var)
UNARY_KINDS = (Sin, Cos, Ln, Exp, Sqrt, NormCdf)
BINARY_KINDS = (Add, Sub, Mul, Div)

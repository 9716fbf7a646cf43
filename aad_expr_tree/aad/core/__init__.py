# aad/core/__init__.py

"""
Core data structures of the expression engine.

Exports:
    Environment     : Immutable variable-id -> float binding.
    Expr and kinds  : The immutable expression tree node types.
    fold            : The generic bottom-up traversal shared by every pass.
    Tagged          : Shape-preserving mirror tree carrying a payload per node.
    errors          : UnboundVariable, ShapeMismatch and their base ExprError.
"""

from .errors import ExprError, UnboundVariable, ShapeMismatch
from .config import AADConfig
from .logger import get_aad_logger
from .env import Environment, EMPTY, empty, update, lookup
from .node import (
    Expr, Unary, Binary,
    Const, Zero, One, Var,
    Sin, Cos, Ln, Exp, Sqrt, NormCdf,
    Add, Sub, Mul, Div,
    ZERO, ONE,
    NULLARY_KINDS, UNARY_KINDS, BINARY_KINDS,
)
from .fold import fold, identity, reject
from .tagged import Tagged, get_tag
from .graph_utils import format_expr, depth, variables, get_graph_stats, print_graph_summary

__all__ = [
    "ExprError", "UnboundVariable", "ShapeMismatch",
    "AADConfig", "get_aad_logger",
    "Environment", "EMPTY", "empty", "update", "lookup",
    "Expr", "Unary", "Binary",
    "Const", "Zero", "One", "Var",
    "Sin", "Cos", "Ln", "Exp", "Sqrt", "NormCdf",
    "Add", "Sub", "Mul", "Div",
    "ZERO", "ONE",
    "NULLARY_KINDS", "UNARY_KINDS", "BINARY_KINDS",
    "fold", "identity", "reject",
    "Tagged", "get_tag",
    "format_expr", "depth", "variables", "get_graph_stats", "print_graph_summary",
]

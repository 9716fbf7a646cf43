# aad/ops/__init__.py

# Convenience re-exports so users can do: from aad.ops import mul, exp, ...
from . import arithmetic
from . import transcendental
from . import special

from .arithmetic import (
    BinaryRule, BINARY_RULES,
    constant, variable, zero, one,
    add, sub, mul, div, negate, power,
)
from .transcendental import UnaryRule, sin, cos, ln, log, exp, sqrt
from .special import norm_cdf, norm_pdf

# Per-kind numeric rules shared by every numeric pass
UNARY_RULES = {**transcendental.UNARY_RULES, **special.UNARY_RULES}

__all__ = [
    "BinaryRule", "UnaryRule", "BINARY_RULES", "UNARY_RULES",
    "constant", "variable", "zero", "one",
    "add", "sub", "mul", "div", "negate", "power",
    "sin", "cos", "ln", "log", "exp", "sqrt",
    "norm_cdf", "norm_pdf",
]

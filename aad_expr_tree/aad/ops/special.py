# aad/ops/special.py
import numpy as np
from scipy.special import ndtr

from ..core.node import NormCdf
from .arithmetic import _as_expr
from .transcendental import UnaryRule

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)


def norm_pdf(x):
    return np.exp(-0.5 * x * x) / SQRT_TWO_PI


# N(x) via scipy's ndtr; local derivative dN/dx = phi(x).
UNARY_RULES = {
    NormCdf: UnaryRule(ndtr, norm_pdf),
}


def norm_cdf(x):
    """Standard normal CDF node N(x)."""
    return NormCdf(_as_expr(x))

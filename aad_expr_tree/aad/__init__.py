# aad/__init__.py
# Expression trees with evaluation, symbolic, forward and reverse differentiation

from .core.errors import ExprError, UnboundVariable, ShapeMismatch
from .core.config import AADConfig
from .core.env import Environment, EMPTY, empty, update, lookup
from .core.node import Expr
from .core.fold import fold
from .core.tagged import Tagged, get_tag
from .core.graph_utils import format_expr, depth, variables, get_graph_stats, print_graph_summary

from .ops import (
    constant, variable, zero, one,
    add, sub, mul, div, negate, power,
    sin, cos, ln, log, exp, sqrt, norm_cdf,
)

from .evaluator import evaluate
from .symbolic import differentiate, symbolic_diff
from .forward import Dual, forward_diff, forward_value_and_diff, forward_gradient
from .reverse import annotate, backprop, backward_all_diff
from .seeds import value, grad, grads, grads_list

__all__ = [
    # Errors / config
    'ExprError', 'UnboundVariable', 'ShapeMismatch', 'AADConfig',
    # Environment
    'Environment', 'EMPTY', 'empty', 'update', 'lookup',
    # Trees
    'Expr', 'fold', 'Tagged', 'get_tag',
    'format_expr', 'depth', 'variables', 'get_graph_stats', 'print_graph_summary',
    # Constructors
    'constant', 'variable', 'zero', 'one',
    'add', 'sub', 'mul', 'div', 'negate', 'power',
    'sin', 'cos', 'ln', 'log', 'exp', 'sqrt', 'norm_cdf',
    # Passes
    'evaluate',
    'differentiate', 'symbolic_diff',
    'Dual', 'forward_diff', 'forward_value_and_diff', 'forward_gradient',
    'annotate', 'backprop', 'backward_all_diff',
    # Seeds
    'value', 'grad', 'grads', 'grads_list',
]

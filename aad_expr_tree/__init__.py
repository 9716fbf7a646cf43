# aad_expr_tree
from . import aad
from . import pricing

__version__ = "0.1.0"

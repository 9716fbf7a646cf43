# pricing/__init__.py
# Formula builders that consume the expression engine

from . import black_scholes
from . import bsm_analytical
from .bsm_analytical import call_price_and_greeks

__all__ = ["black_scholes", "bsm_analytical", "call_price_and_greeks"]

"""
Black-Scholes call price as an expression tree.

The formula is built once from expression primitives, so the same tree can
be priced with `evaluate` and differentiated with any of the three modes.
The Greeks come out of a single reverse pass.
"""

from typing import Dict, Tuple

from ..aad.core.env import Environment
from ..aad.core.node import Expr
from ..aad.evaluator import evaluate
from ..aad.forward import forward_diff
from ..aad.reverse import backward_all_diff
from ..aad.symbolic import symbolic_diff
from ..aad.ops import (
    constant, variable, add, sub, mul, div, negate, exp, ln, sqrt, norm_cdf,
)

# Variable ids used by eval_formula
VOL, STOCK, STRIKE, T, RATE = 0, 1, 2, 3, 4
PARAMS = {"vol": VOL, "stock": STOCK, "strike": STRIKE, "t": T, "rate": RATE}

MODES = ("reverse", "forward", "symbolic")


def formula(*, vol: int, stock: int, strike: int, t: int, rate: int) -> Expr:
    """
    Call price S*N(d1) - K*exp(-r*T)*N(d2) over the given variable ids, with

        d1 = (ln(S/K) + T*(r + sigma^2/2)) / (sigma*sqrt(T))
        d2 = d1 - sigma*sqrt(T)
    """
    vol = variable(vol)
    stock = variable(stock)
    strike = variable(strike)
    expiry_time = variable(t)
    rate = variable(rate)

    discount_factor = exp(negate(mul(rate, expiry_time)))
    vol_square = mul(vol, vol)
    vol_sqrt_t = mul(vol, sqrt(expiry_time))
    vol_square_div_two = div(vol_square, constant(2.0))
    d_1 = div(
        add(ln(div(stock, strike)), mul(expiry_time, add(rate, vol_square_div_two))),
        vol_sqrt_t,
    )
    d_2 = sub(d_1, vol_sqrt_t)
    discounted_stock = mul(stock, norm_cdf(d_1))
    discounted_option = mul(mul(strike, discount_factor), norm_cdf(d_2))
    return sub(discounted_stock, discounted_option)


def eval_formula(*, vol: float, stock: float, strike: float, t: float,
                 rate: float) -> Tuple[Environment, Expr]:
    """Environment binding the market inputs, plus the formula over their ids."""
    env = (Environment()
           .update(VOL, vol)
           .update(STOCK, stock)
           .update(STRIKE, strike)
           .update(T, t)
           .update(RATE, rate))
    return env, formula(vol=VOL, stock=STOCK, strike=STRIKE, t=T, rate=RATE)


def price(*, vol: float, stock: float, strike: float, t: float, rate: float) -> float:
    env, bs_formula = eval_formula(vol=vol, stock=stock, strike=strike, t=t, rate=rate)
    return evaluate(env, bs_formula)


def greeks(*, vol: float, stock: float, strike: float, t: float, rate: float,
           mode: str = "reverse") -> Dict[str, float]:
    """
    Partials of the call price w.r.t. every input, keyed by input name:
    vol (vega), stock (delta), strike, t (-theta), rate (rho).

    mode="reverse" uses one backward pass; "forward" and "symbolic" run one
    traversal per input.
    """
    env, bs_formula = eval_formula(vol=vol, stock=stock, strike=strike, t=t, rate=rate)
    if mode == "reverse":
        all_diff = backward_all_diff(env, bs_formula)
        return {name: float(all_diff.lookup(var_id)) for name, var_id in PARAMS.items()}
    if mode == "forward":
        return {name: forward_diff(env, var_id, bs_formula) for name, var_id in PARAMS.items()}
    if mode == "symbolic":
        return {name: symbolic_diff(env, var_id, bs_formula) for name, var_id in PARAMS.items()}
    raise ValueError(f"mode must be one of {MODES}, but got {mode!r}")

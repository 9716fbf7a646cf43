"""
BSM Analytical Solution

Black-Scholes-Merton closed-form call price and first-order Greeks.
Machine-precision baseline for the expression-tree Greeks.
"""

import numpy as np
from scipy.stats import norm
from typing import Dict


def call_price_and_greeks(*, vol: float, stock: float, strike: float, t: float,
                          rate: float) -> Dict[str, float]:
    """
    Returns:
        dict with price and the partials w.r.t. vol, stock, strike, t and rate
    """
    S, K, T, r, sigma = stock, strike, t, rate, vol

    sqrt_T = np.sqrt(T)
    d1 = (np.log(S / K) + (r + 0.5 * sigma**2) * T) / (sigma * sqrt_T)
    d2 = d1 - sigma * sqrt_T

    phi_d1 = norm.pdf(d1)
    Phi_d1 = norm.cdf(d1)
    Phi_d2 = norm.cdf(d2)
    discount = np.exp(-r * T)

    price = S * Phi_d1 - K * discount * Phi_d2
    delta = Phi_d1
    vega = S * phi_d1 * sqrt_T
    dual_delta = -discount * Phi_d2
    # ∂V/∂T (calendar theta is its negative)
    d_dt = S * phi_d1 * sigma / (2.0 * sqrt_T) + r * K * discount * Phi_d2
    rho = K * T * discount * Phi_d2

    return {
        "price": float(price),
        "vol": float(vega),
        "stock": float(delta),
        "strike": float(dual_delta),
        "t": float(d_dt),
        "rate": float(rho),
    }

# aad/core/config.py
"""
Shared numeric settings for the expression engine.
"""

import numpy as np


class AADConfig:
    """Shared configuration for evaluation and differentiation passes"""

    # Adjoint planted at the root of a backward pass (d root / d root).
    DEFAULT_SEED = 1.0

    # Absolute tolerance used when comparing derivatives across modes.
    DEFAULT_TOLERANCE = 1e-5

    # Division by zero and log of non-positive numbers yield inf/NaN silently.
    FP_ERRSTATE = {"divide": "ignore", "invalid": "ignore", "over": "ignore"}

    LOG_LEVEL_ENV = "AAD_EXPR_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"

    @staticmethod
    def errstate():
        """
        Context manager applying the floating-point error policy.

        Example:
            with AADConfig.errstate():
                np.float64(1.0) / np.float64(0.0)   # inf, no warning
        """
        return np.errstate(**AADConfig.FP_ERRSTATE)

    @staticmethod
    def close(a: float, b: float, tol: float = None) -> bool:
        """True when |a - b| is within `tol` (defaults to DEFAULT_TOLERANCE)."""
        if tol is None:
            tol = AADConfig.DEFAULT_TOLERANCE
        return bool(abs(a - b) <= tol)

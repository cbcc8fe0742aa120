# src/core/finance/errors.py
"""
Typed errors for the amortization engine.

Exports
-------
- InvalidInput
- validate_loan_inputs(principal, annual_rate_pct, tenure_months)

Only caller bugs are raised. Degenerate but valid situations (a prepayment larger
than the balance, a rate change after payoff, an empty modified schedule) are
clamped or ignored by the engine instead.
"""

from __future__ import annotations

import math

# =========================
# Exception types
# =========================


class InvalidInput(ValueError):
    """Non-positive or non-finite principal, non-positive tenure, or a negative or non-finite interest rate."""


# =========================
# Validation helpers
# =========================


def validate_loan_inputs(principal: float, annual_rate_pct: float, tenure_months: int) -> None:
    """
    Raise InvalidInput unless principal is finite and > 0, annual_rate_pct is finite and >= 0
    and tenure_months is a positive integer.
    """
    # NaN compares False both ways, so finiteness is checked first
    if principal is None or not math.isfinite(principal) or principal <= 0:
        raise InvalidInput(f"principal must be finite and > 0 (got {principal!r})")
    if annual_rate_pct is None or not math.isfinite(annual_rate_pct) or annual_rate_pct < 0:
        raise InvalidInput(f"annual_rate_pct must be finite and >= 0 (got {annual_rate_pct!r})")
    if isinstance(tenure_months, bool) or not isinstance(tenure_months, int) or tenure_months <= 0:
        raise InvalidInput(f"tenure_months must be a positive integer (got {tenure_months!r})")


__all__ = [
    "InvalidInput",
    "validate_loan_inputs",
]

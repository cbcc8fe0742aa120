# src/core/finance/emi.py
from __future__ import annotations

import math

from .errors import InvalidInput, validate_loan_inputs


def round_currency(amount: float) -> float:
    """
    Round to the nearest whole currency unit, halves away from zero.

    Every EMI the engine produces passes through here, so cumulative totals only
    ever see whole-unit installments.
    """
    if amount < 0:
        return -float(math.floor(-amount + 0.5))
    return float(math.floor(amount + 0.5))


def monthly_rate(annual_rate_pct: float) -> float:
    """Monthly rate as a fraction (annual_rate_pct is a percentage, e.g. 9.5)."""
    return annual_rate_pct / 100.0 / 12.0


def compute_emi(principal: float, annual_rate_pct: float, tenure_months: int) -> float:
    """
    Equated monthly installment for a reducing-balance loan.

    Formula (standard annuity):
        EMI = [ P * r * (1 + r)^n ] / [ (1 + r)^n - 1 ]

    Where:
        P = principal
        r = monthly rate = annual_rate_pct / 100 / 12
        n = tenure in months

    Args:
        principal: Outstanding amount (> 0).
        annual_rate_pct: Annual interest rate in percent (>= 0).
        tenure_months: Number of monthly installments (> 0).

    Returns:
        The installment rounded with round_currency().

    Raises:
        InvalidInput: principal <= 0, annual_rate_pct < 0, tenure_months <= 0, a non-finite
            principal or rate, or an EMI too large to represent.

    Notes:
        - With a zero rate the denominator collapses to 0, so EMI = P / n is
          computed directly instead.
    """
    validate_loan_inputs(principal, annual_rate_pct, tenure_months)

    r = monthly_rate(annual_rate_pct)
    n = tenure_months

    if r == 0:
        return round_currency(principal / n)

    try:
        growth = (1.0 + r) ** n
        emi = principal * r * growth / (growth - 1.0)
    except OverflowError as e:
        raise InvalidInput(f"EMI out of range for principal={principal!r}, rate={annual_rate_pct!r}%") from e
    if not math.isfinite(emi):
        raise InvalidInput(f"EMI out of range for principal={principal!r}, rate={annual_rate_pct!r}%")
    return round_currency(emi)

"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import Any

# Project models
from src.schemas.models import (
    LoanTerms,
    OneTimePrepayment,
    RateChangeEvent,
    RecurringPrepayment,
)

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_PRINCIPAL = 500_000.0
DEFAULT_RATE_PCT = 10.0
DEFAULT_TENURE_MONTHS = 24
DEFAULT_START_DATE = dt.date(2025, 1, 5)


# -----------------------------
# Factories
# -----------------------------


def make_loan(
    principal: float = DEFAULT_PRINCIPAL,
    annual_rate_pct: float = DEFAULT_RATE_PCT,
    tenure_months: int = DEFAULT_TENURE_MONTHS,
    start_date: dt.date = DEFAULT_START_DATE,
) -> LoanTerms:
    """LoanTerms with the EMI computed from the terms."""
    return LoanTerms.from_terms(principal, annual_rate_pct, tenure_months, start_date)


def month_of(loan: LoanTerms, month: int, day: int = 1) -> dt.date:
    """A date inside the loan's 1-based `month` (day defaults to the 1st)."""
    m0 = loan.start_date.month - 1 + (month - 1)
    return dt.date(loan.start_date.year + m0 // 12, m0 % 12 + 1, day)


def make_prepayment(loan: LoanTerms, month: int, amount: float, *, day: int = 1) -> OneTimePrepayment:
    return OneTimePrepayment(amount=amount, effective_date=month_of(loan, month, day))


def make_recurring_prepayment(
    loan: LoanTerms, month: int, amount: float, frequency: str = "monthly"
) -> RecurringPrepayment:
    return RecurringPrepayment(amount=amount, effective_date=month_of(loan, month), frequency=frequency)


def make_rate_change(loan: LoanTerms, month: int, new_rate_pct: float, *, day: int = 1) -> RateChangeEvent:
    return RateChangeEvent(new_rate_pct=new_rate_pct, effective_date=month_of(loan, month, day))


# -----------------------------
# Canonical payloads
# -----------------------------


def scenario_payload(**loan_overrides: Any) -> dict[str, Any]:
    """Scenario JSON dict (loan EMI omitted) with one prepayment and one rate change."""
    loan = {
        "principal": DEFAULT_PRINCIPAL,
        "annual_rate_pct": DEFAULT_RATE_PCT,
        "tenure_months": DEFAULT_TENURE_MONTHS,
        "start_date": DEFAULT_START_DATE.isoformat(),
    }
    loan.update(loan_overrides)
    return {
        "loan": loan,
        "prepayments": [
            {"kind": "one_time", "amount": 100_000, "effective_date": "2025-06-01"},
        ],
        "rate_changes": [
            {"new_rate_pct": 9.0, "effective_date": "2025-10-01"},
        ],
        "run": {"show_schedule": False, "schedule_limit": 0, "log_level": "WARNING"},
    }


def write_scenario(target_dir: Path, payload: dict[str, Any], filename: str = "scenario.json") -> Path:
    p = target_dir / filename
    p.write_text(json.dumps(payload), encoding="utf-8")
    return p

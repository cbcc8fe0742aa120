# src/core/finance/schedule.py
"""
Month-by-month amortization schedule with prepayments and rate changes.

Event matching
--------------
Events are matched to a schedule month by calendar month and year only; the day
of month is ignored. When several events of the same type fall in one month the
first one in the caller's list wins (`first_event_in_month`). Recurring
prepayments are not expanded: they match their own effective_date month only.
"""

from __future__ import annotations

import datetime as dt
import logging
import math
from collections.abc import Sequence
from typing import TypeVar

from dateutil.relativedelta import relativedelta

from src.schemas.models import (
    LoanTerms,
    OneTimePrepayment,
    PrepaymentEvent,
    RateChangeEvent,
    RecurringPrepayment,
    ScheduleEntry,
)

from .emi import compute_emi, monthly_rate
from .errors import InvalidInput, validate_loan_inputs

logger = logging.getLogger(__name__)

_EPS = 1e-6  # for floating cleanup

_E = TypeVar("_E", OneTimePrepayment, RecurringPrepayment, RateChangeEvent)


def month_date(start_date: dt.date, month: int) -> dt.date:
    """Date of the 1-based `month`; the day is clamped to the end of shorter months."""
    return start_date + relativedelta(months=month - 1)


def first_event_in_month(events: Sequence[_E], on: dt.date) -> _E | None:
    """First event (list order) whose effective_date shares `on`'s month and year."""
    for ev in events:
        eff = ev.effective_date
        if eff.year == on.year and eff.month == on.month:
            return ev
    return None


def generate_schedule(
    loan: LoanTerms,
    prepayments: Sequence[PrepaymentEvent] = (),
    rate_changes: Sequence[RateChangeEvent] = (),
) -> list[ScheduleEntry]:
    """
    Simulate the loan month by month.

    Model:
        - A rate change in the current month replaces the rate and recomputes the
          EMI on the current balance over the remaining months.
        - Interest accrues on the opening balance; the EMI minus interest repays
          principal, never more than the balance and never less than zero.
        - A prepayment in the current month is capped at what is left after the
          EMI's principal.
        - In the final tenure month the principal absorbs any remaining balance,
          so EMI rounding never leaves a residue.

    Args:
        loan: Loan terms (baseline EMI included).
        prepayments: Prepayment events, in tie-break order.
        rate_changes: Rate change events, in tie-break order.

    Returns:
        One entry per month until the balance reaches zero or the tenure ends.

    Raises:
        InvalidInput: invalid principal, rate or tenure, or a non-finite EMI on the loan.
    """
    validate_loan_inputs(loan.principal, loan.annual_rate_pct, loan.tenure_months)
    if loan.emi is None or not math.isfinite(loan.emi):
        raise InvalidInput(f"emi must be finite (got {loan.emi!r})")

    schedule: list[ScheduleEntry] = []
    balance = float(loan.principal)
    rate = loan.annual_rate_pct
    emi = loan.emi

    for month in range(1, loan.tenure_months + 1):
        on = month_date(loan.start_date, month)

        change = first_event_in_month(rate_changes, on)
        if change is not None:
            remaining = loan.tenure_months - month + 1
            rate = change.new_rate_pct
            emi = compute_emi(balance, rate, remaining)
            logger.debug("Month %d: rate -> %.4f%%, EMI recomputed to %.0f over %d months", month, rate, emi, remaining)

        interest = balance * monthly_rate(rate)
        principal_paid = min(max(0.0, emi - interest), balance)
        if month == loan.tenure_months:
            principal_paid = balance

        prepaid = 0.0
        prepay = first_event_in_month(prepayments, on)
        if prepay is not None:
            prepaid = min(prepay.amount, balance - principal_paid)
            if prepaid < prepay.amount:
                logger.debug("Month %d: prepayment %.2f capped at %.2f", month, prepay.amount, prepaid)

        balance -= principal_paid + prepaid
        # Clean tiny residual drift
        if balance < _EPS:
            balance = 0.0

        schedule.append(
            ScheduleEntry(
                month=month,
                date=on,
                emi=emi,
                principal=principal_paid,
                interest=interest,
                prepayment=prepaid if prepaid > 0 else None,
                balance=balance,
            )
        )

        if balance <= 0:
            if month < loan.tenure_months:
                logger.debug("Paid off in month %d of %d", month, loan.tenure_months)
            break

    return schedule


def total_interest(schedule: Sequence[ScheduleEntry]) -> float:
    """Sum of the interest column."""
    return sum(e.interest for e in schedule)

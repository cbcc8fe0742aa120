# src/schemas/models.py

from __future__ import annotations

import datetime as dt
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

# =========================
# Core inputs
# =========================


class LoanTerms(BaseModel):
    """
    Loan parameters for one simulation. All money amounts use the same currency.

    Positivity of principal/tenure and non-negativity of the rate are enforced by
    the engine (InvalidInput), not here, so every entry point fails the same way.
    """

    model_config = ConfigDict(frozen=True)

    principal: float = Field(..., description="Amount borrowed (currency units, > 0).")
    annual_rate_pct: float = Field(..., description="Annual interest rate in percent (e.g., 9.5 = 9.5%).")
    tenure_months: int = Field(..., description="Number of monthly installments (> 0).")
    start_date: dt.date = Field(..., description="Date of the first installment.")
    emi: float = Field(
        ...,
        description="Baseline EMI. Usually compute_emi(principal, rate, tenure) but may be supplied independently.",
    )

    @classmethod
    def from_terms(
        cls,
        principal: float,
        annual_rate_pct: float,
        tenure_months: int,
        start_date: dt.date,
    ) -> LoanTerms:
        """Build terms with the baseline EMI computed from principal, rate and tenure."""
        from src.core.finance.emi import compute_emi

        return cls(
            principal=principal,
            annual_rate_pct=annual_rate_pct,
            tenure_months=tenure_months,
            start_date=start_date,
            emi=compute_emi(principal, annual_rate_pct, tenure_months),
        )


# -------------------------
# Events
# -------------------------


class _PrepaymentBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., gt=0, allow_inf_nan=False, description="Extra amount paid straight to principal.")
    effective_date: dt.date = Field(..., description="Matched by calendar month and year; the day is ignored.")


class OneTimePrepayment(_PrepaymentBase):
    """A single extra payment."""

    kind: Literal["one_time"] = "one_time"


class RecurringPrepayment(_PrepaymentBase):
    """
    An extra payment flagged as recurring.

    The frequency is carried for the caller's records only: the schedule generator
    matches the event to its own effective_date month, exactly like a one-time event.
    """

    kind: Literal["recurring"] = "recurring"
    frequency: Literal["monthly", "yearly", "custom"] = Field(..., description="Declared recurrence.")


PrepaymentEvent = Annotated[OneTimePrepayment | RecurringPrepayment, Field(discriminator="kind")]


class RateChangeEvent(BaseModel):
    """New annual rate from the month of effective_date onwards."""

    model_config = ConfigDict(frozen=True)

    new_rate_pct: float = Field(..., ge=0, allow_inf_nan=False, description="New annual interest rate in percent.")
    effective_date: dt.date = Field(..., description="Matched by calendar month and year; the day is ignored.")


# =========================
# Computed outputs
# =========================


class ScheduleEntry(BaseModel):
    """One row of an amortization schedule."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., description="Month index starting at 1.")
    date: dt.date = Field(..., description="start_date advanced by (month - 1) calendar months.")
    emi: float = Field(
        ...,
        description=(
            "Installment in force this month. On the final tenure month the principal settles the whole "
            "remaining balance, so principal + interest there may differ from this scheduled EMI."
        ),
    )
    principal: float = Field(..., description="Principal repaid out of the EMI.")
    interest: float = Field(..., description="Interest charged on the opening balance.")
    prepayment: float | None = Field(None, description="Prepayment applied this month, if any matched.")
    balance: float = Field(..., description="Closing balance, floored at 0.")


class SavingsSummary(BaseModel):
    """Baseline vs modified schedule. Negative values mean the modified plan is worse."""

    model_config = ConfigDict(frozen=True)

    interest_saved: float = Field(..., description="Baseline total interest minus modified total interest.")
    months_saved: int = Field(..., description="Baseline length minus modified length.")
    new_debt_free_date: dt.date | None = Field(
        None, description="Date of the last modified entry; None when the modified schedule is empty."
    )


class SimulationResult(BaseModel):
    """Everything one simulation run produces."""

    model_config = ConfigDict(frozen=True)

    original_schedule: list[ScheduleEntry] = Field(default_factory=list, description="Schedule without any events.")
    new_schedule: list[ScheduleEntry] = Field(default_factory=list, description="Schedule with the supplied events.")
    savings: SavingsSummary
    new_emi: float = Field(..., description="EMI shown for the simulated plan.")


class SimulationComparison(BaseModel):
    """Absolute differences between two simulation results (second minus first)."""

    model_config = ConfigDict(frozen=True)

    interest_saved_diff: float = Field(..., ge=0)
    months_saved_diff: int = Field(..., ge=0)
    debt_free_days_diff: int | None = Field(None, description="None when either debt-free date is missing.")
    emi_diff: float = Field(..., ge=0)

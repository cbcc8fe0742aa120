# src/core/finance/savings.py

from __future__ import annotations

from collections.abc import Sequence

from src.schemas.models import SavingsSummary, ScheduleEntry, SimulationComparison, SimulationResult

from .schedule import total_interest


def compare_schedules(baseline: Sequence[ScheduleEntry], modified: Sequence[ScheduleEntry]) -> SavingsSummary:
    """
    Diff a baseline schedule against a modified one.

    Nothing is clamped: a modified plan that costs more interest or runs longer
    yields negative savings. An empty modified schedule has no debt-free date.
    """
    return SavingsSummary(
        interest_saved=total_interest(baseline) - total_interest(modified),
        months_saved=len(baseline) - len(modified),
        new_debt_free_date=modified[-1].date if modified else None,
    )


def compare_simulations(first: SimulationResult, second: SimulationResult) -> SimulationComparison:
    """Absolute differences between two simulation results, metric by metric."""
    a, b = first.savings, second.savings

    days: int | None = None
    if a.new_debt_free_date is not None and b.new_debt_free_date is not None:
        days = abs((b.new_debt_free_date - a.new_debt_free_date).days)

    return SimulationComparison(
        interest_saved_diff=abs(b.interest_saved - a.interest_saved),
        months_saved_diff=abs(b.months_saved - a.months_saved),
        debt_free_days_diff=days,
        emi_diff=abs(second.new_emi - first.new_emi),
    )

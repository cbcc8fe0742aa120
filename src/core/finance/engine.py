# src/core/finance/engine.py
from __future__ import annotations

import logging
from collections.abc import Sequence

from src.schemas.models import LoanTerms, PrepaymentEvent, RateChangeEvent, SimulationResult

from .savings import compare_schedules
from .schedule import generate_schedule

logger = logging.getLogger(__name__)


def run_simulation(
    loan: LoanTerms,
    prepayments: Sequence[PrepaymentEvent] = (),
    rate_changes: Sequence[RateChangeEvent] = (),
) -> SimulationResult:
    """
    Baseline vs modified schedule for one loan.

    The baseline ignores every event. `new_emi` is the first modified entry's EMI
    when rate changes were supplied, else the loan's own EMI.
    """
    original = generate_schedule(loan)
    modified = generate_schedule(loan, prepayments, rate_changes)
    savings = compare_schedules(original, modified)

    new_emi = loan.emi
    if rate_changes and modified:
        new_emi = modified[0].emi

    logger.info(
        "Simulated %d prepayment(s), %d rate change(s): %d -> %d months, interest saved %.2f",
        len(prepayments),
        len(rate_changes),
        len(original),
        len(modified),
        savings.interest_saved,
    )

    return SimulationResult(
        original_schedule=original,
        new_schedule=modified,
        savings=savings,
        new_emi=new_emi,
    )

# main.py
"""
Entry Point: Loan Prepayment Simulator

Purpose
-------
Simulate prepayments and interest-rate changes on a loan and print the impact:
  1) Load a scenario (sample defaults or --config JSON).
  2) Build the original schedule (no events) and the simulated schedule.
  3) Print interest saved, months saved, the new debt-free date and,
     optionally, the simulated month-by-month schedule.

Usage
-----
    python main.py
    python main.py --config data/sample/scenario.json --schedule --limit 12
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging

from src.core.finance import InvalidInput, run_simulation
from src.inputs.inputs import ScenarioInputs, ScenarioLoader
from src.reports.summary import render_summary
from src.schemas.models import LoanTerms, OneTimePrepayment, RateChangeEvent

logger = logging.getLogger(__name__)


def build_sample_scenario() -> ScenarioInputs:
    """Return a demo scenario: 5L at 10% over 24 months, one 1L prepayment in month 6."""
    start = dt.date(2025, 1, 5)
    return ScenarioInputs(
        loan=LoanTerms.from_terms(500_000.0, 10.0, 24, start),
        prepayments=[OneTimePrepayment(amount=100_000.0, effective_date=dt.date(2025, 6, 1))],
        rate_changes=[RateChangeEvent(new_rate_pct=9.0, effective_date=dt.date(2025, 10, 1))],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for configurable runs."""
    p = argparse.ArgumentParser(description="Loan Prepayment Simulator")
    p.add_argument("--config", type=str, default=None, help="Path to a scenario JSON file.")
    p.add_argument(
        "--schedule",
        action="store_true",
        default=None,
        help="Print the simulated month-by-month schedule (overrides config).",
    )
    p.add_argument("--limit", type=int, default=None, help="Maximum schedule rows to print (0 = all).")
    p.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides config).",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run one simulation and print the summary. Returns a process exit code."""
    args = parse_args(argv)
    loader = ScenarioLoader()

    # No config file → use demo scenario
    cfg = loader.load(args.config) if args.config else build_sample_scenario()
    cfg = loader.with_overrides(
        cfg,
        show_schedule=args.schedule,
        schedule_limit=args.limit,
        log_level=args.log_level,
    )

    logging.basicConfig(level=getattr(logging, cfg.run.log_level.upper(), logging.WARNING))

    try:
        result = run_simulation(cfg.loan, cfg.prepayments, cfg.rate_changes)
    except InvalidInput as e:
        logger.error("Invalid loan terms: %s", e)
        return 2

    print(
        render_summary(
            cfg.loan,
            result,
            show_schedule=cfg.run.show_schedule,
            schedule_limit=cfg.run.schedule_limit,
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

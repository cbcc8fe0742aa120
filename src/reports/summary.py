# src/reports/summary.py
from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from src.core.finance import total_interest
from src.schemas.models import LoanTerms, ScheduleEntry, SimulationResult


def _fmt_currency(x: float) -> str:
    """
    Format an amount with thousands separators and two decimals.

    Example:
        123456.789 -> 123,456.79
        -2000 -> -2,000.00
    """
    sign = "-" if x < 0 else ""
    return f"{sign}{abs(x):,.2f}"


def _fmt_date(d: dt.date | None) -> str:
    return d.isoformat() if d is not None else "N/A"


def _section(title: str) -> str:
    """
    Render a level-2 heading for Markdown sections.
    """
    return f"\n## {title}\n"


def _render_loan(loan: LoanTerms) -> str:
    lines = [
        "# Loan Simulation",
        "",
        f"- **Principal:** {_fmt_currency(loan.principal)}",
        f"- **Rate:** {loan.annual_rate_pct:.2f}%",
        f"- **Tenure:** {loan.tenure_months} months",
        f"- **Start:** {_fmt_date(loan.start_date)}",
        f"- **EMI:** {_fmt_currency(loan.emi)}",
    ]
    return "\n".join(lines) + "\n"


def _render_savings(result: SimulationResult) -> str:
    """
    Baseline vs simulated plan, side by side, followed by the savings.
    """
    orig, new = result.original_schedule, result.new_schedule
    s = result.savings
    lines = [
        _section("Impact"),
        "| Metric | Original | Simulated |",
        "| :--- | ---: | ---: |",
        f"| Months | {len(orig)} | {len(new)} |",
        f"| Total Interest | {_fmt_currency(total_interest(orig))} | {_fmt_currency(total_interest(new))} |",
        f"| Debt-Free Date | {_fmt_date(orig[-1].date if orig else None)} | {_fmt_date(s.new_debt_free_date)} |",
        "",
        f"- **Interest Saved:** {_fmt_currency(s.interest_saved)}",
        f"- **Months Saved:** {s.months_saved}",
        f"- **EMI:** {_fmt_currency(result.new_emi)}",
    ]
    return "\n".join(lines) + "\n"


def render_schedule(schedule: Sequence[ScheduleEntry], limit: int = 0) -> str:
    """
    Month-by-month table. `limit` > 0 keeps only the first `limit` rows.
    """
    rows_in = list(schedule[:limit]) if limit > 0 else list(schedule)
    header = [
        _section("Simulated Schedule"),
        "| Month | Date | EMI | Principal | Interest | Prepayment | Balance |",
        "| ---: | :--- | ---: | ---: | ---: | ---: | ---: |",
    ]
    rows = []
    for e in rows_in:
        rows.append(
            f"| {e.month} "
            f"| {_fmt_date(e.date)} "
            f"| {_fmt_currency(e.emi)} "
            f"| {_fmt_currency(e.principal)} "
            f"| {_fmt_currency(e.interest)} "
            f"| {_fmt_currency(e.prepayment) if e.prepayment is not None else '-'} "
            f"| {_fmt_currency(e.balance)} |"
        )
    if len(rows_in) < len(schedule):
        rows.append(f"\n_{len(schedule) - len(rows_in)} more month(s) not shown._")
    return "\n".join(header + rows) + "\n"


def render_summary(
    loan: LoanTerms,
    result: SimulationResult,
    *,
    show_schedule: bool = False,
    schedule_limit: int = 0,
) -> str:
    """Full console summary for one simulation."""
    parts = [_render_loan(loan), _render_savings(result)]
    if show_schedule:
        parts.append(render_schedule(result.new_schedule, schedule_limit))
    return "".join(parts)

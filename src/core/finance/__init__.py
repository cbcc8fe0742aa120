# src/core/finance/__init__.py

from .emi import compute_emi, round_currency
from .engine import run_simulation
from .errors import InvalidInput
from .savings import compare_schedules, compare_simulations
from .schedule import first_event_in_month, generate_schedule, month_date, total_interest

__all__ = [
    "InvalidInput",
    "compute_emi",
    "round_currency",
    "generate_schedule",
    "first_event_in_month",
    "month_date",
    "total_interest",
    "compare_schedules",
    "compare_simulations",
    "run_simulation",
]

# src/inputs/inputs.py
"""
Scenario loader for the loan prepayment simulator.

Goals
-----
- Deterministic, file-first inputs with validation via Pydantic.
- One JSON document carries the loan, its events and the run options.
- The loan's EMI may be omitted; it is then computed from principal/rate/tenure.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shape
--------------------
    {
      "loan": {
        "principal": 500000,
        "annual_rate_pct": 10,
        "tenure_months": 24,
        "start_date": "2025-01-05",
        "emi": 23072                      (optional)
      },
      "prepayments": [
        {"kind": "one_time", "amount": 100000, "effective_date": "2025-06-01"},
        {"kind": "recurring", "amount": 5000, "effective_date": "2025-09-01", "frequency": "monthly"}
      ],
      "rate_changes": [
        {"new_rate_pct": 9.25, "effective_date": "2025-10-01"}
      ],
      "run": {"show_schedule": true, "schedule_limit": 12, "log_level": "INFO"}
    }

Environment overrides (optional)
--------------------------------
- LOANSIM_SHOW_SCHEDULE   -> RunOptions.show_schedule ("1"/"true"/"yes" or "0"/"false"/"no")
- LOANSIM_SCHEDULE_LIMIT  -> RunOptions.schedule_limit (int)
- LOANSIM_LOG_LEVEL       -> RunOptions.log_level

Public API
----------
- class ScenarioLoader:
    - load(path: str | Path | None) -> ScenarioInputs
    - load_json(text: str) -> ScenarioInputs
    - with_overrides(cfg, **kwargs) -> ScenarioInputs (non-destructive copies)
- function load_scenario(path: str | Path | None) -> ScenarioInputs  (convenience)

Notes
-----
- Invalid principal/rate/tenure are left for the engine to reject (InvalidInput).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError

from src.core.finance import InvalidInput, compute_emi
from src.schemas.models import LoanTerms, PrepaymentEvent, RateChangeEvent

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")

# ----------------------------
# Pydantic models for structured inputs
# ----------------------------


class RunOptions(BaseModel):
    """Runtime (non-financial) options controlling the CLI output."""

    show_schedule: bool = Field(False, description="Print the month-by-month modified schedule.")
    schedule_limit: int = Field(0, ge=0, description="Maximum schedule rows to print (0 = all).")
    log_level: str = Field("WARNING", description="Root logging level for the run.")


class ScenarioInputs(BaseModel):
    """
    Full input payload.

    Attributes:
        loan:         Loan terms with the baseline EMI resolved.
        prepayments:  Prepayment events in tie-break order.
        rate_changes: Rate change events in tie-break order.
        run:          Non-financial runtime options.
    """

    loan: LoanTerms
    prepayments: list[PrepaymentEvent] = Field(default_factory=list)
    rate_changes: list[RateChangeEvent] = Field(default_factory=list)
    run: RunOptions = RunOptions()


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class ScenarioLoader:
    """
    File-first scenario loader with light env overrides.

    Responsibilities:
        - Read JSON from a file or string
        - Fill in a missing baseline EMI
        - Validate with Pydantic
        - Apply environment overrides for run options

    Default search (when path=None):
        1) ./data/sample/scenario.json
        2) ./scenario.json
    """

    env_prefix: str = "LOANSIM_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> ScenarioInputs:
        """
        Load a scenario from a JSON file (path). If path is None, try defaults.

        Args:
            path: Path to JSON file. If None, uses default search order.

        Returns:
            ScenarioInputs (validated).
        """
        p = self._resolve_path(path)
        raw = self._read_json_file(p)
        data = self._fill_missing_emi(raw)
        cfg = self._parse_root(data)
        return self._apply_env_overrides(cfg)

    def load_json(self, text: str) -> ScenarioInputs:
        """Load a scenario from a JSON string."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Scenario JSON must be an object.")
        data = self._fill_missing_emi(raw)
        cfg = self._parse_root(data)
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: ScenarioInputs,
        *,
        show_schedule: bool | None = None,
        schedule_limit: int | None = None,
        log_level: str | None = None,
    ) -> ScenarioInputs:
        """
        Return a *new* ScenarioInputs with provided non-null overrides applied to RunOptions.
        Does not mutate the original instance.
        """
        updates: dict[str, Any] = {}
        if show_schedule is not None:
            updates["show_schedule"] = show_schedule
        if schedule_limit is not None:
            updates["schedule_limit"] = schedule_limit
        if log_level is not None:
            updates["log_level"] = log_level.strip().upper()

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Scenario file not found: {p}")
            return p

        # Default search order
        for candidate in (Path("data/sample/scenario.json"), Path("scenario.json")):
            if candidate.exists():
                return candidate
        raise FileNotFoundError(
            "No scenario path provided and no default scenario found. "
            "Looked for ./data/sample/scenario.json and ./scenario.json."
        )

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported scenario format for {p.name}; only .json is supported.")
        try:
            raw = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Scenario JSON in {p} must be an object.")
        return cast(dict[str, Any], raw)

    def _fill_missing_emi(self, raw: dict[str, Any]) -> dict[str, Any]:
        """
        Compute the baseline EMI when the loan omits it.
        Invalid terms get a placeholder EMI of 0 so the engine, not validation, rejects them.
        """
        loan = raw.get("loan")
        if not isinstance(loan, dict) or loan.get("emi") is not None:
            return raw
        try:
            emi = compute_emi(
                float(loan["principal"]),
                float(loan["annual_rate_pct"]),
                int(loan["tenure_months"]),
            )
        except InvalidInput:
            # Non-positive principal/tenure or negative rate: the engine reports it on run
            emi = 0.0
        except (KeyError, TypeError, ValueError):
            # Missing or malformed fields surface during validation
            return raw
        return {**raw, "loan": {**loan, "emi": emi}}

    def _parse_root(self, data: dict[str, Any]) -> ScenarioInputs:
        """
        Validate and return structured ScenarioInputs.
        """
        try:
            return ScenarioInputs.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Scenario validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: ScenarioInputs) -> ScenarioInputs:
        """
        Apply light, optional overrides from environment variables to run options.
        """
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        show = os.getenv(f"{prefix}SHOW_SCHEDULE")
        if show:
            normalized = show.strip().lower()
            if normalized in _TRUTHY:
                updates["show_schedule"] = True
            elif normalized in _FALSY:
                updates["show_schedule"] = False

        limit = os.getenv(f"{prefix}SCHEDULE_LIMIT")
        if limit:
            try:
                value = int(limit)
            except ValueError:
                # Ignore bad value; keep validated cfg.schedule_limit
                value = -1
            if value >= 0:
                updates["schedule_limit"] = value

        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            normalized = level.strip().upper()
            if normalized in _LOG_LEVELS:
                updates["log_level"] = normalized

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})


# ----------------------------
# Convenience function
# ----------------------------


def load_scenario(path: str | Path | None = None) -> ScenarioInputs:
    """Convenience wrapper for one-shot callers."""
    return ScenarioLoader().load(path)


__all__ = ["RunOptions", "ScenarioInputs", "ScenarioLoader", "load_scenario"]

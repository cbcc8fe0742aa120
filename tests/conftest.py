# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from tests.utils import make_loan, scenario_payload, write_scenario


# -------- Environment hygiene --------
@pytest.fixture(autouse=True)
def _clear_loansim_env(monkeypatch):
    for name in ("LOANSIM_SHOW_SCHEDULE", "LOANSIM_SCHEDULE_LIMIT", "LOANSIM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


# -------- Loan fixtures --------
@pytest.fixture
def loan():
    """Canonical loan: 500,000 at 10% over 24 months."""
    return make_loan()


@pytest.fixture
def loan_factory():
    """Factory for loans with overridable terms."""

    def _factory(**overrides):
        return make_loan(**overrides)

    return _factory


# -------- Scenario files --------
@pytest.fixture
def scenario_file(tmp_path: Path):
    """
    Callable factory writing a scenario JSON into the test's tmp path.

    Usage:
        path = scenario_file()
        path = scenario_file(principal=0)
        path = scenario_file(payload={...})
    """

    def _factory(*, payload: dict | None = None, **loan_overrides) -> Path:
        data = payload if payload is not None else scenario_payload(**loan_overrides)
        return write_scenario(tmp_path, data)

    return _factory


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")

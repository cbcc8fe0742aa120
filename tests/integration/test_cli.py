# tests/integration/test_cli.py
from __future__ import annotations

import pytest

import main as cli
from tests.utils import scenario_payload

pytestmark = pytest.mark.integration


def test_cli_sample_scenario(capsys) -> None:
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "# Loan Simulation" in out
    assert "Interest Saved" in out


def test_cli_config_with_schedule(scenario_file, capsys) -> None:
    path = scenario_file()
    assert cli.main(["--config", str(path), "--schedule", "--limit", "2"]) == 0
    out = capsys.readouterr().out
    assert "Simulated Schedule" in out
    assert "more month(s) not shown" in out


def test_cli_invalid_terms_exit_code(scenario_file) -> None:
    path = scenario_file(payload=scenario_payload(tenure_months=0))
    assert cli.main(["--config", str(path)]) == 2


def test_cli_missing_config_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.main(["--config", str(tmp_path / "missing.json")])


@pytest.mark.parametrize("field", ["principal", "annual_rate_pct"])
@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_cli_non_finite_terms_exit_code(scenario_file, field, value) -> None:
    # json writes these as NaN / Infinity and reads them back
    path = scenario_file(payload=scenario_payload(**{field: value}))
    assert cli.main(["--config", str(path)]) == 2


def test_cli_non_finite_rate_change_rejected_on_load(scenario_file) -> None:
    payload = scenario_payload()
    payload["rate_changes"][0]["new_rate_pct"] = float("inf")
    with pytest.raises(ValueError, match="Scenario validation failed"):
        cli.main(["--config", str(scenario_file(payload=payload))])

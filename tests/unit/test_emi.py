# tests/unit/test_emi.py
import math

import pytest

from src.core.finance import InvalidInput, compute_emi, round_currency


def test_emi_reference_value():
    # 100,000 @ 12% over 12 months → 8,884.88 → 8,885
    assert compute_emi(100_000, 12, 12) == 8_885.0


def test_emi_matches_closed_form_before_rounding():
    r = 10 / 100 / 12
    growth = (1 + r) ** 24
    exact = 500_000 * r * growth / (growth - 1)
    assert compute_emi(500_000, 10, 24) == pytest.approx(exact, abs=0.5)
    assert compute_emi(500_000, 10, 24) == float(round(exact))


def test_zero_rate_is_principal_over_tenure():
    assert compute_emi(120_000, 0, 12) == 10_000.0
    # 33,333.33 → 33,333
    assert compute_emi(100_000, 0.0, 3) == 33_333.0


def test_single_month_tenure_is_principal_plus_one_month_interest():
    assert compute_emi(10_000, 12, 1) == 10_100.0


def test_emi_is_whole_units():
    emi = compute_emi(2_345_678, 8.65, 240)
    assert emi == int(emi)


def test_round_currency_halves_away_from_zero():
    assert round_currency(2.5) == 3.0
    assert round_currency(3.5) == 4.0
    assert round_currency(-2.5) == -3.0
    assert round_currency(2.4999) == 2.0
    assert round_currency(0.0) == 0.0


@pytest.mark.parametrize(
    "principal, rate, tenure",
    [
        (0, 10, 12),
        (-1_000, 10, 12),
        (1_000, -0.5, 12),
        (1_000, 10, 0),
        (1_000, 10, -3),
        (1_000, 10, 1.5),
        (math.nan, 10, 12),
        (math.inf, 10, 12),
        (1_000, math.nan, 12),
        (1_000, math.inf, 12),
        (1e308, 1e6, 12),
    ],
)
def test_invalid_inputs_raise(principal, rate, tenure):
    with pytest.raises(InvalidInput):
        compute_emi(principal, rate, tenure)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        compute_emi(0, 10, 12)

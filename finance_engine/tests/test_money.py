from __future__ import annotations

from math import isclose

import pytest

from finance_engine.core.annuity import annuity_factor, annuity_payment, growth_factor, ratio
from finance_engine.core.money import round_money, round_percentage
from finance_engine.domain.errors import DivisionDegenerate, InvalidArgument


@pytest.mark.parametrize(
    "value, expected",
    [(1.005, 1.01), (-1.005, -1.01), (2.675, 2.68), (0.125, 0.13), (10.0, 10.0), (-0.001, 0.0)],
)
def test_round_money_rounds_half_away_from_zero(value, expected):
    assert round_money(value) == expected


def test_round_money_never_returns_negative_zero():
    assert str(round_money(-0.004)) == "0.0"


def test_round_percentage_uses_one_place():
    assert round_percentage(21.367521) == 21.4
    assert round_percentage(33.35) == 33.4


def test_ratio_requires_an_explicit_zero_case():
    assert ratio(10, 4) == 2.5
    assert ratio(10, 0, when_zero=100.0) == 100.0
    with pytest.raises(DivisionDegenerate):
        ratio(10, 0)


def test_annuity_factor_degenerates_to_payment_count():
    assert annuity_factor(0.0, 12) == 12.0
    assert annuity_factor(0.0, 12, due=True) == 12.0


def test_annuity_due_adds_one_period_of_growth():
    ordinary = annuity_factor(0.01, 12)
    due = annuity_factor(0.01, 12, due=True)

    assert isclose(ordinary, (1.01**12 - 1) / 0.01)
    assert isclose(due, ordinary * 1.01)


def test_annuity_payment():
    assert annuity_payment(1200, 0.0, 12) == 100.0
    assert isclose(annuity_payment(200_000, 0.045 / 12, 360), 1013.37, abs_tol=5e-3)


def test_tiny_rates_are_not_lost():
    assert isclose(annuity_factor(1e-17, 120), 120.0)
    assert isclose(annuity_factor(1e-17, 120, due=True), 120.0)
    assert isclose(annuity_payment(12_000, 1e-17 / 12, 12), 1000.0)


def test_overflowing_growth_is_rejected():
    with pytest.raises(InvalidArgument):
        growth_factor(5 / 365, 365_000)
    with pytest.raises(InvalidArgument):
        annuity_factor(5 / 365, 365_000)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), 1e200])
def test_unroundable_results_are_rejected(value):
    with pytest.raises(InvalidArgument):
        round_money(value)

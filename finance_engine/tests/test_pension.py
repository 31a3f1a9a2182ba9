from __future__ import annotations

from math import isclose

import pytest

from finance_engine.core.pension import compute_pension_projection, employer_rate
from finance_engine.domain.errors import InvalidArgument
from finance_engine.schemas.pension import PensionRequest


def make_request(**overrides) -> PensionRequest:
    params = {
        "current_salary": 60_000,
        "employee_contribution_pct": 8,
        "employer_match_pct": 4,
        "annual_salary_growth_pct": 3,
        "annual_return_pct": 7,
        "current_age": 30,
        "retirement_age": 65,
        "current_pension_value": 25_000,
    }
    params.update(overrides)
    return PensionRequest(**params)


def test_employer_never_matches_beyond_employee_rate():
    result = compute_pension_projection(make_request(employee_contribution_pct=4, employer_match_pct=6))

    assert len(result.yearly) == 35
    for year in result.yearly:
        assert year.employer_contribution <= year.employee_contribution
        assert year.employer_contribution == year.employee_contribution


def test_lower_match_rate_is_applied_as_is():
    result = compute_pension_projection(make_request())
    first = result.yearly[0]

    assert first.employee_contribution == 4800.0
    assert first.employer_contribution == 2400.0


def test_employer_rate():
    assert employer_rate(5, 3) == 3
    assert employer_rate(3, 5) == 3


def test_zero_return_and_growth_accumulates_contributions():
    result = compute_pension_projection(
        make_request(
            current_salary=50_000,
            employee_contribution_pct=10,
            employer_match_pct=5,
            annual_salary_growth_pct=0,
            annual_return_pct=0,
            current_age=30,
            retirement_age=33,
            current_pension_value=1000,
        )
    )

    assert [year.age for year in result.yearly] == [31, 32, 33]
    assert [year.pension_value for year in result.yearly] == [8500.0, 16000.0, 23500.0]
    assert result.final_pension_value == 23500.0
    assert result.total_employee_contributions == 15000.0
    assert result.total_employer_contributions == 7500.0
    assert result.total_investment_returns == 0.0


def test_returns_accrue_on_opening_balance():
    result = compute_pension_projection(
        make_request(
            current_salary=0,
            employee_contribution_pct=0,
            employer_match_pct=0,
            annual_return_pct=10,
            current_age=60,
            retirement_age=62,
            current_pension_value=1000,
        )
    )

    assert [year.investment_return for year in result.yearly] == [100.0, 110.0]
    assert result.final_pension_value == 1210.0
    assert result.total_investment_returns == 210.0


def test_salary_rises_after_each_year():
    result = compute_pension_projection(
        make_request(current_salary=50_000, annual_salary_growth_pct=10, retirement_age=33)
    )

    assert [year.salary for year in result.yearly] == [50_000.0, 55_000.0, 60_500.0]


def test_totals_match_the_yearly_series():
    result = compute_pension_projection(make_request())
    years = len(result.yearly)

    assert isclose(
        result.total_employee_contributions,
        sum(y.employee_contribution for y in result.yearly),
        abs_tol=0.01 * years,
    )
    assert isclose(
        result.total_employer_contributions,
        sum(y.employer_contribution for y in result.yearly),
        abs_tol=0.01 * years,
    )
    assert result.final_pension_value == result.yearly[-1].pension_value


@pytest.mark.parametrize("retirement_age", [30, 25])
def test_retirement_must_follow_current_age(retirement_age):
    payload = make_request().model_dump()
    payload["retirement_age"] = retirement_age

    with pytest.raises(InvalidArgument):
        compute_pension_projection(payload)


def test_repeated_calls_are_identical():
    request = make_request()
    assert compute_pension_projection(request) == compute_pension_projection(request)

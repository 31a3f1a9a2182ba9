"""Loan amortization."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from finance_engine.core.annuity import annuity_payment
from finance_engine.core.money import round_money, to_cents
from finance_engine.core.requests import as_request
from finance_engine.schemas.loan import AmortizationEntry, LoanRequest, LoanResult

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def monthly_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Level monthly payment, unrounded. A zero rate spreads the principal evenly."""
    return annuity_payment(principal, annual_rate / MONTHS_PER_YEAR, term_years * MONTHS_PER_YEAR)


def compute_loan_schedule(request: Union[LoanRequest, Mapping[str, Any]]) -> LoanResult:
    """
    Monthly amortization schedule for a fully amortizing fixed-rate loan.

    Each month charges interest on the outstanding balance and applies the
    rest of the payment to principal. The final month retires whatever
    balance is left, so the schedule always closes at exactly zero.

    The rounded principal column is the month-over-month drop in the rounded
    balance, so it sums to the loan amount to the cent.
    """
    request = as_request(LoanRequest, request)

    rate = request.annual_rate / MONTHS_PER_YEAR
    periods = request.term_years * MONTHS_PER_YEAR
    payment = monthly_payment(request.principal, request.annual_rate, request.term_years)

    schedule: List[AmortizationEntry] = []
    balance = float(request.principal)
    cumulative_interest = 0.0
    previous_cents = to_cents(balance)

    for index in range(1, periods + 1):
        interest = balance * rate
        if index == periods:
            balance = 0.0
        else:
            balance = max(0.0, balance - (payment - interest))
        cumulative_interest += interest

        balance_cents = to_cents(balance)
        schedule.append(
            AmortizationEntry(
                payment_index=index,
                principal_portion=float(max(previous_cents - balance_cents, 0)),
                interest_portion=round_money(interest),
                cumulative_interest=round_money(cumulative_interest),
                remaining_balance=float(balance_cents),
            )
        )
        previous_cents = balance_cents

    logger.debug(
        "loan schedule: principal=%s rate=%s term=%sy payment=%s interest=%s",
        request.principal,
        request.annual_rate,
        request.term_years,
        payment,
        cumulative_interest,
    )
    return LoanResult(
        monthly_payment=round_money(payment),
        total_interest=round_money(cumulative_interest),
        total_cost=round_money(request.principal + cumulative_interest),
        schedule=schedule,
    )

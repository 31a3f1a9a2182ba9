"""
Route a saved-calculation payload to its calculator.

The persistence collaborator stores ``{type, title, parameters, results}``
records; ``run_calculation`` produces them. Parameters and results are plain
camelCase data, ready to be stored as JSON.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel

from finance_engine.core.emergency_fund import compute_emergency_fund
from finance_engine.core.interest import compute_interest
from finance_engine.core.loan import compute_loan_schedule
from finance_engine.core.net_worth import compute_net_worth
from finance_engine.core.pension import compute_pension_projection
from finance_engine.core.requests import as_request
from finance_engine.core.retirement import compute_retirement_plan
from finance_engine.domain.errors import InvalidArgument
from finance_engine.schemas.calculation import CalculationRecord, CalculationType
from finance_engine.schemas.emergency_fund import EmergencyFundRequest
from finance_engine.schemas.interest import InterestRequest
from finance_engine.schemas.loan import LoanRequest
from finance_engine.schemas.net_worth import NetWorthRequest
from finance_engine.schemas.pension import PensionRequest
from finance_engine.schemas.retirement import RetirementRequest

logger = logging.getLogger(__name__)


def _currency(value: float) -> str:
    return f"${value:,.2f}"


@dataclass(frozen=True)
class Calculator:
    request_model: Type[BaseModel]
    run: Callable[[Any], BaseModel]
    title: Callable[[Any], str]


CALCULATORS: Dict[CalculationType, Calculator] = {
    CalculationType.INTEREST: Calculator(
        request_model=InterestRequest,
        run=compute_interest,
        title=lambda r: f"{r.calculation_type.title()} Interest - {_currency(r.principal)}",
    ),
    CalculationType.LOAN: Calculator(
        request_model=LoanRequest,
        run=compute_loan_schedule,
        title=lambda r: f"Loan - {_currency(r.principal)} over {r.term_years} years",
    ),
    CalculationType.RETIREMENT: Calculator(
        request_model=RetirementRequest,
        run=compute_retirement_plan,
        title=lambda r: f"Retirement Plan - retire at {r.retirement_age}",
    ),
    CalculationType.PENSION: Calculator(
        request_model=PensionRequest,
        run=compute_pension_projection,
        title=lambda r: f"Pension Projection - retire at {r.retirement_age}",
    ),
    CalculationType.EMERGENCY_FUND: Calculator(
        request_model=EmergencyFundRequest,
        run=lambda r: compute_emergency_fund(
            r.monthly_expenses,
            r.desired_months_coverage,
            r.current_savings,
        ),
        title=lambda r: f"Emergency Fund - {r.desired_months_coverage} months",
    ),
    CalculationType.NET_WORTH: Calculator(
        request_model=NetWorthRequest,
        run=lambda r: compute_net_worth(r.assets, r.liabilities),
        title=lambda r: "Net Worth Statement",
    ),
}


def run_calculation(
    calculation_type: Union[CalculationType, str],
    parameters: Union[BaseModel, Mapping[str, Any]],
    title: Optional[str] = None,
) -> CalculationRecord:
    """Validate ``parameters``, run the matching calculator and wrap the outcome."""
    try:
        kind = CalculationType(calculation_type)
    except ValueError:
        raise InvalidArgument([f"unknown calculation type {calculation_type!r}"]) from None

    calculator = CALCULATORS[kind]
    request = as_request(calculator.request_model, parameters)
    result = calculator.run(request)

    logger.debug("ran %s calculation", kind.value)
    return CalculationRecord(
        type=kind,
        title=title or calculator.title(request),
        parameters=request.model_dump(mode="json", by_alias=True),
        results=result.model_dump(mode="json", by_alias=True),
    )

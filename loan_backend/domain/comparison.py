from __future__ import annotations

import logging
from typing import List

from loan_backend.core.annuity import generate_schedule
from loan_backend.core.errors import CalculationError
from loan_backend.core.prepayment import project_with_prepayment
from loan_backend.models import (
    PERIODS_PER_YEAR,
    CumulativeTotal,
    LoanInputs,
    PrepaymentComparison,
)

logger = logging.getLogger(__name__)


class LoanValidationError(CalculationError):
    pass


def validate_loan(inputs: LoanInputs) -> List[str]:
    errors: List[str] = []
    if inputs.principal <= 0:
        errors.append("principal must be positive")
    if inputs.term_periods <= 0:
        errors.append("term must be at least one month")
    if inputs.apr < 0:
        errors.append("apr must not be negative")
    if inputs.prepaymentAmount < 0:
        errors.append("prepaymentAmount must not be negative")
    return errors


def _saving(baseline: float, actual: float, months: int) -> float:
    """Difference in cents; a shortfall within a cent per month is rounding, not a cost."""
    saved = round(baseline - actual, 2)
    if -0.01 * months <= saved < 0:
        return 0.0
    return saved


def _final(series: List[CumulativeTotal]) -> CumulativeTotal:
    return series[-1] if series else CumulativeTotal()


def compare_prepayment(inputs: LoanInputs) -> PrepaymentComparison:
    """Run the loan with and without the monthly prepayment and report the savings."""
    errors = validate_loan(inputs)
    if errors:
        raise LoanValidationError(errors)

    schedule = generate_schedule(inputs.principal, inputs.term_periods, inputs.apr)
    without_series = project_with_prepayment(schedule, 0.0, inputs.apr)
    with_series = project_with_prepayment(schedule, inputs.prepaymentAmount, inputs.apr)

    without = _final(without_series)
    with_ = _final(with_series)
    months_saved = without.months - with_.months
    logger.info(
        "prepayment of %s saves %d months on a %d month loan",
        inputs.prepaymentAmount,
        months_saved,
        without.months,
    )

    return PrepaymentComparison(
        monthlyPayment=schedule[0].payment if schedule else 0.0,
        withoutPrepayment=without,
        withPrepayment=with_,
        interestSaved=_saving(without.interest, with_.interest, without.months),
        monthsSaved=months_saved,
        yearsSaved=round(months_saved / PERIODS_PER_YEAR, 1),
        totalCostSaved=_saving(without.payments, with_.payments, without.months),
        withoutPrepaymentSeries=without_series,
        withPrepaymentSeries=with_series,
    )

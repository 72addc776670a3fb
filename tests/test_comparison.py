from __future__ import annotations

from math import isclose

import pytest

from pydantic import ValidationError

from loan_backend.domain.comparison import LoanValidationError, compare_prepayment
from loan_backend.models import LoanInputs


def test_prepayment_savings():
    inputs = LoanInputs(principal=111000, termYears=15, apr=5, prepaymentAmount=3000)

    result = compare_prepayment(inputs)

    assert result.withoutPrepayment.months == 180
    assert result.withPrepayment.months < 180
    assert result.monthsSaved == 180 - result.withPrepayment.months
    assert isclose(result.yearsSaved, round(result.monthsSaved / 12, 1))
    assert result.interestSaved > 0
    assert isclose(
        result.interestSaved,
        result.withoutPrepayment.interest - result.withPrepayment.interest,
        abs_tol=0.005,
    )
    assert result.totalCostSaved > 0
    assert len(result.withoutPrepaymentSeries) == 180
    assert len(result.withPrepaymentSeries) == result.withPrepayment.months


def test_zero_prepayment_saves_nothing():
    result = compare_prepayment(LoanInputs(principal=50000, termMonths=60, apr=3.5))

    assert result.monthsSaved == 0
    assert result.interestSaved == 0
    assert result.totalCostSaved == 0
    assert result.withPrepaymentSeries == result.withoutPrepaymentSeries


def test_invalid_loan_collects_every_problem():
    inputs = LoanInputs(principal=0, termMonths=0, apr=-1, prepaymentAmount=-5)

    with pytest.raises(LoanValidationError) as excinfo:
        compare_prepayment(inputs)

    assert len(excinfo.value.errors) == 4


def test_inputs_are_immutable():
    inputs = LoanInputs(principal=1000, termMonths=12, apr=1)

    with pytest.raises(ValidationError):
        inputs.principal = 2000


def test_term_required():
    with pytest.raises(ValueError):
        LoanInputs(principal=1000, apr=1)


def test_rounding_drift_is_not_reported_as_negative_saving():
    """
    The plain schedule pays a few cents under the loan through 2 dp rounding.
    A tiny prepayment must not show up as a cost.
    """
    result = compare_prepayment(
        LoanInputs(principal=100000, termMonths=12, apr=0, prepaymentAmount=0.01)
    )

    assert result.totalCostSaved >= 0
    assert result.interestSaved == 0
    assert result.totalCostSaved == round(result.totalCostSaved, 2)


def test_non_finite_term_is_rejected():
    with pytest.raises(ValidationError):
        LoanInputs(principal=1000, termYears=float("inf"), apr=1)
    with pytest.raises(ValidationError):
        LoanInputs(principal=float("nan"), termMonths=12, apr=1)

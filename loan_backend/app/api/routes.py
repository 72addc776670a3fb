"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from loan_backend.core.annuity import compute_payment, generate_schedule
from loan_backend.core.errors import CalculationError
from loan_backend.core.export import schedule_to_json
from loan_backend.core.investment import project_investment
from loan_backend.core.prepayment import apply_prepayment
from loan_backend.domain.comparison import compare_prepayment
from loan_backend.models import InvestmentInputs
from loan_backend.schemas.amortization import (
    LoanRequest,
    PaymentResponse,
    PrepaymentRequest,
    PrepaymentResponse,
    ScheduleResponse,
)
from loan_backend.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

INVALID_LOAN = "invalid loan parameters: principal and term must be positive and apr not negative"


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    logger.warning("%s: %s", type(exc).__name__, exc)
    return jsonify({"error": exc.errors, "kind": type(exc).__name__}), HTTPStatus.UNPROCESSABLE_ENTITY


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _invalid_loan():
    return jsonify({"error": [INVALID_LOAN], "kind": "InvalidInputError"}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse().model_dump())


@api_bp.post("/calc/payment")
def payment() -> Any:
    loan = LoanRequest.model_validate(_payload())
    amount = compute_payment(loan.principal, loan.term_periods, loan.apr)
    if amount == 0:
        return _invalid_loan()
    return jsonify(PaymentResponse(payment=amount).model_dump())


@api_bp.post("/calc/schedule")
def schedule() -> Any:
    loan = LoanRequest.model_validate(_payload())
    entries = generate_schedule(loan.principal, loan.term_periods, loan.apr)
    if not entries:
        return _invalid_loan()
    response = ScheduleResponse(payment=entries[0].payment, schedule=entries)
    return jsonify(response.model_dump())


@api_bp.post("/calc/schedule/export")
def export_schedule() -> Any:
    """Download the schedule as a JSON file."""
    loan = LoanRequest.model_validate(_payload())
    entries = generate_schedule(loan.principal, loan.term_periods, loan.apr)
    if not entries:
        return _invalid_loan()
    return Response(
        schedule_to_json(entries),
        mimetype="application/json",
        headers={"Content-Disposition": "attachment; filename=schedule.json"},
    )


@api_bp.post("/calc/prepayment")
def prepayment() -> Any:
    payload = PrepaymentRequest.model_validate(_payload())
    entries = apply_prepayment(payload.schedule, payload.extraAmount, payload.apr)
    response = PrepaymentResponse(
        schedule=entries,
        paidOff=bool(payload.schedule) and not entries,
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/prepayment/projection")
def prepayment_projection() -> Any:
    """Cumulative totals with and without the monthly prepayment, plus savings."""
    loan = LoanRequest.model_validate(_payload())
    result = compare_prepayment(loan)
    return jsonify(result.model_dump())


@api_bp.post("/calc/investment")
def investment() -> Any:
    inputs = InvestmentInputs.model_validate(_payload())
    result = project_investment(
        inputs.initialAmount,
        inputs.monthlyContribution,
        inputs.annualReturnRate,
        inputs.periods,
    )
    return jsonify(result.model_dump())

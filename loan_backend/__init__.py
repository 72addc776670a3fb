"""Loan prepayment and investment calculator backend."""

__version__ = "0.1.0"

from loan_backend.core.annuity import compute_payment, generate_schedule
from loan_backend.core.errors import CalculationError, InfeasiblePrepaymentError, InvalidInputError
from loan_backend.core.investment import project_investment
from loan_backend.core.prepayment import apply_prepayment, project_with_prepayment

__all__ = [
    "compute_payment",
    "generate_schedule",
    "apply_prepayment",
    "project_with_prepayment",
    "project_investment",
    "CalculationError",
    "InfeasiblePrepaymentError",
    "InvalidInputError",
]

"""Domain errors raised by the calculation core."""

from typing import List


class CalculationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class InfeasiblePrepaymentError(CalculationError):
    """The fixed payment can never amortize the balance left after a prepayment."""

    def __init__(self, principal: float, payment: float):
        super().__init__(["payment cannot cover this prepayment schedule"])
        self.principal = principal
        self.payment = payment


class InvalidInputError(CalculationError):
    pass

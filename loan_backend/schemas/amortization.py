"""Data contracts for the loan endpoints."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from loan_backend.models import LoanInputs, ScheduleEntry

# the payment and schedule endpoints ignore prepaymentAmount
LoanRequest = LoanInputs


class PaymentResponse(BaseModel):
    payment: float


class ScheduleResponse(BaseModel):
    payment: float
    schedule: List[ScheduleEntry]


class PrepaymentRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    schedule: List[ScheduleEntry] = Field(..., description="Schedule whose first entry receives the prepayment.")
    extraAmount: float = Field(..., ge=0)
    apr: float = Field(..., ge=0, description="Annual rate in percent (e.g. 4.2).")


class PrepaymentResponse(BaseModel):
    schedule: List[ScheduleEntry]
    paidOff: bool

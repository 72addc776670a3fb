from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

PERIODS_PER_YEAR = 12


class ScheduleEntry(BaseModel):
    """One period of an amortization schedule.

    ``remaining`` is the outstanding balance *before* this period's payment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    month: int = Field(ge=1)
    payment: float
    interest: float
    principal: float
    remaining: float = Field(ge=0)


class CumulativeTotal(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    payments: float = 0.0
    prepayments: float = 0.0
    interest: float = 0.0
    months: int = Field(default=0, ge=0)


class InvestmentSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    period: int = Field(ge=1)
    # 1-based year the period falls in
    year: int = Field(ge=1)
    balance: float
    totalInvested: float
    totalGains: float


class InvestmentProjection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    finalBalance: float
    totalInvested: float
    totalGains: float
    # None when nothing was invested
    totalReturnPercent: Optional[float] = None
    perPeriod: List[InvestmentSnapshot]
    yearly: List[InvestmentSnapshot]


class LoanInputs(BaseModel):
    """Snapshot of the loan form taken for a single calculation."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    principal: float
    termMonths: Optional[int] = Field(default=None, le=1200)
    termYears: Optional[float] = Field(default=None, le=100)
    apr: float
    prepaymentAmount: float = 0.0

    @model_validator(mode="after")
    def ensure_term(self) -> "LoanInputs":
        if self.termMonths is None and self.termYears is None:
            raise ValueError("either termMonths or termYears is required")
        return self

    @property
    def term_periods(self) -> int:
        if self.termMonths is not None:
            return self.termMonths
        return int(round(self.termYears * PERIODS_PER_YEAR))


class InvestmentInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialAmount: float = Field(default=0.0, ge=0)
    monthlyContribution: float = Field(ge=0)
    annualReturnRate: float = Field(ge=-100, le=1000)
    periods: int = Field(ge=1, le=1200)


class PrepaymentComparison(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    monthlyPayment: float
    withoutPrepayment: CumulativeTotal
    withPrepayment: CumulativeTotal
    interestSaved: float
    monthsSaved: int
    yearsSaved: float
    totalCostSaved: float
    withoutPrepaymentSeries: List[CumulativeTotal]
    withPrepaymentSeries: List[CumulativeTotal]

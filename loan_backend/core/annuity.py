"""Annuity payment and amortization schedule calculations."""

from __future__ import annotations

import logging
from typing import List

from loan_backend.models import PERIODS_PER_YEAR, ScheduleEntry

logger = logging.getLogger(__name__)


def periodic_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate (e.g. 4.2) to a per-period fraction."""
    return annual_rate_percent / 100 / PERIODS_PER_YEAR


def compute_payment(principal: float, term_periods: int, annual_rate_percent: float) -> float:
    """Return the fixed periodic payment that amortizes ``principal``.

    Returns 0.0 when the inputs do not describe a loan (non-positive principal
    or term, negative rate); callers treat that as "no valid payment".
    """
    if term_periods <= 0 or annual_rate_percent < 0 or principal <= 0:
        return 0.0
    r = periodic_rate(annual_rate_percent)
    if r == 0:
        return principal / term_periods
    return principal * r / (1 - (1 + r) ** -term_periods)


def build_entries(
    principal: float,
    payment: float,
    term_periods: int,
    rate: float,
    settle_last: bool = False,
) -> List[ScheduleEntry]:
    """Amortize ``principal`` at a fixed ``payment`` for ``term_periods`` months.

    With ``settle_last`` the final payment is cut down to exactly the balance
    left plus that month's interest.
    """
    schedule: List[ScheduleEntry] = []
    balance = principal

    for month in range(1, term_periods + 1):
        interest = balance * rate
        principal_part = payment - interest
        month_payment = payment
        if settle_last and month == term_periods:
            principal_part = balance
            month_payment = balance + interest

        schedule.append(
            ScheduleEntry(
                month=month,
                payment=round(month_payment, 2),
                interest=round(interest, 2),
                principal=round(principal_part, 2),
                remaining=round(max(balance, 0.0), 2),
            )
        )
        balance -= principal_part

    return schedule


def generate_schedule(
    principal: float, term_periods: int, annual_rate_percent: float
) -> List[ScheduleEntry]:
    """Full month-by-month annuity schedule; empty for invalid inputs."""
    payment = compute_payment(principal, term_periods, annual_rate_percent)
    if payment == 0:
        logger.debug(
            "no schedule for principal=%s term=%s apr=%s", principal, term_periods, annual_rate_percent
        )
        return []
    return build_entries(principal, payment, term_periods, periodic_rate(annual_rate_percent))

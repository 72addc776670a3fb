"""Compound growth of a recurring monthly contribution."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from loan_backend.core.annuity import periodic_rate
from loan_backend.core.errors import InvalidInputError
from loan_backend.models import PERIODS_PER_YEAR, InvestmentProjection, InvestmentSnapshot

logger = logging.getLogger(__name__)


def project_investment(
    initial_amount: float,
    periodic_contribution: float,
    annual_rate_percent: float,
    total_periods: int,
) -> InvestmentProjection:
    """
    Simulate month-by-month growth of an investment account.

    Order of operations (per month):
      1) Deposit the contribution.
      2) Apply the month's growth to the whole balance, new deposit included.

    The initial amount counts as invested money. Snapshots are rounded to whole
    units; the running balance keeps full precision.
    """
    if total_periods <= 0:
        raise InvalidInputError([f"periods must be positive, got {total_periods}"])

    r = periodic_rate(annual_rate_percent)
    balance = float(initial_amount)
    invested = float(initial_amount)

    snapshots: List[InvestmentSnapshot] = []
    for period in range(1, total_periods + 1):
        balance += periodic_contribution
        invested += periodic_contribution
        balance *= 1 + r
        if not math.isfinite(balance):
            raise InvalidInputError([f"balance overflows at period {period}, rate {annual_rate_percent}% is too high"])

        snapshots.append(
            InvestmentSnapshot(
                period=period,
                year=math.ceil(period / PERIODS_PER_YEAR),
                balance=round(balance),
                totalInvested=round(invested),
                totalGains=round(balance - invested),
            )
        )

    return_percent: Optional[float] = None
    if invested:
        return_percent = (balance / invested - 1) * 100
    else:
        logger.debug("nothing invested over %d periods, return undefined", total_periods)

    return InvestmentProjection(
        finalBalance=balance,
        totalInvested=invested,
        totalGains=balance - invested,
        totalReturnPercent=return_percent,
        perPeriod=snapshots,
        yearly=[s for s in snapshots if s.period % PERIODS_PER_YEAR == 0],
    )

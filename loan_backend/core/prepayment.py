"""Prepayment re-amortization and cumulative prepayment projection.

A prepayment keeps the monthly payment fixed and shortens the term. The
re-amortizer works on the ``remaining`` (before-payment) balance of the first
entry it is given, so the projector feeds it the tail of the schedule right
after paying the head entry.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

from loan_backend.core.annuity import build_entries, periodic_rate
from loan_backend.core.errors import InfeasiblePrepaymentError
from loan_backend.models import CumulativeTotal, ScheduleEntry

logger = logging.getLogger(__name__)

# keeps float noise such as 120.0000000001 from adding a phantom month
_TERM_EPS = 1e-9


def solve_term(principal: float, payment: float, annual_rate_percent: float) -> int:
    """Number of months a fixed ``payment`` needs to amortize ``principal``."""
    if payment <= 0:
        raise InfeasiblePrepaymentError(principal, payment)

    r = periodic_rate(annual_rate_percent)
    if r == 0:
        return max(1, math.ceil(principal / payment - _TERM_EPS))

    coverage = principal * r / payment
    if coverage >= 1:
        # interest alone eats the whole payment
        raise InfeasiblePrepaymentError(principal, payment)
    periods = -math.log(1 - coverage) / math.log(1 + r)
    return max(1, math.ceil(periods - _TERM_EPS))


def apply_prepayment(
    schedule: Sequence[ScheduleEntry], extra_amount: float, annual_rate_percent: float
) -> List[ScheduleEntry]:
    """Apply ``extra_amount`` to the balance at the start of ``schedule``.

    Returns the shortened schedule at the same payment, an empty list when the
    prepayment clears the loan, and the schedule unchanged when there is
    nothing to prepay.
    """
    if not schedule or extra_amount <= 0:
        return list(schedule)

    head = schedule[0]
    reduced = head.remaining - extra_amount
    if reduced <= 0:
        logger.debug("prepayment of %s pays off balance %s", extra_amount, head.remaining)
        return []

    new_term = solve_term(reduced, head.payment, annual_rate_percent)
    logger.debug("balance %.2f re-amortized over %d months", reduced, new_term)
    return build_entries(
        reduced,
        head.payment,
        new_term,
        periodic_rate(annual_rate_percent),
        settle_last=True,
    )


def project_with_prepayment(
    schedule: Sequence[ScheduleEntry], extra_amount: float, annual_rate_percent: float
) -> List[CumulativeTotal]:
    """Running totals, one per month, while prepaying ``extra_amount`` monthly.

    With ``extra_amount == 0`` this is a plain accumulation over ``schedule``.
    """
    if extra_amount < 0:
        return []

    payments = prepayments = interest = 0.0
    months = 0
    totals: List[CumulativeTotal] = []
    current = list(schedule)

    while current:
        head, rest = current[0], current[1:]
        # the full extra is charged every month, payoff month included
        payments += head.payment + extra_amount
        prepayments += extra_amount
        interest += head.interest
        months += 1
        totals.append(
            CumulativeTotal(
                payments=payments,
                prepayments=prepayments,
                interest=interest,
                months=months,
            )
        )

        current = apply_prepayment(rest, extra_amount, annual_rate_percent)

    return totals

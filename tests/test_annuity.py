from __future__ import annotations

from math import isclose

import pytest

from loan_backend.core.annuity import compute_payment, generate_schedule


def test_payment_matches_closed_form():
    r = 4.2 / 100 / 12
    expected = 111000 * r / (1 - (1 + r) ** -180)

    payment = compute_payment(111000, 180, 4.2)

    assert isclose(payment, expected, rel_tol=1e-12)
    assert 830.0 < payment < 836.0


def test_zero_rate_is_straight_line():
    assert compute_payment(100000, 12, 0) == 100000 / 12
    assert round(compute_payment(100000, 12, 0), 2) == 8333.33


@pytest.mark.parametrize(
    "principal, term, apr",
    [(0, 12, 5.0), (-1000, 12, 5.0), (1000, 0, 5.0), (1000, -3, 5.0), (1000, 12, -0.5)],
)
def test_invalid_inputs_return_zero_sentinel(principal, term, apr):
    assert compute_payment(principal, term, apr) == 0
    assert generate_schedule(principal, term, apr) == []


def test_zero_rate_schedule_has_no_interest():
    schedule = generate_schedule(100000, 12, 0)

    assert len(schedule) == 12
    assert all(entry.interest == 0 for entry in schedule)
    assert all(entry.payment == 8333.33 for entry in schedule)


def test_schedule_length_and_payoff():
    """
    Every month is present and the balance left after the final payment is zero.
    """
    schedule = generate_schedule(111000, 180, 4.2)

    assert len(schedule) == 180
    assert [entry.month for entry in schedule] == list(range(1, 181))
    last = schedule[-1]
    assert abs(last.remaining - last.principal) <= 0.01


def test_remaining_is_balance_before_payment():
    schedule = generate_schedule(111000, 180, 4.2)

    assert schedule[0].remaining == 111000
    for previous, current in zip(schedule, schedule[1:]):
        assert isclose(current.remaining, previous.remaining - previous.principal, abs_tol=0.02)
        assert current.remaining < previous.remaining


def test_principal_components_sum_to_loan():
    schedule = generate_schedule(250000, 360, 6.5)

    assert isclose(sum(entry.principal for entry in schedule), 250000, abs_tol=0.5)


def test_payment_splits_into_interest_and_principal():
    for entry in generate_schedule(50000, 60, 7.5):
        assert isclose(entry.payment, entry.interest + entry.principal, abs_tol=0.011)

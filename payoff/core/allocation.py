"""Spread one extra-payment budget across several loans.

Loans are ranked by the return of paying them down early. Small budgets, or
a top loan with no close competitor, go entirely to the best loan; otherwise
the budget is split across every loan whose return is within a band of the
best one, in proportion to that return.
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Union

from pydantic import BaseModel

from payoff.core.amortization import payment_future_value

logger = logging.getLogger(__name__)

# Budgets at or below this go to a single loan.
SMALL_BUDGET_THRESHOLD = 100.0
# A loan contends for the budget when its ROI exceeds topROI * CONTENTION_BAND.
CONTENTION_BAND = 0.85
# Payment used to rank loans by return.
REFERENCE_TEST_PAYMENT = 1000.0

LoanId = Union[int, str]


class MortgageOptimization(BaseModel):
    id: LoanId
    name: str = ""
    interestRate: float
    yearsRemaining: float
    futureValue: float
    returnOnInvestment: float


class Allocation(BaseModel):
    mortgageId: LoanId
    amount: float
    futureValue: float
    roi: float


def payment_roi(amount: float, future_value: float) -> float:
    """Percentage gain of ``future_value`` over ``amount``."""
    if amount <= 0:
        return 0.0
    return (future_value - amount) / amount * 100


def reference_optimization(
    id: LoanId,
    interest_rate: float,
    years_remaining: float,
    name: str = "",
    test_payment: float = REFERENCE_TEST_PAYMENT,
) -> MortgageOptimization:
    """Rank data for a loan, measured on a ``test_payment`` paid today."""
    future_value = payment_future_value(test_payment, interest_rate, years_remaining)
    return MortgageOptimization(
        id=id,
        name=name,
        interestRate=interest_rate,
        yearsRemaining=years_remaining,
        futureValue=future_value,
        returnOnInvestment=payment_roi(test_payment, future_value),
    )


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def _allocate(loan: MortgageOptimization, amount: float) -> Allocation:
    if amount == 0:
        return Allocation(mortgageId=loan.id, amount=0.0, futureValue=0.0, roi=0.0)
    future_value = payment_future_value(amount, loan.interestRate, loan.yearsRemaining)
    return Allocation(
        mortgageId=loan.id,
        amount=amount,
        futureValue=future_value,
        roi=payment_roi(amount, future_value),
    )


def optimal_payment_distribution(
    loans: Sequence[MortgageOptimization],
    extra_payment: float,
    small_budget_threshold: float = SMALL_BUDGET_THRESHOLD,
    contention_band: float = CONTENTION_BAND,
) -> List[Allocation]:
    """Split ``extra_payment`` across ``loans``.

    Returns one allocation per loan, best return first. Amounts always sum
    to ``extra_payment``; an empty list is returned when there are no loans
    or nothing to allocate.
    """
    if not loans or extra_payment <= 0:
        return []

    # sorted() is stable, so equal ROIs keep their input order
    ranked = sorted(loans, key=lambda loan: loan.returnOnInvestment, reverse=True)
    top = ranked[0]

    amounts = [0.0] * len(ranked)
    if len(ranked) == 1 or extra_payment <= small_budget_threshold:
        logger.debug("allocating %s to loan %s only", extra_payment, top.id)
        amounts[0] = extra_payment
        return [_allocate(loan, amount) for loan, amount in zip(ranked, amounts)]

    threshold = top.returnOnInvestment * contention_band
    contending = [0] + [
        index
        for index, loan in enumerate(ranked[1:], start=1)
        if loan.returnOnInvestment > threshold
    ]

    if len(contending) == 1:
        amounts[0] = extra_payment
        return [_allocate(loan, amount) for loan, amount in zip(ranked, amounts)]

    roi_total = sum(ranked[index].returnOnInvestment for index in contending)
    for index in contending:
        share = extra_payment * ranked[index].returnOnInvestment / roi_total
        amounts[index] = _round_half_up(share)

    # Rounding leftovers go to the best loan. An overshoot is taken back from
    # the best loan first, then down the ranking, so no amount goes negative.
    difference = extra_payment - sum(amounts)
    if difference > 0:
        amounts[0] += difference
    elif difference < 0:
        for index in contending:
            taken = min(amounts[index], -difference)
            amounts[index] -= taken
            difference += taken
            if difference >= 0:
                break

    return [_allocate(loan, amount) for loan, amount in zip(ranked, amounts)]

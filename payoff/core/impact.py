"""Savings summaries comparing a payment strategy with the standard schedule."""

from __future__ import annotations

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel

from payoff.core.amortization import (
    PaymentStrategy,
    amortization_schedule,
    amortization_with_lump_sum,
    schedule_for_strategy,
    total_interest,
)


class StrategyImpact(BaseModel):
    originalYears: int
    newYears: int
    yearsSaved: int
    originalTotalInterest: float
    newTotalInterest: float
    interestSaved: float
    payoffDate: Optional[date] = None


class LumpSumValue(BaseModel):
    interestSaved: float
    timeYearsSaved: int
    returnOnInvestment: float
    totalSavings: float


def strategy_impact(
    principal: float,
    annual_rate: float,
    term_years: int,
    strategy: PaymentStrategy,
    amount: float = 0.0,
    start_date: Optional[date] = None,
) -> StrategyImpact:
    original = amortization_schedule(principal, annual_rate, term_years)
    updated = schedule_for_strategy(strategy, principal, annual_rate, term_years, amount)

    original_interest = total_interest(original)
    new_interest = total_interest(updated)

    return StrategyImpact(
        originalYears=len(original),
        newYears=len(updated),
        yearsSaved=len(original) - len(updated),
        originalTotalInterest=original_interest,
        newTotalInterest=new_interest,
        interestSaved=original_interest - new_interest,
        payoffDate=start_date + relativedelta(years=len(updated)) if start_date else None,
    )


def lump_sum_value(principal: float, annual_rate: float, term_years: int, lump_sum: float) -> LumpSumValue:
    """What a one-time principal payment buys: interest and years saved, and its return."""
    original = amortization_schedule(principal, annual_rate, term_years)
    updated = amortization_with_lump_sum(principal, annual_rate, term_years, lump_sum)

    interest_saved = total_interest(original) - total_interest(updated)
    roi = interest_saved / lump_sum * 100 if lump_sum > 0 else 0.0

    return LumpSumValue(
        interestSaved=interest_saved,
        timeYearsSaved=len(original) - len(updated),
        returnOnInvestment=roi,
        totalSavings=lump_sum + interest_saved,
    )

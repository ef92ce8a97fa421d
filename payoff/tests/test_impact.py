from __future__ import annotations

from datetime import date
from math import isclose

from payoff.core.amortization import (
    PaymentStrategy,
    amortization_schedule,
    amortization_with_extra_payment,
    total_interest,
)
from payoff.core.impact import lump_sum_value, strategy_impact


def test_standard_strategy_saves_nothing():
    impact = strategy_impact(400000, 0.065, 30, PaymentStrategy.standard)

    assert impact.originalYears == impact.newYears == 30
    assert impact.yearsSaved == 0
    assert impact.interestSaved == 0
    assert impact.payoffDate is None


def test_extra_monthly_impact_matches_schedules():
    impact = strategy_impact(400000, 0.065, 30, PaymentStrategy.extra_monthly, 500, start_date=date(2024, 3, 1))

    standard = amortization_schedule(400000, 0.065, 30)
    accelerated = amortization_with_extra_payment(400000, 0.065, 30, 500)

    assert impact.newYears == len(accelerated)
    assert impact.yearsSaved == len(standard) - len(accelerated) > 0
    assert isclose(impact.interestSaved, total_interest(standard) - total_interest(accelerated))
    assert impact.interestSaved > 0
    assert impact.payoffDate == date(2024 + len(accelerated), 3, 1)


def test_bi_weekly_impact_saves_interest():
    impact = strategy_impact(300000, 0.055, 15, PaymentStrategy.bi_weekly)

    assert impact.interestSaved > 0
    assert impact.newTotalInterest < impact.originalTotalInterest


def test_payoff_date_from_leap_day_start():
    leap_start = date(2024, 2, 29)

    thirty_year = strategy_impact(400000, 0.065, 30, PaymentStrategy.standard, start_date=leap_start)
    four_year = strategy_impact(48000, 0, 4, PaymentStrategy.standard, start_date=leap_start)
    one_year = strategy_impact(12000, 0, 1, PaymentStrategy.standard, start_date=leap_start)

    assert thirty_year.payoffDate == date(2054, 2, 28)
    assert four_year.payoffDate == date(2028, 2, 29)
    assert one_year.payoffDate == date(2025, 2, 28)


def test_lump_sum_value_reports_return_on_payment():
    value = lump_sum_value(400000, 0.065, 30, 50000)

    assert value.interestSaved > 0
    assert value.timeYearsSaved == 0  # payment is re-derived over the original term
    assert isclose(value.returnOnInvestment, value.interestSaved / 50000 * 100)
    assert isclose(value.totalSavings, 50000 + value.interestSaved)


def test_lump_sum_covering_loan_saves_all_interest_and_time():
    value = lump_sum_value(100000, 0.05, 10, 100000)

    assert isclose(value.interestSaved, total_interest(amortization_schedule(100000, 0.05, 10)))
    assert value.timeYearsSaved == 9

"""Amortization engine.

Every schedule here is built from the same yearly roll: a balance is walked
through a fixed number of payment periods per year, each period charging
interest on the running balance and applying the rest of the payment to
principal. Results are aggregated into one ``YearlyAmortization`` per year.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel


PAYOFF_EPSILON = 0.01
MONTHS_PER_YEAR = 12
BI_WEEKLY_PERIODS_PER_YEAR = 26


class YearlyAmortization(BaseModel):
    year: int
    startingBalance: float
    endingBalance: float
    yearlyPrincipal: float
    yearlyInterest: float


class PaymentStrategy(str, Enum):
    standard = "standard"
    extra_monthly = "extra_monthly"
    lump_sum = "lump_sum"
    bi_weekly = "bi_weekly"
    annual_lump_sum = "annual_lump_sum"


def monthly_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Return the level monthly payment that retires ``principal`` over the term.

    Uses the standard annuity formula ``P * r * (1 + r)^n / ((1 + r)^n - 1)``
    with ``r = annual_rate / 12`` and ``n = term_years * 12``; a zero rate
    reduces to ``P / n``.
    """
    total_payments = term_years * MONTHS_PER_YEAR
    if total_payments <= 0:
        return 0.0
    if annual_rate == 0:
        return principal / total_payments

    rate = annual_rate / MONTHS_PER_YEAR
    factor = (1 + rate) ** total_payments
    return principal * rate * factor / (factor - 1)


def _apply_payment(balance: float, periodic_rate: float, payment: float) -> tuple[float, float, float]:
    """One payment period: (interest, principal_paid, new_balance).

    The principal portion is capped at the balance. A payment smaller than
    the accrued interest yields a negative principal portion and a growing
    balance; that case is left as-is.
    """
    interest = balance * periodic_rate
    principal_paid = min(payment - interest, balance)
    return interest, principal_paid, balance - principal_paid


def _roll_schedule(
    principal: float,
    annual_rate: float,
    term_years: int,
    payment: float,
    periods_per_year: int = MONTHS_PER_YEAR,
    year_end_extra: float = 0.0,
) -> List[YearlyAmortization]:
    periodic_rate = annual_rate / periods_per_year
    schedule: List[YearlyAmortization] = []

    balance = principal
    year = 1
    while balance > PAYOFF_EPSILON and year <= term_years:
        starting_balance = balance
        yearly_principal = 0.0
        yearly_interest = 0.0

        for _ in range(periods_per_year):
            if balance <= 0:
                break
            interest, principal_paid, balance = _apply_payment(balance, periodic_rate, payment)
            yearly_interest += interest
            yearly_principal += principal_paid

        # year-end lump sum, never more than what is still owed
        if balance > 0 and year_end_extra > 0:
            extra = min(year_end_extra, balance)
            yearly_principal += extra
            balance -= extra

        if balance <= PAYOFF_EPSILON:
            yearly_principal += balance
            balance = 0.0

        schedule.append(
            YearlyAmortization(
                year=year,
                startingBalance=starting_balance,
                endingBalance=balance,
                yearlyPrincipal=yearly_principal,
                yearlyInterest=yearly_interest,
            )
        )
        year += 1

    return schedule


def amortization_schedule(principal: float, annual_rate: float, term_years: int) -> List[YearlyAmortization]:
    """Yearly schedule for plain monthly payments."""
    payment = monthly_payment(principal, annual_rate, term_years)
    return _roll_schedule(principal, annual_rate, term_years, payment)


def amortization_with_extra_payment(
    principal: float,
    annual_rate: float,
    term_years: int,
    extra_monthly: float,
) -> List[YearlyAmortization]:
    """Yearly schedule when ``extra_monthly`` is added to every monthly payment."""
    payment = monthly_payment(principal, annual_rate, term_years) + extra_monthly
    return _roll_schedule(principal, annual_rate, term_years, payment)


def amortization_with_lump_sum(
    principal: float,
    annual_rate: float,
    term_years: int,
    lump_sum: float,
) -> List[YearlyAmortization]:
    """Yearly schedule after a one-time payment made before the first month.

    The monthly payment is re-derived from the reduced principal over the
    original term. The lump sum itself is reported as principal paid in
    year 1, so year 1 starts from the original principal.
    """
    adjusted_principal = max(0.0, principal - lump_sum)
    if adjusted_principal == 0:
        return [
            YearlyAmortization(
                year=1,
                startingBalance=principal,
                endingBalance=0.0,
                yearlyPrincipal=principal,
                yearlyInterest=0.0,
            )
        ]

    payment = monthly_payment(adjusted_principal, annual_rate, term_years)
    schedule = _roll_schedule(adjusted_principal, annual_rate, term_years, payment)
    if schedule:
        first = schedule[0]
        schedule[0] = first.model_copy(
            update={
                "startingBalance": principal,
                "yearlyPrincipal": first.yearlyPrincipal + (principal - adjusted_principal),
            }
        )
    return schedule


def amortization_with_bi_weekly(principal: float, annual_rate: float, term_years: int) -> List[YearlyAmortization]:
    """Yearly schedule for 26 half-payments a year.

    Each period pays half the standard monthly payment and accrues interest
    at ``annual_rate / 26``. This is a fixed-period approximation, not
    calendar-accurate two-week spacing.
    """
    payment = monthly_payment(principal, annual_rate, term_years) / 2
    return _roll_schedule(
        principal,
        annual_rate,
        term_years,
        payment,
        periods_per_year=BI_WEEKLY_PERIODS_PER_YEAR,
    )


def amortization_with_annual_lump_sum(
    principal: float,
    annual_rate: float,
    term_years: int,
    annual_lump_sum: float,
) -> List[YearlyAmortization]:
    """Yearly schedule with an extra payment applied after every 12th month."""
    payment = monthly_payment(principal, annual_rate, term_years)
    return _roll_schedule(principal, annual_rate, term_years, payment, year_end_extra=annual_lump_sum)


def payment_future_value(additional_payment: float, annual_rate: float, years_remaining: float) -> float:
    """Value of paying ``additional_payment`` today, compounded annually at the loan rate.

    An approximation of the interest the amount would otherwise accrue over
    the remaining term; monthly compounding is intentionally not used.
    """
    return additional_payment * (1 + annual_rate) ** years_remaining


def schedule_for_strategy(
    strategy: PaymentStrategy,
    principal: float,
    annual_rate: float,
    term_years: int,
    amount: float = 0.0,
) -> List[YearlyAmortization]:
    strategy = PaymentStrategy(strategy)
    if strategy is PaymentStrategy.extra_monthly:
        return amortization_with_extra_payment(principal, annual_rate, term_years, amount)
    if strategy is PaymentStrategy.lump_sum:
        return amortization_with_lump_sum(principal, annual_rate, term_years, amount)
    if strategy is PaymentStrategy.bi_weekly:
        return amortization_with_bi_weekly(principal, annual_rate, term_years)
    if strategy is PaymentStrategy.annual_lump_sum:
        return amortization_with_annual_lump_sum(principal, annual_rate, term_years, amount)
    return amortization_schedule(principal, annual_rate, term_years)


def total_interest(schedule: List[YearlyAmortization]) -> float:
    return sum(row.yearlyInterest for row in schedule)


def total_principal(schedule: List[YearlyAmortization]) -> float:
    return sum(row.yearlyPrincipal for row in schedule)

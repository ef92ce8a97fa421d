"""Request and response contracts for the calculation endpoints."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from payoff.core.allocation import Allocation, LoanId
from payoff.core.amortization import PaymentStrategy, YearlyAmortization


class LoanRequest(BaseModel):
    """Loan parameters as stored for a mortgage (rate as a decimal fraction)."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., gt=0, description="Outstanding balance.")
    annualRate: float = Field(
        ...,
        ge=0,
        le=1,
        description="Annual rate expressed as a decimal (e.g. 0.065 for 6.5%).",
    )
    termYears: int = Field(..., gt=0, le=50)


class ScheduleRequest(LoanRequest):
    strategy: PaymentStrategy = PaymentStrategy.standard
    amount: float = Field(
        0.0,
        ge=0,
        description="Extra monthly payment, lump sum or annual lump sum, depending on strategy.",
    )


class ImpactRequest(ScheduleRequest):
    startDate: Optional[date] = None


class LumpSumRequest(LoanRequest):
    lumpSum: float = Field(..., gt=0)


class FutureValueRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    additionalPayment: float = Field(..., ge=0)
    annualRate: float = Field(..., ge=0, le=1)
    yearsRemaining: float = Field(..., ge=0, le=50)


class AllocationLoan(BaseModel):
    """A loan competing for the extra payment.

    ``futureValue``/``returnOnInvestment`` may be omitted, in which case they
    are measured on the reference test payment.
    """

    model_config = ConfigDict(extra="forbid")

    id: LoanId
    name: str = ""
    interestRate: float = Field(..., ge=0, le=1)
    yearsRemaining: float = Field(..., gt=0, le=50)
    futureValue: Optional[float] = None
    returnOnInvestment: Optional[float] = None


class AllocationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    loans: List[AllocationLoan] = Field(default_factory=list)
    extraPayment: float = Field(..., ge=0)


class MonthlyPaymentResponse(BaseModel):
    monthlyPayment: float


class ScheduleResponse(BaseModel):
    monthlyPayment: float
    schedule: List[YearlyAmortization]
    totalInterest: float
    totalPrincipal: float


class FutureValueResponse(BaseModel):
    futureValue: float
    roi: float


class AllocationResponse(BaseModel):
    allocations: List[Allocation]

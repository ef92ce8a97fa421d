"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from payoff.core.allocation import (
    MortgageOptimization,
    optimal_payment_distribution,
    payment_roi,
    reference_optimization,
)
from payoff.core.amortization import (
    PaymentStrategy,
    monthly_payment,
    payment_future_value,
    schedule_for_strategy,
    total_interest,
    total_principal,
)
from payoff.core.health import get_health_status
from payoff.core.impact import lump_sum_value, strategy_impact
from payoff.schemas.health import HealthResponse
from payoff.schemas.mortgage import (
    AllocationLoan,
    AllocationRequest,
    AllocationResponse,
    FutureValueRequest,
    FutureValueResponse,
    ImpactRequest,
    LoanRequest,
    LumpSumRequest,
    MonthlyPaymentResponse,
    ScheduleRequest,
    ScheduleResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(**get_health_status(current_app.config["APP_NAME"]))
    return jsonify(response.model_dump())


@api_bp.post("/calc/monthly-payment")
def calc_monthly_payment() -> Any:
    loan = LoanRequest.model_validate(_payload())
    payment = monthly_payment(loan.principal, loan.annualRate, loan.termYears)
    return jsonify(MonthlyPaymentResponse(monthlyPayment=payment).model_dump())


@api_bp.post("/calc/schedule")
def calc_schedule() -> Any:
    """Yearly amortization for the requested payment strategy."""
    payload = ScheduleRequest.model_validate(_payload())
    logger.debug(
        "schedule %s for %.2f at %.4f over %d years",
        payload.strategy.value,
        payload.principal,
        payload.annualRate,
        payload.termYears,
    )
    schedule = schedule_for_strategy(
        payload.strategy,
        payload.principal,
        payload.annualRate,
        payload.termYears,
        payload.amount,
    )
    payment = monthly_payment(payload.principal, payload.annualRate, payload.termYears)
    if payload.strategy is PaymentStrategy.extra_monthly:
        payment += payload.amount

    response = ScheduleResponse(
        monthlyPayment=payment,
        schedule=schedule,
        totalInterest=total_interest(schedule),
        totalPrincipal=total_principal(schedule),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/impact")
def calc_impact() -> Any:
    """Interest and years saved by a strategy versus standard payments."""
    payload = ImpactRequest.model_validate(_payload())
    impact = strategy_impact(
        payload.principal,
        payload.annualRate,
        payload.termYears,
        payload.strategy,
        payload.amount,
        start_date=payload.startDate,
    )
    return jsonify(impact.model_dump(mode="json"))


@api_bp.post("/calc/lump-sum-value")
def calc_lump_sum_value() -> Any:
    payload = LumpSumRequest.model_validate(_payload())
    value = lump_sum_value(payload.principal, payload.annualRate, payload.termYears, payload.lumpSum)
    return jsonify(value.model_dump())


@api_bp.post("/calc/future-value")
def calc_future_value() -> Any:
    payload = FutureValueRequest.model_validate(_payload())
    future_value = payment_future_value(payload.additionalPayment, payload.annualRate, payload.yearsRemaining)
    response = FutureValueResponse(
        futureValue=future_value,
        roi=payment_roi(payload.additionalPayment, future_value),
    )
    return jsonify(response.model_dump())


def _to_optimization(loan: AllocationLoan) -> MortgageOptimization:
    if loan.futureValue is not None and loan.returnOnInvestment is not None:
        return MortgageOptimization(**loan.model_dump())
    return reference_optimization(
        loan.id,
        loan.interestRate,
        loan.yearsRemaining,
        name=loan.name,
        test_payment=current_app.config["REFERENCE_TEST_PAYMENT"],
    )


@api_bp.post("/calc/allocation")
def calc_allocation() -> Any:
    """Split one extra payment across several mortgages."""
    payload = AllocationRequest.model_validate(_payload())
    loans = [_to_optimization(loan) for loan in payload.loans]
    logger.debug("allocating %.2f across %d loan(s)", payload.extraPayment, len(loans))

    allocations = optimal_payment_distribution(
        loans,
        payload.extraPayment,
        small_budget_threshold=current_app.config["ALLOCATION_SMALL_BUDGET_THRESHOLD"],
        contention_band=current_app.config["ALLOCATION_CONTENTION_BAND"],
    )
    return jsonify(AllocationResponse(allocations=allocations).model_dump())

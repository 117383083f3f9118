"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from contribution_planner.config import PlannerSettings
from contribution_planner.core.contributions import (
    fixed_to_percentage,
    max_contribution_amount,
    percentage_to_fixed,
    resolve_contributions,
    validate_contribution,
)
from contribution_planner.core.planner import build_plan
from contribution_planner.core.ytd import ytd_summary
from contribution_planner.exceptions import PlannerError
from contribution_planner.schemas.contribution import ContributionKind
from contribution_planner.schemas.planner import (
    ContributionsRequest,
    ContributionsResponse,
    PlannerRequest,
    YTDActualsInput,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> PlannerSettings:
    return current_app.config["PLANNER_SETTINGS"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected request to %s: %d validation errors", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(PlannerError)
def _handle_planner_error(exc: PlannerError):
    logger.warning("calculation rejected on %s: %s", request.path, exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify({"status": "healthy", "environment": _settings().environment})


@api_bp.post("/calc/contributions")
def contributions() -> Any:
    """Annual employee/employer figures for one contribution setting."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ContributionsRequest.model_validate(raw_payload)

    breakdown = resolve_contributions(payload.contribution, payload.salary, payload.match_policy)
    if payload.contribution.kind == ContributionKind.PERCENTAGE:
        percentage = payload.contribution.amount
        fixed = percentage_to_fixed(percentage, payload.salary)
    else:
        fixed = payload.contribution.amount
        percentage = fixed_to_percentage(fixed, payload.salary)

    response = ContributionsResponse(
        contributions=breakdown,
        percentage=percentage,
        fixed_per_paycheck=fixed,
    )
    if payload.limits is not None:
        response = response.model_copy(
            update={
                "validation": validate_contribution(breakdown.employee, payload.age, payload.limits),
                "max_amount": max_contribution_amount(
                    payload.contribution.kind, payload.salary, payload.age, payload.limits
                ),
            }
        )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calc/ytd")
def ytd() -> Any:
    """Year-to-date totals and monthly averages from payroll actuals."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    actuals = YTDActualsInput.model_validate(raw_payload)
    return jsonify(ytd_summary(actuals).model_dump(mode="json"))


@api_bp.post("/calc/plan")
def plan() -> Any:
    """Every figure the planner page renders, with optional before/after comparison."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = PlannerRequest.model_validate(raw_payload)
    defaults = _settings().projection

    result = build_plan(
        payload,
        annual_return_rate=(
            payload.annual_return_rate
            if payload.annual_return_rate is not None
            else defaults.annual_return_rate
        ),
        horizon_months=(
            payload.horizon_months
            if payload.horizon_months is not None
            else defaults.horizon_months
        ),
        max_chart_points=(
            payload.max_chart_points
            if payload.max_chart_points is not None
            else defaults.max_chart_points
        ),
    )
    return jsonify(result.model_dump(mode="json"))

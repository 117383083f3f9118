"""End-to-end recompute for one planner page state.

resolve contributions -> YTD -> projections -> comparison -> downsampling.
Every rate, horizon and point budget is passed in by the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from contribution_planner.core.comparison import compare_trajectories, contribution_impact
from contribution_planner.core.contributions import (
    max_contribution_amount,
    resolve_contributions,
    validate_contribution,
)
from contribution_planner.core.downsample import downsample
from contribution_planner.core.projection import (
    project_max_catch_up,
    project_monthly,
    project_yearly,
    summarize_retirement,
)
from contribution_planner.core.ytd import project_year_end, ytd_summary
from contribution_planner.schemas.planner import (
    ContributionSettings,
    PlannerRequest,
    PlannerResponse,
    ScenarioProjection,
)

logger = logging.getLogger(__name__)


def project_scenario(
    request: PlannerRequest,
    settings: ContributionSettings,
    *,
    annual_return_rate: float,
    horizon_months: int,
) -> ScenarioProjection:
    """Full-resolution figures for one set of contribution settings."""
    profile = request.profile
    contributions = resolve_contributions(
        settings.contribution, profile.salary, settings.match_policy
    )

    monthly = project_monthly(
        current_balance=profile.current_balance,
        annual_employee=contributions.employee,
        annual_employer=contributions.employer,
        months_elapsed=request.ytd.months_elapsed,
        annual_return_rate=annual_return_rate,
        horizon_months=horizon_months,
        actuals=request.ytd,
    )
    yearly = project_yearly(
        current_balance=profile.current_balance,
        current_age=profile.age,
        retirement_age=profile.retirement_age,
        annual_employee=contributions.employee,
        annual_employer=contributions.employer,
        annual_return_rate=annual_return_rate,
    )
    catch_up = project_max_catch_up(
        current_balance=profile.current_balance,
        current_age=profile.age,
        retirement_age=profile.retirement_age,
        annual_employee=contributions.employee,
        annual_employer=contributions.employer,
        salary=profile.salary,
        policy=settings.match_policy,
        limits=request.limits,
        annual_return_rate=annual_return_rate,
    )

    return ScenarioProjection(
        contributions=contributions,
        validation=validate_contribution(contributions.employee, profile.age, request.limits),
        year_end=project_year_end(request.ytd, contributions),
        retirement=summarize_retirement(
            profile.current_balance,
            contributions.total,
            profile.age,
            profile.retirement_age,
            annual_return_rate,
        ),
        monthly=monthly,
        yearly=yearly,
        catch_up=catch_up,
    )


def _for_chart(scenario: ScenarioProjection, max_points: int) -> ScenarioProjection:
    return scenario.model_copy(
        update={
            "monthly": list(downsample(scenario.monthly, max_points)),
            "yearly": list(downsample(scenario.yearly, max_points)),
            "catch_up": list(downsample(scenario.catch_up, max_points)),
        }
    )


def build_plan(
    request: PlannerRequest,
    *,
    annual_return_rate: float,
    horizon_months: int,
    max_chart_points: int,
) -> PlannerResponse:
    """
    Recompute every figure the planner page shows.

    Trajectories are downsampled before comparing so per-point deltas line up
    with the rendered points; endpoints survive downsampling, so final deltas
    are unaffected.
    """
    current = _for_chart(
        project_scenario(
            request,
            request.settings,
            annual_return_rate=annual_return_rate,
            horizon_months=horizon_months,
        ),
        max_chart_points,
    )

    original: Optional[ScenarioProjection] = None
    monthly_comparison = yearly_comparison = impact = None
    if request.original is not None:
        original = _for_chart(
            project_scenario(
                request,
                request.original,
                annual_return_rate=annual_return_rate,
                horizon_months=horizon_months,
            ),
            max_chart_points,
        )
        monthly_comparison = compare_trajectories(original.monthly, current.monthly)
        yearly_comparison = compare_trajectories(original.yearly, current.yearly)
        impact = contribution_impact(
            request.profile.current_balance,
            original.contributions.total,
            current.contributions.total,
            request.profile.age,
            request.profile.retirement_age,
            annual_return_rate,
        )

    logger.debug(
        "plan built: %d monthly / %d yearly points, comparison=%s",
        len(current.monthly),
        len(current.yearly),
        request.original is not None,
    )

    return PlannerResponse(
        annual_return_rate=annual_return_rate,
        horizon_months=horizon_months,
        max_chart_points=max_chart_points,
        ytd=ytd_summary(request.ytd),
        max_contribution_amount=max_contribution_amount(
            request.settings.contribution.kind,
            request.profile.salary,
            request.profile.age,
            request.limits,
        ),
        current=current,
        original=original,
        monthly_comparison=monthly_comparison,
        yearly_comparison=yearly_comparison,
        impact=impact,
    )

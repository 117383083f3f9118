"""Before/after comparison of two trajectories."""

from __future__ import annotations

from typing import Sequence

from contribution_planner.core.projection import summarize_retirement
from contribution_planner.exceptions import MismatchedHorizonError
from contribution_planner.schemas.projection import (
    ComparisonResult,
    ContributionImpact,
    ProjectionPoint,
)


def percent_change(original: float, delta: float) -> float:
    if original == 0:
        return 0.0
    return delta / original * 100


def compare_trajectories(
    original: Sequence[ProjectionPoint], modified: Sequence[ProjectionPoint]
) -> ComparisonResult:
    """
    Per-point balance deltas (modified - original) plus the final delta.

    Both trajectories must come from the same horizon parameters. A zero
    final delta is reported as not an increase.
    """
    if len(original) != len(modified):
        raise MismatchedHorizonError(len(original), len(modified))

    deltas = [new.balance - old.balance for old, new in zip(original, modified)]
    if not deltas:
        return ComparisonResult(
            per_point_delta=[], final_delta=0.0, final_percent_change=0.0, is_increase=False
        )

    final_delta = deltas[-1]
    return ComparisonResult(
        per_point_delta=deltas,
        final_delta=final_delta,
        final_percent_change=percent_change(original[-1].balance, final_delta),
        is_increase=final_delta > 0,
    )


def contribution_impact(
    current_balance: float,
    current_annual_contribution: float,
    proposed_annual_contribution: float,
    current_age: int,
    retirement_age: int,
    annual_return_rate: float,
) -> ContributionImpact:
    """Retirement balance under the current and the proposed annual contribution."""
    current = summarize_retirement(
        current_balance, current_annual_contribution, current_age, retirement_age, annual_return_rate
    )
    proposed = summarize_retirement(
        current_balance, proposed_annual_contribution, current_age, retirement_age, annual_return_rate
    )

    difference = proposed.future_value - current.future_value
    return ContributionImpact(
        current=current,
        proposed=proposed,
        difference=difference,
        percentage_change=percent_change(current.future_value, difference),
    )

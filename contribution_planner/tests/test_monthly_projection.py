from __future__ import annotations

from math import isclose

import pytest

from contribution_planner.core.contributions import resolve_contributions
from contribution_planner.core.projection import project_monthly
from contribution_planner.exceptions import InvalidHorizonError
from contribution_planner.schemas.contribution import (
    ContributionKind,
    ContributionSpec,
    YTDActuals,
)


def run_monthly(spec, policy, actuals, *, rate=0.07, horizon=12, balance=45000.0, salary=65000):
    contributions = resolve_contributions(spec, salary, policy)
    return project_monthly(
        current_balance=balance,
        annual_employee=contributions.employee,
        annual_employer=contributions.employer,
        months_elapsed=actuals.months_elapsed,
        annual_return_rate=rate,
        horizon_months=horizon,
        actuals=actuals,
    )


def test_elapsed_months_reproduce_payroll_actuals(ten_percent, full_match_to_five, nine_months):
    points = run_monthly(ten_percent, full_match_to_five, nine_months)

    assert len(points) == 13
    assert [p.index for p in points] == list(range(13))

    today = points[9]
    assert isclose(today.cumulative_employee_contribution, 4875, abs_tol=0.01)
    assert isclose(today.cumulative_employer_contribution, 2437.50, abs_tol=0.01)
    # history ends at today's balance
    assert isclose(today.balance, 45000, abs_tol=0.01)
    assert not today.is_projected
    assert points[10].is_projected


def test_changed_setting_keeps_history_frozen(full_match_to_five, nine_months):
    """
    Dragging the slider from 10% to 20% or to a fixed paycheck amount must not
    rewrite January through September.
    """
    ten = ContributionSpec(kind=ContributionKind.PERCENTAGE, amount=10)
    twenty = ContributionSpec(kind=ContributionKind.PERCENTAGE, amount=20)
    fixed = ContributionSpec(kind=ContributionKind.FIXED, amount=40)

    baseline = run_monthly(ten, full_match_to_five, nine_months)
    for other in (twenty, fixed):
        changed = run_monthly(other, full_match_to_five, nine_months)
        assert changed[:10] == baseline[:10]
        assert changed[9].cumulative_employee_contribution == pytest.approx(4875, abs=0.01)
        assert changed[12].balance != baseline[12].balance


def test_future_months_use_new_rate(full_match_to_five, nine_months):
    twenty = ContributionSpec(kind=ContributionKind.PERCENTAGE, amount=20)

    points = run_monthly(twenty, full_match_to_five, nine_months, rate=0.0)

    # 13,000 employee / 3,250 employer a year at 20%
    assert isclose(points[12].cumulative_employee_contribution, 4875 + 13000 / 12 * 3)
    assert isclose(points[12].cumulative_employer_contribution, 2437.50 + 3250 / 12 * 3)
    assert isclose(points[12].balance, 45000 + (13000 + 3250) / 12 * 3)


def test_investment_growth_is_balance_less_opening_and_contributions(
    ten_percent, full_match_to_five, nine_months
):
    points = run_monthly(ten_percent, full_match_to_five, nine_months)

    opening = points[0].starting_balance
    assert points[0].balance == pytest.approx(opening)
    assert points[0].investment_growth == pytest.approx(0.0)
    for point in points:
        assert point.starting_balance == opening
        expected = point.balance - opening - point.cumulative_total_contribution
        assert point.investment_growth == pytest.approx(expected)


def test_zero_return_rate_has_no_growth(ten_percent, full_match_to_five, nine_months):
    points = run_monthly(ten_percent, full_match_to_five, nine_months, rate=0.0)

    # opening balance = 45,000 - 7,312.50 contributed so far
    assert points[0].balance == pytest.approx(45000 - 7312.50)
    for point in points:
        assert point.investment_growth == pytest.approx(0.0, abs=1e-6)


def test_no_elapsed_months_starts_from_current_balance(ten_percent, full_match_to_five):
    january = YTDActuals(months_elapsed=0, employee_contributed=0, employer_matched=0)

    points = run_monthly(ten_percent, full_match_to_five, january)

    assert points[0].balance == 45000
    assert points[0].starting_balance == 45000
    assert not points[0].is_projected
    assert all(p.is_projected for p in points[1:])


@pytest.mark.parametrize("rate", [0.0, 0.03, 0.07, 0.12])
def test_balance_is_monotonic_for_non_negative_rates(rate, ten_percent, full_match_to_five, nine_months):
    points = run_monthly(ten_percent, full_match_to_five, nine_months, rate=rate, horizon=36)
    balances = [p.balance for p in points]
    assert all(later >= earlier - 1e-9 for earlier, later in zip(balances, balances[1:]))


def test_zero_horizon_is_single_point(ten_percent, full_match_to_five, nine_months):
    points = run_monthly(ten_percent, full_match_to_five, nine_months, horizon=0)
    assert len(points) == 1
    assert points[0].index == 0


def test_invalid_horizons_are_rejected(ten_percent, full_match_to_five, nine_months):
    with pytest.raises(InvalidHorizonError):
        run_monthly(ten_percent, full_match_to_five, nine_months, horizon=-1)

    with pytest.raises(InvalidHorizonError):
        project_monthly(45000, 6500, 3250, 13, 0.07, 12, nine_months)

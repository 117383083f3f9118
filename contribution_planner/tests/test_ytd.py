from __future__ import annotations

from math import isclose

import pytest

from contribution_planner.core.contributions import resolve_contributions
from contribution_planner.core.ytd import project_year_end, ytd_summary
from contribution_planner.exceptions import InvalidHorizonError
from contribution_planner.schemas.contribution import (
    ContributionKind,
    ContributionSpec,
    YTDActuals,
)


def test_ytd_summary_passes_actuals_through(nine_months):
    summary = ytd_summary(nine_months)

    assert summary.employee == 4875
    assert summary.employer == 2437.50
    assert isclose(summary.total, 7312.50)
    assert summary.months_remaining == 3
    assert isclose(summary.progress_percent, 75.0)
    assert isclose(summary.monthly_average_employee, 541.6666666, rel_tol=1e-6)
    assert isclose(summary.monthly_average_total, 812.5)


def test_zero_months_short_circuits_averages():
    summary = ytd_summary(YTDActuals(months_elapsed=0, employee_contributed=0, employer_matched=0))

    assert summary.monthly_average_employee == 0.0
    assert summary.monthly_average_employer == 0.0
    assert summary.monthly_average_total == 0.0
    assert summary.months_remaining == 12


@pytest.mark.parametrize("months", [-1, 13])
def test_months_outside_calendar_year_are_rejected(months):
    with pytest.raises(InvalidHorizonError):
        ytd_summary(YTDActuals(months_elapsed=months, employee_contributed=0, employer_matched=0))


def test_year_end_keeps_actuals_and_applies_new_rate_to_remaining_months(
    nine_months, full_match_to_five
):
    """
    Raising the deferral to 20% leaves the first nine months untouched and
    projects three months at the new rate.
    """
    twenty = ContributionSpec(kind=ContributionKind.PERCENTAGE, amount=20)
    contributions = resolve_contributions(twenty, 65000, full_match_to_five)

    year_end = project_year_end(nine_months, contributions)

    assert isclose(year_end.employee, 4875 + 13000 / 12 * 3)
    assert isclose(year_end.employer, 2437.50 + 3250 / 12 * 3)
    assert isclose(year_end.total, year_end.employee + year_end.employer)

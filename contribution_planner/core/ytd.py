"""Year-to-date figures.

Elapsed-month totals come from payroll and are authoritative. Nothing in this
module looks at the current contribution settings when reporting them.
"""

from __future__ import annotations

from contribution_planner.exceptions import InvalidHorizonError
from contribution_planner.schemas.contribution import (
    ContributionBreakdown,
    YTDActuals,
    YTDSummary,
)

MONTHS_PER_YEAR = 12


def check_months_elapsed(months_elapsed: int) -> None:
    if not 0 <= months_elapsed <= MONTHS_PER_YEAR:
        raise InvalidHorizonError(
            "months_elapsed", months_elapsed, f"must be within 0..{MONTHS_PER_YEAR}"
        )


def actual_monthly_rates(actuals: YTDActuals, months_elapsed: int) -> tuple[float, float]:
    """Average monthly employee and employer contribution so far this year."""
    if months_elapsed == 0:
        return 0.0, 0.0
    return (
        actuals.employee_contributed / months_elapsed,
        actuals.employer_matched / months_elapsed,
    )


def ytd_summary(actuals: YTDActuals) -> YTDSummary:
    check_months_elapsed(actuals.months_elapsed)

    employee = actuals.employee_contributed
    employer = actuals.employer_matched
    monthly_employee, monthly_employer = actual_monthly_rates(actuals, actuals.months_elapsed)

    return YTDSummary(
        employee=employee,
        employer=employer,
        total=employee + employer,
        months_elapsed=actuals.months_elapsed,
        months_remaining=MONTHS_PER_YEAR - actuals.months_elapsed,
        progress_percent=actuals.months_elapsed / MONTHS_PER_YEAR * 100,
        monthly_average_employee=monthly_employee,
        monthly_average_employer=monthly_employer,
        monthly_average_total=monthly_employee + monthly_employer,
    )


def project_year_end(
    actuals: YTDActuals, contributions: ContributionBreakdown
) -> ContributionBreakdown:
    """Actual YTD totals plus the new monthly rate for the months left this year."""
    check_months_elapsed(actuals.months_elapsed)
    months_remaining = MONTHS_PER_YEAR - actuals.months_elapsed

    employee = actuals.employee_contributed + contributions.employee / MONTHS_PER_YEAR * months_remaining
    employer = actuals.employer_matched + contributions.employer / MONTHS_PER_YEAR * months_remaining
    return ContributionBreakdown(employee=employee, employer=employer, total=employee + employer)

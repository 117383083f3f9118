from __future__ import annotations

import logging
from typing import List, Optional

from contribution_planner.core.contributions import calculate_employer_match
from contribution_planner.core.ytd import MONTHS_PER_YEAR, actual_monthly_rates, check_months_elapsed
from contribution_planner.exceptions import InvalidHorizonError
from contribution_planner.schemas.contribution import (
    ContributionLimits,
    EmployerMatchPolicy,
    YTDActuals,
)
from contribution_planner.schemas.projection import ProjectionPoint, RetirementSummary

logger = logging.getLogger(__name__)


def annuity_factor(rate: float, periods: int) -> float:
    """
    Future value of 1 paid at the end of each of ``periods`` periods:
    ((1 + r)^n - 1) / r, which tends to n as r -> 0.
    """
    if periods <= 0:
        return 0.0
    if rate == 0:
        return float(periods)
    return ((1 + rate) ** periods - 1) / rate


def start_of_year_balance(
    current_balance: float, monthly_contribution: float, monthly_rate: float, months_elapsed: int
) -> float:
    """
    Invert FV = PV * (1 + r)^m + PMT * annuity(r, m) for PV.

    We only know today's balance; this recovers the balance that existed
    before this year's contributions and growth were applied.
    """
    if months_elapsed == 0:
        return current_balance
    growth = (1 + monthly_rate) ** months_elapsed
    contributed = monthly_contribution * annuity_factor(monthly_rate, months_elapsed)
    return (current_balance - contributed) / growth


def _point(
    index: int,
    employee: float,
    employer: float,
    balance: float,
    starting_balance: float,
    is_projected: bool,
    age: Optional[int] = None,
) -> ProjectionPoint:
    return ProjectionPoint(
        index=index,
        cumulative_employee_contribution=employee,
        cumulative_employer_contribution=employer,
        balance=balance,
        investment_growth=balance - starting_balance - (employee + employer),
        starting_balance=starting_balance,
        is_projected=is_projected,
        age=age,
    )


def project_monthly(
    current_balance: float,
    annual_employee: float,
    annual_employer: float,
    months_elapsed: int,
    annual_return_rate: float,
    horizon_months: int,
    actuals: YTDActuals,
) -> List[ProjectionPoint]:
    """
    Month-by-month trajectory from January through ``horizon_months``.

    Months 0..months_elapsed are history: they are rebuilt from the payroll
    actuals and a back-solved start-of-year balance, so editing the
    contribution settings can never change them. Later months grow today's
    balance and add the new monthly contribution (annual_employee / 12,
    annual_employer / 12).
    """
    check_months_elapsed(months_elapsed)
    if horizon_months < 0:
        raise InvalidHorizonError("horizon_months", horizon_months, "must not be negative")

    r = annual_return_rate / MONTHS_PER_YEAR

    future_employee = annual_employee / MONTHS_PER_YEAR
    future_employer = annual_employer / MONTHS_PER_YEAR

    actual_employee, actual_employer = actual_monthly_rates(actuals, months_elapsed)
    actual_total = actual_employee + actual_employer

    opening = start_of_year_balance(current_balance, actual_total, r, months_elapsed)

    points: List[ProjectionPoint] = []
    for month in range(horizon_months + 1):
        if month <= months_elapsed:
            # history: actual contribution rate only
            employee = actual_employee * month
            employer = actual_employer * month
            balance = opening * (1 + r) ** month + actual_total * annuity_factor(r, month)
        else:
            # future: today's balance plus the new settings
            months_ahead = month - months_elapsed
            employee = actual_employee * months_elapsed + future_employee * months_ahead
            employer = actual_employer * months_elapsed + future_employer * months_ahead
            balance = (
                current_balance * (1 + r) ** months_ahead
                + (future_employee + future_employer) * annuity_factor(r, months_ahead)
            )

        points.append(
            _point(
                index=month,
                employee=employee,
                employer=employer,
                balance=balance,
                starting_balance=opening,
                is_projected=month > months_elapsed,
            )
        )

    logger.debug(
        "monthly projection: %d points, opening balance %.2f", len(points), opening
    )
    return points


def project_yearly(
    current_balance: float,
    current_age: int,
    retirement_age: int,
    annual_employee: float,
    annual_employer: float,
    annual_return_rate: float,
) -> List[ProjectionPoint]:
    """
    Year-by-year trajectory from today (index 0) to retirement.

    Order of operations (per year):
      1) Grow the previous balance by annual_return_rate.
      2) Add this year's employee + employer contribution (not grown this year).
    """
    horizon_years = max(0, retirement_age - current_age)

    balance = float(current_balance)
    cumulative_employee = 0.0
    cumulative_employer = 0.0

    points = [
        _point(
            index=0,
            employee=0.0,
            employer=0.0,
            balance=balance,
            starting_balance=current_balance,
            is_projected=False,
            age=current_age,
        )
    ]
    for year in range(1, horizon_years + 1):
        cumulative_employee += annual_employee
        cumulative_employer += annual_employer
        balance = balance * (1 + annual_return_rate) + (annual_employee + annual_employer)

        points.append(
            _point(
                index=year,
                employee=cumulative_employee,
                employer=cumulative_employer,
                balance=balance,
                starting_balance=current_balance,
                is_projected=True,
                age=current_age + year,
            )
        )

    return points


def project_max_catch_up(
    current_balance: float,
    current_age: int,
    retirement_age: int,
    annual_employee: float,
    annual_employer: float,
    salary: float,
    policy: EmployerMatchPolicy,
    limits: ContributionLimits,
    annual_return_rate: float,
) -> List[ProjectionPoint]:
    """
    Yearly trajectory where the employee maxes out deferrals from catch_up_age.

    Before catch_up_age the current contributions are used, so the curve
    coincides with ``project_yearly`` up to that age. From catch_up_age the
    employee defers the full catch-up limit and the employer matches it under
    the usual policy.
    """
    horizon_years = max(0, retirement_age - current_age)

    max_employee = limits.standard_annual_limit + limits.catch_up_annual_add_on
    max_employer = calculate_employer_match(max_employee, salary, policy)

    balance = float(current_balance)
    cumulative_employee = 0.0
    cumulative_employer = 0.0

    points = [
        _point(0, 0.0, 0.0, balance, current_balance, False, age=current_age)
    ]
    for year in range(1, horizon_years + 1):
        age = current_age + year
        if age >= limits.catch_up_age:
            employee, employer = max_employee, max_employer
        else:
            employee, employer = annual_employee, annual_employer

        cumulative_employee += employee
        cumulative_employer += employer
        balance = balance * (1 + annual_return_rate) + (employee + employer)

        points.append(
            _point(year, cumulative_employee, cumulative_employer, balance, current_balance, True, age=age)
        )

    logger.debug(
        "catch-up projection: %.2f employee + %.2f employer from age %d",
        max_employee,
        max_employer,
        limits.catch_up_age,
    )
    return points


def summarize_retirement(
    current_balance: float,
    annual_contribution: float,
    current_age: int,
    retirement_age: int,
    annual_return_rate: float,
) -> RetirementSummary:
    """
    Closed-form balance at retirement with monthly compounding:

        FV = PV * (1 + r)^n + PMT * ((1 + r)^n - 1) / r

    r is the monthly rate, n the number of months and PMT the monthly
    contribution (ordinary annuity).
    """
    years = retirement_age - current_age
    if years <= 0:
        return RetirementSummary(
            future_value=current_balance,
            total_contributions=0.0,
            total_growth=0.0,
            years_to_retirement=0,
        )

    r = annual_return_rate / MONTHS_PER_YEAR
    months = years * MONTHS_PER_YEAR
    monthly_contribution = annual_contribution / MONTHS_PER_YEAR

    future_value = current_balance * (1 + r) ** months + monthly_contribution * annuity_factor(r, months)
    total_contributions = annual_contribution * years

    return RetirementSummary(
        future_value=future_value,
        total_contributions=total_contributions,
        total_growth=future_value - current_balance - total_contributions,
        years_to_retirement=years,
    )

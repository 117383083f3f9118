"""Contribution resolution: employee deferral, employer match and IRS limits."""

from __future__ import annotations

from contribution_planner.schemas.contribution import (
    ContributionBreakdown,
    ContributionKind,
    ContributionLimits,
    ContributionSpec,
    ContributionValidation,
    EmployerMatchPolicy,
)

# Biweekly payroll.
PAY_PERIODS_PER_YEAR = 26

NEAR_LIMIT_RATIO = 0.9


def percentage_to_fixed(percentage: float, salary: float) -> float:
    """Per-paycheck dollars that add up to ``percentage`` of salary over a year."""
    return (percentage / 100 * salary) / PAY_PERIODS_PER_YEAR


def fixed_to_percentage(fixed_per_paycheck: float, salary: float) -> float:
    """Percent of salary deferred by ``fixed_per_paycheck``; 0 when salary is 0."""
    if salary == 0:
        return 0.0
    return (fixed_per_paycheck * PAY_PERIODS_PER_YEAR / salary) * 100


def annual_employee_contribution(spec: ContributionSpec, salary: float) -> float:
    if spec.kind == ContributionKind.PERCENTAGE:
        return salary * spec.amount / 100
    return spec.amount * PAY_PERIODS_PER_YEAR


def calculate_employer_match(
    employee_contribution: float, salary: float, policy: EmployerMatchPolicy
) -> float:
    """
    Employer match on an annual employee contribution.

    100% up to 5% of salary on a 10% deferral yields 5% of salary;
    50% up to 6% on a 6% deferral yields 3%.
    """
    matched = employee_contribution * policy.match_rate
    cap = salary * policy.match_cap_percent_of_salary / 100
    return max(0.0, min(matched, cap))


def resolve_contributions(
    spec: ContributionSpec, salary: float, policy: EmployerMatchPolicy
) -> ContributionBreakdown:
    """Annual employee deferral, employer match and their sum."""
    employee = annual_employee_contribution(spec, salary)
    employer = calculate_employer_match(employee, salary, policy)
    return ContributionBreakdown(employee=employee, employer=employer, total=employee + employer)


def convert_contribution(
    spec: ContributionSpec, salary: float, kind: ContributionKind
) -> ContributionSpec:
    """Express the same annual dollar amount as ``kind``."""
    if spec.kind == kind:
        return spec
    if kind == ContributionKind.FIXED:
        return ContributionSpec(kind=kind, amount=percentage_to_fixed(spec.amount, salary))
    return ContributionSpec(kind=kind, amount=fixed_to_percentage(spec.amount, salary))


def applicable_limit(age: int, limits: ContributionLimits) -> float:
    if age >= limits.catch_up_age:
        return limits.standard_annual_limit + limits.catch_up_annual_add_on
    return limits.standard_annual_limit


def validate_contribution(
    annual_employee: float, age: int, limits: ContributionLimits
) -> ContributionValidation:
    """Check an annual employee deferral against the limit for ``age``."""
    limit = applicable_limit(age, limits)
    return ContributionValidation(
        is_valid=annual_employee <= limit,
        is_near_limit=annual_employee > limit * NEAR_LIMIT_RATIO,
        excess_amount=max(0.0, annual_employee - limit),
        applicable_limit=limit,
    )


def max_contribution_amount(
    kind: ContributionKind, salary: float, age: int, limits: ContributionLimits
) -> float:
    """Largest ``amount`` of the given kind that stays within the annual limit."""
    limit = applicable_limit(age, limits)
    if kind == ContributionKind.FIXED:
        return limit / PAY_PERIODS_PER_YEAR
    if salary <= 0:
        return 100.0
    return min(100.0, limit / salary * 100)

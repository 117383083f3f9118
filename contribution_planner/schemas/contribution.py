"""Data contracts for contribution settings and year-to-date figures.

These models carry no domain bounds on purpose: the calculation layer does
arithmetic on whatever it is handed. Bounds live on the request models in
``schemas.planner``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ContributionKind(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class ContributionSpec(BaseModel):
    """How much the employee defers: percent of salary or dollars per paycheck."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ContributionKind
    amount: float


class EmployerMatchPolicy(BaseModel):
    """match_rate 1.0 = 100% match; the cap is a percent of salary (5 = 5%)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    match_rate: float
    match_cap_percent_of_salary: float


class PersonProfile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    age: int
    salary: float
    current_balance: float
    retirement_age: int


class YTDActuals(BaseModel):
    """Payroll-recorded contributions for the elapsed months of this year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    months_elapsed: int
    employee_contributed: float
    employer_matched: float


class ContributionLimits(BaseModel):
    """Annual deferral limit, plus the catch-up add-on from catch_up_age."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_annual_limit: float
    catch_up_annual_add_on: float
    catch_up_age: int


class ContributionBreakdown(BaseModel):
    """Annualized dollar figures."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    employee: float
    employer: float
    total: float


class YTDSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    employee: float
    employer: float
    total: float
    months_elapsed: int
    months_remaining: int
    progress_percent: float
    monthly_average_employee: float
    monthly_average_employer: float
    monthly_average_total: float


class ContributionValidation(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    is_valid: bool
    is_near_limit: bool
    excess_amount: float
    applicable_limit: float

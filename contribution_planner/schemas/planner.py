"""Request and response contracts for the planner HTTP endpoints.

Request models narrow the plain calculation types with the bounds a UI
enforces (non-negative money, 0..12 elapsed months). Anything that passes
here is a sane input for the calculation layer.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from contribution_planner.schemas.contribution import (
    ContributionBreakdown,
    ContributionLimits,
    ContributionSpec,
    ContributionValidation,
    EmployerMatchPolicy,
    PersonProfile,
    YTDActuals,
    YTDSummary,
)
from contribution_planner.schemas.projection import (
    ComparisonResult,
    ContributionImpact,
    ProjectionPoint,
    RetirementSummary,
)


class ContributionSpecInput(ContributionSpec):
    amount: float = Field(..., ge=0, description="Percent of salary or dollars per paycheck.")


class EmployerMatchPolicyInput(EmployerMatchPolicy):
    match_rate: float = Field(..., ge=0, description="1.0 = 100% match.")
    match_cap_percent_of_salary: float = Field(..., ge=0, le=100)


class PersonProfileInput(PersonProfile):
    age: int = Field(..., ge=0, le=120)
    salary: float = Field(..., ge=0)
    current_balance: float = Field(..., ge=0)
    retirement_age: int = Field(..., ge=0, le=120)


class YTDActualsInput(YTDActuals):
    months_elapsed: int = Field(..., ge=0, le=12)
    employee_contributed: float = Field(..., ge=0)
    employer_matched: float = Field(..., ge=0)


class ContributionLimitsInput(ContributionLimits):
    standard_annual_limit: float = Field(..., ge=0)
    catch_up_annual_add_on: float = Field(0.0, ge=0)
    catch_up_age: int = Field(50, ge=0, le=120)


class ContributionSettings(BaseModel):
    """The parts of a plan the user edits: deferral and match policy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    contribution: ContributionSpecInput
    match_policy: EmployerMatchPolicyInput


class ContributionsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    contribution: ContributionSpecInput
    match_policy: EmployerMatchPolicyInput
    salary: float = Field(..., ge=0)
    age: Optional[int] = Field(default=None, ge=0, le=120)
    limits: Optional[ContributionLimitsInput] = None

    @model_validator(mode="after")
    def ensure_limits_have_age(self) -> "ContributionsRequest":
        if self.limits is not None and self.age is None:
            raise ValueError("age is required when limits are supplied")
        return self


class ContributionsResponse(BaseModel):
    contributions: ContributionBreakdown
    percentage: float
    fixed_per_paycheck: float
    validation: Optional[ContributionValidation] = None
    max_amount: Optional[float] = None


class PlannerRequest(BaseModel):
    """Everything the planner page holds; ``original`` enables comparisons."""

    model_config = ConfigDict(extra="forbid")

    profile: PersonProfileInput
    settings: ContributionSettings
    ytd: YTDActualsInput
    limits: ContributionLimitsInput
    original: Optional[ContributionSettings] = None

    annual_return_rate: Optional[float] = Field(default=None, ge=-0.5, le=1)
    horizon_months: Optional[int] = Field(default=None, ge=0, le=600)
    max_chart_points: Optional[int] = Field(default=None, ge=2, le=1000)


class ScenarioProjection(BaseModel):
    """All derived figures for one set of contribution settings."""

    contributions: ContributionBreakdown
    validation: ContributionValidation
    year_end: ContributionBreakdown
    retirement: RetirementSummary
    monthly: List[ProjectionPoint]
    yearly: List[ProjectionPoint]
    catch_up: List[ProjectionPoint]


class PlannerResponse(BaseModel):
    annual_return_rate: float
    horizon_months: int
    max_chart_points: int
    ytd: YTDSummary
    max_contribution_amount: float
    current: ScenarioProjection
    original: Optional[ScenarioProjection] = None
    monthly_comparison: Optional[ComparisonResult] = None
    yearly_comparison: Optional[ComparisonResult] = None
    impact: Optional[ContributionImpact] = None

"""Data contracts for projection trajectories and their comparisons."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ProjectionPoint(BaseModel):
    """One checkpoint of a trajectory (a month or a year from now).

    investment_growth = balance - starting_balance - (cumulative employee
    + cumulative employer). ``age`` is only set on yearly trajectories.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    cumulative_employee_contribution: float
    cumulative_employer_contribution: float
    balance: float
    investment_growth: float
    starting_balance: float
    is_projected: bool
    age: Optional[int] = None

    @property
    def cumulative_total_contribution(self) -> float:
        return self.cumulative_employee_contribution + self.cumulative_employer_contribution


class ComparisonResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    per_point_delta: List[float]
    final_delta: float
    final_percent_change: float
    is_increase: bool


class RetirementSummary(BaseModel):
    """Closed-form balance at retirement."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    future_value: float
    total_contributions: float
    total_growth: float
    years_to_retirement: int


class ContributionImpact(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    current: RetirementSummary
    proposed: RetirementSummary
    difference: float
    percentage_change: float

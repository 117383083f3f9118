from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from contribution_planner.app import create_app
from contribution_planner.config import PlannerSettings
from contribution_planner.schemas.contribution import (
    ContributionKind,
    ContributionLimits,
    ContributionSpec,
    EmployerMatchPolicy,
    YTDActuals,
)


@pytest.fixture()
def settings() -> PlannerSettings:
    return PlannerSettings(environment="test", log_level="WARNING")


@pytest.fixture()
def client(settings: PlannerSettings) -> FlaskClient:
    app = create_app(settings)
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def ten_percent() -> ContributionSpec:
    return ContributionSpec(kind=ContributionKind.PERCENTAGE, amount=10)


@pytest.fixture()
def full_match_to_five() -> EmployerMatchPolicy:
    return EmployerMatchPolicy(match_rate=1.0, match_cap_percent_of_salary=5)


@pytest.fixture()
def nine_months() -> YTDActuals:
    # $65,000 at 10% with a 100%-to-5% match, nine months in
    return YTDActuals(months_elapsed=9, employee_contributed=4875, employer_matched=2437.50)


@pytest.fixture()
def irs_2024() -> ContributionLimits:
    return ContributionLimits(standard_annual_limit=23000, catch_up_annual_add_on=7500, catch_up_age=50)

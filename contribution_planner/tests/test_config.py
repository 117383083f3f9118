"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from contribution_planner.app import create_app
from contribution_planner.config import ApiConfig, PlannerSettings, ProjectionDefaults


def test_default_settings():
    settings = PlannerSettings()
    assert settings.environment == "dev"
    assert settings.api.url_prefix == "/api"
    assert settings.projection.annual_return_rate == 0.07
    assert settings.projection.max_chart_points == 50
    assert settings.projection.horizon_months == 12


def test_projection_defaults_read_env(monkeypatch):
    monkeypatch.setenv("PLANNER_PROJECTION_ANNUAL_RETURN_RATE", "0.05")
    monkeypatch.setenv("PLANNER_PROJECTION_MAX_CHART_POINTS", "30")

    defaults = ProjectionDefaults()

    assert defaults.annual_return_rate == 0.05
    assert defaults.max_chart_points == 30


def test_point_budget_below_two_is_rejected(monkeypatch):
    monkeypatch.setenv("PLANNER_PROJECTION_MAX_CHART_POINTS", "1")
    with pytest.raises(ValidationError):
        ProjectionDefaults()


def test_custom_url_prefix_is_mounted():
    settings = PlannerSettings(environment="test", api=ApiConfig(url_prefix="/v1"))
    app = create_app(settings)

    with app.test_client() as client:
        assert client.get("/v1/health").status_code == 200
        assert client.get("/api/health").status_code == 404

"""Application configuration using pydantic-settings with grouped env prefixes.

Only the HTTP layer reads these values. Core functions receive every rate,
horizon and point budget as an explicit argument.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ApiConfig(BaseSettings):
    """HTTP adapter configuration."""

    model_config = {"env_prefix": "PLANNER_API_"}

    url_prefix: str = "/api"
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )


class ProjectionDefaults(BaseSettings):
    """Defaults the UI relies on when a request leaves them out."""

    model_config = {"env_prefix": "PLANNER_PROJECTION_"}

    annual_return_rate: float = 0.07
    horizon_months: int = Field(12, ge=0)
    max_chart_points: int = Field(50, ge=2)


class PlannerSettings(BaseSettings):
    """Root settings aggregating all sub-configs."""

    model_config = {"env_prefix": "PLANNER_"}

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"

    api: ApiConfig = ApiConfig()
    projection: ProjectionDefaults = ProjectionDefaults()

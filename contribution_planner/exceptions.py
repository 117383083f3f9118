"""Planner exception hierarchy.

The calculation layer only raises for a handful of caller errors. Everything
else (negative salary, negative balance, retirement age below current age) is
not validated here: callers supply sane domain values, and the HTTP layer
enforces them through its request schemas.
"""

from __future__ import annotations


class PlannerError(Exception):
    """Base exception for all planner errors."""


class InvalidHorizonError(PlannerError, ValueError):
    """Months elapsed outside [0, 12] or a negative projection horizon."""

    def __init__(self, field: str, value: int, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}={value}: {message}")


class MismatchedHorizonError(PlannerError, ValueError):
    """Two trajectories built with different horizons were compared."""

    def __init__(self, original_length: int, modified_length: int) -> None:
        self.original_length = original_length
        self.modified_length = modified_length
        super().__init__(
            f"cannot compare trajectories of length {original_length} and {modified_length}"
        )


class InvalidPointBudgetError(PlannerError, ValueError):
    """Downsampling budget too small to keep both endpoints."""

    def __init__(self, max_points: int) -> None:
        self.max_points = max_points
        super().__init__(f"max_points must be at least 2, got {max_points}")

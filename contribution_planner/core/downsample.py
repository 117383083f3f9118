"""Point reduction for long trajectories before charting."""

from __future__ import annotations

import math
from typing import List, Sequence, TypeVar

from contribution_planner.exceptions import InvalidPointBudgetError

T = TypeVar("T")


def downsample(points: Sequence[T], max_points: int) -> Sequence[T]:
    """
    Reduce ``points`` to at most ``max_points`` evenly spaced entries.

    The first and last points are always kept. Sequences already within the
    budget are returned as-is (same object). The step is derived from the
    gaps between points, ceil((n - 1) / (max_points - 1)), so the result never
    exceeds the budget.
    """
    if max_points < 2:
        raise InvalidPointBudgetError(max_points)
    if len(points) <= max_points:
        return points

    last = len(points) - 1
    step = math.ceil(last / (max_points - 1))

    sampled: List[T] = [points[i] for i in range(0, last, step)]
    sampled.append(points[last])
    return sampled

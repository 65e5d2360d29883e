"""Unit conversion helpers for WordprocessingML measurements."""
from __future__ import annotations

import math

HALF_POINTS_PER_POINT = 2


def half_points_to_points(value: float) -> float:
    """Convert a ``w:sz`` half-point value to typographic points."""
    return value / HALF_POINTS_PER_POINT


def half_points_to_display(value: float, scale: float) -> float:
    """Convert half points to display units, rounded half-up to a whole unit."""
    return float(math.floor(half_points_to_points(value) * scale + 0.5))

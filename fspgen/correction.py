"""Clamp generated durations into the configured interval.

Gaussian outliers and correlated windows placed near the interval ends can
produce values outside ``[lb, ub]``; they are moved onto the nearest end.
"""

from __future__ import annotations

from .models import Matrix


def clamp(value: int, lb: int, ub: int) -> int:
    if value < lb:
        return lb
    if value > ub:
        return ub
    return value


def correct_durations(matrix: Matrix, lb: int, ub: int) -> Matrix:
    """Return a copy of ``matrix`` with every cell clamped into [lb, ub]."""
    return [[clamp(v, lb, ub) for v in row] for row in matrix]

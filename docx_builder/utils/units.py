"""Unit conversion helpers for WordprocessingML measurements."""
from __future__ import annotations

TWIPS_PER_POINT = 20
POINTS_PER_INCH = 72
MM_PER_INCH = 25.4


def points_to_twips(value: float) -> int:
    """Convert points to twips (1/20th of a point)."""
    return int(round(value * TWIPS_PER_POINT))


def inches_to_twips(value: float) -> int:
    return points_to_twips(value * POINTS_PER_INCH)


def mm_to_twips(value: float) -> int:
    return inches_to_twips(value / MM_PER_INCH)

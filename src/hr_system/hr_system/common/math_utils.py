from __future__ import annotations

import math


def percent_floor(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100)


def percent_round(part: int, whole: int) -> int:
    """Percentage rounded half up (2.5 -> 3), 0 when ``whole`` is empty."""
    if whole <= 0:
        return 0
    return math.floor(part / whole * 100 + 0.5)

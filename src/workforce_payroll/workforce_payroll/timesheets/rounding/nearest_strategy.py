from __future__ import annotations

import math

from .base import RoundingStrategy


class NearestStrategy(RoundingStrategy):
    """Round half up to the nearest multiple (490 min @30 -> 480)."""

    def _snap(self, units: float) -> int:
        return math.floor(units + 0.5)

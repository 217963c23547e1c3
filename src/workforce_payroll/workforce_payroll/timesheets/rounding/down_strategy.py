from __future__ import annotations

import math

from .base import RoundingStrategy


class DownStrategy(RoundingStrategy):
    def _snap(self, units: float) -> int:
        return math.floor(units)

from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import RoundingMethod
from .base import RoundingStrategy
from .down_strategy import DownStrategy
from .nearest_strategy import NearestStrategy
from .up_strategy import UpStrategy


@dataclass
class RoundingStrategyFactory:
    """Factory Pattern: pick the rounding strategy for a client's rounding method."""

    def for_method(self, method: RoundingMethod) -> RoundingStrategy:
        if method == RoundingMethod.UP:
            return UpStrategy()
        if method == RoundingMethod.DOWN:
            return DownStrategy()
        return NearestStrategy()

from __future__ import annotations

from abc import ABC, abstractmethod


class RoundingStrategy(ABC):
    """Strategy Pattern: how worked minutes snap to the client's minute increment."""

    def round_minutes(self, minutes: float, increment: int) -> float:
        if increment <= 1:
            return minutes
        return self._snap(minutes / increment) * increment

    @abstractmethod
    def _snap(self, units: float) -> int:
        raise NotImplementedError

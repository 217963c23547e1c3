from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.constants import OT1_5_MULTIPLIER, OT2_0_MULTIPLIER


@dataclass(frozen=True)
class OvertimeRates:
    """Pay multipliers for the two overtime buckets of a company."""

    ot1_5: Decimal = OT1_5_MULTIPLIER
    ot2_0: Decimal = OT2_0_MULTIPLIER

    @classmethod
    def with_overrides(cls, ot1_5=None, ot2_0=None) -> "OvertimeRates":
        # Missing or zero overrides keep the standard multiplier.
        return cls(
            ot1_5=Decimal(str(ot1_5)) if ot1_5 else OT1_5_MULTIPLIER,
            ot2_0=Decimal(str(ot2_0)) if ot2_0 else OT2_0_MULTIPLIER,
        )


STANDARD_OVERTIME_RATES = OvertimeRates()

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import DeductionConfigType
from ..workers.model import Worker
from .model import PLATFORM_DEFAULT_RATES, DeductionConfig


@dataclass(frozen=True)
class ResolvedDeductionConfig:
    """The config that applies to a worker plus where it came from.

    ``source_kind`` and ``source_name`` are None when platform defaults apply.
    """

    config: DeductionConfig
    source_kind: Optional[DeductionConfigType]
    source_name: Optional[str]

    @property
    def is_default(self) -> bool:
        return self.source_kind is None


def resolve_deduction_config(worker: Worker, configs: Iterable[DeductionConfig]) -> ResolvedDeductionConfig:
    """Group config first, then job band, then platform defaults."""
    configs = tuple(configs)

    if worker.worker_group_id is not None:
        for c in configs:
            if c.config_type == DeductionConfigType.GROUP and c.group_id == worker.worker_group_id:
                return ResolvedDeductionConfig(c, DeductionConfigType.GROUP, c.source_name)

    if worker.job_band_id is not None:
        for c in configs:
            if c.config_type == DeductionConfigType.BAND and c.job_band_id == worker.job_band_id:
                return ResolvedDeductionConfig(c, DeductionConfigType.BAND, c.source_name)

    return ResolvedDeductionConfig(PLATFORM_DEFAULT_RATES, None, None)

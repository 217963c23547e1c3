from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def list_timesheet_workers(self, company_id: str) -> Sequence[Worker]:
        """Active hourly and unit-based workers of a company."""

        raise NotImplementedError

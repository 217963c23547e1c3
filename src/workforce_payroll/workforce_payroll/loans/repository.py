from __future__ import annotations

from typing import Protocol, Sequence

from .model import Loan


class LoanRepository(Protocol):
    def list_active_for_worker(self, worker_id: int) -> Sequence[Loan]:
        """Active loans and advances that still have a remaining balance."""

        raise NotImplementedError

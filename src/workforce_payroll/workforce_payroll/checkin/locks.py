from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class WorkerLocks:
    """One mutex per worker so a worker's check-ins are handled one at a time."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    def _lock_for(self, worker_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(worker_id)
            if lock is None:
                lock = self._locks[worker_id] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, worker_id: int) -> Iterator[None]:
        lock = self._lock_for(int(worker_id))
        with lock:
            yield

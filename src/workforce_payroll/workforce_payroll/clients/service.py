from __future__ import annotations

import logging

from ..workers.model import Worker
from .model import TimesheetSettings
from .repository import ClientRepository

log = logging.getLogger(__name__)


class TimesheetSettingsResolver:
    """Looks up the timesheet settings in effect for a worker via project -> client."""

    def __init__(self, clients: ClientRepository, *, default: TimesheetSettings | None = None):
        self._clients = clients
        self._default = default or TimesheetSettings()

    def for_worker(self, worker: Worker) -> TimesheetSettings:
        if worker.project_id is None:
            return self._default

        client_id = self._clients.get_client_id_for_project(worker.project_id)
        if client_id is None:
            log.debug("project %s has no client; using default timesheet settings", worker.project_id)
            return self._default

        client = self._clients.get_by_id(client_id)
        if client is None:
            return self._default
        return client.timesheet_settings

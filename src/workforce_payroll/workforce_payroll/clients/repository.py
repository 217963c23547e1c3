from __future__ import annotations

from typing import Optional, Protocol

from .model import Client


class ClientRepository(Protocol):
    def get_by_id(self, client_id: int) -> Optional[Client]:
        raise NotImplementedError

    def get_client_id_for_project(self, project_id: int) -> Optional[int]:
        raise NotImplementedError

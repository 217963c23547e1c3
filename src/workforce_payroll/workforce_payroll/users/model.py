from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an authenticated account.

    Worker accounts carry a link to their worker entity; other roles do not.
    """

    user_id: int
    username: str
    role: Role
    worker_id: Optional[int] = None
    company_id: Optional[int] = None
    is_active: bool = True

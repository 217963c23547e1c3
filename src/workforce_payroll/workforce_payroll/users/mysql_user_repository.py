from __future__ import annotations

from typing import Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, read_errors
from .model import User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with read_errors("user"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, username, role, worker_id, company_id, is_active
                FROM users
                WHERE user_id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=int(row["user_id"]),
                username=row["username"],
                role=Role(row["role"]),
                worker_id=row.get("worker_id"),
                company_id=row.get("company_id"),
                is_active=bool(row.get("is_active", True)),
            )

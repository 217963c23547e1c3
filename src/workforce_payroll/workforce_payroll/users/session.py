from __future__ import annotations

from typing import Iterable, Optional

from flask import session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import User
from .repository import UserRepository


def current_user(users: UserRepository) -> Optional[User]:
    """The active user behind the Flask session, or None."""
    user_id = session.get("user_id")
    if user_id is None:
        return None
    user = users.get_by_id(int(user_id))
    if user is None or not user.is_active:
        return None
    return user


def require_role(user: Optional[User], roles: Iterable[Role]) -> User:
    if user is None:
        raise AuthorizationError("Authentication required")
    if user.role not in set(roles):
        raise AuthorizationError("You do not have permission to perform this action")
    return user

from __future__ import annotations

from typing import Sequence

from ..auth.guard import AuthenticatedAs, expect_role
from ..common.payloads import NewUser
from ..core.enums import Role
from .model import User
from .repository import UserRepository


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, caller: AuthenticatedAs) -> Sequence[User]:
        expect_role(caller, Role.ADMIN)
        return self._users.list_all()

    def provision_user(self, caller: AuthenticatedAs, data: NewUser) -> User:
        expect_role(caller, Role.ADMIN)
        return self._users.create_user(email=data.email, password=data.password, role=data.role)

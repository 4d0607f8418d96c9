from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..users.model import User
from ..users.repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedAs:
    """Capability proving the caller was authenticated and holds ``role``.

    Only ``AuthService.require_role`` builds one; services take it as their
    first argument instead of reading identity from request state.
    """

    user: User
    role: Role

    @property
    def user_id(self) -> int:
        return self.user.user_id


def expect_role(caller: AuthenticatedAs, role: Role) -> None:
    if caller.role != role:
        raise AuthorizationError("Vous n'avez pas les droits pour effectuer cette action.")


class AuthService:
    """Use case: resolve credentials to a user, then check the role."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> User:
        if not email or password is None:
            raise AuthenticationError("Authentification requise.")

        user = self._users.get_by_email(email)
        # Plaintext comparison: credentials are stored unhashed.
        if not user or not hmac.compare_digest(user.password.encode("utf-8"), password.encode("utf-8")):
            logger.info("Authentication failed for %s", email)
            raise AuthenticationError("Identifiants invalides.")
        return user

    def require_role(self, user: User, expected: Role) -> AuthenticatedAs:
        if user.role != expected:
            logger.info("User %s (role=%s) denied, %s required", user.user_id, user.role.value, expected.value)
            raise AuthorizationError("Vous n'avez pas les droits pour effectuer cette action.")
        return AuthenticatedAs(user=user, role=expected)

    def authorize(self, email: str, password: str, expected: Role) -> AuthenticatedAs:
        return self.require_role(self.authenticate(email, password), expected)

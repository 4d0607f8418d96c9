from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.ids import next_id
from ..core.constants import USERS
from ..core.enums import Role
from ..core.exceptions import ConflictError, StoreError
from ..database.store import DocumentStore
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _to_user(row: Mapping[str, Any]) -> User:
    try:
        return User(
            user_id=int(row["id"]),
            email=row["email"],
            password=row["password"],
            role=Role(row["role"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Corrupted user record: {e!r}") from e


class JsonUserRepository(UserRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[User]:
        return [_to_user(r) for r in self._store.read(USERS)]

    def get_by_id(self, user_id: int) -> Optional[User]:
        for row in self._store.read(USERS):
            if int(row["id"]) == user_id:
                return _to_user(row)
        return None

    def get_by_email(self, email: str) -> Optional[User]:
        for row in self._store.read(USERS):
            if row["email"] == email:
                return _to_user(row)
        return None

    def create_user(self, *, email: str, password: str, role: Role) -> User:
        def insert(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
            # Uniqueness and id allocation share the critical section.
            if any(r["email"] == email for r in rows):
                raise ConflictError("Email déjà utilisé.")
            row = {"id": next_id(rows), "email": email, "password": password, "role": role.value}
            rows.append(row)
            return row

        row = self._store.update(USERS, insert)
        logger.info("User %s created (role=%s)", row["id"], row["role"])
        return _to_user(row)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: the password is an opaque plaintext credential, compared as-is.
    """

    user_id: int
    email: str
    password: str
    role: Role

    def to_record(self, *, include_password: bool = True) -> Dict[str, Any]:
        record: Dict[str, Any] = {"id": self.user_id, "email": self.email}
        if include_password:
            record["password"] = self.password
        record["role"] = self.role.value
        return record

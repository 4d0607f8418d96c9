from __future__ import annotations

import re
from enum import Enum
from typing import Any, Mapping, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import format_timestamp, parse_timestamp

E = TypeVar("E", bound=Enum)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_field(payload: Mapping[str, Any], field_name: str) -> Any:
    value = payload.get(field_name)
    if value is None:
        raise ValidationError(f"Le champ {field_name} est requis.")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Le champ {field_name} doit être une chaîne non vide.")
    return value.strip()


def require_email(value: Any, field_name: str = "email") -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"Le champ {field_name} doit être un email valide.")
    return value


def require_choice(value: Any, field_name: str, enum_cls: Type[E]) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"Le champ {field_name} doit être l'une des valeurs: {allowed}.")


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; true/false are never valid ids
    if isinstance(value, bool):
        raise ValidationError(f"Le champ {field_name} doit être un entier positif.")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"Le champ {field_name} doit être un entier positif.")
    return value


def require_timestamp(value: Any, field_name: str) -> str:
    """Check the DD/MM/YYYY HH:MM:SS convention and return the normalized string."""
    value = require_non_empty(value, field_name)
    try:
        parsed = parse_timestamp(value)
    except ValueError:
        raise ValidationError(f"Le champ {field_name} doit respecter le format JJ/MM/AAAA HH:MM:SS.")
    return format_timestamp(parsed)

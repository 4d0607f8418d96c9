"""Payload parsers: raw request bodies in, typed inputs out.

Each parser only reads the in-flight payload; nothing here touches the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ..core.enums import Role
from ..core.exceptions import ValidationError
from .datetime_utils import parse_timestamp
from .validators import (
    require_choice,
    require_email,
    require_field,
    require_non_empty,
    require_positive_int,
    require_timestamp,
)


@dataclass(frozen=True)
class NewUser:
    email: str
    password: str
    role: Role


@dataclass(frozen=True)
class NewCourse:
    title: str
    date: datetime


@dataclass(frozen=True)
class NewEnrollment:
    student_id: int
    course_id: int


@dataclass(frozen=True)
class SignRequest:
    course_id: int


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("Le corps de la requête doit être un objet JSON.")
    return payload


def parse_new_user(payload: Any) -> NewUser:
    payload = _require_object(payload)
    email = require_email(require_field(payload, "email"))
    password = require_field(payload, "password")
    # passwords are opaque: no trimming
    if not isinstance(password, str) or password == "":
        raise ValidationError("Le champ password doit être une chaîne non vide.")
    role = require_choice(require_field(payload, "role"), "role", Role)
    return NewUser(email=email, password=password, role=role)


def parse_new_course(payload: Any) -> NewCourse:
    payload = _require_object(payload)
    title = require_non_empty(require_field(payload, "title"), "title")
    date = parse_timestamp(require_timestamp(require_field(payload, "date"), "date"))
    return NewCourse(title=title, date=date)


def parse_new_enrollment(payload: Any) -> NewEnrollment:
    payload = _require_object(payload)
    return NewEnrollment(
        student_id=require_positive_int(require_field(payload, "studentId"), "studentId"),
        course_id=require_positive_int(require_field(payload, "courseId"), "courseId"),
    )


def parse_sign_request(payload: Any) -> SignRequest:
    payload = _require_object(payload)
    return SignRequest(course_id=require_positive_int(require_field(payload, "courseId"), "courseId"))

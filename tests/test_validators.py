from __future__ import annotations

from datetime import datetime

import pytest

from enrollment_system.common.payloads import (
    parse_new_course,
    parse_new_enrollment,
    parse_new_user,
    parse_sign_request,
)
from enrollment_system.common.validators import require_positive_int, require_timestamp
from enrollment_system.core.enums import Role
from enrollment_system.core.exceptions import ValidationError


def test_parse_new_user_ok():
    data = parse_new_user({"email": " a@x.com ", "password": " p ", "role": "student"})
    assert data.email == "a@x.com"
    assert data.password == " p "
    assert data.role == Role.STUDENT


@pytest.mark.parametrize(
    "payload",
    [
        {"password": "p", "role": "student"},
        {"email": "not-an-email", "password": "p", "role": "student"},
        {"email": "a@x.com", "password": "", "role": "student"},
        {"email": "a@x.com", "password": "p", "role": "teacher"},
        ["a@x.com"],
        None,
    ],
)
def test_parse_new_user_rejects(payload):
    with pytest.raises(ValidationError):
        parse_new_user(payload)


def test_timestamp_is_strict():
    assert require_timestamp("11/11/2021 11:11:11", "date") == "11/11/2021 11:11:11"

    for bad in ("1/1/2021 1:1:1", "2021-11-11 11:11:11", "31/02/2021 10:00:00", "11/11/2021 25:00:00", "11/11/2021"):
        with pytest.raises(ValidationError):
            require_timestamp(bad, "date")


def test_parse_new_course_keeps_day_first():
    data = parse_new_course({"title": "Intro", "date": "05/11/2021 09:00:00"})
    assert data.title == "Intro"
    assert data.date == datetime(2021, 11, 5, 9, 0, 0)


def test_parse_new_course_requires_title():
    with pytest.raises(ValidationError):
        parse_new_course({"title": "  ", "date": "05/11/2021 09:00:00"})


def test_positive_int_accepts_digit_strings_but_not_bools():
    assert require_positive_int("3", "courseId") == 3
    for bad in (True, 0, -1, "x", 1.5):
        with pytest.raises(ValidationError):
            require_positive_int(bad, "courseId")


def test_parse_enrollment_and_sign():
    assert parse_new_enrollment({"studentId": 2, "courseId": 3}).course_id == 3
    assert parse_sign_request({"courseId": 2}).course_id == 2
    with pytest.raises(ValidationError):
        parse_new_enrollment({"studentId": 2})

from __future__ import annotations

from datetime import datetime

import pytest

from enrollment_system.common.payloads import NewCourse
from enrollment_system.core.exceptions import AuthorizationError
from enrollment_system.courses.json_course_repository import JsonCourseRepository
from enrollment_system.courses.service import CourseService


def test_provision_course_persists_fixed_format(store, admin):
    svc = CourseService(JsonCourseRepository(store))

    course = svc.provision_course(admin, NewCourse(title="Intro", date=datetime(2021, 11, 11, 11, 11, 11)))

    assert course.course_id == 1
    assert store.read("courses") == [{"id": 1, "title": "Intro", "date": "11/11/2021 11:11:11"}]
    assert [c.title for c in svc.list_courses(admin)] == ["Intro"]


def test_student_cannot_provision_course(store, student):
    svc = CourseService(JsonCourseRepository(store))

    with pytest.raises(AuthorizationError):
        svc.provision_course(student, NewCourse(title="Intro", date=datetime(2021, 11, 11)))

    assert store.read("courses") == []

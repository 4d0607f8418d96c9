from __future__ import annotations

from typing import Sequence

from ..auth.guard import AuthenticatedAs, expect_role
from ..common.payloads import NewCourse
from ..core.enums import Role
from .model import Course
from .repository import CourseRepository


class CourseService:
    """Use case: manage courses (admin)."""

    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def list_courses(self, caller: AuthenticatedAs) -> Sequence[Course]:
        expect_role(caller, Role.ADMIN)
        return self._courses.list_all()

    def provision_course(self, caller: AuthenticatedAs, data: NewCourse) -> Course:
        expect_role(caller, Role.ADMIN)
        return self._courses.create_course(title=data.title, date=data.date)

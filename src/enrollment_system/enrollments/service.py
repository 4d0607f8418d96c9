from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..auth.guard import AuthenticatedAs, expect_role
from ..common.datetime_utils import now_local
from ..common.payloads import NewEnrollment, SignRequest
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from ..courses.repository import CourseRepository
from ..users.repository import UserRepository
from .model import Enrollment
from .repository import EnrollmentRepository


class EnrollmentService:
    """Use cases: register a student in a course (admin) and sign it (student).

    State machine: unregistered -> REGISTERED (signed_at None) -> SIGNED.
    """

    def __init__(self, enrollments: EnrollmentRepository, users: UserRepository, courses: CourseRepository):
        self._enrollments = enrollments
        self._users = users
        self._courses = courses

    def list_enrollments(self, caller: AuthenticatedAs) -> Sequence[Enrollment]:
        expect_role(caller, Role.ADMIN)
        return self._enrollments.list_all()

    def create_enrollment(
        self,
        caller: AuthenticatedAs,
        data: NewEnrollment,
        *,
        now: Optional[datetime] = None,
    ) -> Enrollment:
        expect_role(caller, Role.ADMIN)

        # Checked in this order; each failure short-circuits.
        student = self._users.get_by_id(data.student_id)
        if not student or student.role != Role.STUDENT:
            raise NotFoundError("Étudiant introuvable.")

        if not self._courses.get_by_id(data.course_id):
            raise NotFoundError("Cours introuvable.")

        # Users and courses are never deleted, so only the pair check needs the store lock.
        return self._enrollments.create_enrollment(
            student_id=data.student_id,
            course_id=data.course_id,
            registered_at=now or now_local(),
        )

    def sign(self, caller: AuthenticatedAs, data: SignRequest, *, now: Optional[datetime] = None) -> Enrollment:
        expect_role(caller, Role.STUDENT)
        return self._enrollments.mark_signed(
            student_id=caller.user_id,
            course_id=data.course_id,
            signed_at=now or now_local(),
        )

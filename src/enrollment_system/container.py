from __future__ import annotations

from dataclasses import dataclass

from .auth.guard import AuthService
from .courses.json_course_repository import JsonCourseRepository
from .courses.service import CourseService
from .database.store import DocumentStore
from .enrollments.json_enrollment_repository import JsonEnrollmentRepository
from .enrollments.service import EnrollmentService
from .users.json_user_repository import JsonUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    users_repo: JsonUserRepository
    courses_repo: JsonCourseRepository
    enrollments_repo: JsonEnrollmentRepository

    auth_service: AuthService
    user_service: UserService
    course_service: CourseService
    enrollment_service: EnrollmentService


def build_container(*, store: DocumentStore) -> Container:
    users_repo = JsonUserRepository(store)
    courses_repo = JsonCourseRepository(store)
    enrollments_repo = JsonEnrollmentRepository(store)

    return Container(
        store=store,
        users_repo=users_repo,
        courses_repo=courses_repo,
        enrollments_repo=enrollments_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        course_service=CourseService(courses_repo),
        enrollment_service=EnrollmentService(enrollments_repo, users_repo, courses_repo),
    )

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Enrollment


class EnrollmentRepository(Protocol):
    def list_all(self) -> Sequence[Enrollment]:
        raise NotImplementedError

    def get_for_student_and_course(self, student_id: int, course_id: int) -> Optional[Enrollment]:
        raise NotImplementedError

    def create_enrollment(self, *, student_id: int, course_id: int, registered_at: datetime) -> Enrollment:
        """Append a REGISTERED enrollment; ConflictError if the pair already exists."""
        raise NotImplementedError

    def mark_signed(self, *, student_id: int, course_id: int, signed_at: datetime) -> Enrollment:
        """REGISTERED -> SIGNED; NotFoundError if missing, ConflictError if already signed."""
        raise NotImplementedError

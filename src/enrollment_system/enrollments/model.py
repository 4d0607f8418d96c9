from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.datetime_utils import format_optional_timestamp, format_timestamp
from ..core.enums import EnrollmentState


@dataclass(frozen=True)
class Enrollment:
    """Domain entity: a student's registration in a course.

    ``signed_at`` goes from None to a timestamp exactly once.
    """

    enrollment_id: int
    student_id: int
    course_id: int
    registered_at: datetime
    signed_at: Optional[datetime] = None

    @property
    def state(self) -> EnrollmentState:
        return EnrollmentState.SIGNED if self.signed_at is not None else EnrollmentState.REGISTERED

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.enrollment_id,
            "studentId": self.student_id,
            "courseId": self.course_id,
            "registeredAt": format_timestamp(self.registered_at),
            "signedAt": format_optional_timestamp(self.signed_at),
        }

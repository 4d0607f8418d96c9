from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError

    def get_by_id(self, course_id: int) -> Optional[Course]:
        raise NotImplementedError

    def create_course(self, *, title: str, date: datetime) -> Course:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..common.datetime_utils import format_timestamp


@dataclass(frozen=True)
class Course:
    """Domain entity: Course."""

    course_id: int
    title: str
    date: datetime

    def to_record(self) -> Dict[str, Any]:
        return {"id": self.course_id, "title": self.title, "date": format_timestamp(self.date)}

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..common.ids import next_id
from ..core.constants import COURSES
from ..core.exceptions import StoreError
from ..database.store import DocumentStore
from .model import Course
from .repository import CourseRepository

logger = logging.getLogger(__name__)


def _to_course(row: Mapping[str, Any]) -> Course:
    try:
        return Course(course_id=int(row["id"]), title=row["title"], date=parse_timestamp(row["date"]))
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Corrupted course record: {e!r}") from e


class JsonCourseRepository(CourseRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[Course]:
        return [_to_course(r) for r in self._store.read(COURSES)]

    def get_by_id(self, course_id: int) -> Optional[Course]:
        for row in self._store.read(COURSES):
            if int(row["id"]) == course_id:
                return _to_course(row)
        return None

    def create_course(self, *, title: str, date: datetime) -> Course:
        def insert(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
            row = {"id": next_id(rows), "title": title, "date": format_timestamp(date)}
            rows.append(row)
            return row

        row = self._store.update(COURSES, insert)
        logger.info("Course %s created", row["id"])
        return _to_course(row)

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_optional_timestamp, parse_timestamp
from ..common.ids import next_id
from ..core.constants import ENROLLMENTS
from ..core.exceptions import ConflictError, NotFoundError, StoreError
from ..database.store import DocumentStore
from .model import Enrollment
from .repository import EnrollmentRepository

logger = logging.getLogger(__name__)


def _to_enrollment(row: Mapping[str, Any]) -> Enrollment:
    try:
        return Enrollment(
            enrollment_id=int(row["id"]),
            student_id=int(row["studentId"]),
            course_id=int(row["courseId"]),
            registered_at=parse_timestamp(row["registeredAt"]),
            signed_at=parse_optional_timestamp(row.get("signedAt")),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Corrupted enrollment record: {e!r}") from e


def _matches(row: Mapping[str, Any], student_id: int, course_id: int) -> bool:
    return int(row["studentId"]) == student_id and int(row["courseId"]) == course_id


class JsonEnrollmentRepository(EnrollmentRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def list_all(self) -> Sequence[Enrollment]:
        return [_to_enrollment(r) for r in self._store.read(ENROLLMENTS)]

    def get_for_student_and_course(self, student_id: int, course_id: int) -> Optional[Enrollment]:
        for row in self._store.read(ENROLLMENTS):
            if _matches(row, student_id, course_id):
                return _to_enrollment(row)
        return None

    def create_enrollment(self, *, student_id: int, course_id: int, registered_at: datetime) -> Enrollment:
        def insert(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
            if any(_matches(r, student_id, course_id) for r in rows):
                raise ConflictError("L'étudiant est déjà inscrit à ce cours.")
            row = {
                "id": next_id(rows),
                "studentId": student_id,
                "courseId": course_id,
                "registeredAt": format_timestamp(registered_at),
                "signedAt": None,
            }
            rows.append(row)
            return row

        row = self._store.update(ENROLLMENTS, insert)
        logger.info("Enrollment %s created (student=%s, course=%s)", row["id"], student_id, course_id)
        return _to_enrollment(row)

    def mark_signed(self, *, student_id: int, course_id: int, signed_at: datetime) -> Enrollment:
        def sign(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
            for row in rows:
                if not _matches(row, student_id, course_id):
                    continue
                if row.get("signedAt") is not None:
                    raise ConflictError("Cours déjà signé.")
                row["signedAt"] = format_timestamp(signed_at)
                return row
            raise NotFoundError("Inscription introuvable.")

        row = self._store.update(ENROLLMENTS, sign)
        logger.info("Enrollment %s signed (student=%s, course=%s)", row["id"], student_id, course_id)
        return _to_enrollment(row)

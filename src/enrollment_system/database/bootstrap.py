from __future__ import annotations

import logging
import shutil
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import format_timestamp, now_local
from ..core.constants import COURSES, ENROLLMENTS, USERS
from ..core.enums import Role
from .store import DocumentStore

logger = logging.getLogger(__name__)

DEFAULT_USERS: List[Dict[str, Any]] = [
    {"id": 1, "email": "admin@test.com", "password": "test", "role": Role.ADMIN.value},
    {"id": 2, "email": "student@test.com", "password": "test", "role": Role.STUDENT.value},
]

SAMPLE_COURSE_TITLES = ("Introduction à Python", "Bases de données", "Réseaux")


def ensure_default_users(store: DocumentStore) -> bool:
    """Seed the admin and student accounts when the users collection does not exist yet."""
    return USERS in store.ensure_defaults({USERS: DEFAULT_USERS})


def sample_data(*, now: Optional[datetime] = None) -> Dict[str, List[Dict[str, Any]]]:
    now = now or now_local()
    courses = [
        {"id": i, "title": title, "date": format_timestamp(now + timedelta(days=7 * i))}
        for i, title in enumerate(SAMPLE_COURSE_TITLES, start=1)
    ]
    # student 2 registered in course 2, not signed yet
    enrollments = [
        {"id": 1, "studentId": 2, "courseId": 2, "registeredAt": format_timestamp(now), "signedAt": None},
    ]
    return {COURSES: courses, ENROLLMENTS: enrollments}


def _references_resolve(doc: Dict[str, List[Dict[str, Any]]], enrollments: List[Dict[str, Any]]) -> bool:
    roles = {int(u["id"]): u.get("role") for u in doc.get(USERS, [])}
    course_ids = {int(c["id"]) for c in doc.get(COURSES, [])}
    return all(
        roles.get(int(e["studentId"])) == Role.STUDENT.value and int(e["courseId"]) in course_ids
        for e in enrollments
    )


def ensure_sample_data(store: DocumentStore, *, now: Optional[datetime] = None) -> List[str]:
    """Seed sample courses and one enrollment into collections that are still empty.

    The enrollment is only written together with the sample courses, and only
    when its student exists with the student role.
    """
    data = sample_data(now=now)
    seeded: List[str] = []
    with store.transaction() as doc:
        if not doc.get(COURSES):
            doc[COURSES] = data[COURSES]
            seeded.append(COURSES)
        if COURSES in seeded and not doc.get(ENROLLMENTS) and _references_resolve(doc, data[ENROLLMENTS]):
            doc[ENROLLMENTS] = data[ENROLLMENTS]
            seeded.append(ENROLLMENTS)
    if seeded:
        logger.info("Seeded sample %s", ", ".join(seeded))
    return seeded


def init_data_file(store: DocumentStore, *, with_samples: bool = False) -> List[str]:
    seeded = []
    if ensure_default_users(store):
        seeded.append(USERS)
    if with_samples:
        seeded.extend(ensure_sample_data(store))
    return seeded


def backup_data_file(data_file: str | Path, out_dir: str | Path, *, now: Optional[datetime] = None) -> Path:
    """Copy the data file to ``out_dir/<stem>_<YYYYmmdd_HHMMSS><suffix>``."""
    source = Path(data_file)
    if not source.exists():
        raise FileNotFoundError(f"Data file not found: {source}")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = (now or now_local()).strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{source.stem}_{ts}{source.suffix or '.json'}"
    shutil.copy2(source, out_file)
    logger.info("Backup created: %s", out_file)
    return out_file

from __future__ import annotations

from datetime import datetime

import pytest

from enrollment_system.database.bootstrap import (
    backup_data_file,
    ensure_default_users,
    ensure_sample_data,
    init_data_file,
)
from enrollment_system.database.store import JsonDocumentStore


def test_default_users_seeded_once(tmp_path):
    store = JsonDocumentStore(tmp_path / "db.json")

    assert ensure_default_users(store) is True
    assert ensure_default_users(store) is False

    users = store.read("users")
    assert [(u["id"], u["role"]) for u in users] == [(1, "admin"), (2, "student")]


def test_sample_data_has_unsigned_enrollment_for_student_two(tmp_path, fixed_now):
    store = JsonDocumentStore(tmp_path / "db.json")
    ensure_default_users(store)

    assert sorted(ensure_sample_data(store, now=fixed_now)) == ["courses", "enrollments"]
    assert ensure_sample_data(store, now=fixed_now) == []

    enrollment = store.read("enrollments")[0]
    assert (enrollment["studentId"], enrollment["courseId"], enrollment["signedAt"]) == (2, 2, None)
    assert enrollment["registeredAt"] == "01/02/2026 08:30:00"
    assert [c["id"] for c in store.read("courses")] == [1, 2, 3]


def test_init_data_file_with_samples(tmp_path):
    store = JsonDocumentStore(tmp_path / "db.json")
    assert init_data_file(store, with_samples=True) == ["users", "courses", "enrollments"]


def test_backup_copies_data_file(tmp_path):
    data_file = tmp_path / "db.json"
    init_data_file(JsonDocumentStore(data_file))

    out = backup_data_file(data_file, tmp_path / "backups", now=datetime(2026, 3, 4, 5, 6, 7))

    assert out.name == "db_20260304_050607.json"
    assert out.read_text(encoding="utf-8") == data_file.read_text(encoding="utf-8")


def test_backup_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        backup_data_file(tmp_path / "nope.json", tmp_path / "backups")


def test_sample_enrollment_skipped_when_courses_already_exist(tmp_path, fixed_now):
    store = JsonDocumentStore(tmp_path / "db.json")
    ensure_default_users(store)
    store.update("courses", lambda rows: rows.append({"id": 1, "title": "Existant", "date": "01/01/2026 09:00:00"}))

    assert ensure_sample_data(store, now=fixed_now) == []

    assert [c["id"] for c in store.read("courses")] == [1]
    assert store.read("enrollments") == []


def test_sample_enrollment_requires_a_student(tmp_path, fixed_now):
    store = JsonDocumentStore(tmp_path / "db.json")
    store.ensure_defaults(
        {
            "users": [
                {"id": 1, "email": "admin@test.com", "password": "test", "role": "admin"},
                {"id": 2, "email": "other@test.com", "password": "test", "role": "admin"},
            ]
        }
    )

    assert ensure_sample_data(store, now=fixed_now) == ["courses"]
    assert store.read("enrollments") == []

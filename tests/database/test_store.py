from __future__ import annotations

import json
import threading

import pytest

from enrollment_system.common.ids import next_id
from enrollment_system.courses.json_course_repository import JsonCourseRepository
from enrollment_system.core.exceptions import StoreError
from enrollment_system.database.store import JsonDocumentStore
from enrollment_system.users.json_user_repository import JsonUserRepository


def test_next_id_starts_at_one_and_follows_max():
    assert next_id([]) == 1
    assert next_id([{"id": 1}, {"id": 7}, {"id": 3}]) == 8


def test_update_commits_and_read_goes_back_to_file(tmp_path):
    path = tmp_path / "db.json"
    store = JsonDocumentStore(path)

    store.update("courses", lambda rows: rows.append({"id": 1, "title": "A"}))

    # a second handle on the same file sees the committed state
    assert JsonDocumentStore(path).read("courses") == [{"id": 1, "title": "A"}]
    assert json.loads(path.read_text(encoding="utf-8"))["courses"][0]["title"] == "A"


def test_failed_transform_leaves_document_unchanged(tmp_path):
    store = JsonDocumentStore(tmp_path / "db.json")
    store.update("users", lambda rows: rows.append({"id": 1}))

    def broken(rows):
        rows.append({"id": 2})
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        store.update("users", broken)

    assert store.read("users") == [{"id": 1}]


def test_memory_store_isolates_callers_from_stored_state():
    store = JsonDocumentStore()
    store.update("users", lambda rows: rows.append({"id": 1}))

    rows = store.read("users")
    rows.append({"id": 99})
    rows[0]["id"] = 42

    assert store.read("users") == [{"id": 1}]


def test_ensure_defaults_only_fills_absent_collections(tmp_path):
    store = JsonDocumentStore(tmp_path / "db.json")
    assert store.ensure_defaults({"users": [{"id": 1}]}) == ["users"]
    assert store.ensure_defaults({"users": [{"id": 5}]}) == []
    assert store.read("users") == [{"id": 1}]

    store.update("courses", lambda rows: None)
    assert store.ensure_defaults({"courses": [{"id": 1}]}) == []
    assert store.read("courses") == []


def test_corrupted_file_raises_store_error(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreError):
        JsonDocumentStore(path).read("users")


def test_concurrent_allocations_never_collide(tmp_path):
    store = JsonDocumentStore(tmp_path / "db.json")

    def allocate():
        store.update("courses", lambda rows: rows.append({"id": next_id(rows)}))

    threads = [threading.Thread(target=allocate) for _ in range(25)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(r["id"] for r in store.read("courses")) == list(range(1, 26))


def test_write_failure_raises_store_error_and_keeps_document(tmp_path, monkeypatch):
    path = tmp_path / "db.json"
    store = JsonDocumentStore(path)
    store.update("courses", lambda rows: rows.append({"id": 1}))
    before = path.read_text(encoding="utf-8")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("enrollment_system.database.store.os.replace", failing_replace)

    with pytest.raises(StoreError):
        store.update("courses", lambda rows: rows.append({"id": 2}))

    assert path.read_text(encoding="utf-8") == before
    assert store.read("courses") == [{"id": 1}]


def test_unparseable_rows_surface_as_store_errors(tmp_path):
    path = tmp_path / "db.json"
    path.write_text(
        json.dumps(
            {
                "users": [{"id": 1, "email": "a@x.com", "password": "p", "role": "teacher"}],
                "courses": [{"id": 1, "title": "Intro", "date": "11/31/2021 11:11:11"}],
            }
        ),
        encoding="utf-8",
    )
    store = JsonDocumentStore(path)

    with pytest.raises(StoreError):
        JsonUserRepository(store).list_all()
    with pytest.raises(StoreError):
        JsonCourseRepository(store).list_all()

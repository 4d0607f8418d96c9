from __future__ import annotations

from datetime import datetime

import pytest

from enrollment_system.auth.guard import AuthenticatedAs
from enrollment_system.core.enums import Role
from enrollment_system.database.bootstrap import ensure_default_users
from enrollment_system.database.store import JsonDocumentStore
from enrollment_system.main import create_app
from enrollment_system.users.model import User


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def store(tmp_path) -> JsonDocumentStore:
    store = JsonDocumentStore(tmp_path / "db.json")
    ensure_default_users(store)
    return store


@pytest.fixture
def admin() -> AuthenticatedAs:
    return AuthenticatedAs(user=User(user_id=1, email="admin@test.com", password="test", role=Role.ADMIN), role=Role.ADMIN)


@pytest.fixture
def student() -> AuthenticatedAs:
    return AuthenticatedAs(
        user=User(user_id=2, email="student@test.com", password="test", role=Role.STUDENT),
        role=Role.STUDENT,
    )


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"DATA_FILE": str(tmp_path / "db.json")})


@pytest.fixture
def client(app):
    return app.test_client()

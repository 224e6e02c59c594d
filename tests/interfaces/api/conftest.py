"""Fixtures for exercising the HTTP layer against the in-memory database."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from fleet_manager.infrastructure.database import get_db
from fleet_manager.infrastructure.security import create_access_token
from fleet_manager.main import create_app


@pytest.fixture()
def client(session_factory):
    """Return a test client whose requests share the test database."""

    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def bearer(username: str = "dispatcher", *, user_id: int = 7, role: str = "admin") -> dict:
    token = create_access_token({"sub": username, "uid": user_id, "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def admin_headers() -> dict:
    return bearer()


@pytest.fixture()
def user_headers() -> dict:
    return bearer("driver", user_id=9, role="user")

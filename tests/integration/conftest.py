import pytest
from fastapi.testclient import TestClient

from store.api.application import create_app
from store.auth import issue_token
from store.config import get_settings


@pytest.fixture()
def app(upload_dir):
    return create_app()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def override_settings(monkeypatch):
    """Set environment-backed settings for the rest of one test."""

    def _override(**values):
        for key, value in values.items():
            monkeypatch.setenv(key.upper(), str(value))
        get_settings.cache_clear()

    yield _override

    get_settings.cache_clear()


def _auth_headers(user_id):
    return {"Authorization": f"Bearer {issue_token(user_id)}"}


@pytest.fixture()
def customer(create_user):
    """A regular signed-in user: `(user_id, headers)`."""
    user_id = create_user(username="jane", email="jane@example.com")
    return user_id, _auth_headers(user_id)


@pytest.fixture()
def admin_headers(create_user):
    return _auth_headers(create_user(username="admin", email="admin@example.com", is_admin=True))


@pytest.fixture()
def auth_headers():
    return _auth_headers

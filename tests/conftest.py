"""Shared fixtures: an app wired to a throwaway SQLite database."""

import pytest
from fastapi.testclient import TestClient

from wonderland.config import Settings
from wonderland.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        environment="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'wonderland.db'}",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        upload_dir=str(tmp_path / "uploads"),
        max_file_size=1024,
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


def register(client, username="santa", email="santa@northpole.com", password="hohoho123"):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def santa(client):
    """A registered user: (headers, user payload)."""
    data = register(client).json()["data"]
    return auth_headers(data["token"]), data["user"]


@pytest.fixture
def grinch(client):
    data = register(client, "grinch", "grinch@mountcrumpit.com", "stolen-xmas").json()["data"]
    return auth_headers(data["token"]), data["user"]

# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from users_api.db.engine import get_engine
from users_api.db.sql import SqlUserStore
from users_api.main import create_app


@pytest.fixture()
def store():
    """A fresh in-memory SQLite store per test."""
    s = SqlUserStore(get_engine("sqlite://"))
    s.create_schema()
    yield s
    s.close()


@pytest.fixture()
def client(store):
    app = create_app(store=store)
    with TestClient(app) as c:
        yield c


def add_user(client, name="Ada Lovelace", email="ada@example.com"):
    resp = client.post("/addUser", json={"name": name, "email": email})
    assert resp.status_code == 200
    return resp.json()

"""Pytest configuration and fixtures for MiniMind tests.

Test isolation strategy:
- Every test gets a fresh application and a fresh store
- Store tests run against both backends (SQL on in-memory SQLite)
- HTTP tests use the in-memory store and Flask's test client
"""

import pytest

from app import create_app
from config import TestingConfig
from extensions import db
from storage import MemStorage, SqlStorage
from tests.factories import FakeClock, connection_payload, register


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(params=["memory", "sql"])
def storage(request, clock):
    """A store of each backend, bound to an app context for the SQL one."""
    if request.param == "memory":
        yield MemStorage(clock=clock)
        return

    store = SqlStorage(clock=clock)
    sql_app = create_app(TestingConfig, storage=store)
    with sql_app.app_context():
        yield store
        db.session.remove()


@pytest.fixture
def app(clock):
    return create_app(TestingConfig, storage=MemStorage(clock=clock))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    """Client logged in as alice."""
    response = register(client, "alice")
    assert response.status_code == 201
    return client


@pytest.fixture
def other_client(app):
    """Second client logged in as bob."""
    other = app.test_client()
    response = register(other, "bob")
    assert response.status_code == 201
    return other


@pytest.fixture
def connection(auth_client) -> dict:
    response = auth_client.post("/api/connections", json=connection_payload())
    assert response.status_code == 201
    return response.get_json()

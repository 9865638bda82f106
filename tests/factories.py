"""Factories for building store records in tests."""

from datetime import datetime, timedelta

from utils.content_splitter import split_content


class FakeClock:
    """Deterministic clock: every call returns a moment one second later."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        moment = self.current
        self.current += timedelta(seconds=1)
        return moment


def user_fields(username: str = "alice", **overrides) -> dict:
    fields = {
        "username": username,
        "password": "hashed-password",
        "email": f"{username}@example.com",
        "name": username.title(),
    }
    fields.update(overrides)
    return fields


def connection_fields(user_id: int, **overrides) -> dict:
    fields = {
        "name": "Work Gmail",
        "url": "https://mail.google.com",
        "token": "secret-token",
        "status": "Connected",
        "icon": "https://mail.google.com/favicon.ico",
        "projects": None,
        "user_id": user_id,
    }
    fields.update(overrides)
    return fields


def feed_fields(user_id: int, connection_id: int, **overrides) -> dict:
    fields = {
        "name": "Daily quotes",
        "description": None,
        "full_text": "first quote\nsecond quote\nthird quote",
        "separator": "\\n",
        "frequency": "Daily",
        "active": True,
        "user_id": user_id,
        "connection_id": connection_id,
    }
    fields.update(overrides)
    fields.setdefault("contents", split_content(fields["full_text"], fields["separator"]))
    return fields


def connection_payload(**overrides) -> dict:
    payload = {
        "name": "Work Gmail",
        "url": "https://mail.google.com",
        "token": "secret-token",
        "status": "Connected",
        "icon": "https://mail.google.com/favicon.ico",
    }
    payload.update(overrides)
    return payload


def feed_payload(connection_id: int, **overrides) -> dict:
    payload = {
        "name": "Daily quotes",
        "description": "One quote a day",
        "full_text": "first quote\nsecond quote\nthird quote",
        "separator": "\\n",
        "frequency": "Daily",
        "connection_id": connection_id,
        "active": True,
    }
    payload.update(overrides)
    return payload


PASSWORD = "Correct-Horse-9"


def register(client, username: str = "alice", password: str = PASSWORD):
    return client.post(
        "/api/register",
        json={
            "username": username,
            "password": password,
            "email": f"{username}@example.com",
            "name": username.title(),
        },
    )

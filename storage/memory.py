"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: storage/memory.py – хранилище в памяти процесса.

Назначение модуля:
- Хранение пользователей, подключений и лент в словарях по идентификатору.
- Все операции выполняются под одной блокировкой: выдача id атомарна,
  каскадное удаление подключения не наблюдается другими запросами частично.
"""

import logging
from copy import deepcopy
from dataclasses import replace
from itertools import count
from threading import Lock

from errors import NotFoundError, ValidationError
from models.connection import Connection, ConnectionPatch
from models.feed import Feed, FeedPatch
from models.user import User
from storage.base import Clock, Storage
from utils.feed_progress import clamp_num_sent

logger = logging.getLogger(__name__)


class MemStorage(Storage):
    """Хранилище на словарях; наружу отдаются только копии записей."""

    def __init__(self, clock: Clock | None = None):
        super().__init__(clock)
        self._users: dict[int, User] = {}
        self._connections: dict[int, Connection] = {}
        self._feeds: dict[int, Feed] = {}
        self._user_ids = count(1)
        self._connection_ids = count(1)
        self._feed_ids = count(1)
        self._lock = Lock()

    def get_user(self, user_id: int) -> User | None:
        with self._lock:
            return deepcopy(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> User | None:
        with self._lock:
            return deepcopy(self._find_user(username))

    def create_user(self, fields: dict) -> User:
        with self._lock:
            if self._find_user(fields.get("username")) is not None:
                raise ValidationError("Username already exists")
            user = User(id=next(self._user_ids), created_at=self.now(), **fields)
            self._users[user.id] = user
            return deepcopy(user)

    def get_connection(self, connection_id: int) -> Connection | None:
        with self._lock:
            return deepcopy(self._connections.get(connection_id))

    def list_connections(self, user_id: int) -> list[Connection]:
        with self._lock:
            return [
                deepcopy(connection)
                for connection in self._connections.values()
                if connection.user_id == user_id
            ]

    def create_connection(self, fields: dict) -> Connection:
        with self._lock:
            now = self.now()
            connection = Connection(
                id=next(self._connection_ids),
                created_at=now,
                updated_at=now,
                **fields,
            )
            self._connections[connection.id] = connection
            return deepcopy(connection)

    def update_connection(self, connection_id: int, patch: ConnectionPatch) -> Connection:
        with self._lock:
            existing = self._connections.get(connection_id)
            if existing is None:
                raise NotFoundError(f"Connection with id {connection_id} not found")

            updated = replace(existing, **patch.changes(), updated_at=self.now())
            self._connections[connection_id] = updated
            return deepcopy(updated)

    def delete_connection(self, connection_id: int) -> None:
        with self._lock:
            dependent = [
                feed_id
                for feed_id, feed in self._feeds.items()
                if feed.connection_id == connection_id
            ]
            for feed_id in dependent:
                del self._feeds[feed_id]

            if self._connections.pop(connection_id, None) is not None:
                logger.info(
                    "Удалено подключение %s вместе с лентами: %s",
                    connection_id,
                    len(dependent),
                )

    def get_feed(self, feed_id: int) -> Feed | None:
        with self._lock:
            return deepcopy(self._feeds.get(feed_id))

    def list_feeds(self, user_id: int) -> list[Feed]:
        with self._lock:
            return [deepcopy(feed) for feed in self._feeds.values() if feed.user_id == user_id]

    def list_feeds_by_connection(self, connection_id: int) -> list[Feed]:
        with self._lock:
            return [
                deepcopy(feed)
                for feed in self._feeds.values()
                if feed.connection_id == connection_id
            ]

    def create_feed(self, fields: dict) -> Feed:
        values = dict(fields)
        values.setdefault("contents", [])
        values["completed_contents"] = []
        values["num_sent"] = 0

        with self._lock:
            now = self.now()
            feed = Feed(id=next(self._feed_ids), created_at=now, updated_at=now, **values)
            self._feeds[feed.id] = feed
            return deepcopy(feed)

    def update_feed(self, feed_id: int, patch: FeedPatch) -> Feed:
        with self._lock:
            existing = self._feeds.get(feed_id)
            if existing is None:
                raise NotFoundError(f"Feed with id {feed_id} not found")

            updated = replace(existing, **patch.changes(), updated_at=self.now())
            updated.num_sent = clamp_num_sent(updated.num_sent, len(updated.contents))
            self._feeds[feed_id] = updated
            return deepcopy(updated)

    def delete_feed(self, feed_id: int) -> None:
        with self._lock:
            self._feeds.pop(feed_id, None)

    def _find_user(self, username: str | None) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

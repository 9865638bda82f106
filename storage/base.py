"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: storage/base.py – контракт хранилища сущностей.

Назначение модуля:
- Общий интерфейс для хранилищ пользователей, подключений и лент.
- Идентификаторы выдаются последовательно и никогда не переиспользуются.
- Удаление подключения каскадно удаляет его ленты; удаление отсутствующей записи не является ошибкой.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable

from models.connection import Connection, ConnectionPatch
from models.feed import Feed, FeedPatch
from models.user import User
from utils.clock import utc_now

Clock = Callable[[], datetime]


class Storage(ABC):
    """Класс `Storage` описывает сущность текущего модуля."""

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or utc_now

    def now(self) -> datetime:
        return self._clock()

    # Пользователи
    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def create_user(self, fields: dict) -> User:
        """Создаёт пользователя; занятое имя приводит к ValidationError."""

    # Подключения
    @abstractmethod
    def get_connection(self, connection_id: int) -> Connection | None: ...

    @abstractmethod
    def list_connections(self, user_id: int) -> list[Connection]: ...

    @abstractmethod
    def create_connection(self, fields: dict) -> Connection: ...

    @abstractmethod
    def update_connection(self, connection_id: int, patch: ConnectionPatch) -> Connection:
        """Сливает переданные поля с записью; отсутствующая запись – NotFoundError."""

    @abstractmethod
    def delete_connection(self, connection_id: int) -> None:
        """Удаляет ленты подключения и само подключение одной операцией."""

    # Ленты
    @abstractmethod
    def get_feed(self, feed_id: int) -> Feed | None: ...

    @abstractmethod
    def list_feeds(self, user_id: int) -> list[Feed]: ...

    @abstractmethod
    def list_feeds_by_connection(self, connection_id: int) -> list[Feed]: ...

    @abstractmethod
    def create_feed(self, fields: dict) -> Feed:
        """Создаёт ленту с num_sent = 0 и пустым completed_contents."""

    @abstractmethod
    def update_feed(self, feed_id: int, patch: FeedPatch) -> Feed: ...

    @abstractmethod
    def delete_feed(self, feed_id: int) -> None: ...

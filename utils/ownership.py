"""
Модуль: `utils/ownership.py`.
Назначение: Проверка принадлежности подключений и лент текущему пользователю.

Чужая и несуществующая запись неразличимы для вызывающей стороны: обе дают NotFoundError,
чтобы не раскрывать факт существования записи. Проверка выполняется до любых изменений.
"""

from errors import NotFoundError
from models.connection import Connection
from models.feed import Feed
from storage.base import Storage


def require_owned_connection(storage: Storage, connection_id: int, user_id: int) -> Connection:
    connection = storage.get_connection(connection_id)
    if connection is None or connection.user_id != user_id:
        raise NotFoundError("Connection not found")
    return connection


def require_owned_feed(storage: Storage, feed_id: int, user_id: int) -> Feed:
    feed = storage.get_feed(feed_id)
    if feed is None or feed.user_id != user_id:
        raise NotFoundError("Feed not found")
    return feed

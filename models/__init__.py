"""
Модуль: `models/__init__.py`.
Назначение: Сущности предметной области и регистрация ORM-таблиц в SQLAlchemy metadata.
"""

from .user import User
from .connection import CONNECTION_STATUSES, Connection, ConnectionPatch
from .feed import FEED_FREQUENCIES, Feed, FeedPatch
from .patch import UNSET
from .tables import ConnectionRow, FeedRow, UserRow

__all__ = [
    "User",
    "Connection",
    "ConnectionPatch",
    "CONNECTION_STATUSES",
    "Feed",
    "FeedPatch",
    "FEED_FREQUENCIES",
    "UNSET",
    "UserRow",
    "ConnectionRow",
    "FeedRow",
]

"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: storage/sql.py – хранилище на Flask-SQLAlchemy.

Назначение модуля:
- Реализация контракта Storage поверх таблиц users, connections и feeds.
- Каскадное удаление подключения выполняется в одной транзакции.
- Методы работают внутри контекста приложения Flask (db.session).
"""

import logging

from sqlalchemy.exc import IntegrityError

from errors import NotFoundError, ValidationError
from extensions import db
from models.connection import Connection, ConnectionPatch
from models.feed import Feed, FeedPatch
from models.tables import ConnectionRow, FeedRow, UserRow
from models.user import User
from storage.base import Storage
from utils.feed_progress import clamp_num_sent

logger = logging.getLogger(__name__)


class SqlStorage(Storage):
    """Класс `SqlStorage` описывает сущность текущего модуля."""

    def get_user(self, user_id: int) -> User | None:
        row = db.session.get(UserRow, user_id)
        return row.to_entity() if row else None

    def get_user_by_username(self, username: str) -> User | None:
        row = db.session.execute(
            db.select(UserRow).filter_by(username=username)
        ).scalar_one_or_none()
        return row.to_entity() if row else None

    def create_user(self, fields: dict) -> User:
        if self.get_user_by_username(fields.get("username")) is not None:
            raise ValidationError("Username already exists")

        row = UserRow(created_at=self.now(), **fields)
        db.session.add(row)
        try:
            db.session.commit()
        except IntegrityError:
            # Параллельная регистрация с тем же именем
            db.session.rollback()
            raise ValidationError("Username already exists")
        return row.to_entity()

    def get_connection(self, connection_id: int) -> Connection | None:
        row = db.session.get(ConnectionRow, connection_id)
        return row.to_entity() if row else None

    def list_connections(self, user_id: int) -> list[Connection]:
        rows = db.session.execute(
            db.select(ConnectionRow).filter_by(user_id=user_id).order_by(ConnectionRow.id)
        ).scalars()
        return [row.to_entity() for row in rows]

    def create_connection(self, fields: dict) -> Connection:
        now = self.now()
        row = ConnectionRow(created_at=now, updated_at=now, **fields)
        db.session.add(row)
        db.session.commit()
        return row.to_entity()

    def update_connection(self, connection_id: int, patch: ConnectionPatch) -> Connection:
        row = db.session.get(ConnectionRow, connection_id)
        if row is None:
            raise NotFoundError(f"Connection with id {connection_id} not found")

        for key, value in patch.changes().items():
            setattr(row, key, value)
        row.updated_at = self.now()
        db.session.commit()
        return row.to_entity()

    def delete_connection(self, connection_id: int) -> None:
        result = db.session.execute(
            db.delete(FeedRow).where(FeedRow.connection_id == connection_id)
        )
        row = db.session.get(ConnectionRow, connection_id)
        if row is not None:
            db.session.delete(row)
        db.session.commit()

        if row is not None:
            logger.info(
                "Удалено подключение %s вместе с лентами: %s",
                connection_id,
                result.rowcount,
            )

    def get_feed(self, feed_id: int) -> Feed | None:
        row = db.session.get(FeedRow, feed_id)
        return row.to_entity() if row else None

    def list_feeds(self, user_id: int) -> list[Feed]:
        rows = db.session.execute(
            db.select(FeedRow).filter_by(user_id=user_id).order_by(FeedRow.id)
        ).scalars()
        return [row.to_entity() for row in rows]

    def list_feeds_by_connection(self, connection_id: int) -> list[Feed]:
        rows = db.session.execute(
            db.select(FeedRow).filter_by(connection_id=connection_id).order_by(FeedRow.id)
        ).scalars()
        return [row.to_entity() for row in rows]

    def create_feed(self, fields: dict) -> Feed:
        values = dict(fields)
        values.setdefault("contents", [])
        values["completed_contents"] = []
        values["num_sent"] = 0

        now = self.now()
        row = FeedRow(created_at=now, updated_at=now, **values)
        db.session.add(row)
        db.session.commit()
        return row.to_entity()

    def update_feed(self, feed_id: int, patch: FeedPatch) -> Feed:
        row = db.session.get(FeedRow, feed_id)
        if row is None:
            raise NotFoundError(f"Feed with id {feed_id} not found")

        for key, value in patch.changes().items():
            setattr(row, key, value)
        row.num_sent = clamp_num_sent(row.num_sent, len(row.contents or []))
        row.updated_at = self.now()
        db.session.commit()
        return row.to_entity()

    def delete_feed(self, feed_id: int) -> None:
        row = db.session.get(FeedRow, feed_id)
        if row is None:
            return
        db.session.delete(row)
        db.session.commit()

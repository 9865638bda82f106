"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: models/tables.py – ORM-таблицы для SQL-хранилища.

Назначение модуля:
- Описание таблиц users, connections и feeds для Flask-SQLAlchemy.
- AUTOINCREMENT в SQLite гарантирует, что идентификаторы удалённых строк не выдаются повторно.
- Преобразование строк таблиц в сущности предметной области.
"""

from extensions import db
from models.connection import Connection
from models.feed import Feed
from models.user import User
from utils.clock import utc_now


class UserRow(db.Model):
    """Класс `UserRow` описывает сущность текущего модуля."""
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    name = db.Column(db.String(120), nullable=False)
    created_at = db.Column(db.DateTime, default=utc_now, nullable=False)

    def to_entity(self) -> User:
        return User(
            id=self.id,
            username=self.username,
            password=self.password,
            email=self.email,
            name=self.name,
            created_at=self.created_at,
        )


class ConnectionRow(db.Model):
    """Класс `ConnectionRow` описывает сущность текущего модуля."""
    __tablename__ = "connections"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    url = db.Column(db.Text, nullable=False)
    token = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    icon = db.Column(db.Text, nullable=False)
    projects = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=utc_now, nullable=False)
    updated_at = db.Column(db.DateTime, default=utc_now, nullable=False)

    def to_entity(self) -> Connection:
        return Connection(
            id=self.id,
            name=self.name,
            url=self.url,
            token=self.token,
            status=self.status,
            user_id=self.user_id,
            icon=self.icon,
            projects=self.projects,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class FeedRow(db.Model):
    """Класс `FeedRow` описывает сущность текущего модуля."""
    __tablename__ = "feeds"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)
    full_text = db.Column(db.Text, nullable=False)
    contents = db.Column(db.JSON, nullable=False, default=list)
    completed_contents = db.Column(db.JSON, nullable=False, default=list)
    separator = db.Column(db.String(50), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    connection_id = db.Column(
        db.Integer, db.ForeignKey("connections.id"), nullable=False, index=True
    )
    num_sent = db.Column(db.Integer, nullable=False, default=0)
    frequency = db.Column(db.String(20), nullable=False)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=utc_now, nullable=False)
    updated_at = db.Column(db.DateTime, default=utc_now, nullable=False)

    def to_entity(self) -> Feed:
        return Feed(
            id=self.id,
            name=self.name,
            description=self.description,
            full_text=self.full_text,
            contents=list(self.contents or []),
            completed_contents=list(self.completed_contents or []),
            separator=self.separator,
            user_id=self.user_id,
            connection_id=self.connection_id,
            num_sent=self.num_sent,
            frequency=self.frequency,
            active=self.active,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

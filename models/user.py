"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: models/user.py – сущность пользователя.

Назначение модуля:
- Описание пользователя (логин, хеш пароля, контакты) для хранилища и Flask-Login.
- Сериализация в JSON без хеша пароля.
"""

from dataclasses import dataclass
from datetime import datetime

from flask_login import UserMixin


@dataclass
class User(UserMixin):
    """Класс `User` описывает сущность текущего модуля."""
    id: int
    username: str
    password: str
    email: str
    name: str
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at.isoformat(),
        }

"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: models/connection.py – подключение к внешнему сервису.

Назначение модуля:
- Описание подключения (Gmail, TickTick, Notion, Slack) и его частичного обновления.
"""

from dataclasses import asdict, dataclass
from datetime import datetime

from .patch import UNSET, provided_changes

CONNECTION_STATUSES = ("Connected", "Disconnected")


@dataclass
class Connection:
    """Класс `Connection` описывает сущность текущего модуля."""
    id: int
    name: str
    url: str
    token: str
    status: str
    user_id: int
    icon: str
    created_at: datetime
    updated_at: datetime
    # JSON-строка со списком проектов (используется TickTick)
    projects: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        return data


@dataclass
class ConnectionPatch:
    """Частичное обновление подключения: UNSET означает «поле не передано».

    projects=None очищает список проектов.
    """
    name: str = UNSET
    url: str = UNSET
    token: str = UNSET
    status: str = UNSET
    icon: str = UNSET
    projects: str | None = UNSET

    def changes(self) -> dict:
        return provided_changes(self)

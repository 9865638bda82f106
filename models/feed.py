"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: models/feed.py – лента контента.

Назначение модуля:
- Описание ленты: исходный текст, разделитель и полученные из них элементы контента.
- Типизированный патч для частичного обновления с пересчётом производного поля contents.
- Сериализация в JSON вместе с показателями прогресса отправки.
"""

from dataclasses import asdict, dataclass, field, replace
from datetime import datetime

from utils.content_splitter import split_content
from utils.feed_progress import completion_percent, remaining_items

from .patch import UNSET, provided_changes

FEED_FREQUENCIES = ("Daily", "Weekly", "Monthly")


@dataclass
class Feed:
    """Класс `Feed` описывает сущность текущего модуля."""
    id: int
    name: str
    full_text: str
    separator: str
    user_id: int
    connection_id: int
    frequency: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    contents: list[str] = field(default_factory=list)
    # Зарезервировано: ни создание, ни обновление это поле не заполняют
    completed_contents: list[str] = field(default_factory=list)
    num_sent: int = 0
    active: bool = True

    @property
    def completion_percent(self) -> int:
        return completion_percent(self.num_sent, len(self.contents))

    @property
    def remaining(self) -> int:
        return remaining_items(self.num_sent, len(self.contents))

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        data["completion_percent"] = self.completion_percent
        data["remaining"] = self.remaining
        return data


@dataclass
class FeedPatch:
    """Частичное обновление ленты: UNSET означает «поле не передано».

    description=None очищает описание.
    """
    name: str = UNSET
    description: str | None = UNSET
    full_text: str = UNSET
    separator: str = UNSET
    contents: list[str] = UNSET
    frequency: str = UNSET
    connection_id: int = UNSET
    num_sent: int = UNSET
    active: bool = UNSET

    def with_derived_contents(self) -> "FeedPatch":
        """Пересчитывает contents, только если переданы и текст, и разделитель."""
        if self.full_text is not UNSET and self.separator is not UNSET:
            return replace(self, contents=split_content(self.full_text, self.separator))
        return self

    def changes(self) -> dict:
        return provided_changes(self)

"""
Модуль: `utils/clock.py`.
Назначение: Текущее время в UTC для меток created_at и updated_at.

Метки хранятся без tzinfo: SQLite возвращает DateTime без часового пояса, и оба
хранилища должны отдавать одинаково сравнимые значения.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

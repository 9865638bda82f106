"""
Модуль: `storage/__init__.py`.
Назначение: Выбор реализации хранилища по конфигурации приложения.
"""

from .base import Storage
from .memory import MemStorage
from .sql import SqlStorage

STORAGE_BACKENDS = {
    "memory": MemStorage,
    "sql": SqlStorage,
}


def create_storage(backend: str) -> Storage:
    """Создаёт хранилище по имени из STORAGE_BACKEND."""
    try:
        storage_class = STORAGE_BACKENDS[backend]
    except KeyError:
        raise ValueError(f"Unknown storage backend: {backend!r}") from None
    return storage_class()


__all__ = ["Storage", "MemStorage", "SqlStorage", "STORAGE_BACKENDS", "create_storage"]

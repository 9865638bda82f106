"""
Модуль: `models/patch.py`.
Назначение: Маркер «поле не передано» для частичных обновлений.

None в патче – это явное значение (например, очистка описания), поэтому отсутствие
поля обозначается отдельным объектом UNSET.
"""

from dataclasses import fields


class _Unset:
    """Единственный экземпляр – UNSET; копирование сохраняет идентичность."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


UNSET = _Unset()


def provided_changes(patch) -> dict:
    """Поля патча, значение которых передано клиентом (включая None)."""
    return {
        field.name: getattr(patch, field.name)
        for field in fields(patch)
        if getattr(patch, field.name) is not UNSET
    }

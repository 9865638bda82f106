"""
Программа: «MiniMind» – панель рассылки контента по подключённым сервисам.
Модуль: errors.py – иерархия прикладных ошибок.

Назначение модуля:
- Единая таксономия ошибок хранилища и API (не найдено, ошибка валидации, нет аутентификации).
- Каждая ошибка несёт HTTP-статус, который использует обработчик в фабрике приложения.
"""


class AppError(Exception):
    """Базовая прикладная ошибка с HTTP-статусом."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """Сущность отсутствует или принадлежит другому пользователю."""

    status_code = 404


class ValidationError(AppError):
    """Некорректные данные при создании или обновлении."""

    status_code = 400


class UnauthenticatedError(AppError):
    status_code = 401

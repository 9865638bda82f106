"""
Модуль: `routes/common.py`.
Назначение: Общие помощники JSON-маршрутов.
"""

from flask import jsonify, request

from errors import ValidationError


def api_error(message: str, status: int = 400):
    return jsonify({"success": False, "error": message}), status


def json_body():
    """Тело запроса как JSON; некорректный JSON даёт None и отсекается валидацией."""
    return request.get_json(silent=True)


def validated(result):
    """Разворачивает пару (значение, ошибка) от валидатора или поднимает ValidationError."""
    value, error = result
    if error:
        raise ValidationError(error)
    return value

"""
Модуль: `utils/validation.py`.
Назначение: Проверка входящих JSON-данных до обращения к хранилищу.

Каждая функция возвращает пару (значение, текст ошибки): при ошибке значение равно None,
при успехе текст ошибки равен None.
"""

import json
import re

from flask_babel import gettext as _

from models.connection import CONNECTION_STATUSES, ConnectionPatch
from models.feed import FEED_FREQUENCIES, FeedPatch

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

NAME_MIN_LENGTH = 3


def normalize_email(value: str | None) -> str:
    """Выполняет операцию `normalize_email` в рамках сценария модуля."""
    if not value or not isinstance(value, str):
        return ""
    email = value.strip().lower()
    if not EMAIL_RE.match(email):
        return ""
    return email


def _validate_username(username) -> str | None:
    if not username or not isinstance(username, str):
        return _("Username is required.")
    if len(username) < 3:
        return _("Username must be at least 3 characters.")
    if len(username) > 80:
        return _("Username must not exceed 80 characters.")
    if any(ch.isspace() for ch in username):
        return _("Username must not contain spaces.")
    return None


def _validate_password(password, min_length: int) -> str | None:
    if not password or not isinstance(password, str):
        return _("Password is required.")
    if not (min_length <= len(password) <= 128):
        return _("Password must be between %(min)s and 128 characters.", min=min_length)
    if any(ch.isspace() for ch in password):
        return _("Password must not contain spaces.")
    return None


def _is_int(value) -> bool:
    # bool – подкласс int, но как идентификатор или счётчик не подходит
    return isinstance(value, int) and not isinstance(value, bool)


def _check_name(value, label: str) -> str | None:
    if not isinstance(value, str) or len(value.strip()) < NAME_MIN_LENGTH:
        return _("%(label)s name must be at least 3 characters", label=label)
    return None


def _check_text(value, field: str) -> str | None:
    if not isinstance(value, str):
        return _("Field '%(field)s' must be a string", field=field)
    return None


def _serialize_projects(value) -> tuple[str | None, str | None]:
    if value is None or isinstance(value, str):
        return value, None
    if isinstance(value, list):
        return json.dumps(value), None
    return None, _("Field 'projects' must be a list or a JSON string")


def validate_registration(data, password_min_length: int) -> tuple[dict | None, str | None]:
    """Проверяет данные регистрации; пароль возвращается как есть, хеширует маршрут."""
    if not isinstance(data, dict):
        return None, _("Request body must be a JSON object")

    username = data.get("username")
    if isinstance(username, str):
        username = username.strip()
    username_error = _validate_username(username)
    if username_error:
        return None, username_error

    password = data.get("password")
    password_error = _validate_password(password, password_min_length)
    if password_error:
        return None, password_error
    if username.lower() in password.lower():
        return None, _("Password must not contain the username.")

    email = normalize_email(data.get("email"))
    if not email:
        return None, _("Enter a valid email address.")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        return None, _("Name is required.")

    return {
        "username": username,
        "password": password,
        "email": email,
        "name": name.strip(),
    }, None


def validate_connection_create(data) -> tuple[dict | None, str | None]:
    if not isinstance(data, dict):
        return None, _("Request body must be a JSON object")

    error = _check_name(data.get("name"), "Connection")
    if error:
        return None, error

    for field in ("url", "token", "icon"):
        error = _check_text(data.get(field), field)
        if error:
            return None, error

    status = data.get("status")
    if status not in CONNECTION_STATUSES:
        return None, _("Status must be one of: %(values)s", values=", ".join(CONNECTION_STATUSES))

    projects, error = _serialize_projects(data.get("projects"))
    if error:
        return None, error

    return {
        "name": data["name"].strip(),
        "url": data["url"],
        "token": data["token"],
        "status": status,
        "icon": data["icon"],
        "projects": projects,
    }, None


def validate_connection_patch(data) -> tuple[ConnectionPatch | None, str | None]:
    """Проверяет только переданные поля; служебные поля (id, user_id, даты) игнорируются.

    Непереданные поля остаются UNSET, а "projects": null очищает список проектов.
    """
    if not isinstance(data, dict):
        return None, _("Request body must be a JSON object")

    changes = {}
    if "name" in data:
        error = _check_name(data["name"], "Connection")
        if error:
            return None, error
        changes["name"] = data["name"].strip()

    for field in ("url", "token", "icon"):
        if field in data:
            error = _check_text(data[field], field)
            if error:
                return None, error
            changes[field] = data[field]

    if "status" in data:
        if data["status"] not in CONNECTION_STATUSES:
            return None, _("Status must be one of: %(values)s", values=", ".join(CONNECTION_STATUSES))
        changes["status"] = data["status"]

    if "projects" in data:
        projects, error = _serialize_projects(data["projects"])
        if error:
            return None, error
        changes["projects"] = projects

    return ConnectionPatch(**changes), None


def _check_feed_fields(data: dict, partial: bool) -> str | None:
    def present(field: str) -> bool:
        return not partial or field in data

    if present("name"):
        error = _check_name(data.get("name"), "Feed")
        if error:
            return error

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        return _("Field '%(field)s' must be a string", field="description")

    if present("full_text"):
        error = _check_text(data.get("full_text"), "full_text")
        if error:
            return error

    if present("separator"):
        separator = data.get("separator")
        if not isinstance(separator, str) or not separator:
            return _("Separator must be a non-empty string")

    if present("frequency") and data.get("frequency") not in FEED_FREQUENCIES:
        return _("Frequency must be one of: %(values)s", values=", ".join(FEED_FREQUENCIES))

    if present("connection_id") and not _is_int(data.get("connection_id")):
        return _("Field 'connection_id' must be an integer")

    if "active" in data and not isinstance(data["active"], bool):
        return _("Field 'active' must be a boolean")

    return None


def validate_feed_create(data) -> tuple[dict | None, str | None]:
    """Проверяет новую ленту; contents и счётчики сервер вычисляет сам."""
    if not isinstance(data, dict):
        return None, _("Request body must be a JSON object")

    error = _check_feed_fields(data, partial=False)
    if error:
        return None, error

    return {
        "name": data["name"].strip(),
        "description": data.get("description"),
        "full_text": data["full_text"],
        "separator": data["separator"],
        "frequency": data["frequency"],
        "connection_id": data["connection_id"],
        "active": data.get("active", True),
    }, None


FEED_PATCH_FIELDS = (
    "description",
    "full_text",
    "separator",
    "frequency",
    "connection_id",
    "num_sent",
    "active",
)


def validate_feed_patch(data) -> tuple[FeedPatch | None, str | None]:
    """Проверяет частичное обновление ленты.

    contents и completed_contents из запроса не принимаются: contents пересчитывается
    из full_text и separator, completed_contents зарезервировано. Непереданные поля
    остаются UNSET, а "description": null очищает описание.
    """
    if not isinstance(data, dict):
        return None, _("Request body must be a JSON object")

    error = _check_feed_fields(data, partial=True)
    if error:
        return None, error

    if "num_sent" in data:
        num_sent = data["num_sent"]
        if not _is_int(num_sent) or num_sent < 0:
            return None, _("Field 'num_sent' must be a non-negative integer")

    changes = {field: data[field] for field in FEED_PATCH_FIELDS if field in data}
    if "name" in data:
        changes["name"] = data["name"].strip()
    return FeedPatch(**changes), None

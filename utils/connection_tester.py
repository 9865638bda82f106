"""
Модуль: `utils/connection_tester.py`.
Назначение: Каталог поддерживаемых сервисов и имитация проверки подключения.

Реальных клиентов Gmail, TickTick, Notion и Slack нет: проверка выжидает фиксированную
задержку и возвращает заготовленный результат. Неудачей заканчивается только Gmail
без адреса или пароля приложения.
"""

import time
from dataclasses import dataclass

SERVICES = (
    {
        "id": "gmail",
        "name": "Gmail",
        "icon": "https://mail.google.com/favicon.ico",
        "description": "Send content via email",
        "url": "https://mail.google.com",
        "auth_fields": [
            {"name": "email", "label": "Email Address", "type": "email"},
            {
                "name": "app_password",
                "label": "App Password",
                "type": "password",
                "hint": "Create an App Password in your Google Account settings",
            },
        ],
    },
    {
        "id": "ticktick",
        "name": "TickTick",
        "icon": "https://ticktick.com/favicon.ico",
        "description": "Create tasks from content",
        "url": "https://api.ticktick.com/open/v1/project",
        "projects": [
            {"id": "6796d6648f08687489478cfc", "name": "My New Project Paul"},
            {"id": "67ca45548f08ced866d9763a", "name": "project2"},
        ],
        "auth_fields": [
            {"name": "api_key", "label": "API Key", "type": "password"},
            {"name": "username", "label": "Username", "type": "text"},
        ],
    },
    {
        "id": "notion",
        "name": "Notion",
        "icon": "https://www.notion.so/front-static/favicon.ico",
        "description": "Add content to your pages",
        "url": "https://www.notion.so/api/v3",
        "auth_fields": [
            {
                "name": "api_key",
                "label": "Integration Token",
                "type": "password",
                "hint": "Create an integration in Notion and copy the secret",
            },
        ],
    },
    {
        "id": "slack",
        "name": "Slack",
        "icon": "https://a.slack-edge.com/80588/marketing/img/meta/favicon-32.png",
        "description": "Send content to channels",
        "url": "https://slack.com/api",
        "auth_fields": [
            {
                "name": "bot_token",
                "label": "Bot Token",
                "type": "password",
                "hint": "Create a Slack app and install it to your workspace",
            },
            {"name": "channel_id", "label": "Default Channel ID", "type": "text"},
        ],
    },
)


@dataclass(frozen=True)
class ConnectionCheckResult:
    success: bool
    message: str


def get_service(service_id: str | None) -> dict | None:
    for service in SERVICES:
        if service["id"] == service_id:
            return service
    return None


def check_connection(service_id: str, credentials: dict, delay_seconds: float = 0, sleep=time.sleep) -> ConnectionCheckResult:
    """Имитирует проверку подключения к сервису `service_id`.

    Неизвестный сервис – ValueError; решение о коде ответа принимает маршрут.
    """
    if get_service(service_id) is None:
        raise ValueError(f"Unknown service: {service_id!r}")

    if delay_seconds > 0:
        sleep(delay_seconds)

    if service_id == "gmail" and (not credentials.get("email") or not credentials.get("app_password")):
        return ConnectionCheckResult(
            success=False,
            message="Invalid Gmail credentials. Please provide both email and app password.",
        )

    return ConnectionCheckResult(success=True, message=f"Successfully connected to {service_id}")
